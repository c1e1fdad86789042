"""
FastAPI routers grouped by domain.

Each module inside this package exposes an APIRouter that is included in the
main application (app.py).
"""
