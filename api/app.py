"""
Person records API application.

Run with uvicorn::

    uvicorn api.app:app --reload
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.core.config import get_settings
from api.core.logging_config import setup_logging
from api.db.create_tables import create_all
from api.routers import person as person_router
from api.services.person_service import PersonService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    create_all()
    logger.info("Person records API started (env=%s)", get_settings().app_env)
    yield


def create_app(person_service: PersonService | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    application = FastAPI(title="Person Records API", lifespan=_lifespan)
    application.state.person_service = person_service or PersonService()
    application.include_router(person_router.router)
    return application


app = create_app()
