"""Database helpers (engine/session, models, schema creation)."""

from .session import Base, get_engine, get_session, reset_engine
from .models import Person
from .create_tables import create_all

__all__ = ["Base", "Person", "create_all", "get_engine", "get_session", "reset_engine"]
