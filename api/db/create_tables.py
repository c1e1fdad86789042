"""Create the persons schema on the configured database."""
from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def create_all(engine: Engine | None = None) -> list[str]:
    """Create missing tables and return the names of those that were created."""
    engine = engine or get_engine()
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    created = [name for name in Base.metadata.tables if name not in existing]
    if created:
        logger.info("Created tables %s on %s", ", ".join(created), engine.url)
    return created


if __name__ == "__main__":
    try:
        tables = create_all()
        print(f"Created: {', '.join(tables)}" if tables else "Schema already up to date.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
