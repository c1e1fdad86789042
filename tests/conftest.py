from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the api package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import config as core_config  # noqa: E402
from api.db.create_tables import create_all  # noqa: E402
from api.db.session import reset_engine  # noqa: E402


def reload_settings() -> None:
    """Drop cached settings and engine so the current env is re-read."""
    core_config.get_settings.cache_clear()
    reset_engine()


@pytest.fixture()
def empty_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a new SQLite file that has no tables yet."""
    db_file = tmp_path / "persons.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    for name in ("RANDOM_SEED", "DEFAULT_PAGE_SIZE"):
        monkeypatch.delenv(name, raising=False)
    reload_settings()

    yield db_file

    # release the SQLite file before tmp_path is cleaned up
    reload_settings()


@pytest.fixture()
def temp_db(empty_db):
    """Temporary SQLite database with the persons table created."""
    assert create_all() == ["persons"]
    return empty_db
