from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garantiza que el paquete libros_api sea importable sin instalarlo
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from libros_api.core import config as core_config  # noqa: E402
from libros_api.db import create_tables  # noqa: E402
from libros_api.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite database with a fresh ``libros`` table."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("AUTO_CREATE_TABLES", "true")
    _clear_caches()

    engine = db_session.get_engine()
    create_tables.drop_all()
    create_tables.create_all()

    yield db_file

    create_tables.drop_all()
    engine.dispose()
    _clear_caches()
