"""
Startup wiring: table auto-creation flag, CORS middleware, schema script.
"""
from __future__ import annotations

import runpy

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from libros_api.app import create_app
from libros_api.core import config as core_config
from libros_api.db import session as db_session


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def empty_db(tmp_path, monkeypatch):
    """SQLite file with no tables at all."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'empty.db'}")
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    _clear_caches()
    yield
    db_session.get_engine().dispose()
    _clear_caches()


def test_startup_creates_tables_by_default(empty_db, monkeypatch):
    monkeypatch.delenv("AUTO_CREATE_TABLES", raising=False)
    _clear_caches()

    with TestClient(create_app()):
        pass

    assert "libros" in inspect(db_session.get_engine()).get_table_names()


def test_startup_skips_tables_when_auto_create_disabled(empty_db, monkeypatch):
    monkeypatch.setenv("AUTO_CREATE_TABLES", "false")
    _clear_caches()

    with TestClient(create_app()) as client:
        assert client.get("/health").status_code == 200

    assert "libros" not in inspect(db_session.get_engine()).get_table_names()


def test_cors_preflight_allowed_for_configured_origin(empty_db, monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example")
    _clear_caches()

    with TestClient(create_app()) as client:
        resp = client.options(
            "/api/libros",
            headers={"Origin": "http://a.example", "Access-Control-Request-Method": "POST"},
        )

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://a.example"


def test_no_cors_headers_without_configured_origins(empty_db):
    with TestClient(create_app()) as client:
        resp = client.get("/health", headers={"Origin": "http://a.example"})

    assert "access-control-allow-origin" not in resp.headers


def test_schema_script_exits_on_database_error(monkeypatch):
    def _broken_engine():
        raise OperationalError("CREATE TABLE libros", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "get_engine", _broken_engine)

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("libros_api.db.create_tables", run_name="__main__")

    assert "Failed to create tables" in str(excinfo.value.code)
