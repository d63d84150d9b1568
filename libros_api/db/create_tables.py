"""Create the ``libros`` schema on the configured DATABASE_URL.

Run with ``python -m libros_api.db.create_tables``; the application also calls
``create_all`` on startup unless AUTO_CREATE_TABLES is disabled.
"""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers Libro on Base.metadata


def create_all() -> list[str]:
    """Create missing tables and return the names known to the metadata."""
    Base.metadata.create_all(bind=get_engine())
    return sorted(Base.metadata.tables)


def drop_all() -> None:
    Base.metadata.drop_all(bind=get_engine())


if __name__ == "__main__":
    try:
        tables = create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print(f"Tables ready: {', '.join(tables)}")
