"""Generic CRUD gateway for the ``libros`` table backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, select

from libros_api.db.models import Libro
from libros_api.db.session import get_session


class LibroRepository:
    """find-all / find-by-id / save / delete-by-id over short-lived sessions.

    Every call opens its own session and closes it before returning, so the
    entities handed back are detached but fully loaded.
    """

    def find_all(self) -> list[Libro]:
        with get_session() as session:
            return list(session.execute(select(Libro)).scalars().all())

    def find_by_id(self, libro_id: int) -> Optional[Libro]:
        with get_session() as session:
            return session.get(Libro, libro_id)

    def save(self, libro: Libro) -> Libro:
        """Insert when ``libro.id`` is unset or unknown, update otherwise."""
        with get_session() as session:
            if libro.id is None:
                session.add(libro)
                entity = libro
            else:
                entity = session.merge(libro)
            session.commit()
            session.refresh(entity)
            return entity

    def delete_by_id(self, libro_id: int) -> None:
        with get_session() as session:
            session.execute(delete(Libro).where(Libro.id == libro_id))
            session.commit()
