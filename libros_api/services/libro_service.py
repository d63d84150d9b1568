"""Libro use cases: thin pass-through over the repository."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from libros_api.db.models import Libro
from libros_api.repositories.libro_repository import LibroRepository


class LibroService:
    """Lists, looks up, saves and deletes Libro records."""

    def __init__(self, repository: LibroRepository | None = None) -> None:
        self.repository = repository or LibroRepository()

    def list_all(self) -> list[Libro]:
        libros = self.repository.find_all()
        logger.debug("Listed {} libros", len(libros))
        return libros

    def find_by_id(self, libro_id: int) -> Optional[Libro]:
        """Return the record or None; a missing id is not an error here."""
        libro = self.repository.find_by_id(libro_id)
        if libro is None:
            logger.debug("Libro {} not found", libro_id)
        return libro

    def save(self, libro: Libro) -> Libro:
        creating = libro.id is None
        saved = self.repository.save(libro)
        logger.info("Libro {} {}", saved.id, "created" if creating else "saved")
        return saved

    def delete_by_id(self, libro_id: int) -> None:
        self.repository.delete_by_id(libro_id)
        logger.info("Libro {} deleted", libro_id)
