"""SQLAlchemy models."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class Libro(Base):
    __tablename__ = "libros"

    id = Column(Integer, primary_key=True, autoincrement=True)
    titulo = Column(String(255), nullable=True)
    autor = Column(String(255), nullable=True)
    genero = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"Libro(id={self.id!r}, titulo={self.titulo!r})"
