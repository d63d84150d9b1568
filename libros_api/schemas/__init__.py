"""Request/response models exposed over HTTP."""

from .libro import LibroIn, LibroOut

__all__ = ["LibroIn", "LibroOut"]
