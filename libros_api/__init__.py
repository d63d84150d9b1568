"""Libros API: CRUD HTTP service for the Libro (book) record."""
