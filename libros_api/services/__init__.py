"""
Use cases for the Libros API.

Routers call these services instead of touching repositories or sessions
directly.
"""
