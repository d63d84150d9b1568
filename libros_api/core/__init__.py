"""
Core utilities shared across the Libros API.

This package hosts configuration helpers (env vars, feature flags) and
cross-cutting concerns such as logging setup. Routers, services and
repositories read settings from here instead of touching os.environ.
"""
