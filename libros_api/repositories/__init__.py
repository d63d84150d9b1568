"""
Persistence adapters.

Services depend on these gateways instead of opening SQLAlchemy sessions
themselves.
"""
