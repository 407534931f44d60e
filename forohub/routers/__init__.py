"""
API routers - all HTTP endpoints
"""
from forohub.routers import auth
from forohub.routers import users
from forohub.routers import topics

__all__ = [
    "auth",
    "users",
    "topics",
]
