"""Database infrastructure - shared connection primitives."""

from infrastructure.database.models import Base, TimestampMixin
from infrastructure.database.session import (
    dispose_engine,
    get_engine,
    get_sessionmaker,
    session_scope,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "dispose_engine",
    "get_engine",
    "get_sessionmaker",
    "session_scope",
]
