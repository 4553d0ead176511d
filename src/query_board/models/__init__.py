# src/query_board/models/__init__.py
"""SQLAlchemy models for the Query Board application."""

from .query import Query, QueryComment, QueryLike
from .user import User

__all__ = [
    "Query", "QueryComment", "QueryLike",
    "User",
]
