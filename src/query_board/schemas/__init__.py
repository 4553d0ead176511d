# src/query_board/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .query import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    MessageResponse,
    QueryCreate,
    QueryResponse,
)

__all__ = [
    "CommentCreate", "CommentResponse",
    "LikeResponse",
    "MessageResponse",
    "QueryCreate", "QueryResponse",
]
