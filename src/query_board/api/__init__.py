# src/query_board/api/__init__.py
"""HTTP API surface."""

from .endpoints import queries_router

__all__ = ["queries_router"]
