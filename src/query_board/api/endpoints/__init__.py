# src/query_board/api/endpoints/__init__.py
"""API endpoint modules."""

from .queries import router as queries_router

__all__ = ["queries_router"]
