"""Ordering domain API package."""

from ordering.api.routes import session_router

__all__ = ["session_router"]
