"""Shopping session registry.

get_session_registry() returns the process-wide registry;
reset_session_registry() discards every open session (useful for tests).
"""

from ordering.session.session import SessionNotFoundError, SessionRegistry, ShoppingSession

__all__ = [
    "SessionNotFoundError",
    "SessionRegistry",
    "ShoppingSession",
    "get_session_registry",
    "reset_session_registry",
]

_current_registry: SessionRegistry | None = None


def get_session_registry() -> SessionRegistry:
    global _current_registry
    if _current_registry is None:
        _current_registry = SessionRegistry()
    return _current_registry


def reset_session_registry() -> None:
    global _current_registry
    _current_registry = None
