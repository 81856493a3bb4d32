"""Request context management using contextvars.

Holds request-scoped data (the request ID) in an async-safe way so log
records emitted anywhere during a request can carry it.

Usage:
    token = set_request_id("abc123")
    request_id = get_request_id()
    reset_request_id(token)
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> Token:
    """Set the current request ID; returns a token for reset_request_id()."""
    return _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    """Restore the request ID that was current before set_request_id()."""
    _request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()
