"""Request-scoped correlation state shared by middleware, logging and error handlers."""

from __future__ import annotations

from contextvars import ContextVar, Token

REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST_ID = "-"

_request_id: ContextVar[str] = ContextVar("taskforge_request_id", default=NO_REQUEST_ID)


def get_request_id() -> str:
    """Return the correlation id bound to the running request, or ``"-"``."""

    return _request_id.get()


def bind_request_id(request_id: str) -> Token[str]:
    return _request_id.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    _request_id.reset(token)


__all__ = [
    "NO_REQUEST_ID",
    "REQUEST_ID_HEADER",
    "bind_request_id",
    "get_request_id",
    "reset_request_id",
]
