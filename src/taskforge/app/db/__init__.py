"""Database related helpers."""

from __future__ import annotations

from .session import get_session, init_db

__all__ = ["get_session", "init_db"]
