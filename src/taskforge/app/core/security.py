"""Password hashing helpers backed by passlib."""

from __future__ import annotations

from functools import lru_cache

from passlib.context import CryptContext

from .config import get_settings


@lru_cache()
def get_password_context(scheme: str | None = None) -> CryptContext:
    """Return the ``CryptContext`` for ``scheme`` (the configured one by default)."""

    return CryptContext(schemes=[scheme or get_settings().password_hash_scheme], deprecated="auto")


def get_password_hash(password: str) -> str:
    """Return a one-way hash of ``password``."""

    return get_password_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hashed counterpart."""

    return get_password_context().verify(plain_password, hashed_password)


__all__ = ["get_password_context", "get_password_hash", "verify_password"]
