from __future__ import annotations


class CacheServiceError(Exception):
    """Base error for the cache server."""


class ValidationError(CacheServiceError):
    """Raised when input is invalid or a construction contract is violated."""


class NotFoundError(CacheServiceError):
    """Raised when a key that must exist is absent, expired or evicted."""
