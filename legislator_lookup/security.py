"""Shared-secret check for API requests."""

import secrets

from fastapi import HTTPException

from .config import Settings


def require_key(provided: str | None, settings: Settings) -> None:
    """
    Reject the request unless it carries the shared secret.

    A missing key is a 400. When the server has a configured key, a
    different value is a 403.
    """
    if not provided:
        raise HTTPException(status_code=400, detail="key required")
    if settings.key is not None and not secrets.compare_digest(
        provided.encode(), settings.key.encode()
    ):
        raise HTTPException(status_code=403, detail="invalid key")
