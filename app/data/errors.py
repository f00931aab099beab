"""
Error taxonomy for the data access layer.

Store-level errors (config, remote, record-not-found) are absorbed by the
fallback policy in `data.service`. Only `NotFoundError` and `ValidationError`
ever reach an end user.
"""

from __future__ import annotations


class StorefrontError(Exception):
    """Base class for all storefront errors."""


class StoreConfigError(StorefrontError):
    """Record store credentials are missing."""


class RemoteError(StorefrontError):
    """The record store could not be reached or rejected the call."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RecordNotFoundError(RemoteError):
    """The record store has no record with the requested id."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class NotFoundError(StorefrontError):
    """No record in the store nor in the fallback dataset."""


class ValidationError(StorefrontError):
    """Required input is missing or malformed."""
