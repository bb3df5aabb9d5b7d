from __future__ import annotations

from typing import Optional


class FetchError(Exception):
    """The data store could not give us the transactions. Shown with a Retry button."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AccessDeniedError(FetchError):
    """The data store answered but refused access (bad key or row level security)."""


class ConfigurationError(FetchError):
    """The data store location or key is not set."""
