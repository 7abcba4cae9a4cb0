"""Exception hierarchy.

Query outcomes are returned as values (see ``core.results``); exceptions are
reserved for misuse of the client and for callers that explicitly ask for
one via ``unwrap()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .results import QueryError


class SyncError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(SyncError):
    """Client was built with invalid or missing settings."""

    pass


class QueryFailedError(SyncError):
    """Raised by ``QueryFailure.unwrap()``.

    Wraps the returned error value so callers preferring exceptions keep
    access to every reason-specific field.
    """

    def __init__(self, error: QueryError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def reason(self):
        return self.error.reason
