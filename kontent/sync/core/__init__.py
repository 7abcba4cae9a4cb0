"""Core components."""

from .enums import ApiMode, ErrorReason
from .exceptions import ConfigurationError, QueryFailedError, SyncError
from .results import (
    AdapterError,
    InvalidResponseError,
    NoResponsesError,
    NotFoundError,
    PagingQueryResult,
    PagingQuerySuccess,
    QueryError,
    QueryFailure,
    QueryResult,
    QuerySuccess,
    SyncResponse,
    SyncResponseMeta,
    ValidationFailedError,
)
from .types import Header, JsonValue

__all__ = [
    "ApiMode",
    "ErrorReason",
    "Header",
    "JsonValue",
    # Exceptions
    "SyncError",
    "ConfigurationError",
    "QueryFailedError",
    # Returned errors
    "QueryError",
    "InvalidResponseError",
    "NotFoundError",
    "AdapterError",
    "ValidationFailedError",
    "NoResponsesError",
    # Results
    "SyncResponse",
    "SyncResponseMeta",
    "QuerySuccess",
    "PagingQuerySuccess",
    "QueryFailure",
    "QueryResult",
    "PagingQueryResult",
]
