"""Kontent.ai Sync - async client for the Kontent.ai Sync API."""

from .clients import SyncClient, get_sync_client
from .config import ResponseValidationConfig, SyncClientConfig
from .core import (
    AdapterError,
    ApiMode,
    ConfigurationError,
    ErrorReason,
    Header,
    InvalidResponseError,
    NoResponsesError,
    NotFoundError,
    PagingQueryResult,
    PagingQuerySuccess,
    QueryError,
    QueryFailedError,
    QueryFailure,
    QueryResult,
    QuerySuccess,
    SyncError,
    SyncResponse,
    SyncResponseMeta,
    ValidationFailedError,
)
from .io import AiohttpService, HttpRequest, HttpResponse, HttpService
from .models import (
    ChangeType,
    ContentItemDeltaObject,
    ContentTypeDeltaObject,
    InitQueryPayload,
    LanguageDeltaObject,
    SyncQueryPayload,
    TaxonomyDeltaObject,
)
from .runtime import PagingQuery, Query
from .sdk_info import SDK_VERSION

__version__ = SDK_VERSION

__all__ = [
    # Client
    "get_sync_client",
    "SyncClient",
    "SyncClientConfig",
    "ResponseValidationConfig",
    "ApiMode",
    # Queries
    "Query",
    "PagingQuery",
    # Results
    "QueryResult",
    "PagingQueryResult",
    "QuerySuccess",
    "PagingQuerySuccess",
    "QueryFailure",
    "SyncResponse",
    "SyncResponseMeta",
    # Errors
    "ErrorReason",
    "QueryError",
    "InvalidResponseError",
    "NotFoundError",
    "AdapterError",
    "ValidationFailedError",
    "NoResponsesError",
    "SyncError",
    "ConfigurationError",
    "QueryFailedError",
    # Transport
    "Header",
    "HttpRequest",
    "HttpResponse",
    "HttpService",
    "AiohttpService",
    # Models
    "ChangeType",
    "ContentItemDeltaObject",
    "ContentTypeDeltaObject",
    "LanguageDeltaObject",
    "TaxonomyDeltaObject",
    "SyncQueryPayload",
    "InitQueryPayload",
]
