"""Query resolution and paging engine.

Architecture:
    The engine consists of:
    - definitions.py: Immutable query descriptions
    - headers.py: Outbound header composition and token extraction
    - validation.py: Schema validation reported as data
    - resolver.py: Single-exchange resolution
    - paging.py: Token-driven multi-page resolution
    - query.py: Capability records exposed to callers
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import QueryDescription, QueryRequest, no_extra_metadata
from .headers import compose_request_headers, extract_continuation_token, get_sdk_id_header
from .paging import resolve_paging_query
from .query import PagingQuery, Query, get_paging_query, get_query
from .resolver import resolve_query
from .validation import AsyncSchema, ValidationOutcome, validate_response

__all__ = [
    "AsyncSchema",
    "PagingQuery",
    "Query",
    "QueryDescription",
    "QueryRequest",
    "ValidationOutcome",
    "compose_request_headers",
    "extract_continuation_token",
    "get_paging_query",
    "get_query",
    "get_sdk_id_header",
    "no_extra_metadata",
    "resolve_paging_query",
    "resolve_query",
    "validate_response",
]
