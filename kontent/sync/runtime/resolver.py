"""Single-query resolution.

Executes exactly one exchange for a ``QueryDescription``: compose headers,
delegate to the transport, optionally validate, then assemble a typed
result. Transport failures are relayed untouched; nothing is retried or
cached here.
"""

from __future__ import annotations

from typing import Any

from ..config import SyncClientConfig
from ..core.results import (
    QueryFailure,
    QueryResult,
    QuerySuccess,
    SyncResponse,
    SyncResponseMeta,
    ValidationFailedError,
)
from ..io.http import HttpRequest
from .definitions import QueryDescription
from .headers import compose_request_headers, extract_continuation_token
from .telemetry import log_query_failed, log_query_resolved
from .validation import validate_response


async def resolve_query(query: QueryDescription, config: SyncClientConfig) -> QueryResult[Any]:
    """Resolve a query with a single exchange.

    Args:
        query: Query to resolve; its continuation token is sent as-is
        config: Client configuration (transport, API key, validation flag)

    Returns:
        QuerySuccess with payload and metadata, or QueryFailure carrying the
        relayed transport error or a ValidationFailedError
    """
    request = query.request
    result = await config.http_service.request_async(
        HttpRequest(
            method=request.method,
            url=request.url,
            body=request.body,
            request_headers=compose_request_headers(
                request.request_headers,
                continuation_token=query.continuation_token,
                api_key=config.delivery_api_key,
            ),
        )
    )

    if not result.success:
        log_query_failed(url=request.url, error=result.error)
        return QueryFailure(result.error)

    response = result.response

    if config.response_validation.enable:
        outcome = await validate_response(response.data, query.schema)
        if not outcome.is_valid:
            error = ValidationFailedError(
                url=request.url,
                message=f"Failed to validate response schema for url '{request.url}'",
                validation_error=outcome.error,
                response=response,
            )
            log_query_failed(url=request.url, error=error)
            return QueryFailure(error)

    response_headers = response.adapter_response.response_headers
    continuation_token = extract_continuation_token(response_headers)
    log_query_resolved(
        url=request.url,
        method=request.method,
        status=response.adapter_response.status,
        has_token=continuation_token is not None,
    )

    return QuerySuccess(
        SyncResponse(
            payload=response.data,
            meta=SyncResponseMeta(
                status=response.adapter_response.status,
                response_headers=response_headers,
                continuation_token=continuation_token,
                extra=dict(query.extra_metadata(response)),
            ),
        )
    )
