"""Request header composition and continuation token extraction."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import AUTHORIZATION_HEADER, CONTINUATION_HEADER, SDK_ID_HEADER
from ..core.types import Header
from ..sdk_info import SDK_HOST, SDK_NAME, SDK_VERSION


def get_sdk_id_header() -> Header:
    """Identification header naming this client and its version."""
    return Header(name=SDK_ID_HEADER, value=f"{SDK_HOST};{SDK_NAME};{SDK_VERSION}")


def compose_request_headers(
    request_headers: Iterable[Header],
    *,
    continuation_token: str | None,
    api_key: str | None,
) -> tuple[Header, ...]:
    """Build the outbound header list.

    Order is fixed: identification header, caller headers, continuation
    token (when given), authorization (when a key is configured).

    Args:
        request_headers: Headers supplied by the query
        continuation_token: Token to resume from, omitted when empty
        api_key: Delivery API key, omitted when empty

    Returns:
        Ordered tuple of headers
    """
    headers = [get_sdk_id_header(), *request_headers]
    if continuation_token:
        headers.append(Header(name=CONTINUATION_HEADER, value=continuation_token))
    if api_key:
        headers.append(Header(name=AUTHORIZATION_HEADER, value=f"Bearer {api_key}"))
    return tuple(headers)


def extract_continuation_token(response_headers: Iterable[Header]) -> str | None:
    """Return the first ``X-Continuation`` value (name matched case-insensitively)."""
    expected = CONTINUATION_HEADER.lower()
    for header in response_headers:
        if header.name.lower() == expected:
            return header.value
    return None
