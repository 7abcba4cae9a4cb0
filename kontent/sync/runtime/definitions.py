"""Declarative query descriptions.

A ``QueryDescription`` is a plain immutable value: what to send, what the
answer should look like, and which token to resume from. The resolvers turn
it into results; the paging resolver derives a fresh description per page
instead of mutating one.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..core.types import Header, JsonValue
from ..io.http import HttpResponse


def no_extra_metadata(response: HttpResponse) -> Mapping[str, Any]:
    return {}


@dataclass(frozen=True)
class QueryRequest:
    """Transport-level part of a query.

    Attributes:
        method: HTTP method ("GET" | "POST")
        url: Absolute target URL
        body: JSON body, None for no body
        request_headers: Caller headers placed after the identification header
    """

    method: str
    url: str
    body: JsonValue = None
    request_headers: tuple[Header, ...] = ()


@dataclass(frozen=True)
class QueryDescription:
    """Everything needed to resolve one query.

    Attributes:
        request: What to send
        schema: Expected payload shape, used when response validation is on
        extra_metadata: Maps the successful exchange to extra response metadata
        continuation_token: Token sent as ``X-Continuation``, None for none
    """

    request: QueryRequest
    schema: Any
    extra_metadata: Callable[[HttpResponse], Mapping[str, Any]] = field(
        default=no_extra_metadata
    )
    continuation_token: str | None = None

    @property
    def url(self) -> str:
        return self.request.url
