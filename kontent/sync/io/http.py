"""Transport boundary.

Architecture:
    The query engine never talks HTTP itself. It hands an ``HttpRequest`` to
    an ``HttpService`` and receives either ``HttpSuccess`` or ``HttpFailure``.
    Connection handling, TLS, timeouts and any retry policy live entirely
    behind this protocol; failures come back as ``QueryError`` values and are
    relayed to callers unchanged.

See Also:
    - AiohttpService: Default implementation on top of aiohttp
    - resolve_query: The single consumer of this boundary
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol, runtime_checkable

from ..core.results import QueryError
from ..core.types import Header, JsonValue


@dataclass(frozen=True)
class HttpRequest:
    method: str
    url: str
    body: JsonValue = None
    request_headers: tuple[Header, ...] = ()


@dataclass(frozen=True)
class AdapterResponse:
    """Raw response details as seen by the transport adapter."""

    status: int
    status_text: str
    response_headers: tuple[Header, ...]
    is_valid_response: bool = True


@dataclass(frozen=True)
class HttpResponse:
    """A successful exchange.

    Attributes:
        data: Decoded JSON body (None for an empty body)
        body: Request body that was sent
        method: Request method
        request_headers: Headers that were sent
        adapter_response: Status and headers of the response
    """

    data: JsonValue
    body: JsonValue
    method: str
    request_headers: tuple[Header, ...]
    adapter_response: AdapterResponse


@dataclass(frozen=True)
class HttpSuccess:
    response: HttpResponse
    success: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class HttpFailure:
    error: QueryError
    success: Literal[False] = field(default=False, init=False)


HttpResult = HttpSuccess | HttpFailure


@runtime_checkable
class HttpService(Protocol):
    """Anything able to execute one HTTP exchange.

    Implementations must report failures as ``HttpFailure`` values instead
    of raising.
    """

    async def request_async(self, request: HttpRequest) -> HttpResult:
        ...
