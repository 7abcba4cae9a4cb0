"""Result and error values returned by queries.

Architecture:
    Every query outcome is a two-variant sum type discriminated by the
    ``success`` literal: a success carrying the response(s), or a
    ``QueryFailure`` carrying exactly one ``QueryError``. Errors form a closed
    set keyed by ``ErrorReason``; each subclass adds its reason-specific
    fields. Nothing in the query engine raises to signal a failed exchange.

Usage:
    >>> result = await client.init().resolve()
    >>> if result.success:
    ...     token = result.response.meta.continuation_token
    ... elif isinstance(result.error, ValidationFailedError):
    ...     print(result.error.validation_error)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Literal, TypeVar

from .enums import ErrorReason
from .exceptions import QueryFailedError
from .types import Header, JsonValue

if TYPE_CHECKING:
    from ..io.http import HttpResponse

PayloadT = TypeVar("PayloadT")


@dataclass(frozen=True, kw_only=True)
class QueryError:
    """Base of all returned error values."""

    reason: ClassVar[ErrorReason]

    url: str
    message: str


@dataclass(frozen=True, kw_only=True)
class InvalidResponseError(QueryError):
    """Server answered with a non-success status."""

    reason: ClassVar[ErrorReason] = ErrorReason.INVALID_RESPONSE

    status: int
    status_text: str
    response_headers: tuple[Header, ...] = ()
    error_data: JsonValue = None


@dataclass(frozen=True, kw_only=True)
class NotFoundError(QueryError):
    """Server answered 404."""

    reason: ClassVar[ErrorReason] = ErrorReason.NOT_FOUND

    response_headers: tuple[Header, ...] = ()
    error_data: JsonValue = None


@dataclass(frozen=True, kw_only=True)
class AdapterError(QueryError):
    """The exchange itself failed (connection, timeout, undecodable body)."""

    reason: ClassVar[ErrorReason] = ErrorReason.ADAPTER_ERROR

    original_error: BaseException | None = None


@dataclass(frozen=True, kw_only=True)
class ValidationFailedError(QueryError):
    """Decoded payload did not match the query schema.

    ``response`` is the original, unvalidated transport response.
    """

    reason: ClassVar[ErrorReason] = ErrorReason.VALIDATION_FAILED

    validation_error: ValueError
    response: HttpResponse


@dataclass(frozen=True, kw_only=True)
class NoResponsesError(QueryError):
    """A paging query finished without fetching a single page."""

    reason: ClassVar[ErrorReason] = ErrorReason.NO_RESPONSES


@dataclass(frozen=True)
class SyncResponseMeta:
    """Metadata attached to every successful response.

    Attributes:
        status: HTTP status code
        response_headers: All response headers in received order
        continuation_token: Value of ``X-Continuation`` or None when absent
        extra: Caller-defined metadata produced by the query's extra_metadata
    """

    status: int
    response_headers: tuple[Header, ...]
    continuation_token: str | None
    extra: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SyncResponse(Generic[PayloadT]):
    """Decoded payload plus metadata of one successful exchange."""

    payload: PayloadT
    meta: SyncResponseMeta


@dataclass(frozen=True)
class QuerySuccess(Generic[PayloadT]):
    response: SyncResponse[PayloadT]
    success: Literal[True] = field(default=True, init=False)

    def unwrap(self) -> SyncResponse[PayloadT]:
        return self.response


@dataclass(frozen=True)
class PagingQuerySuccess(Generic[PayloadT]):
    """Aggregate of a completed paging query.

    Attributes:
        responses: Every fetched page in arrival order (never empty)
        last_continuation_token: Token of the last page, "" if it had none
    """

    responses: tuple[SyncResponse[PayloadT], ...]
    last_continuation_token: str
    success: Literal[True] = field(default=True, init=False)

    def unwrap(self) -> tuple[SyncResponse[PayloadT], ...]:
        return self.responses


@dataclass(frozen=True)
class QueryFailure:
    error: QueryError
    success: Literal[False] = field(default=False, init=False)

    def unwrap(self):
        """Raise the carried error as ``QueryFailedError``."""
        raise QueryFailedError(self.error)


QueryResult = QuerySuccess[PayloadT] | QueryFailure
PagingQueryResult = PagingQuerySuccess[PayloadT] | QueryFailure
