"""Paging resolution driven by continuation tokens.

Architecture:
    An explicit loop over ``resolve_query``. Each page's request carries the
    token returned by the previous page; pages are fetched strictly one
    after another because every request depends on the prior answer.

    States: fetching -> accumulated+continuing (predicate holds and a next
    token exists) -> fetching again; or accumulated+stopped; or failed.
    The first failure aborts the whole call and discards fetched pages.

    If the predicate never stops and the server keeps returning tokens the
    loop keeps going; callers bound long-running streams via the predicate.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

from ..config import SyncClientConfig
from ..core.results import (
    NoResponsesError,
    PagingQueryResult,
    PagingQuerySuccess,
    QueryFailure,
    SyncResponse,
)
from .definitions import QueryDescription
from .resolver import resolve_query
from .telemetry import log_page_fetched, log_paging_complete, log_paging_failed

NO_RESPONSES_MESSAGE = (
    "No responses were processed. Expected at least one response to be fetched "
    "when using paging queries."
)


async def resolve_paging_query(
    query: QueryDescription,
    config: SyncClientConfig,
    *,
    can_fetch_next_response: Callable[[SyncResponse[Any]], bool],
) -> PagingQueryResult[Any]:
    """Fetch pages until the predicate stops or the token stream runs out.

    Args:
        query: Query whose continuation_token is the starting token
        config: Client configuration
        can_fetch_next_response: Decides after each page whether to continue

    Returns:
        PagingQuerySuccess with all pages in arrival order, or the first
        QueryFailure encountered; NoResponsesError if no page was fetched
    """
    responses: list[SyncResponse[Any]] = []
    current_token = query.continuation_token

    while current_token:
        result = await resolve_query(replace(query, continuation_token=current_token), config)

        if not result.success:
            log_paging_failed(url=query.url, pages_discarded=len(responses), error=result.error)
            return result

        response = result.response
        responses.append(response)

        if can_fetch_next_response(response):
            current_token = response.meta.continuation_token
        else:
            current_token = None

        log_page_fetched(
            url=query.url,
            page_index=len(responses) - 1,
            will_continue=bool(current_token),
        )

    if not responses:
        return QueryFailure(NoResponsesError(url=query.url, message=NO_RESPONSES_MESSAGE))

    log_paging_complete(url=query.url, pages=len(responses))
    return PagingQuerySuccess(
        responses=tuple(responses),
        last_continuation_token=responses[-1].meta.continuation_token or "",
    )
