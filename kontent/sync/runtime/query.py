"""Query capability records.

``Query`` can resolve once; ``PagingQuery`` can additionally resolve all
pages. A paging query is composed from a plain query rather than derived
from it, so both expose exactly the operations their endpoint supports.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..config import SyncClientConfig
from ..core.results import PagingQueryResult, QueryResult, SyncResponse
from .definitions import QueryDescription
from .paging import resolve_paging_query
from .resolver import resolve_query


@dataclass(frozen=True)
class Query:
    description: QueryDescription
    config: SyncClientConfig

    def to_url(self) -> str:
        return self.description.url

    async def resolve(self) -> QueryResult[Any]:
        """Execute the query once."""
        return await resolve_query(self.description, self.config)


@dataclass(frozen=True)
class PagingQuery:
    """Query over a continuation-token stream.

    ``resolve()`` fetches the single page at the starting token;
    ``resolve_all()`` keeps following tokens while
    ``can_fetch_next_response`` approves the latest page.
    """

    query: Query
    can_fetch_next_response: Callable[[SyncResponse[Any]], bool]

    def to_url(self) -> str:
        return self.query.to_url()

    async def resolve(self) -> QueryResult[Any]:
        return await self.query.resolve()

    async def resolve_all(self) -> PagingQueryResult[Any]:
        return await resolve_paging_query(
            self.query.description,
            self.query.config,
            can_fetch_next_response=self.can_fetch_next_response,
        )


def get_query(description: QueryDescription, config: SyncClientConfig) -> Query:
    return Query(description=description, config=config)


def get_paging_query(
    description: QueryDescription,
    config: SyncClientConfig,
    *,
    can_fetch_next_response: Callable[[SyncResponse[Any]], bool],
) -> PagingQuery:
    return PagingQuery(
        query=get_query(description, config),
        can_fetch_next_response=can_fetch_next_response,
    )
