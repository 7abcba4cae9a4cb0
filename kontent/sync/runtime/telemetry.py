"""Structured logging for query resolution.

Events carry URLs, statuses and counts only. Request headers are never
logged because they include the API key.
"""

from __future__ import annotations

import logging

from ..core.results import QueryError

logger = logging.getLogger(__name__)


def log_query_resolved(*, url: str, method: str, status: int, has_token: bool) -> None:
    """Log a successful single exchange.

    Args:
        url: Target URL
        method: HTTP method
        status: Response status code
        has_token: Whether the response carried a continuation token
    """
    logger.debug(
        "query_resolved",
        extra={"url": url, "method": method, "status": status, "has_token": has_token},
    )


def log_query_failed(*, url: str, error: QueryError) -> None:
    logger.warning(
        "query_failed",
        extra={"url": url, "reason": error.reason.value, "error_message": error.message},
    )


def log_page_fetched(*, url: str, page_index: int, will_continue: bool) -> None:
    """Log one accumulated page of a paging query.

    Args:
        url: Target URL
        page_index: Zero-based index of the page
        will_continue: Whether another page will be requested
    """
    logger.debug(
        "paging_page_fetched",
        extra={"url": url, "page_index": page_index, "will_continue": will_continue},
    )


def log_paging_complete(*, url: str, pages: int) -> None:
    logger.info("paging_complete", extra={"url": url, "pages": pages})


def log_paging_failed(*, url: str, pages_discarded: int, error: QueryError) -> None:
    logger.warning(
        "paging_failed",
        extra={
            "url": url,
            "pages_discarded": pages_discarded,
            "reason": error.reason.value,
        },
    )
