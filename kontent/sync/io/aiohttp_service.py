"""Default ``HttpService`` built on aiohttp.

Performs exactly one exchange per call. Non-success statuses and connection
problems are mapped to returned error values; nothing is retried here.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ..core.results import AdapterError, InvalidResponseError, NotFoundError
from ..core.types import Header
from .http import AdapterResponse, HttpFailure, HttpRequest, HttpResponse, HttpResult, HttpSuccess

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class AiohttpService:
    """Async HTTP service wrapper."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request_async(self, request: HttpRequest) -> HttpResult:
        headers = [(header.name, header.value) for header in request.request_headers]
        try:
            async with self.session.request(
                request.method, request.url, json=request.body, headers=headers
            ) as response:
                response_headers = tuple(
                    Header(name=name, value=value) for name, value in response.headers.items()
                )
                status_text = response.reason or ""

                if response.status == 404:
                    return HttpFailure(
                        NotFoundError(
                            url=request.url,
                            message=f"Resource at url '{request.url}' was not found",
                            response_headers=response_headers,
                            error_data=await self._read_error_data(response),
                        )
                    )

                if not 200 <= response.status < 300:
                    logger.debug(
                        "http_invalid_response",
                        extra={"url": request.url, "status": response.status},
                    )
                    return HttpFailure(
                        InvalidResponseError(
                            url=request.url,
                            message=(
                                f"Request to '{request.url}' failed with status "
                                f"{response.status} {status_text}".rstrip()
                            ),
                            status=response.status,
                            status_text=status_text,
                            response_headers=response_headers,
                            error_data=await self._read_error_data(response),
                        )
                    )

                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            return HttpFailure(
                AdapterError(
                    url=request.url,
                    message=f"Request to '{request.url}' failed: {type(exc).__name__}: {exc}",
                    original_error=exc,
                )
            )

        return HttpSuccess(
            HttpResponse(
                data=data,
                body=request.body,
                method=request.method,
                request_headers=request.request_headers,
                adapter_response=AdapterResponse(
                    status=response.status,
                    status_text=status_text,
                    response_headers=response_headers,
                ),
            )
        )

    @staticmethod
    async def _read_error_data(response: aiohttp.ClientResponse) -> Any:
        try:
            return await response.json(content_type=None)
        except ValueError:
            return await response.text() or None

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AiohttpService:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
