"""Sync API client facade.

Architecture:
    ``get_sync_client(env)`` starts a small builder chain that fixes the API
    mode (and key) before the client is created:

        get_sync_client(env).public_api().create()
        get_sync_client(env).preview_api(key).create(response_validation=True)
        get_sync_client(env).secure_api(key).create(http_service=my_service)

    The resulting ``SyncClient`` only builds queries; resolving them is done
    by the query engine in ``runtime``.

Resource ownership:
    When no ``http_service`` is given the client creates an
    ``AiohttpService`` and closes it in ``close()``. A caller-supplied
    service is left open.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config import (
    SYNC_INIT_PATH,
    SYNC_PATH,
    ResponseValidationConfig,
    SyncClientConfig,
)
from ..core.enums import ApiMode
from ..core.exceptions import ConfigurationError
from ..core.results import SyncResponse
from ..io.aiohttp_service import AiohttpService
from ..io.http import HttpService
from ..models import InitQueryPayload, SyncQueryPayload, batch_has_changes
from ..runtime import (
    PagingQuery,
    Query,
    QueryDescription,
    QueryRequest,
    get_paging_query,
    get_query,
)
from ..utils.urls import get_sync_endpoint_url


def payload_has_changes(response: SyncResponse[Any]) -> bool:
    """Whether a sync page reported at least one delta object.

    An empty page means the stream is caught up, so paging stops there.
    """
    payload = response.payload
    if not isinstance(payload, Mapping):
        return False
    return batch_has_changes(payload)


class SyncClient:
    """Builds init and sync queries for one environment."""

    def __init__(self, config: SyncClientConfig, *, owns_http_service: bool = False) -> None:
        self._config = config
        self._owns_http_service = owns_http_service

    @property
    def config(self) -> SyncClientConfig:
        return self._config

    def init(self) -> Query:
        """Query returning the initial continuation token."""
        return get_query(
            QueryDescription(
                request=QueryRequest(method="POST", url=self._url(SYNC_INIT_PATH)),
                schema=InitQueryPayload,
            ),
            self._config,
        )

    def sync(self, continuation_token: str) -> PagingQuery:
        """Query the changes made since ``continuation_token``.

        ``resolve()`` returns one batch; ``resolve_all()`` follows tokens
        until a batch without changes is received.
        """
        return get_paging_query(
            QueryDescription(
                request=QueryRequest(method="GET", url=self._url(SYNC_PATH)),
                schema=SyncQueryPayload,
                continuation_token=continuation_token,
            ),
            self._config,
            can_fetch_next_response=payload_has_changes,
        )

    def _url(self, path: str) -> str:
        return get_sync_endpoint_url(
            environment_id=self._config.environment_id,
            path=path,
            api_mode=self._config.api_mode,
            base_url=self._config.base_url,
        )

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_service and isinstance(self._config.http_service, AiohttpService):
            await self._config.http_service.close()

    async def __aenter__(self) -> SyncClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class SyncClientFactory:
    """Creates clients for a fixed environment and API mode."""

    def __init__(self, environment_id: str, api_mode: ApiMode, api_key: str | None = None) -> None:
        if api_mode.requires_api_key and not api_key:
            raise ConfigurationError(f"An API key is required for the '{api_mode.value}' API")
        self._environment_id = environment_id
        self._api_mode = api_mode
        self._api_key = api_key

    def create(
        self,
        *,
        base_url: str | None = None,
        http_service: HttpService | None = None,
        response_validation: ResponseValidationConfig | bool | None = None,
    ) -> SyncClient:
        """Create the client.

        Args:
            base_url: Custom Delivery API host
            http_service: Transport to use (default: a new AiohttpService)
            response_validation: Config, or a bool shorthand for ``enable``

        Returns:
            SyncClient
        """
        if isinstance(response_validation, bool):
            response_validation = ResponseValidationConfig(enable=response_validation)

        owns_http_service = http_service is None
        config = SyncClientConfig(
            environment_id=self._environment_id,
            api_mode=self._api_mode,
            http_service=AiohttpService() if owns_http_service else http_service,
            delivery_api_key=self._api_key,
            base_url=base_url,
            response_validation=response_validation or ResponseValidationConfig(),
        )
        return SyncClient(config, owns_http_service=owns_http_service)


class SyncClientBuilder:
    def __init__(self, environment_id: str) -> None:
        if not environment_id:
            raise ConfigurationError("Environment id must be a non-empty string")
        self._environment_id = environment_id

    def public_api(self) -> SyncClientFactory:
        return SyncClientFactory(self._environment_id, ApiMode.PUBLIC)

    def preview_api(self, api_key: str) -> SyncClientFactory:
        return SyncClientFactory(self._environment_id, ApiMode.PREVIEW, api_key)

    def secure_api(self, api_key: str) -> SyncClientFactory:
        return SyncClientFactory(self._environment_id, ApiMode.SECURE, api_key)


def get_sync_client(environment_id: str) -> SyncClientBuilder:
    """Entry point: ``get_sync_client(env).public_api().create()``."""
    return SyncClientBuilder(environment_id)
