"""Client configuration and Sync API constants.

This module centralizes header names, default hosts and the immutable
configuration object consumed by the query engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .core.enums import ApiMode
from .io.http import HttpService

# Header names (wire contract)
CONTINUATION_HEADER = "X-Continuation"
AUTHORIZATION_HEADER = "Authorization"
SDK_ID_HEADER = "X-KC-SDKID"

# Default Delivery API hosts per mode
DELIVERY_BASE_URL = "https://deliver.kontent.ai/v2"
PREVIEW_DELIVERY_BASE_URL = "https://preview-deliver.kontent.ai/v2"

BASE_URLS = {
    ApiMode.PUBLIC: DELIVERY_BASE_URL,
    ApiMode.SECURE: DELIVERY_BASE_URL,
    ApiMode.PREVIEW: PREVIEW_DELIVERY_BASE_URL,
}

# Endpoint paths relative to the environment
SYNC_INIT_PATH = "sync/init"
SYNC_PATH = "sync"


@dataclass(frozen=True)
class ResponseValidationConfig:
    """Schema validation of decoded payloads (off by default)."""

    enable: bool = False


@dataclass(frozen=True)
class SyncClientConfig:
    """Settings shared by every query a client builds.

    Attributes:
        environment_id: Kontent.ai environment identifier
        api_mode: Public, preview or secure Delivery API
        http_service: Transport used for every exchange
        delivery_api_key: Preview or secure API key, sent as a bearer token
        base_url: Overrides the mode's default host
        response_validation: Whether payloads are checked against schemas
    """

    environment_id: str
    api_mode: ApiMode
    http_service: HttpService
    delivery_api_key: str | None = None
    base_url: str | None = None
    response_validation: ResponseValidationConfig = field(
        default_factory=ResponseValidationConfig
    )
