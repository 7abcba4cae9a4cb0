"""High-level client API."""

from .sync_client import (
    SyncClient,
    SyncClientBuilder,
    SyncClientFactory,
    get_sync_client,
    payload_has_changes,
)

__all__ = [
    "SyncClient",
    "SyncClientBuilder",
    "SyncClientFactory",
    "get_sync_client",
    "payload_has_changes",
]
