"""Endpoint URL construction."""

from __future__ import annotations

import re

from ..config import BASE_URLS
from ..core.enums import ApiMode

_DUPLICATE_SLASHES = re.compile(r"/{2,}")


def get_sync_endpoint_url(
    *, environment_id: str, path: str, api_mode: ApiMode, base_url: str | None = None
) -> str:
    """Build an environment-scoped Sync API URL.

    Args:
        environment_id: Kontent.ai environment identifier
        path: Endpoint path relative to the environment (e.g. "sync/init")
        api_mode: Selects the default host when base_url is not given
        base_url: Custom host, e.g. for proxies or test servers

    Returns:
        Absolute endpoint URL
    """
    return get_endpoint_url(
        environment_id=environment_id,
        path=path,
        base_url=base_url or BASE_URLS[api_mode],
    )


def get_endpoint_url(*, environment_id: str, path: str, base_url: str) -> str:
    return remove_duplicate_slashes(f"{base_url}/{environment_id}/{path}")


def remove_duplicate_slashes(url: str) -> str:
    """Collapse repeated slashes, leaving the scheme separator intact."""
    scheme, sep, rest = url.partition("://")
    if not sep:
        return _DUPLICATE_SLASHES.sub("/", url)
    return f"{scheme}{sep}{_DUPLICATE_SLASHES.sub('/', rest)}"
