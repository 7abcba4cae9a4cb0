"""Transport boundary and the default aiohttp-backed implementation."""

from .aiohttp_service import AiohttpService
from .http import (
    AdapterResponse,
    HttpFailure,
    HttpRequest,
    HttpResponse,
    HttpResult,
    HttpService,
    HttpSuccess,
)

__all__ = [
    "AdapterResponse",
    "AiohttpService",
    "HttpFailure",
    "HttpRequest",
    "HttpResponse",
    "HttpResult",
    "HttpService",
    "HttpSuccess",
]
