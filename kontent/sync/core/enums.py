"""Core enumerations.

Architecture:
    String enums so values serialize directly and compare equal to the
    camelCase reason tags used by the Sync API tooling.

Key Types:
    - ApiMode: Which Delivery API flavour a client talks to
    - ErrorReason: Closed set of tags carried by returned error values
"""

from enum import Enum


class ApiMode(str, Enum):
    """Delivery API flavour.

    Preview mode uses a different host; secure and preview modes require an
    API key sent as a bearer token.
    """

    PUBLIC = "public"
    PREVIEW = "preview"
    SECURE = "secure"

    @property
    def requires_api_key(self) -> bool:
        return self is not ApiMode.PUBLIC


class ErrorReason(str, Enum):
    """Reason tag of a returned query error."""

    # Relayed from the transport boundary
    INVALID_RESPONSE = "invalidResponse"
    NOT_FOUND = "notFound"
    ADAPTER_ERROR = "adapterError"

    # Produced by the query engine
    VALIDATION_FAILED = "validationFailed"
    NO_RESPONSES = "noResponses"
