"""Schema validation of decoded payloads.

A schema is anything pydantic can validate against (a model class, a type
annotation, a ready ``TypeAdapter``) or an object implementing
``AsyncSchema`` for validation that needs to await, e.g. remote lookups.
Mismatches are reported as data, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from pydantic import TypeAdapter


@runtime_checkable
class AsyncSchema(Protocol):
    async def validate_async(self, value: Any) -> Any:
        """Validate value, raising ``ValueError`` on mismatch."""
        ...


@dataclass(frozen=True)
class ValidationOutcome:
    is_valid: bool
    error: ValueError | None = None


async def validate_response(data: Any, schema: Any) -> ValidationOutcome:
    """Validate a decoded payload against a schema.

    Args:
        data: Decoded JSON payload
        schema: Pydantic model/type, TypeAdapter or AsyncSchema

    Returns:
        ValidationOutcome, carrying the rejecting error when invalid
    """
    try:
        if isinstance(schema, AsyncSchema):
            await schema.validate_async(data)
        elif isinstance(schema, TypeAdapter):
            schema.validate_python(data)
        else:
            TypeAdapter(schema).validate_python(data)
    except ValueError as exc:
        return ValidationOutcome(is_valid=False, error=exc)
    return ValidationOutcome(is_valid=True)
