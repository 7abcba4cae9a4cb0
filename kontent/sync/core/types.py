"""Primitive value types shared by the transport boundary and the core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

JsonValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass(frozen=True)
class Header:
    """A single HTTP header.

    Header lists are kept as ordered tuples rather than dicts: request header
    order is part of the wire contract and response headers may repeat.
    """

    name: str
    value: str
