"""Payload models of the init and sync endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from .delta import (
    ContentItemDeltaObject,
    ContentTypeDeltaObject,
    LanguageDeltaObject,
    TaxonomyDeltaObject,
)

CHANGE_COLLECTIONS = ("items", "types", "languages", "taxonomies")


def batch_has_changes(batch: Mapping[str, Any]) -> bool:
    """Whether a sync batch reports at least one delta object."""
    return any(batch.get(key) for key in CHANGE_COLLECTIONS)


class SyncQueryPayload(BaseModel):
    """One batch of changes returned by ``GET /sync``."""

    items: list[ContentItemDeltaObject]
    types: list[ContentTypeDeltaObject]
    languages: list[LanguageDeltaObject]
    taxonomies: list[TaxonomyDeltaObject]

    model_config = ConfigDict(frozen=True)

    @property
    def has_changes(self) -> bool:
        return batch_has_changes(dict(self))


class InitQueryPayload(SyncQueryPayload):
    """Payload of ``POST /sync/init``.

    Shares the sync batch shape; the lists are normally empty and the
    interesting part is the continuation token in the response headers.
    """

    pass
