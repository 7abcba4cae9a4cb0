"""Sync API payload models.

Architecture:
    Pydantic v2 models describing the JSON returned by the init and sync
    endpoints. They serve both as validation schemas for the query engine
    and as typed views callers can build from a raw payload:

    >>> payload = SyncQueryPayload.model_validate(response.payload)

    All models are immutable (frozen=True).
"""

from .delta import (
    ChangeType,
    ContentItemData,
    ContentItemDeltaObject,
    ContentItemSystem,
    ContentTypeData,
    ContentTypeDeltaObject,
    ContentTypeSystem,
    LanguageData,
    LanguageDeltaObject,
    LanguageSystem,
    TaxonomyData,
    TaxonomyDeltaObject,
    TaxonomySystem,
)
from .payloads import CHANGE_COLLECTIONS, InitQueryPayload, SyncQueryPayload, batch_has_changes

__all__ = [
    "CHANGE_COLLECTIONS",
    "ChangeType",
    "ContentItemData",
    "ContentItemDeltaObject",
    "ContentItemSystem",
    "ContentTypeData",
    "ContentTypeDeltaObject",
    "ContentTypeSystem",
    "InitQueryPayload",
    "LanguageData",
    "LanguageDeltaObject",
    "LanguageSystem",
    "SyncQueryPayload",
    "TaxonomyData",
    "TaxonomyDeltaObject",
    "TaxonomySystem",
    "batch_has_changes",
]
