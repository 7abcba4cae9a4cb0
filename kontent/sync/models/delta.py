"""Delta object models reported by the Sync API.

Every delta object has the same envelope: a change type, the time of the
change and a ``data`` block whose ``system`` section identifies the entity.
System blocks allow unknown fields so newer API versions keep validating.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ChangeType(str, Enum):
    """Kind of change reported for an entity."""

    CHANGED = "changed"
    DELETED = "deleted"


class _SystemBase(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    codename: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, extra="allow")


class ContentItemSystem(_SystemBase):
    """System attributes of a content item variant."""

    language: str
    type: str
    collection: str
    last_modified: datetime
    workflow: str | None = None
    workflow_step: str | None = None


class ContentTypeSystem(_SystemBase):
    last_modified: datetime


class LanguageSystem(_SystemBase):
    pass


class TaxonomySystem(_SystemBase):
    last_modified: datetime


class ContentItemData(BaseModel):
    system: ContentItemSystem

    model_config = ConfigDict(frozen=True)


class ContentTypeData(BaseModel):
    system: ContentTypeSystem

    model_config = ConfigDict(frozen=True)


class LanguageData(BaseModel):
    system: LanguageSystem

    model_config = ConfigDict(frozen=True)


class TaxonomyData(BaseModel):
    system: TaxonomySystem

    model_config = ConfigDict(frozen=True)


class ContentItemDeltaObject(BaseModel):
    """Change of a content item in one language."""

    change_type: ChangeType
    timestamp: datetime
    data: ContentItemData

    model_config = ConfigDict(frozen=True)


class ContentTypeDeltaObject(BaseModel):
    change_type: ChangeType
    timestamp: datetime
    data: ContentTypeData

    model_config = ConfigDict(frozen=True)


class LanguageDeltaObject(BaseModel):
    change_type: ChangeType
    timestamp: datetime
    data: LanguageData

    model_config = ConfigDict(frozen=True)


class TaxonomyDeltaObject(BaseModel):
    change_type: ChangeType
    timestamp: datetime
    data: TaxonomyData

    model_config = ConfigDict(frozen=True)
