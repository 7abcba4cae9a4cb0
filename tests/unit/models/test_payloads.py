"""Unit tests for Sync API payload models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from kontent.sync.models import (
    CHANGE_COLLECTIONS,
    ChangeType,
    ContentItemDeltaObject,
    ContentTypeDeltaObject,
    SyncQueryPayload,
    TaxonomyDeltaObject,
    batch_has_changes,
)

ITEM_DELTA = {
    "change_type": "changed",
    "timestamp": "2024-05-01T10:00:00Z",
    "data": {
        "system": {
            "id": "f4b3fc05-e988-4dae-9ac1-a94aba566474",
            "name": "On Roasts",
            "codename": "on_roasts",
            "language": "en-US",
            "type": "article",
            "collection": "default",
            "workflow": "default",
            "workflow_step": "published",
            "last_modified": "2024-05-01T09:59:00Z",
        }
    },
}


class TestDeltaObjects:
    def test_content_item(self):
        delta = ContentItemDeltaObject.model_validate(ITEM_DELTA)
        assert delta.change_type is ChangeType.CHANGED
        assert delta.timestamp == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
        assert delta.data.system.codename == "on_roasts"
        assert delta.data.system.workflow_step == "published"

    def test_deleted_item_without_workflow(self):
        raw = {**ITEM_DELTA, "change_type": "deleted"}
        raw["data"] = {"system": {k: v for k, v in ITEM_DELTA["data"]["system"].items()
                                  if not k.startswith("workflow")}}
        delta = ContentItemDeltaObject.model_validate(raw)
        assert delta.change_type is ChangeType.DELETED
        assert delta.data.system.workflow is None

    def test_unknown_system_fields_allowed(self):
        raw = {
            "change_type": "changed",
            "timestamp": "2024-05-01T10:00:00Z",
            "data": {
                "system": {
                    "id": "1",
                    "name": "Article",
                    "codename": "article",
                    "last_modified": "2024-05-01T10:00:00Z",
                    "future_field": 1,
                }
            },
        }
        delta = ContentTypeDeltaObject.model_validate(raw)
        assert delta.data.system.model_extra == {"future_field": 1}

    def test_unknown_change_type_rejected(self):
        with pytest.raises(ValidationError):
            ContentItemDeltaObject.model_validate({**ITEM_DELTA, "change_type": "moved"})

    def test_taxonomy_requires_last_modified(self):
        raw = {
            "change_type": "changed",
            "timestamp": "2024-05-01T10:00:00Z",
            "data": {"system": {"id": "1", "name": "Tags", "codename": "tags"}},
        }
        with pytest.raises(ValidationError):
            TaxonomyDeltaObject.model_validate(raw)

    def test_frozen(self):
        delta = ContentItemDeltaObject.model_validate(ITEM_DELTA)
        with pytest.raises(ValidationError):
            delta.change_type = ChangeType.DELETED


class TestSyncQueryPayload:
    def test_has_changes(self):
        payload = SyncQueryPayload.model_validate(
            {"items": [ITEM_DELTA], "types": [], "languages": [], "taxonomies": []}
        )
        assert payload.has_changes
        assert len(payload.items) == 1

    def test_empty_batch(self):
        payload = SyncQueryPayload.model_validate(
            {"items": [], "types": [], "languages": [], "taxonomies": []}
        )
        assert not payload.has_changes

    def test_missing_collection_rejected(self):
        with pytest.raises(ValidationError):
            SyncQueryPayload.model_validate({"items": [], "types": [], "languages": []})

    def test_raw_batch_and_model_agree(self):
        raw = {"items": [ITEM_DELTA], "types": [], "languages": [], "taxonomies": []}
        assert batch_has_changes(raw)
        assert SyncQueryPayload.model_validate(raw).has_changes

        empty = {key: [] for key in CHANGE_COLLECTIONS}
        assert not batch_has_changes(empty)
        assert not batch_has_changes({})
