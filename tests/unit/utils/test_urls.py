"""Unit tests for endpoint URL construction."""

import pytest

from kontent.sync.core import ApiMode
from kontent.sync.utils import get_endpoint_url, get_sync_endpoint_url, remove_duplicate_slashes


class TestSyncEndpointUrl:
    @pytest.mark.parametrize(
        "mode,expected",
        [
            (ApiMode.PUBLIC, "https://deliver.kontent.ai/v2/env/sync"),
            (ApiMode.SECURE, "https://deliver.kontent.ai/v2/env/sync"),
            (ApiMode.PREVIEW, "https://preview-deliver.kontent.ai/v2/env/sync"),
        ],
    )
    def test_default_host_per_mode(self, mode, expected):
        assert get_sync_endpoint_url(environment_id="env", path="sync", api_mode=mode) == expected

    def test_base_url_overrides_mode(self):
        url = get_sync_endpoint_url(
            environment_id="env",
            path="sync/init",
            api_mode=ApiMode.PREVIEW,
            base_url="https://proxy.example.com/kontent",
        )
        assert url == "https://proxy.example.com/kontent/env/sync/init"


class TestRemoveDuplicateSlashes:
    def test_keeps_scheme_separator(self):
        assert remove_duplicate_slashes("https://a.com//b///c") == "https://a.com/b/c"

    def test_without_scheme(self):
        assert remove_duplicate_slashes("//a//b") == "/a/b"

    def test_endpoint_url_trailing_slash_base(self):
        url = get_endpoint_url(environment_id="env", path="/sync", base_url="https://a.com/v2/")
        assert url == "https://a.com/v2/env/sync"
