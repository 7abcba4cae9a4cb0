"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def environment_id():
    value = os.environ.get("KONTENT_SYNC_ENVIRONMENT_ID")
    if not value:
        pytest.skip("KONTENT_SYNC_ENVIRONMENT_ID is not set")
    return value


@pytest.fixture
def base_url():
    return os.environ.get("KONTENT_SYNC_BASE_URL")
