"""Unit tests for exceptions and core enums."""

from kontent.sync.core import ApiMode, ConfigurationError, QueryFailedError, SyncError


def test_configuration_error_is_sync_error():
    error = ConfigurationError("missing key")
    assert str(error) == "missing key"
    assert isinstance(error, SyncError)


def test_query_failed_error_is_sync_error():
    assert issubclass(QueryFailedError, SyncError)


def test_api_mode_key_requirement():
    assert ApiMode.PUBLIC.requires_api_key is False
    assert ApiMode.PREVIEW.requires_api_key is True
    assert ApiMode.SECURE.requires_api_key is True
