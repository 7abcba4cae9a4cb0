"""Utility functions."""

from .urls import get_endpoint_url, get_sync_endpoint_url, remove_duplicate_slashes

__all__ = ["get_endpoint_url", "get_sync_endpoint_url", "remove_duplicate_slashes"]
