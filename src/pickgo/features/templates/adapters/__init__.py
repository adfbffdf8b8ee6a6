"""Adapters backing the template use cases."""

from .cache_store import JsonCacheStore

__all__ = ["JsonCacheStore"]
