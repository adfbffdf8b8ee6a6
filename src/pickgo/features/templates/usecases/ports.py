"""Ports for the templates feature."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Protocol

from ..domain.models import CacheEntry


class CacheStorePort(Protocol):
    """Freshness bookkeeping for cached template trees."""

    def storage_path(self, key: str) -> Path:
        """Return the deterministic storage directory for ``key``."""

        ...

    def is_fresh(self, key: str) -> bool:
        """Return True when ``key`` has an entry younger than the TTL."""

        ...

    def touch(self, key: str, *, version: str | None = None) -> CacheEntry:
        """Record a successful fetch of ``key`` as of now."""

        ...

    def get(self, key: str) -> CacheEntry:
        """Return the entry for ``key`` or raise ``NotCachedError``."""

        ...

    def age(self, key: str) -> timedelta:
        """Return how long ago ``key`` was cached."""

        ...

    def invalidate(self, key: str) -> None:
        """Drop the entry and storage directory for ``key``."""

        ...

    def invalidate_all(self) -> None:
        """Drop every entry and storage directory."""

        ...

    def size_bytes(self) -> int:
        """Return the total size of the cache root in bytes."""

        ...


class RemoteFetcherPort(Protocol):
    """Retrieve template trees from a version-control remote."""

    def shallow_clone(
        self,
        repository: str,
        destination: Path,
        *,
        ref: str | None = None,
        credential: str | None = None,
    ) -> None:
        """Fetch the latest state of ``ref`` into ``destination``."""

        ...

    def pull(self, checkout: Path, *, credential: str | None = None) -> None:
        """Refresh an existing checkout in place."""

        ...


__all__ = ["CacheStorePort", "RemoteFetcherPort"]
