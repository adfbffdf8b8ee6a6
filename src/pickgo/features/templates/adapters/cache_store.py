"""
Summary: JSON-document cache store tracking when each template tree was fetched.
Why: Answer freshness queries without touching the network and fail open on bad bookkeeping.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, final

from pickgo.config.file_ops import replace_text_file
from pickgo.config.settings import CACHE_TTL, METADATA_FILE_NAME
from pickgo.platform.filesystem import directory_size, ensure_directory, remove_tree
from pickgo.platform.logging import logger
from pickgo.shared.errors import FilesystemError, InvariantViolation, NotCachedError

from ..domain.models import CacheEntry


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@final
class JsonCacheStore:
    """Cache bookkeeping persisted as one JSON document under the cache root.

    Every mutation rewrites the whole document. The store holds no lock; a
    single writer per cache root is assumed.
    """

    cache_root: Path
    ttl: timedelta
    _clock: Callable[[], datetime]

    def __init__(
        self,
        cache_root: Path,
        *,
        ttl: timedelta = CACHE_TTL,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.cache_root = cache_root
        self.ttl = ttl
        self._clock = clock or _utcnow

    @property
    def metadata_path(self) -> Path:
        return self.cache_root / METADATA_FILE_NAME

    def storage_path(self, key: str) -> Path:
        """Return ``<cache_root>/<key>``.

        Raises:
            InvariantViolation: If ``key`` is empty or not a single path segment.
        """
        if not key or key in {".", ".."} or "/" in key or "\\" in key:
            raise InvariantViolation(f"Invalid cache key: {key!r}")
        return self.cache_root / key

    def is_fresh(self, key: str) -> bool:
        """Return True iff ``key`` has an entry and ``now - cached_at < ttl``."""

        try:
            entries = self._load()
        except FilesystemError as exc:
            logger.warning("Cache metadata unreadable, treating as empty: %s", exc)
            return False

        entry = entries.get(key)
        if entry is None:
            return False
        return self._clock() - entry.cached_at < self.ttl

    def touch(self, key: str, *, version: str | None = None) -> CacheEntry:
        """Upsert ``key`` as cached now and rewrite the metadata document."""

        storage_path = self.storage_path(key)
        entries = self._load()
        now = self._clock()
        entry = CacheEntry(
            key=key,
            cached_at=now,
            last_checked_at=now,
            storage_path=storage_path,
            version=version,
        )
        entries[key] = entry
        self._save(entries)
        return entry

    def get(self, key: str) -> CacheEntry:
        """Return the stored entry for ``key`` regardless of freshness.

        Raises:
            NotCachedError: If ``key`` has no entry.
        """
        entry = self._load().get(key)
        if entry is None:
            raise NotCachedError(key)
        return entry

    def entries(self) -> dict[str, CacheEntry]:
        return self._load()

    def age(self, key: str) -> timedelta:
        return self._clock() - self.get(key).cached_at

    def invalidate(self, key: str) -> None:
        """Remove the storage directory and the entry for ``key``."""

        storage_path = self.storage_path(key)
        try:
            removed = remove_tree(storage_path)
        except OSError as exc:
            raise FilesystemError(f"Failed to remove template cache ({exc})", storage_path) from exc
        if removed:
            logger.info(
                "Removed cached template %s",
                key,
                extra={"scaffold_event": "cache.invalidate", "template": key},
            )

        entries = self._load()
        if entries.pop(key, None) is not None:
            self._save(entries)

    def invalidate_all(self) -> None:
        """Remove every storage directory under the cache root and all entries."""

        if not self.cache_root.exists():
            return

        for child in sorted(self.cache_root.iterdir()):
            if not child.is_dir():
                continue
            try:
                _ = remove_tree(child)
            except OSError as exc:
                raise FilesystemError(f"Failed to remove template cache ({exc})", child) from exc

        self._save({})
        logger.info("Cleared template cache at %s", self.cache_root)

    def size_bytes(self) -> int:
        return directory_size(self.cache_root)

    def _load(self) -> dict[str, CacheEntry]:
        """Read the metadata document; corrupt content degrades to no entries.

        Raises:
            FilesystemError: If the document exists but cannot be read.
        """
        path = self.metadata_path
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError as exc:
            logger.warning("Ignoring corrupt cache metadata at %s: %s", path, exc)
            return {}
        except OSError as exc:
            raise FilesystemError(f"Failed to read cache metadata ({exc})", path) from exc

        try:
            document: Any = json.loads(raw)
            templates = document.get("templates") or {}
            if not isinstance(templates, dict):
                raise ValueError("'templates' must be an object")
            return {
                str(key): CacheEntry.from_dict(str(key), payload)
                for key, payload in templates.items()
            }
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Ignoring corrupt cache metadata at %s: %s", path, exc)
            return {}

    def _save(self, entries: dict[str, CacheEntry]) -> None:
        document = {"templates": {key: entry.to_dict() for key, entry in entries.items()}}
        try:
            _ = ensure_directory(self.cache_root)
            replace_text_file(self.metadata_path, json.dumps(document, indent=2) + "\n")
        except OSError as exc:
            raise FilesystemError(
                f"Failed to write cache metadata ({exc})", self.metadata_path
            ) from exc


__all__ = ["JsonCacheStore"]
