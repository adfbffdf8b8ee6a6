"""Use cases fetching template trees into the cache and keeping them fresh."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from logging import Logger
from pathlib import Path

from pickgo.config.settings import VCS_METADATA_DIRS
from pickgo.platform.filesystem import ensure_directory, remove_tree
from pickgo.platform.logging import logger as app_logger
from pickgo.shared.errors import FetchError, FilesystemError, RefreshUnavailableError

from ..domain.models import TemplateDescriptor
from .ports import CacheStorePort, RemoteFetcherPort


class FetchPath(str, Enum):
    """Which branch of the fetch state machine produced a checkout."""

    FRESH_CLONE = "fresh_clone"
    REFRESHED = "refreshed"
    RECLONED = "recloned"


@dataclass(slots=True)
class RefreshSummary:
    """Outcome of refreshing several templates; failures never abort the batch."""

    refreshed: list[str] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.failures


class TemplateProvider:
    """Resolve descriptors to cached checkouts, fetching when stale or missing."""

    _cache: CacheStorePort
    _fetcher: RemoteFetcherPort
    _logger: Logger

    def __init__(
        self,
        *,
        cache: CacheStorePort,
        fetcher: RemoteFetcherPort,
        logger: Logger | None = None,
    ) -> None:
        self._cache = cache
        self._fetcher = fetcher
        self._logger = logger or app_logger

    def storage_path(self, descriptor: TemplateDescriptor) -> Path:
        return self._cache.storage_path(descriptor.key)

    def ensure_cached(self, descriptor: TemplateDescriptor, credential: str | None = None) -> Path:
        """Return the checkout for ``descriptor``, fetching only when not fresh."""

        if self._cache.is_fresh(descriptor.key):
            self._logger.debug(
                "Template %s is fresh",
                descriptor.key,
                extra={"scaffold_event": "cache.hit", "template": descriptor.key},
            )
            return self.storage_path(descriptor)

        _ = self.fetch(descriptor, credential)
        return self.storage_path(descriptor)

    def fetch(self, descriptor: TemplateDescriptor, credential: str | None = None) -> FetchPath:
        """Download ``descriptor`` into its storage directory and mark it fresh.

        An existing directory is refreshed in place when possible. Version-control
        metadata is stripped after every fetch, so that refresh normally fails;
        the directory is then deleted and cloned again.

        Raises:
            FetchError: If the final clone fails. Any partial directory is left
                for the caller to invalidate.
            FilesystemError: If the stale directory cannot be removed.
        """
        destination = self.storage_path(descriptor)
        self._logger.info(
            "Fetching template %s",
            descriptor.key,
            extra={"scaffold_event": "fetch.start", "template": descriptor.key},
        )

        if destination.exists():
            fetch_path = self._refresh_or_reclone(descriptor, destination, credential)
        else:
            self._clone(descriptor, destination, credential)
            fetch_path = FetchPath.FRESH_CLONE

        self._strip_vcs_metadata(destination)
        _ = self._cache.touch(descriptor.key)
        self._logger.info(
            "Fetched template %s",
            descriptor.key,
            extra={
                "scaffold_event": "fetch.complete",
                "template": descriptor.key,
                "path": str(destination),
            },
        )
        return fetch_path

    def refresh_all(
        self,
        descriptors: list[TemplateDescriptor],
        credential: str | None = None,
    ) -> RefreshSummary:
        """Force-fetch every descriptor, collecting failures instead of raising.

        A template whose fetch fails is invalidated so no later run trusts a
        deleted or half-written checkout.
        """

        summary = RefreshSummary()
        for descriptor in descriptors:
            try:
                _ = self.fetch(descriptor, credential)
            except (FetchError, FilesystemError) as exc:
                self._logger.warning(
                    "Failed to update %s: %s",
                    descriptor.display_name,
                    exc,
                    extra={
                        "scaffold_event": "fetch.error",
                        "template": descriptor.key,
                        "error_message": str(exc),
                    },
                )
                summary.failures[descriptor.key] = str(exc)
                self._discard_partial(descriptor)
                continue
            summary.refreshed.append(descriptor.key)
        return summary

    def _discard_partial(self, descriptor: TemplateDescriptor) -> None:
        """Drop the entry and directory of a template whose forced fetch failed."""

        try:
            self._cache.invalidate(descriptor.key)
        except FilesystemError as exc:
            self._logger.error(
                "Failed to discard cached template %s: %s",
                descriptor.key,
                exc,
                extra={
                    "scaffold_event": "fetch.error",
                    "template": descriptor.key,
                    "error_message": str(exc),
                },
            )

    def _refresh_or_reclone(
        self,
        descriptor: TemplateDescriptor,
        destination: Path,
        credential: str | None,
    ) -> FetchPath:
        try:
            self._fetcher.pull(destination, credential=credential)
            return FetchPath.REFRESHED
        except RefreshUnavailableError as exc:
            self._logger.debug(
                "In-place refresh unavailable for %s: %s",
                descriptor.key,
                exc,
                extra={"scaffold_event": "fetch.refresh_unavailable", "template": descriptor.key},
            )
        except FetchError as exc:
            self._logger.warning("In-place refresh of %s failed, refetching: %s", descriptor.key, exc)

        try:
            _ = remove_tree(destination)
        except OSError as exc:
            raise FilesystemError(f"Failed to remove old cache ({exc})", destination) from exc
        self._clone(descriptor, destination, credential)
        return FetchPath.RECLONED

    def _clone(self, descriptor: TemplateDescriptor, destination: Path, credential: str | None) -> None:
        try:
            _ = ensure_directory(destination.parent)
        except OSError as exc:
            raise FilesystemError(
                f"Failed to create cache directory ({exc})", destination.parent
            ) from exc

        try:
            self._fetcher.shallow_clone(
                descriptor.repository,
                destination,
                ref=descriptor.ref,
                credential=credential,
            )
        except FetchError as exc:
            raise FetchError(f"Failed to clone {descriptor.key} template: {exc}") from exc

    def _strip_vcs_metadata(self, root: Path) -> None:
        """Delete version-control directories anywhere under ``root``."""

        for current, dirnames, _ in os.walk(root):
            for name in list(dirnames):
                if name not in VCS_METADATA_DIRS:
                    continue
                dirnames.remove(name)
                target = Path(current) / name
                try:
                    _ = remove_tree(target)
                except OSError as exc:
                    self._logger.warning("Failed to remove %s: %s", target, exc)


__all__ = ["FetchPath", "RefreshSummary", "TemplateProvider"]
