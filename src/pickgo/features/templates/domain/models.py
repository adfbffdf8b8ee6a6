"""Data structures describing templates and their cache bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Final


class ArchitectureType(str, Enum):
    """Supported project architecture patterns; each maps to one template."""

    LAYERED = "layered"
    MODULAR = "modular"
    HEXAGONAL = "hexagonal"

    @property
    def display_name(self) -> str:
        return f"{self.value.capitalize()} Architecture"

    @staticmethod
    def from_user_input(value: str) -> "ArchitectureType":
        """Translate raw CLI or prompt input into the matching architecture."""

        normalized = value.strip().lower()
        for architecture in ArchitectureType:
            if architecture.value == normalized:
                return architecture
        valid: Final[str] = ", ".join(a.value for a in ArchitectureType)
        msg = f"Unsupported architecture '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(slots=True, frozen=True)
class TemplateDescriptor:
    """Remote location and presentation details for one template."""

    identifier: ArchitectureType
    name: str
    description: str
    repository: str
    ref: str = "main"
    structure: tuple[str, ...] = ()
    notes: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        """Cache key; also the storage directory name under the cache root."""

        return self.identifier.value

    @property
    def display_name(self) -> str:
        return self.identifier.display_name


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat()


def _parse_timestamp(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise ValueError(f"Expected an ISO-8601 timestamp, got {raw!r}")
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(slots=True, frozen=True)
class CacheEntry:
    """Freshness record for one cached template."""

    key: str
    cached_at: datetime
    last_checked_at: datetime
    storage_path: Path
    version: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "cached_at": _format_timestamp(self.cached_at),
            "last_checked": _format_timestamp(self.last_checked_at),
            "path": str(self.storage_path),
        }
        if self.version:
            payload["version"] = self.version
        return payload

    @classmethod
    def from_dict(cls, key: str, payload: dict[str, Any]) -> "CacheEntry":
        """Build an entry from its persisted form.

        Raises:
            ValueError: If required fields are missing or malformed.
            KeyError: If a required field is absent.
        """
        version = payload.get("version")
        return cls(
            key=key,
            cached_at=_parse_timestamp(payload["cached_at"]),
            last_checked_at=_parse_timestamp(payload.get("last_checked", payload["cached_at"])),
            storage_path=Path(str(payload["path"])),
            version=str(version) if version else None,
        )


__all__ = ["ArchitectureType", "CacheEntry", "TemplateDescriptor"]
