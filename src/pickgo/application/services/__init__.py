"""Application services reused by the CLI."""

from .scaffold_service import (
    CacheInfo,
    ScaffoldRequest,
    ScaffoldResult,
    ScaffoldService,
    TemplateStatus,
)

__all__ = [
    "CacheInfo",
    "ScaffoldRequest",
    "ScaffoldResult",
    "ScaffoldService",
    "TemplateStatus",
]
