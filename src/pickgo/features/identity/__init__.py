"""Public surface for the module identity feature."""

from .domain import (
    ImportReference,
    RewriteFailure,
    RewriteReport,
    extract_declared_identity,
    scan_imports,
    set_declared_identity,
)
from .usecases import rewrite_imports

__all__ = [
    "ImportReference",
    "RewriteFailure",
    "RewriteReport",
    "extract_declared_identity",
    "rewrite_imports",
    "scan_imports",
    "set_declared_identity",
]
