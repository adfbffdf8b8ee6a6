"""Pure identity rewriting logic."""

from .import_scanner import (
    ScanState,
    iter_candidate_lines,
    replace_module_path_in_line,
    require_distinct_identities,
    rewrite_import_paths,
    scan_imports,
    strip_line_comment,
)
from .manifest import extract_declared_identity, set_declared_identity
from .models import ImportReference, RewriteFailure, RewriteReport

__all__ = [
    "ImportReference",
    "RewriteFailure",
    "RewriteReport",
    "ScanState",
    "extract_declared_identity",
    "iter_candidate_lines",
    "replace_module_path_in_line",
    "require_distinct_identities",
    "rewrite_import_paths",
    "scan_imports",
    "set_declared_identity",
    "strip_line_comment",
]
