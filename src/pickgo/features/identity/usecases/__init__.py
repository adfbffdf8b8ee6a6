"""Tree-wide identity rewriting use cases."""

from .rewrite_imports import iter_source_files, rewrite_imports

__all__ = ["iter_source_files", "rewrite_imports"]
