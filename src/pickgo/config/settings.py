"""Where: src/pickgo/config/settings.py
What: Fixed runtime constants for caching, fetching and identity rewriting.
Why: Keep magic values in one place so feature layers never hardcode them.
Assumptions: - Templates are Go modules with a root ``go.mod``.
Trade-offs: - The TTL is deliberately not user-configurable.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Final

# Cache -----------------------------------------------------------------------

# Entries older than this are refetched.
CACHE_TTL: Final[timedelta] = timedelta(hours=24)

METADATA_FILE_NAME: Final[str] = "cache-metadata.json"


# Remote fetch ----------------------------------------------------------------

DEFAULT_TOKEN_ENV_VAR: Final[str] = "PICK_YOUR_GO_GITHUB_TOKEN"

VCS_METADATA_DIRS: Final[frozenset[str]] = frozenset({".git"})


# Identity rewriting ----------------------------------------------------------

MANIFEST_FILE_NAME: Final[str] = "go.mod"
DECLARATION_KEYWORD: Final[str] = "module"
SOURCE_SUFFIX: Final[str] = ".go"

# Directories never descended into while rewriting, in addition to dot-directories.
REWRITE_SKIP_DIRS: Final[frozenset[str]] = frozenset({"vendor"}) | VCS_METADATA_DIRS

IMPORT_BLOCK_OPENER: Final[str] = "import ("
IMPORT_BLOCK_CLOSER: Final[str] = ")"
IMPORT_KEYWORD_PREFIX: Final[str] = "import "


__all__ = [
    "CACHE_TTL",
    "DECLARATION_KEYWORD",
    "DEFAULT_TOKEN_ENV_VAR",
    "IMPORT_BLOCK_CLOSER",
    "IMPORT_BLOCK_OPENER",
    "IMPORT_KEYWORD_PREFIX",
    "MANIFEST_FILE_NAME",
    "METADATA_FILE_NAME",
    "REWRITE_SKIP_DIRS",
    "SOURCE_SUFFIX",
    "VCS_METADATA_DIRS",
]
