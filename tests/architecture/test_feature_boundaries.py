"""
Summary: Architecture checks keeping feature domains free of platform and UI imports.
Why: Prevent regressions where pure rewrite or registry logic starts shelling out or printing.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
FEATURES_DIR = REPO_ROOT / "src" / "pickgo" / "features"


def _offending(directory: Path, needle: str) -> list[Path]:
    return [
        path
        for path in sorted(directory.rglob("*.py"))
        if needle in path.read_text(encoding="utf-8")
    ]


@pytest.mark.parametrize("feature", ["templates", "identity"])
def test_feature_domains_do_not_import_platform(feature: str) -> None:
    """Domain modules must stay pure."""

    offending = _offending(FEATURES_DIR / feature / "domain", "pickgo.platform")
    assert offending == [], (
        "Domain modules must not import platform packages; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending)}"
    )


def test_template_usecases_reach_git_only_through_ports() -> None:
    """Use cases depend on the fetcher port rather than the git client."""

    offending = _offending(FEATURES_DIR / "templates" / "usecases", "pickgo.platform.git")
    assert offending == [], (
        "Template use cases must depend on RemoteFetcherPort; found git imports in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending)}"
    )


def test_features_do_not_import_ui() -> None:
    """Features never reach up into the CLI layer."""

    offending = _offending(FEATURES_DIR, "pickgo.ui")
    assert offending == []
