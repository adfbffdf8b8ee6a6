"""Tests for reading and rewriting the go.mod module declaration."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from pickgo.features.identity.domain.manifest import (
    extract_declared_identity,
    set_declared_identity,
)
from pickgo.shared.errors import ConfigurationError, FilesystemError, InvariantViolation

GO_MOD = """module github.com/test/example

go 1.21

require (
\tgithub.com/stretchr/testify v1.8.0
)
"""


@pytest.fixture
def manifest(tmp_path: Path) -> Path:
    path = tmp_path / "go.mod"
    _ = path.write_bytes(GO_MOD.encode("utf-8"))
    return path


def test_extract_declared_identity(manifest: Path) -> None:
    assert extract_declared_identity(manifest) == "github.com/test/example"


def test_set_declared_identity_only_touches_module_line(manifest: Path) -> None:
    set_declared_identity(manifest, "github.com/acme/shop")

    assert manifest.read_bytes().decode("utf-8") == GO_MOD.replace(
        "module github.com/test/example", "module github.com/acme/shop"
    )


def test_round_trip(manifest: Path) -> None:
    set_declared_identity(manifest, "github.com/acme/shop")

    assert extract_declared_identity(manifest) == "github.com/acme/shop"


def test_first_declaration_wins(tmp_path: Path) -> None:
    path = tmp_path / "go.mod"
    _ = path.write_text("// comment\nmodule first/one\nmodule second/two\n", encoding="utf-8")

    assert extract_declared_identity(path) == "first/one"
    set_declared_identity(path, "third/three")
    assert path.read_text(encoding="utf-8") == "// comment\nmodule third/three\nmodule second/two\n"


def test_crlf_manifest_keeps_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "go.mod"
    _ = path.write_bytes(b"module old/name\r\n\r\ngo 1.22\r\n")

    set_declared_identity(path, "new/name")

    assert path.read_bytes() == b"module new/name\r\n\r\ngo 1.22\r\n"
    assert extract_declared_identity(path) == "new/name"


def test_missing_manifest_names_path(tmp_path: Path) -> None:
    missing = tmp_path / "go.mod"

    with pytest.raises(FilesystemError) as excinfo:
        _ = extract_declared_identity(missing)

    assert excinfo.value.path == missing


def test_manifest_without_declaration(tmp_path: Path) -> None:
    path = tmp_path / "go.mod"
    _ = path.write_text("go 1.21\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match=re.escape(str(path))):
        _ = extract_declared_identity(path)
    with pytest.raises(ConfigurationError):
        set_declared_identity(path, "new/name")


def test_empty_new_identity_is_rejected(manifest: Path) -> None:
    with pytest.raises(InvariantViolation):
        set_declared_identity(manifest, "")
