"""Tests for text file persistence helpers."""

import os
import stat
from pathlib import Path

import pytest

from pickgo.config.file_ops import ensure_file_with_template, replace_text_file


def test_ensure_file_with_template_creates_once(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.toml"

    assert ensure_file_with_template(target, template_provider=lambda: "a = 1\n") is True
    assert ensure_file_with_template(target, template_provider=lambda: "b = 2\n") is False
    assert target.read_text(encoding="utf-8") == "a = 1\n"


def test_ensure_file_with_template_rejects_non_string(tmp_path: Path) -> None:
    with pytest.raises(TypeError):
        _ = ensure_file_with_template(tmp_path / "x.toml", template_provider=lambda: 42)


def test_replace_text_file_keeps_line_endings(tmp_path: Path) -> None:
    target = tmp_path / "main.go"

    replace_text_file(target, "package main\r\n\r\nfunc main() {}\r\n")

    assert target.read_bytes() == b"package main\r\n\r\nfunc main() {}\r\n"
    assert not (tmp_path / ".main.go.tmp").exists()


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits required")
def test_replace_text_file_preserves_permission_bits(tmp_path: Path) -> None:
    target = tmp_path / "run.sh"
    _ = target.write_text("old\n", encoding="utf-8")
    target.chmod(0o750)

    replace_text_file(target, "new\n")

    assert target.read_text(encoding="utf-8") == "new\n"
    assert stat.S_IMODE(target.stat().st_mode) == 0o750
