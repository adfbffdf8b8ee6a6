"""Tests for copying cached template trees into new projects."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from pickgo.features.templates.usecases.tree_copier import copy_tree
from pickgo.shared.errors import FilesystemError, InvariantViolation


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    root = tmp_path / "cache" / "layered"
    (root / "cmd" / "api").mkdir(parents=True)
    (root / "internal" / "domain").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / ".git" / "objects").mkdir(parents=True)
    _ = (root / "go.mod").write_text("module github.com/PickHD/go-layered-template\n", encoding="utf-8")
    _ = (root / "cmd" / "api" / "main.go").write_text("package main\n", encoding="utf-8")
    _ = (root / "internal" / "domain" / "user.go").write_text("package domain\n", encoding="utf-8")
    _ = (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    _ = (root / "scripts.sh").write_text("#!/bin/sh\n", encoding="utf-8")
    return root


def test_copy_preserves_relative_structure(template_tree: Path, tmp_path: Path) -> None:
    destination = tmp_path / "projects" / "shop"

    copied = copy_tree(template_tree, destination)

    assert copied == 4
    assert (destination / "go.mod").read_text(encoding="utf-8").startswith("module ")
    assert (destination / "cmd" / "api" / "main.go").is_file()
    assert (destination / "internal" / "domain" / "user.go").is_file()
    assert (destination / "docs").is_dir()


def test_copy_skips_version_control_metadata(template_tree: Path, tmp_path: Path) -> None:
    destination = tmp_path / "shop"

    _ = copy_tree(template_tree, destination)

    assert not (destination / ".git").exists()


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits required")
def test_copy_preserves_permission_bits(template_tree: Path, tmp_path: Path) -> None:
    (template_tree / "scripts.sh").chmod(0o755)
    (template_tree / "go.mod").chmod(0o640)
    destination = tmp_path / "shop"

    _ = copy_tree(template_tree, destination)

    assert stat.S_IMODE((destination / "scripts.sh").stat().st_mode) == 0o755
    assert stat.S_IMODE((destination / "go.mod").stat().st_mode) == 0o640


def test_relative_destination_is_rejected(template_tree: Path) -> None:
    with pytest.raises(InvariantViolation, match="not absolute"):
        _ = copy_tree(template_tree, Path("relative/shop"))


def test_missing_source_is_reported(tmp_path: Path) -> None:
    with pytest.raises(FilesystemError) as excinfo:
        _ = copy_tree(tmp_path / "missing", tmp_path / "shop")

    assert excinfo.value.path == tmp_path / "missing"


def test_single_copy_failure_aborts_without_rollback(
    template_tree: Path, tmp_path: Path, mocker: MockerFixture
) -> None:
    import shutil

    real_copyfile = shutil.copyfile
    failing = template_tree / "internal" / "domain" / "user.go"

    def copyfile(src: Path, dst: Path, *, follow_symlinks: bool = True) -> Path:
        if Path(src) == failing:
            raise PermissionError("denied")
        return real_copyfile(src, dst, follow_symlinks=follow_symlinks)

    _ = mocker.patch("pickgo.features.templates.usecases.tree_copier.shutil.copyfile", side_effect=copyfile)
    destination = tmp_path / "shop"

    with pytest.raises(FilesystemError) as excinfo:
        _ = copy_tree(template_tree, destination)

    assert excinfo.value.path == failing
    assert (destination / "go.mod").exists()


@pytest.mark.skipif(os.name != "posix", reason="symlink creation needs POSIX permissions")
def test_directory_symlinks_are_recreated_not_dropped(template_tree: Path, tmp_path: Path) -> None:
    os.symlink("internal/domain", template_tree / "domain", target_is_directory=True)
    os.symlink("../go.mod", template_tree / "docs" / "go.mod.link")
    destination = tmp_path / "projects" / "shop"

    copied = copy_tree(template_tree, destination)

    assert copied == 6
    alias = destination / "domain"
    assert alias.is_symlink()
    assert os.readlink(alias) == "internal/domain"
    assert (alias / "user.go").read_text(encoding="utf-8") == "package domain\n"
    assert os.readlink(destination / "docs" / "go.mod.link") == "../go.mod"
