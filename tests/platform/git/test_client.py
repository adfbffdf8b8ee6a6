"""Tests for the git subprocess wrapper."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from pickgo.platform.git import GitClient, build_authenticated_url, redact
from pickgo.shared.errors import FetchError, RefreshUnavailableError

TOKEN = "ghp_secretvalue"


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_build_authenticated_url_injects_credential() -> None:
    url = build_authenticated_url("https://github.com/PickHD/go-layered-template.git", TOKEN)
    assert url == f"https://{TOKEN}@github.com/PickHD/go-layered-template.git"


def test_build_authenticated_url_replaces_existing_userinfo() -> None:
    url = build_authenticated_url("https://someone@github.com/org/repo.git", TOKEN)
    assert url == f"https://{TOKEN}@github.com/org/repo.git"


def test_build_authenticated_url_without_credential_is_unchanged() -> None:
    repository = "https://github.com/org/repo.git"
    assert build_authenticated_url(repository, None) == repository
    assert build_authenticated_url(repository, "") == repository


def test_build_authenticated_url_rejects_missing_host() -> None:
    with pytest.raises(FetchError, match="no host"):
        _ = build_authenticated_url("https:///org/repo.git", TOKEN)


def test_redact_masks_every_occurrence() -> None:
    assert redact(f"a {TOKEN} b {TOKEN}", TOKEN) == "a *** b ***"
    assert redact("nothing here", None) == "nothing here"


def test_shallow_clone_builds_command(tmp_path: Path, mocker: MockerFixture) -> None:
    run = mocker.patch("pickgo.platform.git.client.subprocess.run", return_value=_completed())

    GitClient().shallow_clone(
        "https://github.com/org/repo.git",
        tmp_path / "layered",
        ref="main",
        credential=TOKEN,
    )

    command = run.call_args.args[0]
    assert command == [
        "git",
        "clone",
        "--depth",
        "1",
        "--branch",
        "main",
        f"https://{TOKEN}@github.com/org/repo.git",
        str(tmp_path / "layered"),
    ]
    assert run.call_args.kwargs["env"]["GIT_TERMINAL_PROMPT"] == "0"
    assert run.call_args.kwargs["check"] is False


def test_shallow_clone_failure_is_redacted(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "pickgo.platform.git.client.subprocess.run",
        return_value=_completed(
            returncode=128,
            stderr=f"fatal: could not read from https://{TOKEN}@github.com/org/repo.git",
        ),
    )

    with pytest.raises(FetchError) as excinfo:
        GitClient().shallow_clone("https://github.com/org/repo.git", tmp_path / "x", credential=TOKEN)

    assert TOKEN not in str(excinfo.value)
    assert "***" in str(excinfo.value)


def test_command_is_logged_without_credential(
    tmp_path: Path, mocker: MockerFixture
) -> None:
    _ = mocker.patch("pickgo.platform.git.client.subprocess.run", return_value=_completed())
    mock_logger = mocker.patch("pickgo.platform.git.client.logger")

    GitClient().shallow_clone("https://github.com/org/repo.git", tmp_path / "x", credential=TOKEN)

    logged = " ".join(str(arg) for arg in mock_logger.debug.call_args.args)
    assert TOKEN not in logged


def test_missing_git_executable_raises_fetch_error(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "pickgo.platform.git.client.subprocess.run",
        side_effect=FileNotFoundError("git"),
    )

    with pytest.raises(FetchError, match="git executable not found"):
        GitClient().shallow_clone("https://github.com/org/repo.git", tmp_path / "x")


def test_pull_without_repository_metadata_is_unavailable(tmp_path: Path, mocker: MockerFixture) -> None:
    run = mocker.patch("pickgo.platform.git.client.subprocess.run")

    with pytest.raises(RefreshUnavailableError):
        GitClient().pull(tmp_path)

    run.assert_not_called()


def test_pull_runs_fast_forward(tmp_path: Path, mocker: MockerFixture) -> None:
    (tmp_path / ".git").mkdir()
    run = mocker.patch("pickgo.platform.git.client.subprocess.run", return_value=_completed())

    GitClient().pull(tmp_path)

    assert run.call_args.args[0] == ["git", "-C", str(tmp_path), "pull", "--ff-only", "--depth", "1"]
