"""
Summary: Thin subprocess wrapper around the ``git`` executable for shallow template fetches.
Why: Keep credential injection and redaction next to the only code that sees raw remote URLs.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Final
from urllib.parse import urlsplit, urlunsplit

from pickgo.platform.logging import logger
from pickgo.shared.errors import FetchError, RefreshUnavailableError

REDACTED: Final[str] = "***"


def build_authenticated_url(repository: str, credential: str | None) -> str:
    """Inject ``credential`` into the authority component of ``repository``.

    ``https://github.com/org/repo.git`` becomes
    ``https://<credential>@github.com/org/repo.git``. Any userinfo already
    present is replaced. Without a credential the URL is returned unchanged.
    """

    if not credential:
        return repository

    candidate = repository if "://" in repository else f"https://{repository}"
    parts = urlsplit(candidate)
    host = parts.netloc.rsplit("@", 1)[-1]
    if not host:
        raise FetchError(f"Remote URL has no host: {repository}")
    return urlunsplit((parts.scheme, f"{credential}@{host}", parts.path, parts.query, parts.fragment))


def redact(text: str, credential: str | None) -> str:
    """Replace every occurrence of ``credential`` in ``text``."""

    if not credential:
        return text
    return text.replace(credential, REDACTED)


class GitClient:
    """Run the git commands needed to materialize a template checkout."""

    executable: str

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def shallow_clone(
        self,
        repository: str,
        destination: Path,
        *,
        ref: str | None = None,
        credential: str | None = None,
    ) -> None:
        """Clone only the tip of ``ref`` from ``repository`` into ``destination``.

        Raises:
            FetchError: If git is missing or the clone exits non-zero. The
                message never contains ``credential``.
        """
        url = build_authenticated_url(repository, credential)
        args = ["clone", "--depth", "1"]
        if ref:
            args.extend(["--branch", ref])
        args.extend([url, str(destination)])
        self._run(args, credential=credential)

    def pull(self, checkout: Path, *, credential: str | None = None) -> None:
        """Fast-forward an existing checkout in place.

        Raises:
            RefreshUnavailableError: If ``checkout`` has no repository metadata.
            FetchError: If the pull itself fails.
        """
        if not (checkout / ".git").is_dir():
            raise RefreshUnavailableError(f"No repository metadata to refresh in {checkout}")
        self._run(["-C", str(checkout), "pull", "--ff-only", "--depth", "1"], credential=credential)

    def _run(self, args: list[str], *, credential: str | None) -> str:
        command = [self.executable, *args]
        logger.debug("Running %s", redact(" ".join(command), credential))

        env = dict(os.environ)
        # Never block on an interactive credential prompt.
        env["GIT_TERMINAL_PROMPT"] = "0"
        try:
            proc = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
                env=env,
            )
        except FileNotFoundError as exc:
            raise FetchError(f"git executable not found: {self.executable}") from exc

        if proc.returncode != 0:
            msg = proc.stderr.strip() or proc.stdout.strip()
            if not msg:
                msg = f"git {args[0]} failed (exit {proc.returncode})"
            raise FetchError(redact(msg, credential))
        return proc.stdout.strip()


__all__ = [
    "GitClient",
    "REDACTED",
    "RefreshUnavailableError",
    "build_authenticated_url",
    "redact",
]
