"""git-backed implementation of :class:`~solo_ui.core.protocols.SourceFetcher`.

This module is the **only** place in the codebase that runs git.  All
subprocess failures are caught here and re-raised as
:class:`~solo_ui.exceptions.NetworkError` or
:class:`~solo_ui.exceptions.GitError`.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from solo_ui.exceptions import GitError, NetworkError
from solo_ui.infra.git_detector import require_git
from solo_ui.utils.constants import CLONE_DEPTH

logger = logging.getLogger(__name__)

_NETWORK_MARKERS: tuple[str, ...] = (
    "could not resolve host",
    "could not resolve hostname",
    "temporary failure in name resolution",
    "failed to connect",
    "connection timed out",
    "connection refused",
    "network is unreachable",
    "operation timed out",
)
"""Lower-cased git stderr fragments that indicate a network problem."""


class GitSourceFetcher:
    """Concrete :class:`SourceFetcher` that shallow-clones with the git CLI.

    This class satisfies the :class:`~solo_ui.core.protocols.SourceFetcher`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, *, depth: int = CLONE_DEPTH, timeout: float | None = 120.0) -> None:
        self._depth = depth
        self._timeout = timeout

    @staticmethod
    def build_command(git: Path | str, repo_url: str, dest_dir: Path, depth: int) -> list[str]:
        """Return the argv for a quiet shallow clone."""
        return [
            str(git),
            "clone",
            "--depth",
            str(depth),
            "--quiet",
            repo_url,
            str(dest_dir),
        ]

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def fetch(self, repo_url: str, dest_dir: Path) -> None:
        """Shallow-clone *repo_url* into *dest_dir*.

        Raises
        ------
        NetworkError
            When the remote cannot be reached or the clone times out.
        GitError
            When git is missing or exits with any other failure.
        """
        git = require_git()
        prepare_destination(dest_dir)
        argv = self.build_command(git, repo_url, dest_dir, self._depth)
        logger.debug("running %s", " ".join(argv))

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise NetworkError(
                f"Cloning {repo_url} timed out after {self._timeout:.0f}s.",
                hint="Check your network connection and try again.",
            ) from exc
        except OSError as exc:
            raise GitError(f"Failed to run git: {exc}") from exc

        if completed.returncode != 0:
            raise classify_clone_failure(repo_url, completed.stderr or "")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def prepare_destination(dest_dir: Path) -> None:
    """Make sure *dest_dir* exists and is empty before a clone."""
    if dest_dir.exists() and any(dest_dir.iterdir()):
        logger.debug("clearing leftover clone at %s", dest_dir)
        try:
            shutil.rmtree(dest_dir)
        except OSError as exc:
            raise GitError(f"Cannot clear clone destination {dest_dir}: {exc}") from exc
    dest_dir.mkdir(parents=True, exist_ok=True)


def classify_clone_failure(repo_url: str, stderr: str) -> GitError | NetworkError:
    """Map a failed clone's stderr to the matching exception."""
    detail = stderr.strip().splitlines()[-1] if stderr.strip() else "git clone failed"
    lowered = stderr.lower()
    if any(marker in lowered for marker in _NETWORK_MARKERS):
        return NetworkError(
            f"Could not fetch {repo_url}: {detail}",
            hint="Check your network connection and the repository URL.",
        )
    return GitError(f"git clone of {repo_url} failed: {detail}")
