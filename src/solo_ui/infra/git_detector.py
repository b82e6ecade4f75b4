"""Infrastructure: git detection and platform guidance.

This module is responsible for locating git on the system PATH and
providing platform-specific installation guidance when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from solo_ui.exceptions import GitError


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GitStatus:
    """Result of a git detection probe.

    Attributes
    ----------
    found : bool
        Whether git was located on PATH.
    path : Path | None
        Absolute path to the git binary, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found at …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested shell commands for installing git on the current
        platform.  Empty when git is already present.
    """

    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_git() -> GitStatus:
    """Probe the system for a git binary.

    Returns a :class:`GitStatus` regardless of whether git is present —
    the caller decides whether to abort or merely warn.
    """
    result = shutil.which("git")

    if result is not None:
        resolved = Path(result).resolve()
        return GitStatus(
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
            install_commands=(),
        )

    return GitStatus(
        found=False,
        path=None,
        version_hint="not found",
        install_commands=_platform_install_commands(),
    )


def require_git() -> Path:
    """Locate git or raise :class:`GitError`.

    Every command that fetches the catalog goes through here first.
    """
    status = detect_git()
    if not status.found or status.path is None:
        hint_lines: list[str] = []
        if status.install_commands:
            hint_lines.append("Install git using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise GitError(
            "git is not installed or not on PATH.",
            hint="\n".join(hint_lines) if hint_lines else None,
        )
    return status.path


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Git.Git",
            "choco install git",
        )
    if system == "linux":
        return (
            "sudo apt install git",
            "sudo dnf install git",
            "sudo pacman -S git",
        )
    if system == "darwin":
        return ("brew install git", "xcode-select --install")
    return ("Please install git from https://git-scm.com/downloads",)
