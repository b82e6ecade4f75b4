"""Domain models for solo-ui.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from solo_ui.exceptions import FailureKind


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScaffoldSettings:
    """Resolved configuration for a single command invocation."""

    repo_url: str
    """Remote component source repository (cloned at depth 1)."""

    project_dir: Path
    """Target project directory being configured/populated."""


# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ComponentDescriptor:
    """One installable component inside a fetched catalog.

    No dependency list is modelled; see
    :func:`~solo_ui.core.transforms.analyze_dependencies`.
    """

    name: str
    """Directory name of the component in the catalog root."""

    path: Path
    """Absolute source directory inside the scratch workspace."""

    files: tuple[str, ...]
    """POSIX paths of every file, relative to :attr:`path`."""

    types_file: Path | None = None
    """The ``types.ts`` descriptor, when the component ships one."""

    styles_file: Path | None = None
    """The ``styles.css`` fragment, when the component ships one."""

    @property
    def has_styles(self) -> bool:
        return self.styles_file is not None

    @property
    def has_types(self) -> bool:
        return self.types_file is not None


# ---------------------------------------------------------------------------
# Command outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one ``init`` / ``add`` / ``list`` pipeline run.

    Pipelines never raise for expected failures; they return one of
    these instead so the caller can render and map it to an exit code.
    """

    command: str
    ok: bool
    message: str
    failure: FailureKind | None = None
    installed: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    hint: str | None = None

    @classmethod
    def success(
        cls,
        command: str,
        message: str,
        *,
        installed: tuple[str, ...] = (),
        warnings: tuple[str, ...] = (),
    ) -> CommandResult:
        return cls(
            command=command,
            ok=True,
            message=message,
            installed=installed,
            warnings=warnings,
        )

    @classmethod
    def failed(
        cls,
        command: str,
        message: str,
        failure: FailureKind,
        *,
        warnings: tuple[str, ...] = (),
        hint: str | None = None,
    ) -> CommandResult:
        return cls(
            command=command,
            ok=False,
            message=message,
            failure=failure,
            warnings=warnings,
            hint=hint,
        )
