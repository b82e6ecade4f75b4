"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from pathlib import Path, PurePosixPath
from typing import Any, Protocol

from solo_ui.core.models import ComponentDescriptor


class SourceFetcher(Protocol):
    """Contract for obtaining a local copy of the component source."""

    def fetch(self, repo_url: str, dest_dir: Path) -> None:
        """Shallow-clone *repo_url* into *dest_dir*.

        *dest_dir* is created, or emptied if it already has content,
        before the clone starts.

        Raises
        ------
        NetworkError
            When the remote cannot be reached.
        GitError
            When git is missing or the clone fails for another reason.
        """
        ...  # pragma: no cover


class WorkspaceFactory(Protocol):
    """Produces one scratch workspace per command invocation.

    The returned context manager yields a fresh, empty directory and
    removes it on exit, on the success path and on every failure path.
    """

    def __call__(self) -> AbstractContextManager[Path]:
        ...  # pragma: no cover


class Catalog(Protocol):
    """Read-only view of a fetched component catalog."""

    def list_components(self) -> list[str]:
        """Installable component names, in directory-enumeration order."""
        ...  # pragma: no cover

    def describe(self, name: str) -> ComponentDescriptor:
        """Resolve *name* to a descriptor.

        Raises
        ------
        ComponentNotFoundError
            When the catalog has no such component directory.
        """
        ...  # pragma: no cover

    def source_file(self, relative: str | PurePosixPath) -> Path:
        """Return an existing file path relative to the clone root.

        Raises
        ------
        MissingSourceFileError
            When the file is absent from the clone.
        """
        ...  # pragma: no cover

    def read_manifest(self) -> dict[str, Any]:
        """Parse the remote ``package.json``."""
        ...  # pragma: no cover


class TargetProject(Protocol):
    """Mutable view of the consumer project directory."""

    def validate(self) -> None:
        """Raise :class:`NotAProjectError` when no manifest is present."""
        ...  # pragma: no cover

    def ensure_structure(self) -> None:
        """Create the components and styles directories if missing."""
        ...  # pragma: no cover

    def read_manifest(self) -> dict[str, Any]:
        ...  # pragma: no cover

    def install_component(self, component: ComponentDescriptor) -> Path:
        """Copy the component tree into the project; return the target."""
        ...  # pragma: no cover

    def merge_styles(self, component: ComponentDescriptor) -> bool:
        """Append the component's style fragment; ``True`` if appended."""
        ...  # pragma: no cover

    def install_config(self, catalog: Catalog, *, src_dir: str | None = None) -> None:
        """Copy stylesheet and framework config; update the manifest."""
        ...  # pragma: no cover


class ComponentPicker(Protocol):
    """Interactive single-select over catalog components."""

    def pick(self, components: Sequence[ComponentDescriptor]) -> str | None:
        """Return the chosen component name, or ``None`` if cancelled."""
        ...  # pragma: no cover


class StatusReporter(Protocol):
    """Progress-indicator capability used by the command pipelines."""

    def start(self, text: str) -> None:
        ...  # pragma: no cover

    def succeed(self, text: str) -> None:
        ...  # pragma: no cover

    def fail(self, text: str) -> None:
        ...  # pragma: no cover

    def info(self, text: str) -> None:
        ...  # pragma: no cover

    def stop(self) -> None:
        ...  # pragma: no cover
