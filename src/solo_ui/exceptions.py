"""Custom exception hierarchy for solo-ui.

All exceptions that cross layer boundaries must inherit from
:class:`SoloUIError`.  Raw ``subprocess`` and ``OSError`` failures must
NEVER propagate beyond the infrastructure layer — they must be caught
and re-raised as a typed subclass defined here.

Each subclass carries a :class:`FailureKind` so the command pipelines
can turn any stage failure into a typed
:class:`~solo_ui.core.models.CommandResult`.

Hierarchy
---------
SoloUIError
├── NotAProjectError
├── NetworkError
├── GitError
├── ComponentNotFoundError
├── MissingSourceFileError
└── EnvironmentError
"""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Category of a failed command stage."""

    NOT_A_PROJECT = "not-a-project"
    NETWORK = "network"
    GIT = "git"
    COMPONENT_NOT_FOUND = "component-not-found"
    MISSING_SOURCE_FILE = "missing-source-file"
    ENVIRONMENT = "environment"
    UNEXPECTED = "unexpected"


class SoloUIError(Exception):
    """Base exception for all solo-ui errors.

    Every user-visible error condition must map to a subclass of this
    exception so that failures are rendered as a clean message without
    leaking internal stack traces.
    """

    kind: FailureKind = FailureKind.UNEXPECTED

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Target project --------------------------------------------------------

class NotAProjectError(SoloUIError):
    """Raised when the target directory has no package manifest."""

    kind = FailureKind.NOT_A_PROJECT


# --- Remote fetch ----------------------------------------------------------

class NetworkError(SoloUIError):
    """Raised when the remote repository cannot be reached."""

    kind = FailureKind.NETWORK


class GitError(SoloUIError):
    """Raised when git fails or is not available."""

    kind = FailureKind.GIT


# --- Catalog ---------------------------------------------------------------

class ComponentNotFoundError(SoloUIError):
    """Raised when a requested component is absent from the catalog."""

    kind = FailureKind.COMPONENT_NOT_FOUND


class MissingSourceFileError(SoloUIError):
    """Raised when an expected template or config file is absent."""

    kind = FailureKind.MISSING_SOURCE_FILE


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SoloUIError):
    """Raised when a required runtime dependency is not available."""

    kind = FailureKind.ENVIRONMENT
