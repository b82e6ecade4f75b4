"""Core / service layer — models, contracts, transforms and pipelines.

Rules
-----
* No ``print()`` calls.
* No direct filesystem, network or terminal I/O — all of it goes
  through the protocols in :mod:`solo_ui.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from solo_ui.core.models import CommandResult, ComponentDescriptor, ScaffoldSettings
from solo_ui.core.protocols import (
    Catalog,
    ComponentPicker,
    SourceFetcher,
    StatusReporter,
    TargetProject,
    WorkspaceFactory,
)
from solo_ui.core.scaffold_service import ScaffoldService

__all__: list[str] = [
    "Catalog",
    "CommandResult",
    "ComponentDescriptor",
    "ComponentPicker",
    "ScaffoldService",
    "ScaffoldSettings",
    "SourceFetcher",
    "StatusReporter",
    "TargetProject",
    "WorkspaceFactory",
]
