"""Infrastructure layer — git, scratch directories and the filesystem.

This layer wraps all interaction with git, the temp directory and the
target project tree.  Every raw ``subprocess`` or ``OSError`` failure
must be caught here and re-raised as a
:class:`~solo_ui.exceptions.SoloUIError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from solo_ui.infra.catalog import FetchedCatalog
from solo_ui.infra.git_detector import GitStatus, detect_git, require_git
from solo_ui.infra.git_fetcher import GitSourceFetcher
from solo_ui.infra.project import LocalProject
from solo_ui.infra.workspace import scratch_workspace

__all__: list[str] = [
    "FetchedCatalog",
    "GitSourceFetcher",
    "GitStatus",
    "LocalProject",
    "detect_git",
    "require_git",
    "scratch_workspace",
]
