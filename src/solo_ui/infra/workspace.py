"""Scratch workspace lifecycle.

Each command invocation gets its own temporary directory under the
system temp location; it is removed when the ``with`` block exits,
whether the block succeeded or raised.  A failed removal is logged and
never masks the original outcome.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX: str = "solo-ui-"


@contextmanager
def scratch_workspace(base_dir: Path | None = None) -> Iterator[Path]:
    """Yield a fresh empty directory and remove it afterwards.

    Satisfies :class:`~solo_ui.core.protocols.WorkspaceFactory` when
    passed as-is.
    """
    path = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=base_dir))
    logger.debug("created scratch workspace %s", path)
    try:
        yield path
    finally:
        remove_workspace(path)


def remove_workspace(path: Path) -> bool:
    """Recursively remove *path*; return ``False`` if that failed."""
    try:
        if path.exists():
            shutil.rmtree(path)
    except OSError as exc:
        logger.warning("Failed to clean up temporary directory %s: %s", path, exc)
        return False
    logger.debug("removed scratch workspace %s", path)
    return True
