"""Filesystem reader for a fetched component catalog.

Implements :class:`~solo_ui.core.protocols.Catalog` over the clone
directory inside a scratch workspace.  Nothing here writes to disk.
"""

from __future__ import annotations

import json
from pathlib import Path, PurePosixPath
from typing import Any

from solo_ui.core.models import ComponentDescriptor
from solo_ui.core.transforms import is_catalog_component
from solo_ui.exceptions import ComponentNotFoundError, MissingSourceFileError
from solo_ui.utils.constants import (
    CATALOG_ROOT,
    COMPONENT_STYLES_FILE,
    COMPONENT_TYPES_FILE,
    REMOTE_MANIFEST,
)


class FetchedCatalog:
    """Read-only view of the catalog inside a fetched clone.

    Parameters
    ----------
    root:
        Directory the remote repository was cloned into.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def components_dir(self) -> Path:
        return self._root / CATALOG_ROOT

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_components(self) -> list[str]:
        """Return installable component names in enumeration order.

        Raises
        ------
        MissingSourceFileError
            When the clone has no catalog directory at all.
        """
        catalog_dir = self.components_dir
        if not catalog_dir.is_dir():
            raise MissingSourceFileError(
                f"Component catalog not found at {CATALOG_ROOT} in the fetched source.",
            )
        return [
            entry.name
            for entry in catalog_dir.iterdir()
            if is_catalog_component(entry.name, is_dir=entry.is_dir())
        ]

    def describe(self, name: str) -> ComponentDescriptor:
        """Resolve *name* to a :class:`ComponentDescriptor`.

        Raises
        ------
        ComponentNotFoundError
            When *name* is not a component directory of the catalog.
        """
        path = self.components_dir / name
        if (
            not name
            or PurePosixPath(name).name != name
            or "\\" in name
            or not is_catalog_component(name, is_dir=path.is_dir())
        ):
            raise ComponentNotFoundError(
                f"Component {name} not found",
                hint="Run 'solo-ui list' to browse the available components.",
            )

        files = tuple(
            sorted(
                item.relative_to(path).as_posix()
                for item in path.rglob("*")
                if item.is_file()
            )
        )
        types_file = path / COMPONENT_TYPES_FILE
        styles_file = path / COMPONENT_STYLES_FILE
        return ComponentDescriptor(
            name=name,
            path=path,
            files=files,
            types_file=types_file if types_file.is_file() else None,
            styles_file=styles_file if styles_file.is_file() else None,
        )

    # ------------------------------------------------------------------
    # Shared files
    # ------------------------------------------------------------------

    def source_file(self, relative: str | PurePosixPath) -> Path:
        """Return the clone file at *relative*, which must exist.

        Raises
        ------
        MissingSourceFileError
            When the file is absent from the fetched source.
        """
        path = self._root / relative
        if not path.is_file():
            raise MissingSourceFileError(
                f"{PurePosixPath(relative)} is missing from the fetched source.",
            )
        return path

    def read_manifest(self) -> dict[str, Any]:
        """Parse the remote ``package.json``.

        Raises
        ------
        MissingSourceFileError
            When the manifest is absent or is not a JSON object.
        """
        path = self.source_file(REMOTE_MANIFEST)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise MissingSourceFileError(
                f"Remote {REMOTE_MANIFEST} is unreadable: {exc}",
            ) from exc
        if not isinstance(data, dict):
            raise MissingSourceFileError(f"Remote {REMOTE_MANIFEST} is not a JSON object.")
        return data
