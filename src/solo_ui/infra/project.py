"""Filesystem adapter for the target (consumer) project.

Implements :class:`~solo_ui.core.protocols.TargetProject`: manifest
check, directory structure, component copy, style merge and config
install.  All decisions about file *content* are delegated to
:mod:`solo_ui.core.transforms`; this module only reads and writes.

Overwrites are unconditional: an existing component directory or config
file is replaced file by file, with no backup.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any

from solo_ui.core.models import ComponentDescriptor
from solo_ui.core.protocols import Catalog
from solo_ui.core.transforms import (
    has_content_array,
    merge_dev_dependencies,
    rewrite_content_globs,
    style_addition,
)
from solo_ui.exceptions import NotAProjectError, SoloUIError
from solo_ui.utils.constants import (
    COMPONENTS_DIR,
    CONFIG_FILES,
    GLOBAL_STYLESHEET,
    PROJECT_MANIFEST,
    STYLES_DIR,
    STYLES_TEMPLATE,
    TAILWIND_CONFIG,
)

logger = logging.getLogger(__name__)


class LocalProject:
    """A consumer project rooted at *root*."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def manifest_path(self) -> Path:
        return self._root / PROJECT_MANIFEST

    @property
    def components_dir(self) -> Path:
        return self._root / COMPONENTS_DIR

    @property
    def global_stylesheet(self) -> Path:
        return self._root / GLOBAL_STYLESHEET

    # ------------------------------------------------------------------
    # Validation / structure
    # ------------------------------------------------------------------

    def validate(self) -> None:
        """Raise :class:`NotAProjectError` unless ``package.json`` exists."""
        if not self.manifest_path.is_file():
            raise NotAProjectError(
                f"No {PROJECT_MANIFEST} found. "
                "Please run this command in a Node.js project.",
                hint="Run 'npm init' first, or point --cwd at your project.",
            )

    def ensure_structure(self) -> None:
        for directory in (self.components_dir, self._root / STYLES_DIR):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise SoloUIError(f"Cannot create {directory}: {exc}") from exc

    # ------------------------------------------------------------------
    # Manifest
    # ------------------------------------------------------------------

    def read_manifest(self) -> dict[str, Any]:
        try:
            data = json.loads(self.manifest_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise NotAProjectError(f"No {PROJECT_MANIFEST} found.") from exc
        except (OSError, ValueError) as exc:
            raise NotAProjectError(f"{PROJECT_MANIFEST} is unreadable: {exc}") from exc
        if not isinstance(data, dict):
            raise NotAProjectError(f"{PROJECT_MANIFEST} is not a JSON object.")
        return data

    def write_manifest(self, manifest: dict[str, Any]) -> None:
        text = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
        self.manifest_path.write_text(text, encoding="utf-8")

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def install_component(self, component: ComponentDescriptor) -> Path:
        """Copy the component tree to ``components/<name>``."""
        target = self.components_dir / component.name
        try:
            shutil.copytree(component.path, target, dirs_exist_ok=True)
        except (OSError, shutil.Error) as exc:
            raise SoloUIError(f"Could not copy {component.name}: {exc}") from exc
        return target

    def merge_styles(self, component: ComponentDescriptor) -> bool:
        """Append the component's style fragment unless already present.

        The stylesheet is only ever appended to, so its existing bytes and
        line endings stay as they are.  A missing global stylesheet is
        treated as empty and created.
        """
        if component.styles_file is None:
            return False

        fragment = _read_verbatim(component.styles_file)
        stylesheet = self.global_stylesheet
        current = _read_verbatim(stylesheet) if stylesheet.exists() else ""

        addition = style_addition(current, fragment)
        if addition is None:
            logger.debug("%s styles already present", component.name)
            return False

        stylesheet.parent.mkdir(parents=True, exist_ok=True)
        with open(stylesheet, "a", encoding="utf-8", newline="") as handle:
            handle.write(addition)
        return True


    # ------------------------------------------------------------------
    # Config
    # ------------------------------------------------------------------

    def install_config(self, catalog: Catalog, *, src_dir: str | None = None) -> None:
        """Copy the stylesheet template and framework config files.

        Every source file is resolved before anything is copied, so a
        missing file leaves the project untouched.  With *src_dir*, the
        Tailwind ``content`` globs are rewritten to point at it.  The
        manifest gains the framework dev-dependencies.
        """
        copies = [(catalog.source_file(STYLES_TEMPLATE), self.global_stylesheet)]
        copies.extend(
            (catalog.source_file(name), self._root / name) for name in CONFIG_FILES
        )

        for source, target in copies:
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(source, target)
            except OSError as exc:
                raise SoloUIError(f"Could not write {target}: {exc}") from exc
            logger.debug("copied %s -> %s", source, target)

        if src_dir is not None:
            self._rewrite_tailwind_content(src_dir)

        self.write_manifest(merge_dev_dependencies(self.read_manifest()))

    def _rewrite_tailwind_content(self, src_dir: str) -> None:
        config_path = self._root / TAILWIND_CONFIG
        text = config_path.read_text(encoding="utf-8")
        if not has_content_array(text):
            logger.warning("%s has no content array; left unchanged", TAILWIND_CONFIG)
            return
        config_path.write_text(rewrite_content_globs(text, src_dir), encoding="utf-8")


def _read_verbatim(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()
