"""Pure text and mapping transforms used by the install pipelines.

Every function here is deterministic and side-effect free; the
infrastructure layer reads and writes the files around them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from solo_ui.core.models import ComponentDescriptor
from solo_ui.utils.constants import (
    CATALOG_EXCLUDED_NAMES,
    COMPONENTS_DIR,
    CONTENT_GLOB_EXTENSIONS,
    DEV_DEPENDENCIES,
)

_CONTENT_ARRAY = re.compile(r"content\s*:\s*\[[^\]]*\]")
"""Matches the ``content: [...]`` array of a Tailwind config file."""


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

def is_catalog_component(name: str, *, is_dir: bool) -> bool:
    """Return whether a catalog root entry is an installable component.

    Hidden entries, non-directories and the shared entries listed in
    :data:`~solo_ui.utils.constants.CATALOG_EXCLUDED_NAMES` are never
    components.
    """
    if not is_dir:
        return False
    if name.startswith("."):
        return False
    return name not in CATALOG_EXCLUDED_NAMES


def analyze_dependencies(component: ComponentDescriptor) -> tuple[str, ...]:
    """Return the catalog components *component* requires.

    Components declare no dependencies yet, so this always returns an
    empty tuple.  It is injected into
    :class:`~solo_ui.core.scaffold_service.ScaffoldService` so a real
    analyser can replace it.
    """
    _ = component
    return ()


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

def style_addition(global_text: str, fragment: str) -> str | None:
    """Return the text to append to the stylesheet, or ``None``.

    ``None`` means the fragment's exact text is already a substring of
    *global_text*.  Reordered or re-indented copies are not detected.
    """
    if fragment in global_text:
        return None
    return f"\n{fragment}"



# ---------------------------------------------------------------------------
# Framework config
# ---------------------------------------------------------------------------

def build_content_globs(src_dir: str) -> list[str]:
    """Content globs covering *src_dir* and the installed components."""
    src = src_dir.strip().strip("/") or "."
    return [
        f"./{src}/**/*.{CONTENT_GLOB_EXTENSIONS}",
        f"./{COMPONENTS_DIR}/**/*.{CONTENT_GLOB_EXTENSIONS}",
    ]


def rewrite_content_globs(config_text: str, src_dir: str) -> str:
    """Point the ``content`` array of a Tailwind config at *src_dir*.

    Only the first ``content: [...]`` array is replaced.  Text without
    one is returned unchanged.
    """
    globs = ", ".join(f'"{glob}"' for glob in build_content_globs(src_dir))
    return _CONTENT_ARRAY.sub(lambda _m: f"content: [{globs}]", config_text, count=1)


def has_content_array(config_text: str) -> bool:
    return _CONTENT_ARRAY.search(config_text) is not None


# ---------------------------------------------------------------------------
# Package manifest
# ---------------------------------------------------------------------------

def merge_dev_dependencies(manifest: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *manifest* with the framework dev-dependencies.

    Existing ``devDependencies`` entries are kept; the pinned framework
    packages overwrite any entry with the same name.  No other key is
    added, removed or reordered.
    """
    merged = dict(manifest)
    existing = manifest.get("devDependencies") or {}
    merged["devDependencies"] = {**existing, **DEV_DEPENDENCIES}
    return merged


def describe_version_mismatch(
    local_manifest: Mapping[str, Any],
    remote_manifest: Mapping[str, Any],
) -> str | None:
    """Return a warning when the manifest versions differ, else ``None``."""
    local_version = local_manifest.get("version")
    remote_version = remote_manifest.get("version")
    if local_version == remote_version:
        return None
    return (
        f"Your local version ({local_version}) differs from "
        f"the remote version ({remote_version})"
    )
