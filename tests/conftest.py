"""Shared pytest fixtures and configuration for the solo-ui test suite.

Guidelines
----------
* No internet access in any test — git is replaced by fetchers that
  copy a catalog tree built on disk.
* questionary and Rich are mocked at their lazy-import seams.
* Projects and fake clones live under ``tmp_path``.
"""

from __future__ import annotations

import json
import logging
import shutil
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

from solo_ui.core.models import ComponentDescriptor

GLOBALS_CSS = "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n"

TAILWIND_CONFIG = """/** @type {import('tailwindcss').Config} */
module.exports = {
  content: ["./packages/**/*.{js,ts,jsx,tsx}"],
  theme: { extend: {} },
  plugins: [],
}
"""

POSTCSS_CONFIG = """module.exports = {
  plugins: { tailwindcss: {}, autoprefixer: {} },
}
"""

DEFAULT_COMPONENTS: dict[str, dict[str, str]] = {
    "button": {
        "index.tsx": "export const Button = () => <button />\n",
        "types.ts": "export interface ButtonProps {}\n",
        "styles.css": ".solo-button { padding: 0.5rem; }\n",
    },
    "card": {
        "index.tsx": "export const Card = () => <div />\n",
        "parts/header.tsx": "export const CardHeader = () => <header />\n",
    },
}


def build_clone(
    root: Path,
    components: dict[str, dict[str, str]] | None = None,
    *,
    version: str = "1.0.0",
) -> Path:
    """Lay out a fake solo-ui clone under *root* and return it."""
    catalog = root / "packages" / "components"
    catalog.mkdir(parents=True)
    for name, files in (DEFAULT_COMPONENTS if components is None else components).items():
        for relative, content in files.items():
            path = catalog / name / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

    (catalog / "styles").mkdir()
    (catalog / "styles" / "globals.css").write_text(GLOBALS_CSS, encoding="utf-8")
    (catalog / "package.json").write_text('{"name": "components"}\n', encoding="utf-8")
    (catalog / "node_modules" / "react").mkdir(parents=True)
    (catalog / ".turbo").mkdir()

    (root / "tailwind.config.js").write_text(TAILWIND_CONFIG, encoding="utf-8")
    (root / "postcss.config.js").write_text(POSTCSS_CONFIG, encoding="utf-8")
    (root / "package.json").write_text(
        json.dumps({"name": "solo-ui", "version": version}), encoding="utf-8",
    )
    return root


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------

class CopyFetcher:
    """SourceFetcher that copies a prepared clone instead of running git."""

    def __init__(self, source: Path) -> None:
        self.source = source
        self.calls: list[tuple[str, Path]] = []

    def fetch(self, repo_url: str, dest_dir: Path) -> None:
        self.calls.append((repo_url, dest_dir))
        shutil.copytree(self.source, dest_dir, dirs_exist_ok=True)


class RaisingFetcher:
    """SourceFetcher that always fails with *error*."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls: list[tuple[str, Path]] = []

    def fetch(self, repo_url: str, dest_dir: Path) -> None:
        self.calls.append((repo_url, dest_dir))
        raise self.error


class RecordingReporter:
    """StatusReporter that records every call as ``(method, text)``."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def start(self, text: str) -> None:
        self.events.append(("start", text))

    def succeed(self, text: str) -> None:
        self.events.append(("succeed", text))

    def fail(self, text: str) -> None:
        self.events.append(("fail", text))

    def info(self, text: str) -> None:
        self.events.append(("info", text))

    def stop(self) -> None:
        self.events.append(("stop", ""))

    def texts(self, method: str) -> list[str]:
        return [text for name, text in self.events if name == method]


class StubPicker:
    """ComponentPicker returning a fixed answer."""

    def __init__(self, choice: str | None) -> None:
        self.choice = choice
        self.offered: list[str] = []

    def pick(self, components: Sequence[ComponentDescriptor]) -> str | None:
        self.offered = [component.name for component in components]
        return self.choice


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def clone_dir(tmp_path: Path) -> Path:
    """A fake clone with the default ``button`` and ``card`` components."""
    return build_clone(tmp_path / "remote")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A target project with a minimal ``package.json``."""
    root = tmp_path / "app"
    root.mkdir()
    manifest = {"name": "app", "version": "1.0.0", "scripts": {"dev": "next dev"}}
    (root / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return root


@pytest.fixture
def scratch_base(tmp_path: Path) -> Path:
    """Parent directory for scratch workspaces, so cleanup is observable."""
    base = tmp_path / "scratch"
    base.mkdir()
    return base


@pytest.fixture
def tree_snapshot() -> Callable[[Path], dict[str, bytes]]:
    """Return a helper mapping every file under a root to its bytes."""

    def snapshot(root: Path) -> dict[str, bytes]:
        if not root.exists():
            return {}
        return {
            path.relative_to(root).as_posix(): path.read_bytes()
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }

    return snapshot


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo :func:`configure_logging` so caplog sees package records."""
    yield
    logger = logging.getLogger("solo_ui")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
