"""Catalog and target-project layout constants.

Paths are relative: catalog paths to the root of the fetched clone,
target paths to the consumer project directory.
"""

from __future__ import annotations

from pathlib import PurePosixPath

DEFAULT_REPO_URL: str = "https://github.com/irychen/solo-ui.git"
"""Remote component source repository."""

REPO_URL_ENV_VAR: str = "SOLO_UI_REPO_URL"
"""Environment variable overriding :data:`DEFAULT_REPO_URL`."""

CLONE_DEPTH: int = 1

# ---------------------------------------------------------------------------
# Fetched catalog layout
# ---------------------------------------------------------------------------

CATALOG_ROOT = PurePosixPath("packages/components")
STYLES_TEMPLATE = CATALOG_ROOT / "styles" / "globals.css"
REMOTE_MANIFEST = PurePosixPath("package.json")
TAILWIND_CONFIG = PurePosixPath("tailwind.config.js")
POSTCSS_CONFIG = PurePosixPath("postcss.config.js")

COMPONENT_STYLES_FILE: str = "styles.css"
COMPONENT_TYPES_FILE: str = "types.ts"

CATALOG_EXCLUDED_NAMES: frozenset[str] = frozenset(
    {"styles", "package.json", "node_modules"}
)
"""Catalog root entries that are never offered as components."""

# ---------------------------------------------------------------------------
# Target project layout
# ---------------------------------------------------------------------------

PROJECT_MANIFEST: str = "package.json"
COMPONENTS_DIR: str = "components"
STYLES_DIR: str = "styles"
GLOBAL_STYLESHEET = PurePosixPath(STYLES_DIR) / "globals.css"

CONFIG_FILES: tuple[PurePosixPath, ...] = (TAILWIND_CONFIG, POSTCSS_CONFIG)

DEV_DEPENDENCIES: dict[str, str] = {
    "tailwindcss": "^3.4.0",
    "postcss": "^8.4.0",
    "autoprefixer": "^10.4.0",
}
"""Dev-time packages merged into the target manifest by ``init``."""

CONTENT_GLOB_EXTENSIONS: str = "{js,ts,jsx,tsx,mdx}"
