"""Allow ``python -m solo_ui`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m solo_ui`` behaves identically to the ``solo-ui``
console script.
"""

from __future__ import annotations

from solo_ui.cli.app import cli

if __name__ == "__main__":
    cli()
