"""solo-ui — copy-paste UI component scaffolding CLI.

Fetches the remote component catalog and places component sources,
shared styles and framework config into a consumer project.
"""

from solo_ui.version import __version__

__all__: list[str] = ["__version__"]
