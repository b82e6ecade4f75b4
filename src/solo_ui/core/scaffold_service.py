"""Core scaffold service — the ``init`` / ``add`` / ``list`` pipelines.

Each public method is one linear pipeline::

    Start → Validating → Fetching → (Installing | Listing) → Cleanup → End

Collaborators (fetcher, workspace factory, catalog reader, target
project, picker, status reporter) are injected at construction time.

Guarantees
----------
* Every pipeline returns a :class:`~solo_ui.core.models.CommandResult`;
  stage failures never propagate to the caller.
* The scratch workspace is entered with ``with`` and is therefore
  removed on the success path and on every failure path.
* Project validation runs before any workspace, network or project
  write in ``init`` and ``add``.
* Files copied before a failure stay in place; there is no rollback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from solo_ui.core.models import CommandResult, ComponentDescriptor, ScaffoldSettings
from solo_ui.core.protocols import (
    Catalog,
    ComponentPicker,
    SourceFetcher,
    StatusReporter,
    TargetProject,
    WorkspaceFactory,
)
from solo_ui.core.transforms import analyze_dependencies, describe_version_mismatch
from solo_ui.exceptions import FailureKind, SoloUIError

logger = logging.getLogger(__name__)

DependencyAnalyzer = Callable[[ComponentDescriptor], Sequence[str]]

_CLONE_DIRNAME = "source"


class ScaffoldService:
    """Drives the three user-facing commands.

    Parameters
    ----------
    settings:
        Remote URL and target project location.
    fetcher:
        Shallow-clones the remote into the scratch workspace.
    workspaces:
        Creates one scratch workspace per pipeline run.
    catalog_factory:
        Wraps the fetched clone directory in a :class:`Catalog`.
    project:
        The target project adapter.
    reporter:
        Progress indicator.
    picker:
        Interactive single-select used by :meth:`browse`.
    dependency_analyzer:
        Returns the components a component requires.  Defaults to
        :func:`~solo_ui.core.transforms.analyze_dependencies`.
    """

    def __init__(
        self,
        settings: ScaffoldSettings,
        *,
        fetcher: SourceFetcher,
        workspaces: WorkspaceFactory,
        catalog_factory: Callable[[Path], Catalog],
        project: TargetProject,
        reporter: StatusReporter,
        picker: ComponentPicker,
        dependency_analyzer: DependencyAnalyzer = analyze_dependencies,
    ) -> None:
        self._settings = settings
        self._fetcher = fetcher
        self._workspaces = workspaces
        self._catalog_factory = catalog_factory
        self._project = project
        self._reporter = reporter
        self._picker = picker
        self._dependency_analyzer = dependency_analyzer

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def init(self, *, src_dir: str | None = None) -> CommandResult:
        """Install the global stylesheet, framework config and dev deps."""
        command = "init"
        warnings: list[str] = []
        self._reporter.start("Initializing solo-ui...")
        try:
            self._project.validate()
            self._project.ensure_structure()
            with self._fetched_catalog() as catalog:
                warnings.extend(self._check_version(catalog))
                self._project.install_config(catalog, src_dir=src_dir)
        except Exception as exc:  # noqa: BLE001
            return self._failed(command, "Failed to initialize", exc, warnings)

        message = "Successfully initialized solo-ui!"
        self._reporter.succeed(message)
        return CommandResult.success(command, message, warnings=tuple(warnings))

    def add(self, name: str) -> CommandResult:
        """Install the catalog component *name* into the project."""
        command = "add"
        warnings: list[str] = []
        self._reporter.start("Fetching component...")
        try:
            self._project.validate()
            self._project.ensure_structure()
            with self._fetched_catalog() as catalog:
                warnings.extend(self._check_version(catalog))
                component = catalog.describe(name)
                self._report_dependencies(component)
                self._place(component)
        except Exception as exc:  # noqa: BLE001
            return self._failed(command, "Failed to add component", exc, warnings)

        message = f"Successfully added {name} component"
        self._reporter.succeed(message)
        return CommandResult.success(
            command, message, installed=(name,), warnings=tuple(warnings),
        )

    def browse(self) -> CommandResult:
        """List the catalog, prompt for one component and install it.

        An empty catalog and a cancelled prompt both end successfully
        without touching the project.
        """
        command = "list"
        self._reporter.start("Fetching components...")
        try:
            with self._fetched_catalog() as catalog:
                names = catalog.list_components()
                if not names:
                    message = "No components available"
                    self._reporter.info(message)
                    return CommandResult.success(command, message)

                components = [catalog.describe(name) for name in names]
                self._reporter.stop()
                choice = self._picker.pick(components)
                if choice is None:
                    logger.debug("component selection cancelled")
                    return CommandResult.success(command, "No component selected")

                self._reporter.start(f"Adding {choice}...")
                component = catalog.describe(choice)
                self._place(component)
        except Exception as exc:  # noqa: BLE001
            return self._failed(command, "Failed to fetch components", exc, [])

        message = f"Successfully added {choice} component"
        self._reporter.succeed(message)
        return CommandResult.success(command, message, installed=(choice,))

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    @contextmanager
    def _fetched_catalog(self) -> Iterator[Catalog]:
        with self._workspaces() as workspace:
            clone_dir = workspace / _CLONE_DIRNAME
            logger.debug("fetching %s into %s", self._settings.repo_url, clone_dir)
            self._fetcher.fetch(self._settings.repo_url, clone_dir)
            yield self._catalog_factory(clone_dir)

    def _check_version(self, catalog: Catalog) -> list[str]:
        try:
            remote = catalog.read_manifest()
            local = self._project.read_manifest()
        except SoloUIError as exc:
            logger.info("Unable to check versions: %s", exc)
            return ["Unable to check versions"]

        mismatch = describe_version_mismatch(local, remote)
        if mismatch is None:
            return []
        logger.info(mismatch)
        return [mismatch]

    def _report_dependencies(self, component: ComponentDescriptor) -> None:
        required = tuple(self._dependency_analyzer(component))
        if required:
            logger.info("%s requires %s", component.name, ", ".join(required))
            self._reporter.info(
                f"{component.name} also uses: {', '.join(required)}",
            )

    def _place(self, component: ComponentDescriptor) -> None:
        target = self._project.install_component(component)
        logger.info("copied %s to %s", component.name, target)
        if self._project.merge_styles(component):
            logger.info("merged %s styles into the global stylesheet", component.name)

    def _failed(
        self,
        command: str,
        prefix: str,
        exc: Exception,
        warnings: list[str],
    ) -> CommandResult:
        if isinstance(exc, SoloUIError):
            kind = exc.kind
            hint = exc.hint
            detail = str(exc)
        else:
            kind = FailureKind.UNEXPECTED
            hint = None
            detail = str(exc) or type(exc).__name__
            logger.debug("%s failed unexpectedly", command, exc_info=exc)

        message = f"{prefix}: {detail}"
        self._reporter.fail(message)
        return CommandResult.failed(
            command, message, kind, warnings=tuple(warnings), hint=hint,
        )
