# src/testcommander/runtime/resolver.py

"""
Reads toolchain options and works out the directory test commands run in.
"""

import os

import structlog

from testcommander.config.store import (
    BUILD_KEY,
    RESTORE_KEY,
    RESULTS_INTEGRATION_KEY,
    TEST_PROJECT_PATH_KEY,
    ConfigurationStore,
)
from testcommander.protocols import ConfigurationView
from testcommander.telemetry import StructLogger

log: StructLogger = structlog.get_logger("runtime.resolver")


def resolve_path(path: str | None, workspace_root: str | None) -> str | None:
    """
    Expands ``~`` and anchors relative paths at the workspace root.

    Absolute paths are returned unchanged; no other normalization is done.
    """
    if not path:
        return path
    path = os.path.expanduser(path)
    if not os.path.isabs(path) and workspace_root:
        path = os.path.join(os.path.expanduser(workspace_root), path)
    return path


class ConfigurationResolver:
    """Reads options from a store and resolves the test directory."""

    def __init__(
        self,
        store: ConfigurationStore,
        workspace_root: str | None,
        logger: StructLogger | None = None,
    ):
        self.store = store
        self.workspace_root = workspace_root
        self._log = logger or log

    def read_view(self) -> ConfigurationView:
        """Takes a fresh snapshot of the options, applying defaults for unset keys."""
        values = self.store.snapshot()
        build = values.get(BUILD_KEY)
        restore = values.get(RESTORE_KEY)
        results_integration = values.get(RESULTS_INTEGRATION_KEY)
        return ConfigurationView(
            build=True if build is None else bool(build),
            restore=True if restore is None else bool(restore),
            test_project_path=values.get(TEST_PROJECT_PATH_KEY) or None,
            results_integration=bool(results_integration),
        )

    def resolve_directory(self, view: ConfigurationView | None = None) -> str | None:
        """
        Returns the configured test project path, or the workspace root when
        none is configured. Pass the request's ``view`` so the directory and
        the command come from the same read of the options.

        A directory that does not exist is logged and still returned; the
        dotnet tool reports the problem itself when it runs there.
        """
        if view is None:
            view = self.read_view()
        configured = view.test_project_path
        if configured:
            directory = resolve_path(configured, self.workspace_root)
        else:
            directory = self.workspace_root

        if directory is None or not os.path.exists(directory):
            self._log.info(f"Path {directory} is not valid")

        return directory
