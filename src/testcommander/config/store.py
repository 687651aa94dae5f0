#
# config/store.py
#
"""
Key/value access to toolchain options.

Stores return ``None`` for keys that are not set. Nothing is cached: every
``get`` reflects the current state of the underlying source.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import structlog

from testcommander.config.loader import load_config
from testcommander.config.models import TestCommanderConfig

log = structlog.get_logger("config.store")

BUILD_KEY = "build"
RESTORE_KEY = "restore"
TEST_PROJECT_PATH_KEY = "test_project_path"
RESULTS_INTEGRATION_KEY = "results_integration"


@runtime_checkable
class ConfigurationStore(Protocol):
    """Read access to named configuration options."""

    def get(self, key: str) -> Any | None:
        """Returns the value for ``key``, or None when it is not set."""
        ...

    def snapshot(self) -> Mapping[str, Any]:
        """Returns every option that is set, read in one pass."""
        ...


def _config_values(config: TestCommanderConfig) -> dict[str, Any]:
    return {
        BUILD_KEY: config.dotnet.build,
        RESTORE_KEY: config.dotnet.restore,
        TEST_PROJECT_PATH_KEY: config.dotnet.test_project_path,
        RESULTS_INTEGRATION_KEY: config.global_config.results_integration,
    }


class MappingConfigurationStore:
    """Serves options from an in-memory mapping."""

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values = dict(values or {})

    def get(self, key: str) -> Any | None:
        return self._values.get(key)

    def snapshot(self) -> Mapping[str, Any]:
        return dict(self._values)

    def set(self, key: str, value: Any | None) -> None:
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value


class FileConfigurationStore:
    """
    Serves options from a configuration file, re-reading it on every access
    so edits take effect on the next command. A missing file means no option
    is set.
    """

    def __init__(self, config_path: Path):
        self.config_path = Path(config_path)

    def get(self, key: str) -> Any | None:
        return self.snapshot().get(key)

    def snapshot(self) -> Mapping[str, Any]:
        if not self.config_path.exists():
            log.debug("Configuration file absent, no options set", path=str(self.config_path))
            return {}
        values = _config_values(load_config(self.config_path))
        return {key: value for key, value in values.items() if value is not None}


class LayeredConfigurationStore:
    """Consults each store in order and returns the first value that is set."""

    def __init__(self, *stores: ConfigurationStore):
        self._stores = stores

    def get(self, key: str) -> Any | None:
        for store in self._stores:
            value = store.get(key)
            if value is not None:
                return value
        return None

    def snapshot(self) -> Mapping[str, Any]:
        merged: dict[str, Any] = {}
        for store in reversed(self._stores):
            merged.update((k, v) for k, v in store.snapshot().items() if v is not None)
        return merged
