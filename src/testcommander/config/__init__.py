#
# config/__init__.py
#
"""
Configuration handling sub-package for testcommander.

Exports the loading function, the core configuration models and the
option stores.
"""

from .loader import DEFAULT_CONFIG_FILENAME, load_config
from .models import DotnetConfig, GlobalConfig, TestCommanderConfig
from .store import (
    BUILD_KEY,
    RESTORE_KEY,
    RESULTS_INTEGRATION_KEY,
    TEST_PROJECT_PATH_KEY,
    ConfigurationStore,
    FileConfigurationStore,
    LayeredConfigurationStore,
    MappingConfigurationStore,
)

__all__ = [
    "BUILD_KEY",
    "DEFAULT_CONFIG_FILENAME",
    "RESTORE_KEY",
    "RESULTS_INTEGRATION_KEY",
    "TEST_PROJECT_PATH_KEY",
    "ConfigurationStore",
    "DotnetConfig",
    "FileConfigurationStore",
    "GlobalConfig",
    "LayeredConfigurationStore",
    "MappingConfigurationStore",
    "TestCommanderConfig",
    "load_config",
]
