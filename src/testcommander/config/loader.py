#
# config/loader.py
#
"""
Loads and validates the TOML configuration file.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

import attrs
import structlog

from testcommander.config.models import DotnetConfig, GlobalConfig, TestCommanderConfig
from testcommander.exceptions import ConfigurationError

log = structlog.get_logger("config.loader")

DEFAULT_CONFIG_FILENAME = "testcommander.conf"
ENV_LOG_LEVEL = "TESTCOMMANDER_LOG_LEVEL"


def _structure_section(cls: type, data: Any, section: str, path: Path) -> Any:
    """Builds one attrs model from a TOML table, rejecting unknown keys."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Section '[{section}]' must be a table", path=str(path))

    known = {a.name for a in attrs.fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown key(s) in '[{section}]': {', '.join(unknown)}", path=str(path))

    try:
        return cls(**data)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value in '[{section}]': {e}", path=str(path), details=e) from e


def parse_config(data: dict[str, Any], path: Path) -> TestCommanderConfig:
    """Converts raw TOML data into the configuration model."""
    sections = {
        a.metadata.get("toml_name", a.name): a.name for a in attrs.fields(TestCommanderConfig)
    }
    unknown = sorted(set(data) - set(sections))
    if unknown:
        raise ConfigurationError(f"Unknown section(s): {', '.join(unknown)}", path=str(path))

    global_data = dict(data.get("global", {}))
    if env_level := os.environ.get(ENV_LOG_LEVEL):
        log.debug("Overriding log level from environment", env_var=ENV_LOG_LEVEL, value=env_level)
        global_data["log_level"] = env_level

    return TestCommanderConfig(
        dotnet=_structure_section(DotnetConfig, data.get("dotnet", {}), "dotnet", path),
        global_config=_structure_section(GlobalConfig, global_data, "global", path),
    )


def load_config(config_path: Path) -> TestCommanderConfig:
    """
    Loads the configuration file at ``config_path``.

    Raises:
        ConfigurationError: if the file is missing, is not valid TOML, or
            contains unknown keys or values of the wrong type.
    """
    config_path = Path(config_path)
    load_log = log.bind(path=str(config_path))
    load_log.debug("Loading configuration")

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError("Configuration file not found", path=str(config_path), details=e) from e
    except OSError as e:
        raise ConfigurationError("Configuration file could not be read", path=str(config_path), details=e) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError("Configuration file is not valid TOML", path=str(config_path), details=e) from e

    config = parse_config(data, config_path)
    load_log.debug("Configuration loaded", dotnet=attrs.asdict(config.dotnet))
    return config
