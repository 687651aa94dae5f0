#
# config/models.py
#
"""
Attrs-based data models for testcommander configuration structure.
"""

import logging
from typing import Any

from attrs import define, field


# --- Validators ---
def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging.getLevelNamesMapping().keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_non_empty(inst: Any, attr: Any, value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Field '{attr.name}' must be a non-empty string, got {value!r}")


def _validate_optional_bool(inst: Any, attr: Any, value: bool | None) -> None:
    if value is not None and not isinstance(value, bool):
        raise ValueError(f"Field '{attr.name}' must be true or false, got {value!r}")


def _validate_optional_str(inst: Any, attr: Any, value: str | None) -> None:
    if value is not None and not isinstance(value, str):
        raise ValueError(f"Field '{attr.name}' must be a string, got {value!r}")


@define(frozen=True, slots=True)
class DotnetConfig:
    """
    Options for the dotnet test toolchain.

    Boolean options are kept as ``None`` when the file does not set them;
    defaults are applied where the options are read.
    """
    build: bool | None = field(default=None, validator=_validate_optional_bool)
    restore: bool | None = field(default=None, validator=_validate_optional_bool)
    test_project_path: str | None = field(default=None, validator=_validate_optional_str)
    base_command: str = field(default="dotnet test", validator=_validate_non_empty)
    executor: str = field(default="terminal", validator=_validate_non_empty)


@define(frozen=True, slots=True)
class GlobalConfig:
    """Global default settings for testcommander."""
    log_level: str = field(default="WARNING", validator=_validate_log_level)
    results_integration: bool | None = field(default=None, validator=_validate_optional_bool)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


@define(frozen=True, slots=True)
class TestCommanderConfig:
    """Root configuration object for the testcommander application."""
    dotnet: DotnetConfig = field(factory=DotnetConfig)
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})


# 🔼⚙️
