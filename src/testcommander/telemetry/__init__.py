#
# src/testcommander/telemetry/__init__.py
#
"""
Logging and usage-recording utilities for testcommander.
"""

from .logger import StructLogger, setup_logging
from .usage import LoggingUsageRecorder, UsageRecorder

__all__ = [
    "LoggingUsageRecorder",
    "StructLogger",
    "UsageRecorder",
    "setup_logging",
]
