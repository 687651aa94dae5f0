# src/testcommander/runtime/__init__.py

"""
Runtime components: command building, discovery and orchestration.
"""

from .command_builder import CommandBuilder, options_suffix, strip_parameter_list
from .console_interface import ConsoleInterface
from .discovery import DiscoveryCoordinator, Err, Ok
from .memory import LastCommandMemory
from .notifications import EventStream, NotificationHub
from .orchestrator import TestOrchestrator
from .resolver import ConfigurationResolver, resolve_path

__all__ = [
    "CommandBuilder",
    "ConfigurationResolver",
    "ConsoleInterface",
    "DiscoveryCoordinator",
    "Err",
    "EventStream",
    "LastCommandMemory",
    "NotificationHub",
    "Ok",
    "TestOrchestrator",
    "options_suffix",
    "resolve_path",
    "strip_parameter_list",
]
