#
# src/testcommander/testing/__init__.py
#
"""
Adapters between testcommander and the dotnet tool: discovery, executors
and the results file.
"""
from .discoverer import DotnetTestDiscoverer, extract_test_names
from .executors import EchoExecutor, TerminalExecutor
from .factory import get_executor
from .results_file import TestResultsFile

__all__ = [
    "DotnetTestDiscoverer",
    "EchoExecutor",
    "TerminalExecutor",
    "TestResultsFile",
    "extract_test_names",
    "get_executor",
]

# 🔼⚙️
