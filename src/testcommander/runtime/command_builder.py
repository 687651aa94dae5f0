# src/testcommander/runtime/command_builder.py

"""
Assembles `dotnet test` command lines.

The clause order is fixed and each clause carries its own leading space:

    <base>[ --no-build][ --no-restore][ --logger "trx;LogFileName=<file>"]
          [ --filter FullyQualifiedName~<name>][ --no-build]
"""

import re

from testcommander.protocols import ConfigurationView, ResultsFile, TestCommand

DEFAULT_BASE_COMMAND = "dotnet test"
NO_BUILD_CLAUSE = " --no-build"
NO_RESTORE_CLAUSE = " --no-restore"

# Greedy on purpose: everything from the first "(" to the last ")" goes.
_PARAMETER_LIST = re.compile(r"\(.*\)")


def strip_parameter_list(test_name: str) -> str:
    """Drops the argument list of a parameterized test's display name, e.g. ``Foo(1,2)`` -> ``Foo``."""
    return _PARAMETER_LIST.sub("", test_name)


def options_suffix(options: ConfigurationView) -> str:
    """The build/restore clauses shared by run and discovery commands."""
    suffix = ""
    if not options.build:
        suffix += NO_BUILD_CLAUSE
    if not options.restore:
        suffix += NO_RESTORE_CLAUSE
    return suffix


class CommandBuilder:
    def __init__(self, results_file: ResultsFile, base_command: str = DEFAULT_BASE_COMMAND):
        self.results_file = results_file
        self.base_command = base_command

    def results_clause(self, options: ConfigurationView) -> str:
        if not options.results_integration:
            return ""
        return f' --logger "trx;LogFileName={self.results_file.file_name}"'

    def build(self, command: TestCommand, options: ConfigurationView) -> str:
        line = f"{self.base_command}{options_suffix(options)}{self.results_clause(options)}"
        if command.test_name:
            line += f" --filter FullyQualifiedName~{strip_parameter_list(command.test_name)}"
        if command.skip_build:
            line += NO_BUILD_CLAUSE
        return line
