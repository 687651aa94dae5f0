#
# src/testcommander/protocols.py
#
"""
Value types and collaborator protocols shared by the runtime components.
"""

from typing import Protocol, runtime_checkable

from attrs import define, field


@define(frozen=True, slots=True)
class TestCommand:
    """
    A requested test invocation.

    An empty ``test_name`` means no filter, i.e. run every test.
    """
    test_name: str = field(default="")
    skip_build: bool = field(default=False)


@define(frozen=True, slots=True)
class WarningMessage:
    """A message for the user that accompanies an otherwise successful result."""
    text: str


@define(frozen=True, slots=True)
class DiscoveryResult:
    """Test identifiers listed by a discoverer, in the order it listed them."""
    test_names: tuple[str, ...] = field(factory=tuple, converter=tuple)
    warning_message: WarningMessage | None = field(default=None)


@define(frozen=True, slots=True)
class ConfigurationView:
    """Snapshot of the toolchain options used to build one command."""
    build: bool = True
    restore: bool = True
    test_project_path: str | None = None
    results_integration: bool = False


@runtime_checkable
class Executor(Protocol):
    """Hands a command line to a terminal. Fire-and-forget."""

    def run_in_terminal(self, command: str, directory: str | None) -> None: ...


@runtime_checkable
class Discoverer(Protocol):
    """Lists the tests available in a project directory without running them."""

    async def discover_tests(self, directory: str | None, options_suffix: str) -> DiscoveryResult:
        """
        Args:
            directory: The project directory to inspect.
            options_suffix: The build/restore clauses also used for test runs.

        Returns:
            The discovered test names and an optional warning.
        """
        ...


@runtime_checkable
class MessageDisplay(Protocol):
    def show_warning(self, message: WarningMessage) -> None: ...


@runtime_checkable
class ResultsFile(Protocol):
    @property
    def file_name(self) -> str: ...


# 🔼⚙️
