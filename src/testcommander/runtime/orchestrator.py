# src/testcommander/runtime/orchestrator.py

"""
High-level coordinator for discovering and running tests.
Owns the last-command memory and the notification streams.
"""

import asyncio

import attrs
import structlog

from testcommander.config.store import ConfigurationStore
from testcommander.protocols import (
    Discoverer,
    Executor,
    MessageDisplay,
    ResultsFile,
    TestCommand,
)
from testcommander.telemetry import LoggingUsageRecorder, StructLogger, UsageRecorder

from .command_builder import DEFAULT_BASE_COMMAND, CommandBuilder, options_suffix
from .discovery import DiscoveryCoordinator
from .memory import LastCommandMemory
from .notifications import EventStream, NotificationHub
from .resolver import ConfigurationResolver

log: StructLogger = structlog.get_logger("runtime.orchestrator")


class TestOrchestrator:
    """
    Entry point for the run-all, run-one, rerun-last and discover operations.

    Runs are handed to the executor and not awaited. Discovery is scheduled
    on the running event loop; the returned task may be awaited but callers
    are free to carry on issuing runs meanwhile.
    """

    def __init__(
        self,
        store: ConfigurationStore,
        workspace_root: str | None,
        executor: Executor,
        discoverer: Discoverer,
        results_file: ResultsFile,
        messages: MessageDisplay,
        *,
        base_command: str = DEFAULT_BASE_COMMAND,
        usage: UsageRecorder | None = None,
        logger: StructLogger | None = None,
    ):
        self._log = logger or log
        self.executor = executor
        self.usage = usage or LoggingUsageRecorder()
        self.resolver = ConfigurationResolver(store, workspace_root, logger=self._log)
        self.builder = CommandBuilder(results_file, base_command=base_command)
        self.memory = LastCommandMemory()
        self.notifications = NotificationHub()
        self.discovery = DiscoveryCoordinator(
            discoverer, messages, self.notifications.discovery_results, logger=self._log
        )
        self._discovery_tasks: set[asyncio.Task] = set()

    @property
    def on_new_test_discovery(self) -> EventStream[list[str]]:
        return self.notifications.discovery_results

    @property
    def on_test_run(self) -> EventStream[str]:
        return self.notifications.test_run_started

    def run_all_tests(self, command: TestCommand) -> None:
        """
        Runs every test in the project directory.

        May trigger a build or restore first, so it can be slow.
        """
        self._run_test_command(attrs.evolve(command, test_name=""))
        self.usage.record("run_all_tests")

    def run_test(self, command: TestCommand) -> None:
        """
        Runs the tests matching ``command.test_name``.

        May trigger a build or restore first, so it can be slow.
        """
        self.run_test_by_name(command)

    def run_test_by_name(self, command: TestCommand) -> None:
        self._run_test_command(command)
        self.usage.record("run_test")

    def rerun_last_command(self) -> bool:
        """Runs the last command again. Returns False if nothing has run yet."""
        last = self.memory.replay()
        if last is None:
            self._log.debug("No previous test command to rerun")
            return False
        self._run_test_command(last)
        self.usage.record("rerun_last_command")
        return True

    def discover_tests(self) -> asyncio.Task:
        """Starts discovery in the background and returns its task."""
        view = self.resolver.read_view()
        directory = self.resolver.resolve_directory(view)
        suffix = options_suffix(view)
        self._log.debug("Starting test discovery", directory=directory, options=suffix)

        task = asyncio.get_running_loop().create_task(self.discovery.discover(directory, suffix))
        self._discovery_tasks.add(task)
        task.add_done_callback(self._discovery_tasks.discard)
        return task

    async def wait_for_discovery(self) -> None:
        """Waits until every discovery started so far has published."""
        if self._discovery_tasks:
            await asyncio.gather(*self._discovery_tasks)

    def _run_test_command(self, command: TestCommand) -> None:
        view = self.resolver.read_view()
        directory = self.resolver.resolve_directory(view)
        line = self.builder.build(command, view)
        self.memory.record(command)

        self._log.info(f"Executing {line} in {directory}")
        self.notifications.test_run_started.publish(command.test_name)
        self.executor.run_in_terminal(line, directory)
