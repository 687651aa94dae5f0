# src/testcommander/runtime/console_interface.py

"""
Console bridge: shows warnings and renders notifications for the CLI.
"""

import click
import structlog

from testcommander.protocols import WarningMessage
from testcommander.telemetry import StructLogger

from .notifications import NotificationHub

log: StructLogger = structlog.get_logger("runtime.console_interface")


class ConsoleInterface:
    """Writes user-facing messages to the terminal."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self._tokens: list[tuple[object, int]] = []

    def show_warning(self, message: WarningMessage) -> None:
        click.secho(f"Warning: {message.text}", fg="yellow", err=True)

    def attach(self, hub: NotificationHub) -> None:
        """Subscribes to the hub's streams."""
        self._tokens.append((hub.discovery_results, hub.discovery_results.subscribe(self.show_discovered)))
        self._tokens.append((hub.test_run_started, hub.test_run_started.subscribe(self.show_run_started)))
        log.debug("Console interface attached to notification hub")

    def detach(self) -> None:
        for stream, token in self._tokens:
            stream.unsubscribe(token)
        self._tokens.clear()

    def show_discovered(self, test_names: list[str]) -> None:
        if not test_names:
            click.secho("No tests discovered.", fg="yellow")
            return
        click.secho(f"Discovered {len(test_names)} test(s):", bold=True)
        for name in test_names:
            click.echo(f"  {name}")

    def show_run_started(self, test_name: str) -> None:
        if self.quiet:
            return
        target = test_name or "all tests"
        click.secho(f"▶️  Running {target}", fg="cyan", err=True)
