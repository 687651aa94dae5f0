# src/testcommander/cli/session_cmds.py

"""
Interactive session sharing one orchestrator, so `rerun` has something to replay.
"""

import asyncio
import logging
import shlex
from pathlib import Path

import click
import structlog

from testcommander.cli.utils import logging_options, orchestrator_options, prepare_orchestrator
from testcommander.exceptions import TestCommanderError
from testcommander.protocols import TestCommand
from testcommander.runtime import TestOrchestrator
from testcommander.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.session")

SESSION_HELP = """Commands:
  discover               list tests (runs in the background)
  run NAME [--skip-build]  run tests matching NAME
  all [--skip-build]     run every test
  rerun                  run the last command again
  wait                   wait for running commands to finish
  help                   show this help
  quit                   leave the session"""


async def handle_line(line: str, orchestrator: TestOrchestrator, executor) -> bool:
    """Executes one session command. Returns False when the session should end."""
    try:
        words = shlex.split(line)
    except ValueError as e:
        click.echo(f"Could not parse command: {e}", err=True)
        return True
    if not words:
        return True

    verb, args = words[0].lower(), words[1:]
    skip_build = "--skip-build" in args
    args = [a for a in args if a != "--skip-build"]

    if verb in ("quit", "exit", "q"):
        return False
    try:
        await _dispatch(verb, args, skip_build, orchestrator, executor)
    except TestCommanderError as e:
        log.error("Session command failed", command=verb, error=str(e))
        click.echo(f"Error: {e}", err=True)
    return True


async def _dispatch(verb: str, args: list[str], skip_build: bool, orchestrator: TestOrchestrator, executor) -> None:
    if verb == "help":
        click.echo(SESSION_HELP)
    elif verb == "discover":
        orchestrator.discover_tests()
    elif verb == "run" and args:
        orchestrator.run_test(TestCommand(test_name=" ".join(args), skip_build=skip_build))
    elif verb in ("all", "run"):
        orchestrator.run_all_tests(TestCommand(skip_build=skip_build))
    elif verb == "rerun":
        if not orchestrator.rerun_last_command():
            click.echo("Nothing to rerun yet.")
    elif verb == "wait":
        await orchestrator.wait_for_discovery()
        await executor.drain()
    else:
        click.echo(f"Unknown command '{verb}'. Type 'help' for a list.", err=True)


async def _session_loop(orchestrator: TestOrchestrator, executor) -> int:
    click.echo(SESSION_HELP)
    while True:
        try:
            line = await asyncio.to_thread(click.prompt, "testcommander", default="", show_default=False)
        except click.Abort:
            click.echo()
            break
        if not await handle_line(line, orchestrator, executor):
            break

    log.debug("Session ending, waiting for outstanding work")
    await orchestrator.wait_for_discovery()
    await executor.drain()
    return 0


@click.command(name="session")
@orchestrator_options
@logging_options
@click.pass_context
def session_cli(ctx: click.Context, config_path: Path, workspace, project_path, executor_name, **kwargs):
    """Interactive prompt for discovering, running and re-running tests."""
    orchestrator, executor = prepare_orchestrator(ctx, config_path, workspace, project_path, executor_name, kwargs)
    log.info("Starting interactive session")
    try:
        asyncio.run(_session_loop(orchestrator, executor))
    except KeyboardInterrupt:
        log.warning("Session interrupted by KeyboardInterrupt (CTRL-C).")
        ctx.exit(130)
    finally:
        logging.shutdown()
