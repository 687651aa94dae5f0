# src/testcommander/cli/run_cmds.py

"""
One-shot commands: discover, run and run-all.
"""

import asyncio
import logging
from pathlib import Path

import click
import structlog

from testcommander.cli.utils import (
    exit_code_from,
    logging_options,
    orchestrator_options,
    prepare_orchestrator,
)
from testcommander.exceptions import TestCommanderError
from testcommander.protocols import TestCommand
from testcommander.runtime import TestOrchestrator
from testcommander.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")

skip_build_option = click.option(
    "--skip-build",
    is_flag=True,
    default=False,
    help="Pass --no-build to assume the project is already built.",
)


async def _discover(orchestrator: TestOrchestrator) -> None:
    await orchestrator.discover_tests()


async def _run(orchestrator: TestOrchestrator, executor, command: TestCommand, run_all: bool) -> int:
    if run_all:
        orchestrator.run_all_tests(command)
    else:
        orchestrator.run_test_by_name(command)
    return exit_code_from(await executor.drain())


def _run_loop(coro) -> int:
    try:
        return asyncio.run(coro)
    except KeyboardInterrupt:
        log.warning("Interrupted by KeyboardInterrupt (CTRL-C).")
        return 130
    except TestCommanderError as e:
        log.error("Command failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        return 1
    finally:
        logging.shutdown()


@click.command(name="discover")
@orchestrator_options
@logging_options
@click.pass_context
def discover_cli(ctx: click.Context, config_path: Path, workspace, project_path, executor_name, **kwargs):
    """List the tests in the test project without running them."""
    orchestrator, _ = prepare_orchestrator(ctx, config_path, workspace, project_path, executor_name, kwargs)
    log.info("Executing 'discover' command")
    ctx.exit(_run_loop(_discover(orchestrator)) or 0)


@click.command(name="run")
@click.argument("test_name", required=False, default="")
@skip_build_option
@orchestrator_options
@logging_options
@click.pass_context
def run_cli(
    ctx: click.Context,
    test_name: str,
    skip_build: bool,
    config_path: Path,
    workspace,
    project_path,
    executor_name,
    **kwargs,
):
    """Run the tests matching TEST_NAME, or every test when it is omitted."""
    orchestrator, executor = prepare_orchestrator(ctx, config_path, workspace, project_path, executor_name, kwargs)
    command = TestCommand(test_name=test_name, skip_build=skip_build)
    log.info("Executing 'run' command", test_name=test_name, skip_build=skip_build)
    ctx.exit(_run_loop(_run(orchestrator, executor, command, run_all=not test_name)))


@click.command(name="run-all")
@skip_build_option
@orchestrator_options
@logging_options
@click.pass_context
def run_all_cli(ctx: click.Context, skip_build: bool, config_path: Path, workspace, project_path, executor_name, **kwargs):
    """Run every test in the test project."""
    orchestrator, executor = prepare_orchestrator(ctx, config_path, workspace, project_path, executor_name, kwargs)
    command = TestCommand(skip_build=skip_build)
    log.info("Executing 'run-all' command", skip_build=skip_build)
    ctx.exit(_run_loop(_run(orchestrator, executor, command, run_all=True)))
