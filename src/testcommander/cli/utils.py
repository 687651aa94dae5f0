# src/testcommander/cli/utils.py

import logging
from pathlib import Path

import click
import structlog

from testcommander.config import (
    DEFAULT_CONFIG_FILENAME,
    TEST_PROJECT_PATH_KEY,
    FileConfigurationStore,
    LayeredConfigurationStore,
    MappingConfigurationStore,
    TestCommanderConfig,
    load_config,
)
from testcommander.exceptions import ConfigurationError
from testcommander.runtime import ConsoleInterface, TestOrchestrator
from testcommander.telemetry.logger import setup_logging as core_setup_logging
from testcommander.testing import DotnetTestDiscoverer, TestResultsFile, get_executor

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging.getLevelNamesMapping().keys()), case_sensitive=False)


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="TESTCOMMANDER_LOG_LEVEL",
        help="Set the logging level (overrides config file).",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="TESTCOMMANDER_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="TESTCOMMANDER_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def orchestrator_options(f):
    """Decorator adding the options every test command needs."""
    f = click.option(
        "-c",
        "--config-path",
        type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
        default=Path(DEFAULT_CONFIG_FILENAME),
        show_default=True,
        envvar="TESTCOMMANDER_CONF",
        show_envvar=True,
        help="Path to the configuration file. It is re-read before every command.",
    )(f)
    f = click.option(
        "-w",
        "--workspace",
        type=click.Path(file_okay=False, path_type=str),
        default=None,
        help="Workspace root used when no test project path is configured [default: current directory].",
    )(f)
    f = click.option(
        "-p",
        "--project-path",
        default=None,
        help="Test project directory (overrides the config file).",
    )(f)
    f = click.option(
        "--executor",
        "executor_name",
        type=click.Choice(["terminal", "echo", "dry-run"], case_sensitive=False),
        default=None,
        help="How commands are run: 'terminal' runs them, 'echo' only prints them.",
    )(f)
    return f


def setup_logging_from_context(
    ctx: click.Context,
    local_log_level: str | None = None,
    local_log_file: str | None = None,
    local_json_logs: bool | None = None,
    default_log_level: str = "WARNING",
) -> None:
    """
    Setup logging using context values, allowing local overrides.
    """
    log_level_str = local_log_level or ctx.obj.get("LOG_LEVEL") or default_log_level
    log_file_path = local_log_file or ctx.obj.get("LOG_FILE")
    use_json_logs = local_json_logs if local_json_logs is not None else ctx.obj.get("JSON_LOGS", False)

    numeric_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
        log_level_str = "INFO"

    core_setup_logging(
        level=numeric_level,
        json_logs=use_json_logs,
        log_file=log_file_path,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )


def load_startup_config(ctx: click.Context, config_path: Path) -> TestCommanderConfig:
    """
    Loads the settings that are fixed for the lifetime of the process.
    A missing file gives the defaults; an invalid one ends the command.
    """
    if not config_path.exists():
        log.debug("No configuration file, using defaults", path=str(config_path))
        return TestCommanderConfig()
    try:
        return load_config(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate configuration", error=str(e))
        click.echo(f"Error: Configuration problem in '{config_path}':\n{e}", err=True)
        ctx.exit(1)


def setup_command_logging(ctx: click.Context, config: TestCommanderConfig, **kwargs) -> None:
    """Applies command-level logging options, falling back to the config file's level."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level") or ctx.obj.get("LOG_LEVEL") or config.global_config.log_level,
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )


def build_orchestrator(
    config: TestCommanderConfig,
    config_path: Path,
    workspace: str | None,
    project_path: str | None,
    executor_name: str | None,
    console: ConsoleInterface,
):
    """Wires an orchestrator to the real dotnet collaborators. Returns (orchestrator, executor)."""
    overrides = MappingConfigurationStore({TEST_PROJECT_PATH_KEY: project_path})
    store = LayeredConfigurationStore(overrides, FileConfigurationStore(config_path))
    executor = get_executor(executor_name or config.dotnet.executor)

    orchestrator = TestOrchestrator(
        store=store,
        workspace_root=workspace if workspace is not None else str(Path.cwd()),
        executor=executor,
        discoverer=DotnetTestDiscoverer(base_command=config.dotnet.base_command),
        results_file=TestResultsFile(),
        messages=console,
        base_command=config.dotnet.base_command,
    )
    console.attach(orchestrator.notifications)
    return orchestrator, executor


def prepare_orchestrator(ctx: click.Context, config_path: Path, workspace, project_path, executor_name, kwargs):
    """Loads startup config, sets up logging and builds the orchestrator for a command."""
    config = load_startup_config(ctx, config_path)
    setup_command_logging(ctx, config, **kwargs)
    try:
        return build_orchestrator(config, config_path, workspace, project_path, executor_name, ConsoleInterface())
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


def exit_code_from(codes: list[int]) -> int:
    """First non-zero exit code of the runs, or 0."""
    return next((code for code in codes if code != 0), 0)

# ⚙️🛠️
