# src/testcommander/cli/config_cmds.py

from pathlib import Path

import click
import structlog
from rich.pretty import pretty_repr

from testcommander.cli.utils import logging_options, setup_logging_from_context
from testcommander.config import DEFAULT_CONFIG_FILENAME, load_config
from testcommander.exceptions import ConfigurationError
from testcommander.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting and validating configuration."""
    pass


@config_cli.command(name="show")
@click.option(
    "-c",
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=Path(DEFAULT_CONFIG_FILENAME),
    show_default=True,
    envvar="TESTCOMMANDER_CONF",
    help="Path to the testcommander configuration file (env var TESTCOMMANDER_CONF).",
    show_envvar=True,
)
@logging_options
@click.pass_context
def show_config(ctx: click.Context, config_path: Path, **kwargs):
    """Load, validate, and display the configuration."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )
    log.info("Executing 'config show' command", config_path=str(config_path))

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate configuration", error=str(e))
        click.echo(f"Error: Configuration problem in '{config_path}':\n{e}", err=True)
        ctx.exit(1)

    click.echo(pretty_repr(config, expand_all=True))

    if config.dotnet.test_project_path and not Path(config.dotnet.test_project_path).expanduser().exists():
        log.warning("Configured test project path does not exist", path=config.dotnet.test_project_path)

# 🔼⚙️
