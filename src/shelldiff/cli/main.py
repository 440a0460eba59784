# src/shelldiff/cli/main.py

"""
Main CLI entry point for shelldiff using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from shelldiff.cli.cases_cmds import cases_cli
from shelldiff.cli.echo_cmds import echo_cli
from shelldiff.cli.run_cmds import run_cli
from shelldiff.cli.utils import logging_options, setup_logging_from_context
from shelldiff.telemetry import StructLogger

try:
    __version__ = version("shelldiff")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="shelldiff")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    Shelldiff: differential tester for a shell implementation.

    Runs each test command through a reference shell (bash) and the shell
    under test (minishell) and reports where their output, errors, and exit
    codes differ.
    Configuration precedence: CLI options > Environment Variables > Defaults.
    """
    ctx.ensure_object(dict)

    ctx.obj["LOG_LEVEL"] = log_level
    ctx.obj["LOG_FILE"] = log_file
    ctx.obj["JSON_LOGS"] = json_logs if json_logs is not None else False

    setup_logging_from_context(ctx)
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(cases_cli)
cli.add_command(echo_cli)
cli.add_command(run_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
