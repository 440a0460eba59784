# src/shelldiff/cli/cases_cmds.py

from collections import Counter
from pathlib import Path

import click
import structlog
from rich.pretty import pretty_repr

from shelldiff.cases import load_test_cases
from shelldiff.cli.utils import logging_options, setup_logging_from_context
from shelldiff.config import DEFAULT_TESTS_PATH
from shelldiff.exceptions import LoadError
from shelldiff.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.cases")


@click.group(name="cases")
def cases_cli():
    """Commands for inspecting and validating test case files."""
    pass


@cases_cli.command(name="show")
@click.option(
    "-t",
    "--tests",
    "tests_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=DEFAULT_TESTS_PATH,
    show_default=True,
    envvar="SHELLDIFF_TESTS",
    show_envvar=True,
    help="Path to the test cases JSON file.",
)
@logging_options
@click.pass_context
def show_cases(ctx: click.Context, tests_path: Path, **kwargs):
    """Load, validate, and display the test cases."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )
    log.info("Executing 'cases show' command", tests_path=str(tests_path))

    try:
        cases = load_test_cases(tests_path)
    except LoadError as e:
        log.error("Failed to load or validate test cases", error=str(e))
        click.echo(f"Error: Test case problem in '{tests_path}':\n{e}", err=True)
        ctx.exit(1)

    click.echo(pretty_repr(cases, expand_all=True))
    click.echo(f"{len(cases)} test case(s) loaded.")

    duplicates = [command for command, count in Counter(c.command for c in cases).items() if count > 1]
    for command in duplicates:
        # Results are keyed by command, so only the last occurrence is reported.
        click.echo(f"Duplicate command (only the last occurrence is reported): {command}")
