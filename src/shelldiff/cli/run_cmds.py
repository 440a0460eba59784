# src/shelldiff/cli/run_cmds.py

import asyncio
from pathlib import Path

import click
import structlog

from shelldiff.cases import TestCase, load_test_cases
from shelldiff.cli.utils import logging_options, setup_logging_from_context
from shelldiff.comparison import CaseResult, ShellComparator, SuiteSummary
from shelldiff.config import (
    DEFAULT_IMPLEMENTATION_SHELL,
    DEFAULT_REFERENCE_SHELL,
    DEFAULT_TESTS_PATH,
    HarnessConfig,
)
from shelldiff.diffing import generate_differences
from shelldiff.exceptions import ConfigurationError, LoadError, ReportWriteError
from shelldiff.report import ConsoleReporter, write_report
from shelldiff.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")

EXIT_FATAL = 1
EXIT_UNEXPECTED = 2
EXIT_MISMATCH = 3


def _execute_suite(comparator: ShellComparator, cases: list[TestCase]) -> dict[str, CaseResult]:
    """Drive the comparator to completion on a fresh event loop."""
    return asyncio.run(comparator.compare_suite(cases))


@click.command(name="run")
@click.option(
    "--bash",
    "reference_shell",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_REFERENCE_SHELL,
    show_default=True,
    envvar="SHELLDIFF_BASH",
    show_envvar=True,
    help="Path to the reference shell executable.",
)
@click.option(
    "--minishell",
    "implementation_shell",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_IMPLEMENTATION_SHELL,
    show_default=True,
    envvar="SHELLDIFF_MINISHELL",
    show_envvar=True,
    help="Path to the shell implementation under test.",
)
@click.option(
    "--tests",
    "tests_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_TESTS_PATH,
    show_default=True,
    envvar="SHELLDIFF_TESTS",
    show_envvar=True,
    help="Path to the test cases JSON file.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="SHELLDIFF_OUTPUT",
    show_envvar=True,
    help="Path to save test results as JSON.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    envvar="SHELLDIFF_TIMEOUT",
    show_envvar=True,
    help="Seconds to wait for each shell before killing it (default: wait forever).",
)
@click.option(
    "--fail-on-mismatch",
    is_flag=True,
    default=False,
    envvar="SHELLDIFF_FAIL_ON_MISMATCH",
    show_envvar=True,
    help=f"Exit with status {EXIT_MISMATCH} when any test fails.",
)
@logging_options
@click.pass_context
def run_cli(
    ctx: click.Context,
    reference_shell: Path,
    implementation_shell: Path,
    tests_path: Path,
    output_path: Path | None,
    timeout: float | None,
    fail_on_mismatch: bool,
    **kwargs,
):
    """Run every test case through both shells and report mismatches."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )
    log.info("Executing 'run' command", tests_path=str(tests_path))

    try:
        config = HarnessConfig(
            reference_shell=reference_shell,
            implementation_shell=implementation_shell,
            tests_path=tests_path,
            output_path=output_path,
            timeout=timeout,
            fail_on_mismatch=fail_on_mismatch,
        )
    except (TypeError, ValueError) as e:
        log.error("Invalid harness configuration", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_FATAL)

    try:
        cases = load_test_cases(config.tests_path)
    except LoadError as e:
        log.error("Failed to load test cases", error=str(e))
        click.echo(f"Error loading test cases: {e}", err=True)
        ctx.exit(EXIT_FATAL)

    try:
        comparator = ShellComparator.from_paths(
            config.reference_shell,
            config.implementation_shell,
            timeout=config.timeout,
        )
    except ConfigurationError as e:
        log.error("Harness configuration problem", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_FATAL)

    try:
        results = _execute_suite(comparator, cases)
    except Exception as e:
        log.critical("An unexpected error occurred during 'run'", error=str(e), exc_info=True)
        click.echo(f"Error: An unexpected issue occurred: {e}", err=True)
        ctx.exit(EXIT_UNEXPECTED)

    differences = generate_differences(results)
    reporter = ConsoleReporter()
    summary: SuiteSummary = reporter.report(results, differences)

    if config.output_path is not None:
        try:
            saved = write_report(config.output_path, results, differences)
        except ReportWriteError as e:
            log.error("Failed to save report", error=str(e))
            click.echo(f"Error: {e}", err=True)
            ctx.exit(EXIT_FATAL)
        reporter.note_saved(saved)

    log.info("'run' command finished", total=summary.total, failed=summary.failed)
    if config.fail_on_mismatch and summary.failed > 0:
        ctx.exit(EXIT_MISMATCH)

# 🔼⚙️
