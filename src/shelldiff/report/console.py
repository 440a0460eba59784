#
# src/shelldiff/report/console.py
#
"""
Human-readable console report rendered with rich.
"""

from collections.abc import Mapping

import structlog
from rich.console import Console
from rich.text import Text

from shelldiff.comparison import CaseResult, SuiteSummary
from shelldiff.diffing import DiffSpan, has_changes, render_rich

log = structlog.get_logger("report.console")

RULE = "=" * 50


class ConsoleReporter:
    """Prints the summary, a status line per test, and diff blocks for failures."""

    def __init__(self, console: Console | None = None):
        # highlight=False keeps command text from being recolored by rich.
        self.console = console or Console(highlight=False, soft_wrap=True)

    def _line(self, *parts: str | Text) -> None:
        self.console.print(*parts, markup=False, emoji=False, highlight=False)

    def print_summary(self, summary: SuiteSummary) -> None:
        self._line()
        self._line(f"Test Summary ({summary.passed}/{summary.total} passed):")
        self._line(RULE)

    def print_results(self, results: Mapping[str, CaseResult]) -> None:
        for command, result in results.items():
            status = Text("PASS", style="bold green") if result.passed else Text("FAIL", style="bold red")
            self._line()
            self._line(f"Test: {result.description}")
            self._line(f"Command: {command}")
            self._line(Text.assemble("Status: ", status))
            if not result.meets_expectations:
                self._line("Expectations: not met")

    def print_differences(
        self,
        results: Mapping[str, CaseResult],
        differences: Mapping[str, list[DiffSpan]],
    ) -> None:
        if not differences:
            return

        self._line()
        self._line("Detailed Differences:")
        self._line(RULE)
        for command, spans in differences.items():
            result = results[command]
            self._line()
            self._line(f"Test: {result.description}")
            self._line(f"Command: {command}")
            self._line()
            if has_changes(spans):
                self._line("Differences detected:")
                self._line(render_rich(spans))
            else:
                self._line("Differences detected: stdout is identical")
            if not result.error_match:
                self._line(f"bash stderr: {result.reference.stderr}")
                self._line(f"minishell stderr: {result.implementation.stderr}")
            if not result.return_code_match:
                self._line(
                    f"Exit codes: bash={result.reference.exit_code} "
                    f"minishell={result.implementation.exit_code}"
                )
            for name, run in (("bash", result.reference), ("minishell", result.implementation)):
                if not run.launched:
                    self._line(f"{name} could not be run: {run.launch_error}")
                elif run.timed_out:
                    self._line(f"{name} timed out and was killed")

    def report(
        self,
        results: Mapping[str, CaseResult],
        differences: Mapping[str, list[DiffSpan]],
    ) -> SuiteSummary:
        summary = SuiteSummary.from_results(results)
        log.debug("Rendering console report", total=summary.total, failed=summary.failed)
        self.print_summary(summary)
        self.print_results(results)
        self.print_differences(results, differences)
        return summary

    def note_saved(self, path) -> None:
        self._line()
        self._line(f"Detailed results saved to {path}")

# 🔼⚙️
