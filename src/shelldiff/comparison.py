#
# src/shelldiff/comparison.py
#
"""
Differential execution: runs each test case through the reference shell and
the shell under test, then classifies where they agree.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import structlog
from attrs import define, field

from shelldiff.cases.models import TestCase
from shelldiff.exceptions import ConfigurationError
from shelldiff.execution.protocols import ShellRunner, ShellRunResult
from shelldiff.execution.subprocess_runner import SubprocessShellRunner

log = structlog.get_logger("comparison")


@define(frozen=True, slots=True)
class CaseResult:
    """
    Outcome of one test case run through both shells.

    The *_match flags compare reference against implementation. The
    expected_*_match flags compare the implementation against the case's own
    expectations and are True whenever no expectation was declared.
    """

    index: int
    command: str
    description: str
    reference: ShellRunResult
    implementation: ShellRunResult
    output_match: bool
    error_match: bool
    return_code_match: bool
    expected_output_match: bool = field(default=True)
    expected_error_match: bool = field(default=True)
    expected_code_match: bool = field(default=True)

    @property
    def passed(self) -> bool:
        return self.output_match and self.error_match and self.return_code_match

    @property
    def meets_expectations(self) -> bool:
        return self.expected_output_match and self.expected_error_match and self.expected_code_match

    @classmethod
    def build(
        cls,
        index: int,
        case: TestCase,
        reference: ShellRunResult,
        implementation: ShellRunResult,
    ) -> "CaseResult":
        return cls(
            index=index,
            command=case.command,
            description=case.description,
            reference=reference,
            implementation=implementation,
            output_match=reference.stdout == implementation.stdout,
            error_match=reference.stderr == implementation.stderr,
            return_code_match=reference.exit_code == implementation.exit_code,
            expected_output_match=(
                not case.has_expected_output or implementation.stdout == case.expected_output
            ),
            expected_error_match=(
                not case.has_expected_error or implementation.stderr == case.expected_error
            ),
            expected_code_match=(
                not case.has_expected_code or implementation.exit_code == case.expected_code
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serializable form used in the JSON report."""
        return {
            "description": self.description,
            "bash_output": self.reference.stdout,
            "minishell_output": self.implementation.stdout,
            "bash_error": self.reference.stderr,
            "minishell_error": self.implementation.stderr,
            "bash_return_code": self.reference.exit_code,
            "minishell_return_code": self.implementation.exit_code,
            "bash_launch_error": self.reference.launch_error,
            "minishell_launch_error": self.implementation.launch_error,
            "bash_timed_out": self.reference.timed_out,
            "minishell_timed_out": self.implementation.timed_out,
            "output_match": self.output_match,
            "error_match": self.error_match,
            "return_code_match": self.return_code_match,
            "expected_output_match": self.expected_output_match,
            "expected_error_match": self.expected_error_match,
            "expected_code_match": self.expected_code_match,
            "meets_expectations": self.meets_expectations,
        }


@define(frozen=True, slots=True)
class SuiteSummary:
    total: int
    passed: int
    failed: int

    @classmethod
    def from_results(cls, results: Mapping[str, CaseResult]) -> "SuiteSummary":
        total = len(results)
        passed = sum(1 for result in results.values() if result.passed)
        return cls(total=total, passed=passed, failed=total - passed)

    def to_dict(self) -> dict[str, int]:
        return {
            "total_tests": self.total,
            "passed_tests": self.passed,
            "failed_tests": self.failed,
        }


def _require_exists(path: Path, role: str) -> None:
    # Anything present but unlaunchable is reported per test as a launch failure.
    if not path.exists():
        raise ConfigurationError(f"{role} executable not found at {path}")


class ShellComparator:
    """Runs commands against a reference shell and a shell under test."""

    def __init__(
        self,
        reference_shell: Path,
        implementation_shell: Path,
        runner: ShellRunner | None = None,
        timeout: float | None = None,
    ):
        self.reference_shell = Path(reference_shell)
        self.implementation_shell = Path(implementation_shell)
        self.runner = runner or SubprocessShellRunner()
        self.timeout = timeout
        self._log = log.bind(
            reference_shell=str(self.reference_shell),
            implementation_shell=str(self.implementation_shell),
            runner=type(self.runner).__name__,
        )

    @classmethod
    def from_paths(
        cls,
        reference_shell: Path,
        implementation_shell: Path,
        runner: ShellRunner | None = None,
        timeout: float | None = None,
    ) -> "ShellComparator":
        """
        Build a comparator after checking both shells exist on disk.

        Raises:
            ConfigurationError: If either shell path does not exist.
        """
        _require_exists(Path(reference_shell), "Reference shell")
        _require_exists(Path(implementation_shell), "Implementation shell")
        return cls(reference_shell, implementation_shell, runner=runner, timeout=timeout)

    async def compare_case(self, case: TestCase, index: int = 0) -> CaseResult:
        """Run one case through the reference shell, then the implementation."""
        reference = await self.runner.run_command(self.reference_shell, case.command, self.timeout)
        implementation = await self.runner.run_command(
            self.implementation_shell, case.command, self.timeout
        )
        result = CaseResult.build(index, case, reference, implementation)
        self._log.debug(
            "Case compared",
            index=index,
            command=case.command,
            passed=result.passed,
            output_match=result.output_match,
            error_match=result.error_match,
            return_code_match=result.return_code_match,
        )
        return result

    async def compare_suite(self, cases: Iterable[TestCase]) -> dict[str, CaseResult]:
        """
        Compare every case in order, one at a time.

        Results are keyed by command text, so a repeated command keeps only
        the result of its last occurrence.
        """
        results: dict[str, CaseResult] = {}
        for index, case in enumerate(cases):
            if case.command in results:
                self._log.warning(
                    "Duplicate command replaces an earlier result",
                    command=case.command,
                    index=index,
                    previous_index=results[case.command].index,
                )
            results[case.command] = await self.compare_case(case, index)

        summary = SuiteSummary.from_results(results)
        self._log.info(
            "Suite comparison complete",
            total=summary.total,
            passed=summary.passed,
            failed=summary.failed,
        )
        return results

# 🔼⚙️
