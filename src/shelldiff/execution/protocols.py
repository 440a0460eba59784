#
# src/shelldiff/execution/protocols.py
#
"""
Defines protocols and data structures for running a command inside a shell.
"""
from pathlib import Path
from typing import Protocol, runtime_checkable

from attrs import define, field

# Named sentinels so a harness-level failure is never mistaken for a real
# exit status reported by the shell.
LAUNCH_FAILURE_EXIT_CODE = 1
TIMEOUT_EXIT_CODE = 124
# Reported for a shell killed by a signal, whatever the signal was.
SIGNALED_EXIT_CODE = -1


@define(frozen=True, slots=True)
class ShellRunResult:
    """
    Captured outcome of feeding one command to one shell.

    stdout and stderr are already trimmed of surrounding whitespace.
    """
    stdout: str
    stderr: str
    exit_code: int
    launch_error: str | None = field(default=None)
    timed_out: bool = field(default=False)

    @property
    def launched(self) -> bool:
        return self.launch_error is None


@runtime_checkable
class ShellRunner(Protocol):
    """
    Protocol for something that can execute a command through a shell binary.
    """
    async def run_command(
        self,
        shell_path: Path,
        command: str,
        timeout: float | None = None,
    ) -> ShellRunResult:
        """
        Runs a single command in the given shell and captures its output.

        Args:
            shell_path: The shell executable, launched without arguments.
            command: The command text written to the shell's standard input.
            timeout: Seconds to wait before killing the shell, or None to wait forever.

        Returns:
            A ShellRunResult. Launch failures and timeouts are reported in the
            result rather than raised.
        """
        ...

# 🔼⚙️
