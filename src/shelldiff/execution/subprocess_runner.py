#
# src/shelldiff/execution/subprocess_runner.py
#
"""
Runs shell commands using asyncio.subprocess.
"""
import asyncio
from pathlib import Path

import structlog

from shelldiff.execution.protocols import (
    LAUNCH_FAILURE_EXIT_CODE,
    SIGNALED_EXIT_CODE,
    TIMEOUT_EXIT_CODE,
    ShellRunner,
    ShellRunResult,
)

log = structlog.get_logger("execution.runner")

EXIT_INSTRUCTION = "exit"


def build_shell_input(command: str) -> bytes:
    """The command, then an explicit exit so interactive shells terminate."""
    return f"{command}\n{EXIT_INSTRUCTION}\n".encode("utf-8")


def _kill_quietly(process: asyncio.subprocess.Process) -> None:
    if process.returncode is not None:
        return
    try:
        process.kill()
    except ProcessLookupError:
        pass  # Exited between the check and the signal.


async def _feed_stdin(stdin: asyncio.StreamWriter, payload: bytes) -> str | None:
    """Write the payload and close stdin. Returns the error text if the pipe broke."""
    try:
        stdin.write(payload)
        await stdin.drain()
    except (BrokenPipeError, ConnectionResetError) as e:
        return str(e) or type(e).__name__
    finally:
        stdin.close()
    return None


def _launch_failure(message: str) -> ShellRunResult:
    return ShellRunResult(
        stdout="",
        stderr=message,
        exit_code=LAUNCH_FAILURE_EXIT_CODE,
        launch_error=message,
    )


class SubprocessShellRunner(ShellRunner):
    """
    Implements the ShellRunner protocol by piping the command into a child process.
    """
    async def run_command(
        self,
        shell_path: Path,
        command: str,
        timeout: float | None = None,
    ) -> ShellRunResult:
        """
        Launches the shell with no arguments, writes the command to stdin and
        waits for it to exit.

        Both output streams are drained while stdin is being written, so a
        shell producing a lot of output cannot stall the write.
        """
        runner_log = log.bind(shell=str(shell_path), command=command)
        runner_log.debug("Launching shell")

        try:
            process = await asyncio.create_subprocess_exec(
                str(shell_path),
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            runner_log.warning("Shell could not be started", error=str(e))
            return _launch_failure(str(e))

        async def exchange() -> tuple[str | None, bytes, bytes]:
            write_error, out, err = await asyncio.gather(
                _feed_stdin(process.stdin, build_shell_input(command)),
                process.stdout.read(),
                process.stderr.read(),
            )
            await process.wait()
            return write_error, out, err

        try:
            write_error, stdout_bytes, stderr_bytes = await asyncio.wait_for(
                exchange(), timeout=timeout
            )
        except TimeoutError:
            _kill_quietly(process)
            await process.wait()
            message = f"Shell did not exit within {timeout} seconds"
            runner_log.warning("Shell timed out and was killed", timeout=timeout)
            return ShellRunResult(
                stdout="",
                stderr=message,
                exit_code=TIMEOUT_EXIT_CODE,
                timed_out=True,
            )
        except OSError as e:
            _kill_quietly(process)
            await process.wait()
            runner_log.warning("Failed to exchange data with shell", error=str(e))
            return _launch_failure(str(e))

        if write_error is not None:
            runner_log.warning(
                "Shell input could not be written",
                error=write_error,
                returncode=process.returncode,
            )
            return _launch_failure(write_error)

        exit_code = process.returncode
        if exit_code is None or exit_code < 0:
            runner_log.debug("Shell terminated by signal", returncode=exit_code)
            exit_code = SIGNALED_EXIT_CODE
        stdout = stdout_bytes.decode("utf-8", errors="replace").strip()
        stderr = stderr_bytes.decode("utf-8", errors="replace").strip()

        runner_log.debug(
            "Shell finished",
            exit_code=exit_code,
            stdout_len=len(stdout),
            stderr_len=len(stderr),
        )

        return ShellRunResult(stdout=stdout, stderr=stderr, exit_code=exit_code)

# 🔼⚙️
