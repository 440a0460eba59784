#
# src/shelldiff/execution/__init__.py
#
"""
Shell execution sub-package for shelldiff.
"""
from .protocols import (
    LAUNCH_FAILURE_EXIT_CODE,
    SIGNALED_EXIT_CODE,
    TIMEOUT_EXIT_CODE,
    ShellRunner,
    ShellRunResult,
)
from .subprocess_runner import SubprocessShellRunner

__all__ = [
    "LAUNCH_FAILURE_EXIT_CODE",
    "SIGNALED_EXIT_CODE",
    "TIMEOUT_EXIT_CODE",
    "ShellRunResult",
    "ShellRunner",
    "SubprocessShellRunner",
]

# 🔼⚙️
