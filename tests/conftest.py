import json
import logging
import shutil
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

from shelldiff.cases import TestCase
from shelldiff.execution import ShellRunResult


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests point handlers at CliRunner streams; drop them between tests."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
    structlog.reset_defaults()


@pytest.fixture
def posix_sh() -> Path:
    sh = shutil.which("sh")
    if sh is None:
        pytest.skip("No POSIX sh available")
    return Path(sh)


@pytest.fixture
def make_shell(tmp_path: Path) -> Callable[[str, str], Path]:
    """Writes an executable /bin/sh script standing in for a shell under test."""

    def _make(name: str, body: str) -> Path:
        script = tmp_path / name
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(0o755)
        return script

    return _make


@pytest.fixture
def silent_shell(make_shell) -> Path:
    """Swallows its input, prints nothing and exits 0."""
    return make_shell("silent_shell", "cat > /dev/null\nexit 0")


@pytest.fixture
def write_suite(tmp_path: Path) -> Callable[..., Path]:
    def _write(cases: list[dict], name: str = "test_cases.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps({"test_cases": cases}))
        return path

    return _write


@pytest.fixture
def echo_case() -> TestCase:
    return TestCase(command="echo hello", description="Simple echo")


@pytest.fixture
def make_result() -> Callable[..., ShellRunResult]:
    def _make(stdout: str = "", stderr: str = "", exit_code: int = 0, **kwargs) -> ShellRunResult:
        return ShellRunResult(stdout=stdout, stderr=stderr, exit_code=exit_code, **kwargs)

    return _make
