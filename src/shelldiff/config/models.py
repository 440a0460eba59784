#
# config/models.py
#
"""
Attrs-based data models for the shelldiff harness configuration.
"""

from pathlib import Path
from typing import Any

from attrs import converters, define, field

DEFAULT_REFERENCE_SHELL = Path("/bin/bash")
DEFAULT_IMPLEMENTATION_SHELL = Path("./minishell")
DEFAULT_TESTS_PATH = Path("test_cases.json")


# --- Validators ---
def _validate_optional_positive(inst: Any, attr: Any, value: float | None) -> None:
    """Validator ensures a number is positive when given."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        raise ValueError(f"Field '{attr.name}' must be a positive number, got {value}")


@define(frozen=True, slots=True)
class HarnessConfig:
    """Settings for one differential run, resolved from CLI options and env vars."""

    reference_shell: Path = field(default=DEFAULT_REFERENCE_SHELL, converter=Path)
    implementation_shell: Path = field(default=DEFAULT_IMPLEMENTATION_SHELL, converter=Path)
    tests_path: Path = field(default=DEFAULT_TESTS_PATH, converter=Path)
    output_path: Path | None = field(default=None, converter=converters.optional(Path))
    # None waits for the shell indefinitely.
    timeout: float | None = field(default=None, validator=_validate_optional_positive)
    fail_on_mismatch: bool = field(default=False)

# 🔼⚙️
