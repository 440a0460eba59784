#
# cases/loader.py
#
"""
Loads a shell test suite from a JSON file into TestCase records.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from shelldiff.cases.models import TestCase
from shelldiff.exceptions import LoadError

log = structlog.get_logger("cases.loader")

SUITE_KEY = "test_cases"
KNOWN_FIELDS = ("command", "description", "expected_output", "expected_error", "expected_code")


def _case_from_mapping(raw: Any, index: int, path: Path) -> TestCase:
    if not isinstance(raw, Mapping):
        raise LoadError(
            f"Test case #{index} must be a JSON object, got {type(raw).__name__}",
            path=str(path),
        )
    if "command" not in raw:
        raise LoadError(f"Test case #{index} is missing required field 'command'", path=str(path))

    # Unknown keys are ignored; null behaves like an omitted field.
    kwargs = {key: raw[key] for key in KNOWN_FIELDS if raw.get(key) is not None}
    try:
        return TestCase(**kwargs)
    except (TypeError, ValueError) as e:
        raise LoadError(f"Test case #{index} is invalid: {e}", path=str(path), details=e) from e


def parse_test_cases(data: Any, path: Path) -> list[TestCase]:
    """Validate decoded JSON and build the ordered suite. All-or-nothing."""
    if not isinstance(data, Mapping):
        raise LoadError(
            f"Top-level JSON value must be an object, got {type(data).__name__}",
            path=str(path),
        )

    raw_cases = data.get(SUITE_KEY)
    if raw_cases is None:
        log.warning("Suite file has no test cases", path=str(path), key=SUITE_KEY)
        return []
    if not isinstance(raw_cases, list):
        raise LoadError(f"'{SUITE_KEY}' must be a JSON array", path=str(path))

    return [_case_from_mapping(raw, index, path) for index, raw in enumerate(raw_cases)]


def load_test_cases(path: Path | str) -> list[TestCase]:
    """
    Read and parse a test case file.

    Args:
        path: Path to a JSON document of the form {"test_cases": [...]}.

    Returns:
        The test cases in file order.

    Raises:
        LoadError: If the file cannot be read, is not valid JSON, or does not
            match the expected schema.
    """
    path = Path(path)
    load_log = log.bind(path=str(path))
    load_log.debug("Loading test cases")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        load_log.error("Failed to read test case file", error=str(e))
        raise LoadError(f"Error reading file: {e}", path=str(path), details=e) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        load_log.error("Failed to parse test case file", error=str(e))
        raise LoadError(f"Error parsing JSON: {e}", path=str(path), details=e) from e

    cases = parse_test_cases(data, path)
    load_log.info("Test cases loaded", count=len(cases))
    return cases

# 🔼⚙️
