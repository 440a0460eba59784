#
# tests/unit/test_loader.py
#
"""
Tests for loading test case files.
"""

import json
from pathlib import Path

import pytest

from shelldiff.cases import TestCase, load_test_cases
from shelldiff.exceptions import LoadError


class TestLoadTestCases:
    """Test the JSON test case loader."""

    def test_loads_cases_in_file_order(self, write_suite) -> None:
        path = write_suite(
            [
                {"command": "echo one", "description": "first"},
                {"command": "echo two", "description": "second"},
                {"command": "echo three", "description": "third"},
            ]
        )

        cases = load_test_cases(path)

        assert [c.command for c in cases] == ["echo one", "echo two", "echo three"]
        assert cases[0] == TestCase(command="echo one", description="first")

    def test_optional_fields_default_to_empty_and_zero(self, write_suite) -> None:
        cases = load_test_cases(write_suite([{"command": "ls"}]))

        case = cases[0]
        assert case.description == ""
        assert case.expected_output == ""
        assert case.expected_error == ""
        assert case.expected_code == 0
        assert not case.has_expected_output
        assert not case.has_expected_error
        assert not case.has_expected_code

    def test_expectations_are_loaded(self, write_suite) -> None:
        path = write_suite(
            [
                {
                    "command": "exit 3",
                    "description": "exit status",
                    "expected_output": "",
                    "expected_error": "oops",
                    "expected_code": 3,
                }
            ]
        )

        case = load_test_cases(path)[0]

        assert case.expected_error == "oops"
        assert case.expected_code == 3
        assert case.has_expected_code

    def test_unknown_fields_are_ignored(self, write_suite) -> None:
        path = write_suite([{"command": "pwd", "tags": ["builtin"], "timeout": 5}])

        assert load_test_cases(path) == [TestCase(command="pwd")]

    def test_null_fields_behave_as_missing(self, write_suite) -> None:
        path = write_suite([{"command": "pwd", "description": None, "expected_code": None}])

        case = load_test_cases(path)[0]
        assert case.description == ""
        assert case.expected_code == 0

    def test_missing_suite_key_gives_empty_suite(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("{}")

        assert load_test_cases(path) == []

    def test_accepts_string_path(self, write_suite) -> None:
        path = write_suite([{"command": "true"}])

        assert len(load_test_cases(str(path))) == 1


class TestLoadErrors:
    """Failure modes: nothing is partially loaded."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(LoadError) as exc_info:
            load_test_cases(tmp_path / "nope.json")

        assert "Error reading file" in str(exc_info.value)
        assert "nope.json" in str(exc_info.value)

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"test_cases": [ {"command": "ls"}, ')

        with pytest.raises(LoadError) as exc_info:
            load_test_cases(path)

        assert "Error parsing JSON" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_top_level_must_be_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text('[{"command": "ls"}]')

        with pytest.raises(LoadError, match="must be an object"):
            load_test_cases(path)

    def test_suite_must_be_array(self, tmp_path: Path) -> None:
        path = tmp_path / "obj.json"
        path.write_text('{"test_cases": {"command": "ls"}}')

        with pytest.raises(LoadError, match="must be a JSON array"):
            load_test_cases(path)

    def test_case_must_be_object(self, write_suite) -> None:
        with pytest.raises(LoadError, match="#1 must be a JSON object"):
            load_test_cases(write_suite([{"command": "ls"}, "echo hi"]))

    def test_command_is_required(self, write_suite) -> None:
        with pytest.raises(LoadError, match="missing required field 'command'"):
            load_test_cases(write_suite([{"description": "no command"}]))

    @pytest.mark.parametrize(
        "bad_case",
        [
            {"command": 42},
            {"command": "ls", "description": ["x"]},
            {"command": "ls", "expected_output": 1},
            {"command": "ls", "expected_code": "3"},
            {"command": "ls", "expected_code": True},
        ],
    )
    def test_wrong_field_types_are_rejected(self, write_suite, bad_case: dict) -> None:
        with pytest.raises(LoadError, match="#0 is invalid"):
            load_test_cases(write_suite([bad_case]))

    def test_error_is_all_or_nothing(self, write_suite) -> None:
        path = write_suite([{"command": "echo ok"}, {"command": 1}, {"command": "echo later"}])

        with pytest.raises(LoadError):
            load_test_cases(path)

# 🧪📄
