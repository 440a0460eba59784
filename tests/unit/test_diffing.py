#
# tests/unit/test_diffing.py
#
"""
Tests for stdout diff generation and rendering.
"""

from shelldiff.cases import TestCase
from shelldiff.comparison import CaseResult
from shelldiff.diffing import (
    DiffOp,
    DiffSpan,
    compute_diff,
    generate_differences,
    has_changes,
    render_plain,
    render_rich,
)


class TestComputeDiff:
    def test_identical_strings_are_one_equal_span(self) -> None:
        assert compute_diff("hello", "hello") == [DiffSpan(DiffOp.EQUAL, "hello")]

    def test_empty_strings_have_no_spans(self) -> None:
        spans = compute_diff("", "")

        assert spans == []
        assert not has_changes(spans)

    def test_insertion_and_deletion(self) -> None:
        spans = compute_diff("hello world", "hello there world!")

        assert has_changes(spans)
        assert "".join(s.text for s in spans if s.op is not DiffOp.INSERT) == "hello world"
        assert "".join(s.text for s in spans if s.op is not DiffOp.DELETE) == "hello there world!"

    def test_replacement_emits_delete_before_insert(self) -> None:
        spans = compute_diff("cat", "cut")

        assert spans == [
            DiffSpan(DiffOp.EQUAL, "c"),
            DiffSpan(DiffOp.DELETE, "a"),
            DiffSpan(DiffOp.INSERT, "u"),
            DiffSpan(DiffOp.EQUAL, "t"),
        ]


class TestRendering:
    def test_plain_markup(self) -> None:
        spans = compute_diff("cat", "cut")

        assert render_plain(spans) == "c[-a-]{+u+}t"

    def test_plain_markup_for_missing_output(self) -> None:
        assert render_plain(compute_diff("hello", "")) == "[-hello-]"

    def test_rich_text_styles_changed_spans(self) -> None:
        text = render_rich(compute_diff("cat", "cut"))

        assert text.plain == "caut"
        styles = {str(span.style) for span in text.spans}
        assert "bold red strike" in styles
        assert "bold green" in styles


class TestGenerateDifferences:
    def test_only_failing_results_are_diffed(self, make_result) -> None:
        ok = make_result(stdout="same")
        results = {
            "pass": CaseResult.build(0, TestCase(command="pass"), ok, ok),
            "fail": CaseResult.build(1, TestCase(command="fail"), ok, make_result(stdout="sane")),
        }

        differences = generate_differences(results)

        assert list(differences) == ["fail"]
        assert render_plain(differences["fail"]) == "sa[-m-]{+n+}e"

    def test_exit_code_only_failure_still_listed(self, make_result) -> None:
        results = {
            "exit 3": CaseResult.build(
                0, TestCase(command="exit 3"), make_result(exit_code=3), make_result(exit_code=0)
            )
        }

        differences = generate_differences(results)

        assert "exit 3" in differences
        assert not has_changes(differences["exit 3"])

    def test_stderr_is_not_diffed(self, make_result) -> None:
        results = {
            "x": CaseResult.build(
                0, TestCase(command="x"), make_result(stderr="one"), make_result(stderr="two")
            )
        }

        assert not has_changes(generate_differences(results)["x"])

# 🧪🔍
