#
# src/shelldiff/diffing.py
#
"""
Character-level diffs between reference and implementation stdout.
"""

import difflib
from collections.abc import Mapping
from enum import Enum

from attrs import define
from rich.text import Text

from shelldiff.comparison import CaseResult


class DiffOp(str, Enum):
    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


@define(frozen=True, slots=True)
class DiffSpan:
    op: DiffOp
    text: str


DIFF_STYLES = {
    DiffOp.EQUAL: "",
    DiffOp.INSERT: "bold green",
    DiffOp.DELETE: "bold red strike",
}


def compute_diff(expected: str, actual: str) -> list[DiffSpan]:
    """
    Diff two strings into equal/insert/delete spans.

    Deletions are text only in `expected`; insertions are text only in `actual`.
    """
    spans: list[DiffSpan] = []
    matcher = difflib.SequenceMatcher(None, expected, actual, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            spans.append(DiffSpan(DiffOp.EQUAL, expected[i1:i2]))
            continue
        if tag in ("delete", "replace"):
            spans.append(DiffSpan(DiffOp.DELETE, expected[i1:i2]))
        if tag in ("insert", "replace"):
            spans.append(DiffSpan(DiffOp.INSERT, actual[j1:j2]))
    return spans


def has_changes(spans: list[DiffSpan]) -> bool:
    return any(span.op is not DiffOp.EQUAL for span in spans)


def render_plain(spans: list[DiffSpan]) -> str:
    """wdiff-style markup: [-deleted-] and {+inserted+}."""
    parts = []
    for span in spans:
        if span.op is DiffOp.DELETE:
            parts.append(f"[-{span.text}-]")
        elif span.op is DiffOp.INSERT:
            parts.append(f"{{+{span.text}+}}")
        else:
            parts.append(span.text)
    return "".join(parts)


def render_rich(spans: list[DiffSpan]) -> Text:
    text = Text()
    for span in spans:
        text.append(span.text, style=DIFF_STYLES[span.op])
    return text


def generate_differences(results: Mapping[str, CaseResult]) -> dict[str, list[DiffSpan]]:
    """
    Diff stdout for every result that did not pass.

    Only stdout is diffed; a result that failed on stderr or exit code alone
    still gets an entry, with no changed spans.
    """
    return {
        command: compute_diff(result.reference.stdout, result.implementation.stdout)
        for command, result in results.items()
        if not result.passed
    }

# 🔼⚙️
