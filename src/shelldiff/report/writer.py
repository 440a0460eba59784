#
# src/shelldiff/report/writer.py
#
"""
Persists a run as a structured JSON report.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from shelldiff.comparison import CaseResult, SuiteSummary
from shelldiff.diffing import DiffSpan, render_plain
from shelldiff.exceptions import ReportWriteError

log = structlog.get_logger("report.writer")


def build_report(
    results: Mapping[str, CaseResult],
    differences: Mapping[str, list[DiffSpan]],
) -> dict[str, Any]:
    return {
        "summary": SuiteSummary.from_results(results).to_dict(),
        "results": {command: result.to_dict() for command, result in results.items()},
        "differences": {command: render_plain(spans) for command, spans in differences.items()},
    }


def write_report(
    path: Path | str,
    results: Mapping[str, CaseResult],
    differences: Mapping[str, list[DiffSpan]],
) -> Path:
    """
    Write the JSON report to `path`, overwriting any existing file.

    Raises:
        ReportWriteError: If the report cannot be serialized or written.
    """
    path = Path(path)
    write_log = log.bind(path=str(path))

    try:
        payload = json.dumps(build_report(results, differences), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        write_log.error("Failed to serialize report", error=str(e))
        raise ReportWriteError(f"Error creating JSON output: {e}", details=e) from e

    try:
        path.write_text(payload + "\n", encoding="utf-8")
    except OSError as e:
        write_log.error("Failed to write report", error=str(e))
        raise ReportWriteError(f"Error writing output file: {e}", details=e) from e

    write_log.info("Report written", bytes=len(payload))
    return path

# 🔼⚙️
