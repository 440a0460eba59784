#
# src/shelldiff/report/__init__.py
#
"""
Console and file reporting for shelldiff runs.
"""
from .console import ConsoleReporter
from .writer import build_report, write_report

__all__ = [
    "ConsoleReporter",
    "build_report",
    "write_report",
]

# 🔼⚙️
