#
# src/shelldiff/__init__.py
#
"""
Shelldiff - differential testing of a shell implementation against bash.
"""

from shelldiff.cases import TestCase, load_test_cases
from shelldiff.comparison import CaseResult, ShellComparator, SuiteSummary
from shelldiff.diffing import generate_differences
from shelldiff.exceptions import (
    ConfigurationError,
    LoadError,
    ReportWriteError,
    ShelldiffError,
)

__all__ = [
    "CaseResult",
    "ConfigurationError",
    "LoadError",
    "ReportWriteError",
    "ShellComparator",
    "ShelldiffError",
    "SuiteSummary",
    "TestCase",
    "generate_differences",
    "load_test_cases",
]
