#
# cases/__init__.py
#
"""
Test case loading sub-package for shelldiff.
"""

from .loader import load_test_cases, parse_test_cases
from .models import TestCase

__all__ = [
    "TestCase",
    "load_test_cases",
    "parse_test_cases",
]

# 🔼⚙️
