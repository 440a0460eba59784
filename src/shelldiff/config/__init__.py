#
# config/__init__.py
#
"""
Configuration handling sub-package for shelldiff.
"""

from .models import (
    DEFAULT_IMPLEMENTATION_SHELL,
    DEFAULT_REFERENCE_SHELL,
    DEFAULT_TESTS_PATH,
    HarnessConfig,
)

__all__ = [
    "DEFAULT_IMPLEMENTATION_SHELL",
    "DEFAULT_REFERENCE_SHELL",
    "DEFAULT_TESTS_PATH",
    "HarnessConfig",
]

# 🔼⚙️
