# src/shelldiff/telemetry/__init__.py

"""
Logging setup for shelldiff.
"""

from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]
