#
# src/shelldiff/exceptions.py
#
"""
Custom exceptions for shelldiff.
"""


class ShelldiffError(Exception):
    """Base class for all shelldiff errors."""

    def __init__(self, message: str, details: Exception | None = None):
        self.details = details
        super().__init__(message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class ConfigurationError(ShelldiffError):
    """Raised for invalid harness settings, e.g. a missing shell executable."""

    pass


class LoadError(ShelldiffError):
    """Raised when a test case file cannot be read or does not match the schema."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: Exception | None = None,
    ):
        self.path = path
        full_message = message
        if path:
            full_message += f" (File: '{path}')"
        super().__init__(full_message, details=details)


class ReportWriteError(ShelldiffError):
    """Raised when the structured report cannot be serialized or written."""

    pass

# 🔼⚙️
