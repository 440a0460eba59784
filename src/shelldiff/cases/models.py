#
# cases/models.py
#
"""
Attrs-based data model for declarative shell test cases.
"""

from attrs import define, field, validators


def _strict_int(inst, attr, value) -> None:
    """JSON booleans are ints in Python; reject them explicitly."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Field '{attr.name}' must be an integer, got {type(value).__name__}")


@define(frozen=True, slots=True)
class TestCase:
    """
    A single command to run through both shells, with optional expectations.

    Empty strings and a zero exit code mean "no expectation declared".
    """

    __test__ = False  # Not a pytest test class.

    command: str = field(validator=validators.instance_of(str))
    description: str = field(default="", validator=validators.instance_of(str))
    expected_output: str = field(default="", validator=validators.instance_of(str))
    expected_error: str = field(default="", validator=validators.instance_of(str))
    expected_code: int = field(default=0, validator=_strict_int)

    @property
    def has_expected_output(self) -> bool:
        return self.expected_output != ""

    @property
    def has_expected_error(self) -> bool:
        return self.expected_error != ""

    @property
    def has_expected_code(self) -> bool:
        return self.expected_code != 0

# 🔼⚙️
