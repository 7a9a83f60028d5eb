"""Value kinds a form field can hold."""

from __future__ import annotations

from enum import Enum
from typing import Any

from formstate.comparison import is_structured


class ValueKind(str, Enum):
    """Kind of value a binding reads and writes.

    The store never checks kinds; each adapter decides which kind it works
    with and what an absent field reads as.
    """

    TEXT = "text"  # Free text, empty is ""
    FLAG = "flag"  # Scalar checkbox, empty is False
    CHOICES = "choices"  # Multi-choice checkbox, empty is []
    RAW = "raw"  # Anything, empty is None

    @property
    def empty_value(self) -> Any:
        """The value an absent field reads as for this kind."""
        if self is ValueKind.TEXT:
            return ""
        if self is ValueKind.FLAG:
            return False
        if self is ValueKind.CHOICES:
            return []
        return None

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        """Best-effort classification of a stored value."""
        if isinstance(value, bool):
            return cls.FLAG
        if isinstance(value, str):
            return cls.TEXT
        if isinstance(value, (list, tuple)):
            return cls.CHOICES
        return cls.RAW


def is_empty(value: Any) -> bool:
    """Check if a value counts as "back to empty" for a field without a baseline."""
    return value is False or (isinstance(value, str) and value == "")


def describe(value: Any) -> str:
    """Short description of a value for log messages."""
    kind = ValueKind.of(value)
    if is_structured(value):
        return f"{kind.value}[{len(value)}]"
    return f"{kind.value}:{value!r}"
