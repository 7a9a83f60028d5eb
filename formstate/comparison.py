"""Value comparison helpers used by the dirty check and the bindings.

Form values come from input controls, so truthiness and equality follow form
semantics rather than plain Python ones: an empty list is a real value and a
boolean never equals a number. Structured values are compared item by item
with the same rule.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence, Set
from typing import Any, Callable


def is_structured(value: Any) -> bool:
    """Check if a value is a mapping, a set or a non-string sequence."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Mapping, Sequence, Set))


def is_truthy(value: Any) -> bool:
    """Form truthiness.

    ``None``, ``False``, ``""``, zero and NaN are falsy. Every structured
    value is truthy, including empty lists and dicts.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and not math.isnan(value)
    return True


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that never mixes booleans with numbers."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    try:
        return bool(left == right)
    except Exception:
        return left is right


def structurally_equal(left: Any, right: Any) -> bool:
    """Deep structural equality.

    Mappings compare key sets, then values. Sequences compare element by
    element in order; a list and a tuple with the same items are equal. Sets
    compare regardless of order. Leaves go through :func:`strict_equals`, so
    ``10`` equals ``10.0`` but ``True`` never equals ``1``.
    """
    if isinstance(left, Mapping) or isinstance(right, Mapping):
        if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
            return False
        if left.keys() != right.keys():
            return False
        return all(structurally_equal(left[key], right[key]) for key in left)

    if isinstance(left, Set) or isinstance(right, Set):
        if not (isinstance(left, Set) and isinstance(right, Set)) or len(left) != len(right):
            return False
        remaining = list(right)
        for item in left:
            index = _index_where(remaining, item, structurally_equal)
            if index < 0:
                return False
            del remaining[index]
        return True

    if is_structured(left) and is_structured(right):
        if len(left) != len(right):
            return False
        return all(structurally_equal(a, b) for a, b in zip(left, right))

    return strict_equals(left, right)


def index_of(items: Sequence[Any], value: Any) -> int:
    """Index of the first item strictly equal to ``value``, or -1."""
    return _index_where(items, value, strict_equals)


def contains(items: Sequence[Any], value: Any) -> bool:
    return index_of(items, value) > -1


def _index_where(items: Sequence[Any], value: Any, equals: Callable[[Any, Any], bool]) -> int:
    for index, item in enumerate(items):
        if equals(item, value):
            return index
    return -1
