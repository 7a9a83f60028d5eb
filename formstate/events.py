"""Change events handed to event bindings.

Event bindings read ``event.target.value`` or ``event.target.checked``. Any
object with that shape works; :class:`ChangeEvent` is provided for hosts that
have no native event type and for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from formstate.exceptions import InvalidEventError


@dataclass
class EventTarget:
    """The control an event originated from."""

    value: Any = ""
    checked: bool = False
    name: str = ""


@dataclass
class ChangeEvent:
    """Minimal change event carrying a target."""

    target: EventTarget = field(default_factory=EventTarget)

    @classmethod
    def of_value(cls, value: Any, name: str = "") -> "ChangeEvent":
        """Event for a text-like control whose value changed."""
        return cls(target=EventTarget(value=value, name=name))

    @classmethod
    def of_checked(cls, checked: bool, value: Any = "", name: str = "") -> "ChangeEvent":
        """Event for a checkable control that was toggled."""
        return cls(target=EventTarget(value=value, checked=checked, name=name))


def _read_target(event: Any, attribute: str, field_name: str | None) -> Any:
    target = getattr(event, "target", None)
    if target is None or not hasattr(target, attribute):
        raise InvalidEventError(
            f"Change event has no target.{attribute}",
            field_name=field_name,
            attribute=attribute,
        )
    return getattr(target, attribute)


def event_value(event: Any, field_name: str | None = None) -> Any:
    """Extract ``event.target.value``."""
    return _read_target(event, "value", field_name)


def event_checked(event: Any, field_name: str | None = None) -> bool:
    """Extract ``event.target.checked`` as a bool."""
    return bool(_read_target(event, "checked", field_name))
