"""Field store for a single form.

This class provides a UI-agnostic representation of form state that can be
tested without any widget toolkit. It holds the current value of each named
field next to the initial snapshot, and keeps two indexes up to date on every
write: the fields that were touched and the fields that are dirty.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping

from formstate.comparison import is_structured, is_truthy, strict_equals, structurally_equal
from formstate.logging import get_form_logger
from formstate.models.field_value import describe, is_empty
from formstate.settings import FormStateSettings, get_settings

StateListener = Callable[["FormState"], None]


class FormState:
    """Current values, initial snapshot, dirty set and touched set of a form.

    Dirtiness is computed when a field is written, not when it is read, so
    ``has_dirty`` and ``is_dirty`` are constant time. Listeners registered
    with :meth:`subscribe` (or passed as ``on_state_change``) are called
    synchronously after every mutation so the host can schedule a refresh.

    Attributes:
        name: Optional form name, added to log records
        settings: Behaviour switches (clear scope, logging of writes)
    """

    def __init__(
        self,
        initial_state: Mapping[str, Any] | None = None,
        *,
        name: str = "",
        settings: FormStateSettings | None = None,
        on_state_change: StateListener | None = None,
    ) -> None:
        initial = initial_state if initial_state is not None else {}
        self.name = name
        self.settings = settings or get_settings()
        self._initial: Mapping[str, Any] = dict(initial)
        self._values: dict[str, Any] = dict(initial)
        self._dirty: set[str] = set()
        self._touched: set[str] = set()
        self._listeners: list[StateListener] = []
        if on_state_change is not None:
            self._listeners.append(on_state_change)
        self._logger = get_form_logger(__name__, form=name)

    # Read accessors

    @property
    def values(self) -> Mapping[str, Any]:
        """Live read-only view of the current values."""
        return MappingProxyType(self._values)

    @property
    def initial_state(self) -> Mapping[str, Any]:
        """Read-only view of the current baseline."""
        return MappingProxyType(self._initial)

    @property
    def dirty(self) -> set[str]:
        """Live set of dirty field names. Write through set_value only."""
        return self._dirty

    @property
    def touched(self) -> set[str]:
        """Live set of touched field names. Write through set_value only."""
        return self._touched

    @property
    def has_dirty(self) -> bool:
        return bool(self._dirty)

    @property
    def has_touched(self) -> bool:
        return bool(self._touched)

    def is_dirty(self, name: str) -> bool:
        return name in self._dirty

    def is_touched(self, name: str) -> bool:
        return name in self._touched

    def get(self, name: str, default: Any = None) -> Any:
        """Get the current value of a field."""
        return self._values.get(name, default)

    # Mutations

    def set_value(self, name: str, value: Any, mark_touched: bool = True, mark_dirty: bool = True) -> None:
        """Write a field value and update the touched and dirty indexes.

        Args:
            name: Field name
            value: New value, of any kind
            mark_touched: Add the field to the touched set
            mark_dirty: Recompute the field's dirtiness against the baseline
        """
        self._values[name] = value

        if mark_touched:
            self._touched.add(name)

        if mark_dirty:
            if self._differs_from_baseline(name, value):
                self._dirty.add(name)
            else:
                self._dirty.discard(name)

        if self.settings.log_changes:
            self._logger.field_changed(name, describe(value), name in self._dirty, name in self._touched)

        self._notify()

    def set_initial_state(self, new_state: Mapping[str, Any]) -> None:
        """Replace the baseline and the current values, and reset tracking.

        Use this once the external source of truth changes, for example after
        a successful save or a reload. The mapping is copied one level deep;
        nested lists and dicts are shared with the caller.
        """
        baseline = dict(new_state)
        self._initial = baseline
        self._values.clear()
        self._values.update(baseline)
        self._dirty.clear()
        self._touched.clear()
        self._logger.debug("Initial state replaced with %d field(s)", len(new_state))
        self._notify()

    def clear(self, name: str) -> None:
        """Blank a field to an empty string.

        With the default ``clear_scope`` of ``"all"`` this empties the dirty
        and touched sets for every field, not only ``name``. With ``"field"``
        only ``name`` leaves both sets.
        """
        self._values[name] = ""
        if self.settings.clears_all:
            self._dirty.clear()
            self._touched.clear()
        else:
            self._dirty.discard(name)
            self._touched.discard(name)
        self._logger.debug("Cleared %s (scope=%s)", name, self.settings.clear_scope)
        self._notify()

    # Notification

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called after every mutation.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as exc:
                self._logger.listener_failed(exc)
                raise

    def _differs_from_baseline(self, name: str, value: Any) -> bool:
        baseline = self._initial.get(name)
        if is_truthy(baseline):
            if is_structured(value):
                return not structurally_equal(value, baseline)
            return not strict_equals(value, baseline)
        return not is_empty(value)

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of the form state for debugging and serialization."""
        return {
            "values": dict(self._values),
            "dirty": sorted(self._dirty),
            "touched": sorted(self._touched),
        }

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return (
            f"<FormState{label} fields={len(self._values)} "
            f"dirty={len(self._dirty)} touched={len(self._touched)}>"
        )
