"""Per-field bindings between input controls and a FormState.

A binding exposes a live read accessor (``value`` or ``checked``) and an
``on_change`` handler. Bindings hold no state of their own: every read goes
to the store and every write goes through ``FormState.set_value``, so asking
for the same binding twice is safe.

Two handler shapes exist:

- event bindings (text, email, select, radio, checkbox) take a change event
  and read ``event.target.value`` or ``event.target.checked``
- value bindings (raw) take the new value directly

An optional external ``on_change`` callback receives the same argument as the
handler, after the store has been updated.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Protocol

from formstate.comparison import contains, index_of, is_structured, is_truthy, strict_equals
from formstate.events import event_checked, event_value
from formstate.exceptions import UnknownAdapterError
from formstate.models.field_value import ValueKind
from formstate.models.form_state import FormState

ChangeCallback = Callable[[Any], Any]


class AdapterKind(str, Enum):
    """Input semantics a binding adapts the store to."""

    TEXT = "text"
    EMAIL = "email"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    RAW = "raw"


class EventBinding(Protocol):
    """A binding whose handler consumes a change event."""

    name: str

    def on_change(self, event: Any) -> None: ...


class ValueBinding(Protocol):
    """A binding whose handler consumes the new value itself."""

    name: str

    def on_change(self, value: Any) -> None: ...


class _Binding:
    kind: ValueKind = ValueKind.RAW

    def __init__(self, store: FormState, name: str, on_change: ChangeCallback | None = None) -> None:
        self._store = store
        self._external_on_change = on_change
        self.name = name

    def _current(self) -> Any:
        return self._store.get(self.name)

    def _changed(self, argument: Any) -> None:
        if self._external_on_change is not None:
            self._external_on_change(argument)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


class TextBinding(_Binding):
    """Free text input. Also used for email and select controls."""

    kind = ValueKind.TEXT

    def __init__(
        self,
        store: FormState,
        name: str,
        input_type: str = AdapterKind.TEXT.value,
        on_change: ChangeCallback | None = None,
    ) -> None:
        super().__init__(store, name, on_change)
        self.type = input_type

    @property
    def value(self) -> Any:
        current = self._current()
        return current if is_truthy(current) else self.kind.empty_value

    def on_change(self, event: Any) -> None:
        self._store.set_value(self.name, event_value(event, self.name))
        self._changed(event)


class RadioBinding(_Binding):
    """One option of a single-choice group.

    The handler stores ``event.target.value``, not the binding's own choice
    value; the control must report the choice it represents.
    """

    kind = ValueKind.RAW

    def __init__(self, store: FormState, name: str, value: Any, on_change: ChangeCallback | None = None) -> None:
        super().__init__(store, name, on_change)
        self.value = value

    @property
    def checked(self) -> bool:
        return strict_equals(self._current(), self.value)

    def on_change(self, event: Any) -> None:
        self._store.set_value(self.name, event_value(event, self.name))
        self._changed(event)


class CheckboxBinding(_Binding):
    """Scalar or multi-choice checkbox.

    A field whose name ends with the array suffix (``"[]"`` by default) holds
    a list of checked choices; any other field holds a single flag. The branch
    is fixed when the binding is created.
    """

    def __init__(self, store: FormState, name: str, value: Any = None, on_change: ChangeCallback | None = None) -> None:
        super().__init__(store, name, on_change)
        self.value = value
        self.is_array = name.endswith(store.settings.array_suffix)
        self.kind = ValueKind.CHOICES if self.is_array else ValueKind.FLAG

    def _choices(self) -> list[Any]:
        current = self._current()
        if is_structured(current):
            return list(current)
        return []

    @property
    def checked(self) -> Any:
        if self.is_array:
            return contains(self._choices(), self.value)
        current = self._current()
        return current if is_truthy(current) else self.kind.empty_value

    def on_change(self, event: Any) -> None:
        if self.is_array:
            choices = self._choices()
            if event_checked(event, self.name):
                choices.append(self.value)
            else:
                # Only the first occurrence goes
                index = index_of(choices, self.value)
                if index > -1:
                    del choices[index]
            self._store.set_value(self.name, choices)
        else:
            self._store.set_value(self.name, event_checked(event, self.name))
        self._changed(event)


class RawBinding(_Binding):
    """Passthrough binding for custom components that report plain values."""

    kind = ValueKind.RAW

    @property
    def value(self) -> Any:
        return self._current()

    def on_change(self, value: Any) -> None:
        self._store.set_value(self.name, value)
        self._changed(value)


class BindingFactory:
    """Creates bindings over one FormState."""

    def __init__(self, store: FormState) -> None:
        self.store = store

    def text(self, name: str, on_change: ChangeCallback | None = None) -> TextBinding:
        return TextBinding(self.store, name, AdapterKind.TEXT.value, on_change)

    def email(self, name: str, on_change: ChangeCallback | None = None) -> TextBinding:
        return TextBinding(self.store, name, AdapterKind.EMAIL.value, on_change)

    # Same semantics as text, including for multi-select controls
    select = text

    def radio(self, name: str, value: Any, on_change: ChangeCallback | None = None) -> RadioBinding:
        return RadioBinding(self.store, name, value, on_change)

    def checkbox(self, name: str, value: Any = None, on_change: ChangeCallback | None = None) -> CheckboxBinding:
        return CheckboxBinding(self.store, name, value, on_change)

    def raw(self, name: str, on_change: ChangeCallback | None = None) -> RawBinding:
        return RawBinding(self.store, name, on_change)

    def bind(
        self,
        kind: AdapterKind | str,
        name: str,
        choice_value: Any = None,
        on_change: ChangeCallback | None = None,
    ) -> EventBinding | ValueBinding:
        """Create a binding by adapter kind name.

        Raises:
            UnknownAdapterError: If ``kind`` is not an adapter kind
        """
        try:
            adapter = AdapterKind(kind)
        except ValueError:
            raise UnknownAdapterError(str(kind), field_name=name) from None

        if adapter is AdapterKind.RADIO:
            return self.radio(name, choice_value, on_change)
        if adapter is AdapterKind.CHECKBOX:
            return self.checkbox(name, choice_value, on_change)
        if adapter is AdapterKind.RAW:
            return self.raw(name, on_change)
        if adapter is AdapterKind.EMAIL:
            return self.email(name, on_change)
        return self.text(name, on_change)
