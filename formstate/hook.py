"""The ``use_form_state`` entry point.

Builds a FormState and a BindingFactory over it and returns the pair the host
UI works with: the live values mapping and the methods object.

Example:
    >>> from formstate.events import ChangeEvent
    >>> values, form = use_form_state({"name": "Alice"})
    >>> field = form.text("name")
    >>> field.on_change(ChangeEvent.of_value("Bob"))
    >>> values["name"], "name" in form.dirty
    ('Bob', True)
"""

from __future__ import annotations

from typing import Any, Mapping

from formstate.bindings import AdapterKind, BindingFactory, ChangeCallback, EventBinding, ValueBinding
from formstate.models.form_state import FormState, StateListener
from formstate.settings import FormStateSettings


class FormMethods:
    """Adapter factories and direct access to the store.

    Input methods: ``text``, ``email``, ``radio``, ``checkbox``, ``select``
    (an alias of ``text``) and ``raw``. Direct access: ``set_form_state``,
    ``clear``, ``set_initial_state``, ``dirty`` and ``touched``.
    """

    def __init__(self, store: FormState) -> None:
        self.state = store
        self.bindings = BindingFactory(store)

        # Input types methods
        self.text = self.bindings.text
        self.email = self.bindings.email
        self.radio = self.bindings.radio
        self.checkbox = self.bindings.checkbox
        self.select = self.bindings.text
        self.raw = self.bindings.raw

        # Direct access methods
        self.set_form_state = store.set_value
        self.clear = store.clear
        self.set_initial_state = store.set_initial_state
        self.subscribe = store.subscribe

    @property
    def dirty(self) -> set[str]:
        return self.state.dirty

    @property
    def touched(self) -> set[str]:
        return self.state.touched

    def bind(
        self,
        kind: AdapterKind | str,
        name: str,
        choice_value: Any = None,
        on_change: ChangeCallback | None = None,
    ) -> EventBinding | ValueBinding:
        """Create a binding by adapter kind name (see BindingFactory.bind)."""
        return self.bindings.bind(kind, name, choice_value, on_change)


def use_form_state(
    initial_state: Mapping[str, Any] | None = None,
    *,
    name: str = "",
    settings: FormStateSettings | None = None,
    on_state_change: StateListener | None = None,
) -> tuple[Mapping[str, Any], FormMethods]:
    """Create form state for a set of fields.

    Args:
        initial_state: Initial field values, also the baseline for dirtiness
        name: Optional form name used in log records
        settings: Settings to use instead of the project settings file
        on_state_change: Called synchronously after every mutation

    Returns:
        The live read-only values mapping and the FormMethods object
    """
    store = FormState(initial_state, name=name, settings=settings, on_state_change=on_state_change)
    return store.values, FormMethods(store)
