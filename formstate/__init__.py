"""Field-state controller for interactive forms.

Tracks field values, which fields were touched and which are dirty, and
builds bindings that adapt one value store to text, radio, checkbox and raw
input controls.

Usage:
    from formstate import ChangeEvent, use_form_state

    values, form = use_form_state({"email": "a@example.com"})
    form.email("email").on_change(ChangeEvent.of_value("b@example.com"))
"""

from formstate.bindings import (
    AdapterKind,
    BindingFactory,
    CheckboxBinding,
    RadioBinding,
    RawBinding,
    TextBinding,
)
from formstate.events import ChangeEvent, EventTarget
from formstate.exceptions import (
    FormStateError,
    InvalidEventError,
    SettingsValidationError,
    UnknownAdapterError,
)
from formstate.hook import FormMethods, use_form_state
from formstate.models import FormState, ValueKind
from formstate.settings import FormStateSettings, get_settings

__version__ = "1.0.0"

__all__ = [
    "AdapterKind",
    "BindingFactory",
    "ChangeEvent",
    "CheckboxBinding",
    "EventTarget",
    "FormMethods",
    "FormState",
    "FormStateError",
    "FormStateSettings",
    "InvalidEventError",
    "RadioBinding",
    "RawBinding",
    "SettingsValidationError",
    "TextBinding",
    "UnknownAdapterError",
    "ValueKind",
    "get_settings",
    "use_form_state",
]
