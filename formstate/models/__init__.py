"""UI-agnostic state for forms.

The state layer holds field values, the initial snapshot they are compared
against, and the dirty and touched indexes. It has no widget toolkit
dependency.
"""

from formstate.models.field_value import ValueKind
from formstate.models.form_state import FormState, StateListener

__all__ = [
    "FormState",
    "StateListener",
    "ValueKind",
]
