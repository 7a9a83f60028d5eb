"""Tests for change events and exception formatting."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from formstate.events import ChangeEvent, EventTarget, event_checked, event_value
from formstate.exceptions import FormStateError, InvalidEventError, UnknownAdapterError


class TestChangeEvent:
    def test_of_value(self) -> None:
        event = ChangeEvent.of_value("Bob", name="name")

        assert event.target == EventTarget(value="Bob", checked=False, name="name")

    def test_of_checked(self) -> None:
        event = ChangeEvent.of_checked(True, value="x")

        assert event.target.checked is True
        assert event.target.value == "x"

    def test_default_event(self) -> None:
        assert event_value(ChangeEvent()) == ""
        assert event_checked(ChangeEvent()) is False

    def test_checked_coerced_to_bool(self) -> None:
        event = SimpleNamespace(target=SimpleNamespace(checked=1))

        assert event_checked(event) is True

    def test_missing_target(self) -> None:
        with pytest.raises(InvalidEventError) as exc_info:
            event_value(object(), "name")

        assert str(exc_info.value) == "[EVT001] Change event has no target.value (field=name, attribute=value)"


class TestExceptions:
    def test_base_without_details(self) -> None:
        assert str(FormStateError("boom")) == "[ERR000] boom"

    def test_error_code_override(self) -> None:
        error = FormStateError("boom", details={"a": 1}, error_code="X1")

        assert str(error) == "[X1] boom (a=1)"

    def test_hierarchy(self) -> None:
        assert issubclass(UnknownAdapterError, FormStateError)
        assert issubclass(InvalidEventError, FormStateError)
