"""Shared fixtures for form-state tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Generator

import pytest

import formstate.settings
from formstate.models import FormState
from formstate.settings import FormStateSettings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> FormStateSettings:
    """Pin the global settings so a settings file in cwd never leaks into tests."""
    settings = FormStateSettings()
    monkeypatch.setattr(formstate.settings, "_settings", settings)
    return settings


@pytest.fixture
def profile_state() -> FormState:
    """A store for a small profile form."""
    return FormState(
        {
            "name": "Alice",
            "email": "alice@example.com",
            "plan": "free",
            "newsletter": True,
            "address": {"city": "Lyon", "zip": "69001"},
            "roles[]": ["viewer"],
        }
    )


@pytest.fixture
def recorder() -> list[Any]:
    """Collects whatever a callback is called with."""
    return []


@pytest.fixture
def settings_file(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a .form-state.yaml file in a temporary project root."""
    path = tmp_path / ".form-state.yaml"
    path.write_text(
        """
formstate:
  clear_scope: field
  array_suffix: "[]"
  log_changes: true
""",
        encoding="utf-8",
    )
    yield path
