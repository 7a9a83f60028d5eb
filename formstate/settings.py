"""Form-state project settings loader.

Reads project-specific configuration from .form-state.yaml in the project
root. This lets a team pick how ``clear`` resets tracking and which name
suffix marks a multi-choice checkbox field.

Example .form-state.yaml:
    formstate:
      clear_scope: all      # "all" resets every field's flags, "field" only the cleared one
      array_suffix: "[]"    # checkbox names ending with this hold a list of choices
      log_changes: false    # debug-log every field write
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from formstate.exceptions import SettingsValidationError

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".form-state.yaml"

CLEAR_SCOPE_ALL = "all"
CLEAR_SCOPE_FIELD = "field"
CLEAR_SCOPES = (CLEAR_SCOPE_ALL, CLEAR_SCOPE_FIELD)


@dataclass(frozen=True)
class FormStateSettings:
    """Form-state configuration settings."""

    # How clear(name) resets dirty/touched tracking
    clear_scope: str = CLEAR_SCOPE_ALL

    # Checkbox field names ending with this suffix store a list of choices
    array_suffix: str = "[]"

    # Debug-log every set_value call
    log_changes: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self, config_path: str | None = None) -> None:
        """Raise SettingsValidationError if any value is out of range."""
        if self.clear_scope not in CLEAR_SCOPES:
            raise SettingsValidationError(
                f"clear_scope must be one of {', '.join(CLEAR_SCOPES)}, got {self.clear_scope!r}",
                config_path=config_path,
                key="clear_scope",
            )
        if not isinstance(self.array_suffix, str) or not self.array_suffix:
            raise SettingsValidationError(
                "array_suffix must be a non-empty string",
                config_path=config_path,
                key="array_suffix",
            )
        if not isinstance(self.log_changes, bool):
            raise SettingsValidationError(
                f"log_changes must be true or false, got {self.log_changes!r}",
                config_path=config_path,
                key="log_changes",
            )

    @property
    def clears_all(self) -> bool:
        return self.clear_scope == CLEAR_SCOPE_ALL

    @classmethod
    def load(cls, project_root: Path | None = None) -> "FormStateSettings":
        """Load settings from .form-state.yaml in project root.

        Args:
            project_root: Project root directory. Defaults to cwd.

        Returns:
            FormStateSettings with values from config file or defaults.

        Raises:
            SettingsValidationError: If the file holds invalid values.
        """
        root = project_root or Path.cwd()
        config_path = root / SETTINGS_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            # If config file is unreadable, use defaults
            logger.warning("Ignoring unreadable settings file %s: %s", config_path, exc)
            return cls()

        section = config.get("formstate", {}) if isinstance(config, dict) else {}
        if not isinstance(section, dict):
            logger.warning("Ignoring malformed 'formstate' section in %s", config_path)
            return cls()

        try:
            return cls(
                clear_scope=section.get("clear_scope", CLEAR_SCOPE_ALL),
                array_suffix=section.get("array_suffix", "[]"),
                log_changes=section.get("log_changes", False),
            )
        except SettingsValidationError as exc:
            # Re-raise with the offending file attached
            raise SettingsValidationError(
                exc.message,
                config_path=str(config_path),
                key=exc.details.get("config_key"),
            ) from exc


# Global settings instance (loaded on first access)
_settings: FormStateSettings | None = None


def get_settings(reload: bool = False) -> FormStateSettings:
    """Get the global form-state settings.

    Args:
        reload: Force reload from config file.

    Returns:
        FormStateSettings instance.
    """
    global _settings
    if _settings is None or reload:
        _settings = FormStateSettings.load()
    return _settings
