"""Custom exception classes for form-state.

The store itself is permissive and never raises while reading or writing
field values. These exceptions cover the edges around it: configuration,
adapter lookup and malformed change events handed in by the host UI.
"""

from typing import Any, Dict, Optional


class FormStateError(Exception):
    """Base exception for all form-state errors."""

    error_code: str = "ERR000"  # Override in subclasses

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, error_code: Optional[str] = None):
        """
        Initialize form-state exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context
            error_code: Optional error code override
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if error_code:
            self.error_code = error_code

    def __str__(self) -> str:
        """Return string representation with error code and details."""
        parts = [f"[{self.error_code}] {self.message}"]
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"({detail_str})")
        return " ".join(parts)


class SettingsValidationError(FormStateError):
    """Raised when form-state settings contain invalid values.

    Examples:
        - Unknown clear scope
        - Empty multi-choice suffix
    """

    error_code = "CFG001"

    def __init__(self, message: str, config_path: Optional[str] = None, key: Optional[str] = None):
        """
        Initialize settings validation error.

        Args:
            message: Description of validation failure
            config_path: Path to the settings file that failed validation
            key: Specific settings key that caused the error
        """
        details = {}
        if config_path:
            details['config_path'] = config_path
        if key:
            details['config_key'] = key
        super().__init__(message, details)


class UnknownAdapterError(FormStateError):
    """Raised when a binding is requested for an adapter kind that does not exist."""

    error_code = "BND001"

    def __init__(self, kind: str, field_name: Optional[str] = None):
        details: Dict[str, Any] = {'kind': kind}
        if field_name:
            details['field'] = field_name
        super().__init__(f"Unknown adapter kind '{kind}'", details)
        self.kind = kind


class InvalidEventError(FormStateError):
    """Raised when a change event lacks the target attribute a handler reads.

    Examples:
        - A plain value passed to a text binding instead of an event
        - An event whose target has no ``checked`` attribute for a checkbox
    """

    error_code = "EVT001"

    def __init__(self, message: str, field_name: Optional[str] = None, attribute: Optional[str] = None):
        details = {}
        if field_name:
            details['field'] = field_name
        if attribute:
            details['attribute'] = attribute
        super().__init__(message, details)
