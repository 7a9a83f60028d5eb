"""Logging for form state.

Records carry the form they belong to, so several forms living in one host
can be told apart in any handler the host configures. The package never
configures handlers itself.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

__all__ = [
    "FormLogger",
    "get_form_logger",
]


class FormLogger:
    """Logger with form-specific context.

    Every record gets the context fields (``form`` and anything added with
    :meth:`set_context`) as attributes.

    Example:
        logger = get_form_logger(__name__, form="signup")
        logger.field_changed("email", "text:'a@example.com'", dirty=True, touched=True)
    """

    def __init__(self, name: str, form: str = ""):
        """Initialize form logger.

        Args:
            name: Logger name (typically module path)
            form: Form name added to every record, if any
        """
        self._logger = logging.getLogger(name)
        self._context: Dict[str, Any] = {}
        if form:
            self._context["form"] = form

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def set_context(self, **kwargs: Any) -> None:
        """Set context fields that will be included in all log records."""
        self._context.update(kwargs)

    def clear_context(self) -> None:
        self._context.clear()

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        extra = dict(kwargs.pop("extra", None) or {})
        extra.update(self._context)
        self._logger.log(level, msg, *args, extra=extra, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an error with the current exception's traceback."""
        kwargs["exc_info"] = True
        self._log(logging.ERROR, msg, *args, **kwargs)

    def field_changed(self, field: str, description: str, dirty: bool, touched: bool) -> None:
        """Log a field write at debug level.

        Args:
            field: Field name
            description: Short description of the new value
            dirty: Whether the field is dirty after the write
            touched: Whether the field is touched after the write
        """
        self.debug(
            "Set %s to %s (dirty=%s, touched=%s)",
            field,
            description,
            dirty,
            touched,
            extra={"field": field, "dirty": dirty, "touched": touched},
        )

    def listener_failed(self, exc: Exception) -> None:
        """Log a state change listener failure with its traceback."""
        self._log(
            logging.ERROR,
            "State change listener failed: %s",
            exc,
            exc_info=exc,
            extra={"exception_type": type(exc).__name__},
        )


def get_form_logger(name: str, form: str = "") -> FormLogger:
    """Get a form logger instance.

    Args:
        name: Logger name (typically module path)
        form: Form name added to every record, if any

    Returns:
        FormLogger instance
    """
    return FormLogger(name, form)
