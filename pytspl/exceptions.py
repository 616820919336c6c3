"""
Exceptions raised by the TSPL encoder.

Hierarchy:
    TSPLError (base)
    ├── ValidationError   command validation failed (render / formatting)
    └── ConfigError       invalid LabelConfig values

Example:
    >>> from pytspl.exceptions import ValidationError
    >>> try:
    ...     payload = label.render()
    ... except ValidationError as e:
    ...     logger.error(f"Label not ready: {e}")
    ...     print(f"Command: {e.command}, field: {e.field}")
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "TSPLError",
    "ValidationError",
    "ConfigError",
]


class TSPLError(Exception):
    """
    Base exception for every error raised by pytspl.

    Attributes:
        message: Human-readable description.
        command: TSPL command name involved (e.g. "BLOCK"), if any.
        context: Extra debugging context.
    """

    def __init__(
        self,
        message: str,
        *,
        command: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.command = command
        self.context: Dict[str, Any] = dict(context) if context else {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.command:
            return f"{self.command}: {self.message}"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, command={self.command!r})"
        )


class ValidationError(TSPLError):
    """
    Command validation failed.

    Raised when a required field is unset or a value violates a documented
    range or enumeration constraint.

    Attributes:
        field: Offending field name(s), comma separated when several
            required fields are missing.
    """

    def __init__(
        self,
        message: str,
        *,
        command: Optional[str] = None,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, command=command, context=context)
        self.field = field


class ConfigError(TSPLError):
    """Invalid configuration value."""
