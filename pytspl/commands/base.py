"""
Shared command abstraction.

Every TSPL command kind is an immutable value: a frozen dataclass whose
fields start out as None and are populated by ``with_*`` setters, each of
which returns a new command. ``render()`` validates the configured fields
and produces the command's wire bytes, or raises ValidationError.

The Label sequencer depends only on this interface.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from enum import Enum
from typing import Any, ClassVar, Final, Iterable, Optional, Self

from pytspl.exceptions import ValidationError
from pytspl.formatting import (
    DEFAULT_TEXT_ENCODING,
    FLOAT_PRECISION,
    ROTATION_ANGLES,
    encode_command,
    format_allowed,
)

__all__ = ["Command"]

logger: Final = logging.getLogger(__name__)


def _token(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class Command(ABC):
    """
    Base class for all TSPL command encoders.

    Subclasses are ``@dataclass(frozen=True, slots=True)`` and declare:
        NAME: command token written on the wire.
        REQUIRED: field names that must be set before rendering.
        NON_EMPTY: subset of string fields where "" counts as unset.

    Subclasses implement ``_parameters()`` and, for commands carrying raw
    data, ``_payload()``. Extra range/enumeration checks go in ``_check()``.
    """

    __slots__ = ()

    NAME: ClassVar[str]
    REQUIRED: ClassVar[tuple[str, ...]] = ()
    NON_EMPTY: ClassVar[tuple[str, ...]] = ()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, encoding: str = DEFAULT_TEXT_ENCODING) -> bytes:
        """
        Validate and encode this command.

        Args:
            encoding: Codec for string fields (font names, content, ...).

        Returns:
            Complete command bytes including the line terminator.

        Raises:
            ValidationError: If a required field is unset or a value is out
                of range. No partial output is produced.
        """
        try:
            self.validate()
            data = encode_command(
                self.NAME, self._parameters(encoding), self._payload()
            )
        except ValidationError as e:
            if e.command is None:
                e.command = self.NAME
            logger.debug("%s rejected: %s", self.NAME, e.message)
            raise

        logger.debug("Rendered %s (%d bytes)", self.NAME, len(data))
        return data

    def validate(self) -> None:
        """
        Check required fields, then command-specific constraints.

        Raises:
            ValidationError: Naming every missing field, or the first
                violated constraint.
        """
        missing = [name for name in self.REQUIRED if self._is_unset(name)]
        if missing:
            fields = ", ".join(missing)
            raise ValidationError(
                f"missing required field(s): {fields}",
                command=self.NAME,
                field=fields,
            )
        self._check()

    @abstractmethod
    def _parameters(self, encoding: str) -> list[bytes]:
        """Return formatted parameter tokens in wire order."""

    def _payload(self) -> Optional[bytes]:
        return None

    def _check(self) -> None:
        pass

    # -------------------------------------------------------------------------
    # Helpers for subclasses
    # -------------------------------------------------------------------------

    def _with(self, **changes: Any) -> Self:
        return replace(self, **changes)

    def _is_unset(self, name: str) -> bool:
        value = getattr(self, name)
        if value is None:
            return True
        return name in self.NON_EMPTY and isinstance(value, str) and not value

    def _check_range(
        self, name: str, low: float, high: Optional[float] = None
    ) -> None:
        """Inclusive range check, skipped when the field is unset."""
        value = getattr(self, name)
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(
                f"{name} must be a number, got {type(value).__name__}",
                command=self.NAME,
                field=name,
            )
        if high is None:
            if value < low:
                raise ValidationError(
                    f"{name} parameter must be at least {low}, got {value}",
                    command=self.NAME,
                    field=name,
                )
        elif not low <= value <= high:
            raise ValidationError(
                f"{name} parameter must be between {low} and {high}, got {value}",
                command=self.NAME,
                field=name,
            )

    def _check_choice(self, name: str, allowed: Iterable[Any]) -> None:
        """Membership check, skipped when the field is unset."""
        value = getattr(self, name)
        if value is None:
            return
        allowed = tuple(allowed)
        if value not in allowed:
            raise ValidationError(
                f"{name} must be one of {format_allowed(_token(a) for a in allowed)}, "
                f"got {value}",
                command=self.NAME,
                field=name,
                context={"allowed": allowed},
            )

    def _check_rotation(self, name: str = "rotation") -> None:
        self._check_choice(name, ROTATION_ANGLES)

    def _check_positive(self, name: str) -> None:
        """Strictly greater than zero, skipped when the field is unset."""
        self._check_range(name, 0)
        value = getattr(self, name)
        # Checked on the value as written, after fixed-point rounding
        if value is not None and round(value, FLOAT_PRECISION) <= 0:
            raise ValidationError(
                f"{name} parameter must be greater than 0 "
                f"(at {FLOAT_PRECISION} decimals), got {value}",
                command=self.NAME,
                field=name,
            )
