"""
Value formatting primitives for TSPL.

Converts integers, fixed-point multipliers, dimensions and string fields into
the exact tokens the printer firmware parses, and assembles a command from its
name, parameter tokens and optional raw payload.

Wire format:
    NAME<space>P1,P2,...,Pn[,<raw payload>]<CR><LF>

All constants here are protocol constants. They are not configurable.

Reference: TSC TSPL/TSPL2 Programming Manual, "Command syntax"
"""

import math
from typing import Final, Iterable, Optional, Sequence

from pytspl.exceptions import ValidationError

__all__ = [
    "EMPTY_SPACE",
    "VALUE_SEPARATOR",
    "DOUBLE_QUOTE",
    "LINE_ENDING",
    "UNIT_MM",
    "ROTATION_ANGLES",
    "DEFAULT_TEXT_ENCODING",
    "FLOAT_PRECISION",
    "format_int",
    "format_float_with_units",
    "encode_text",
    "quote",
    "format_allowed",
    "encode_command",
]

# =============================================================================
# WIRE CONSTANTS
# =============================================================================

EMPTY_SPACE: Final[str] = " "
VALUE_SEPARATOR: Final[str] = ","
DOUBLE_QUOTE: Final[str] = '"'
LINE_ENDING: Final[bytes] = b"\r\n"
UNIT_MM: Final[str] = " mm"

ROTATION_ANGLES: Final[tuple[int, ...]] = (0, 90, 180, 270)

DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"

# Decimal places kept for multipliers, speeds and label dimensions
FLOAT_PRECISION: Final[int] = 2


# =============================================================================
# NUMERIC TOKENS
# =============================================================================


def format_int(value: int, *, field: Optional[str] = None) -> bytes:
    """
    Format an integer as decimal ASCII.

    No leading zeros, sign only when negative. IntEnum members render as
    their backing value, never their symbolic name.

    Args:
        value: Integer (or IntEnum member).
        field: Field name reported on failure.

    Returns:
        ASCII bytes, e.g. b"-12".

    Raises:
        ValidationError: If value is not an integer (bools are rejected).

    Example:
        >>> format_int(100)
        b'100'
        >>> format_int(BitmapMode.XOR)
        b'2'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{field or 'value'} must be an integer, got {type(value).__name__}",
            field=field,
        )
    return str(int(value)).encode("ascii")


def format_float_with_units(
    value: float, metric: bool = False, *, field: Optional[str] = None
) -> bytes:
    """
    Format a fixed-point number, optionally with the metric unit suffix.

    The value is rounded to FLOAT_PRECISION decimals, then trailing zeros
    and a dangling decimal point are stripped, which is the form the
    firmware numeric parser accepts for scale factors and dimensions.

    Args:
        value: Number to format.
        metric: Append " mm" (SIZE/GAP in millimetres instead of inches).
        field: Field name reported on failure.

    Returns:
        ASCII bytes.

    Raises:
        ValidationError: If value is not a finite number.

    Example:
        >>> format_float_with_units(1.0)
        b'1'
        >>> format_float_with_units(2.5, metric=True)
        b'2.5 mm'
        >>> format_float_with_units(1.234)
        b'1.23'
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{field or 'value'} must be a number, got {type(value).__name__}",
            field=field,
        )
    if not math.isfinite(value):
        raise ValidationError(
            f"{field or 'value'} must be finite, got {value}", field=field
        )

    text = f"{value:.{FLOAT_PRECISION}f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    if metric:
        text += UNIT_MM
    return text.encode("ascii")


# =============================================================================
# STRING TOKENS
# =============================================================================


def encode_text(
    value: str,
    encoding: str = DEFAULT_TEXT_ENCODING,
    *,
    field: Optional[str] = None,
) -> bytes:
    """
    Encode a string field for the wire.

    Raises:
        ValidationError: If the value is not a string, cannot be represented
            in the encoding, or the encoding is unknown.
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"{field or 'text'} must be a string, got {type(value).__name__}",
            field=field,
        )
    try:
        return value.encode(encoding)
    except (UnicodeEncodeError, LookupError) as e:
        raise ValidationError(
            f"{field or 'text'} cannot be encoded as {encoding}: {e}",
            field=field,
        ) from e


def quote(
    value: str,
    encoding: str = DEFAULT_TEXT_ENCODING,
    *,
    field: Optional[str] = None,
) -> bytes:
    """
    Wrap a string field in double quotes.

    The text is inserted verbatim. Embedded double quotes are NOT escaped:
    the firmware has no escape syntax for them, so the bytes are passed
    through as-is.

    Example:
        >>> quote("IMAGE1")
        b'"IMAGE1"'
    """
    q = DOUBLE_QUOTE.encode("ascii")
    return q + encode_text(value, encoding, field=field) + q


def format_allowed(values: Iterable[object]) -> str:
    """
    Render an allowed-value set for error messages: "[0,90,180,270]".

    An empty string member is shown as "" so it stays visible.
    """
    tokens = (DOUBLE_QUOTE * 2 if v == "" else str(v) for v in values)
    return "[" + VALUE_SEPARATOR.join(tokens) + "]"


# =============================================================================
# COMMAND ASSEMBLY
# =============================================================================


def encode_command(
    name: str,
    params: Sequence[bytes] = (),
    payload: Optional[bytes] = None,
) -> bytes:
    """
    Assemble one complete command.

    Layout:
        NAME                         (no parameters)
        NAME P1,P2,...,Pn            (parameters)
        NAME P1,...,Pn,<payload>     (raw payload, no length prefix, unquoted)
    followed by LINE_ENDING in every case.

    Args:
        name: Command token, e.g. "BITMAP".
        params: Already formatted parameter tokens.
        payload: Raw bytes appended after a separator.

    Returns:
        Command bytes.

    Example:
        >>> encode_command("BITMAP", [b"0", b"0", b"100", b"50", b"0"], b"\\xff")
        b'BITMAP 0,0,100,50,0,\\xff\\r\\n'
    """
    buf = bytearray(name.encode("ascii"))
    if params:
        buf += EMPTY_SPACE.encode("ascii")
        buf += VALUE_SEPARATOR.encode("ascii").join(params)
    if payload is not None:
        buf += VALUE_SEPARATOR.encode("ascii")
        buf += payload
    buf += LINE_ENDING
    return bytes(buf)
