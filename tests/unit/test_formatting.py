"""
Unit tests for pytspl.formatting.

Covers numeric and string token formatting and command assembly.
"""

import math
from enum import IntEnum

import pytest

from pytspl.exceptions import ValidationError
from pytspl.formatting import (
    DOUBLE_QUOTE,
    EMPTY_SPACE,
    LINE_ENDING,
    ROTATION_ANGLES,
    UNIT_MM,
    VALUE_SEPARATOR,
    encode_command,
    encode_text,
    format_allowed,
    format_float_with_units,
    format_int,
    quote,
)


class _Mode(IntEnum):
    A = 0
    B = 2


class TestConstants:
    """Wire constants must match firmware byte-for-byte."""

    def test_separators(self) -> None:
        assert EMPTY_SPACE == " "
        assert VALUE_SEPARATOR == ","
        assert DOUBLE_QUOTE == '"'
        assert LINE_ENDING == b"\r\n"
        assert UNIT_MM == " mm"

    def test_rotation_angles(self) -> None:
        assert ROTATION_ANGLES == (0, 90, 180, 270)


class TestFormatInt:
    @pytest.mark.parametrize(
        "value, expected",
        [(0, b"0"), (100, b"100"), (-12, b"-12"), (_Mode.B, b"2")],
    )
    def test_valid(self, value: int, expected: bytes) -> None:
        assert format_int(value) == expected

    @pytest.mark.parametrize("value", [True, 1.5, "1", None])
    def test_rejects_non_integers(self, value: object) -> None:
        with pytest.raises(ValidationError, match="x must be an integer") as exc_info:
            format_int(value, field="x")  # type: ignore[arg-type]
        assert exc_info.value.field == "x"


class TestFormatFloatWithUnits:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, b"1"),
            (1.0, b"1"),
            (10, b"10"),
            (2.5, b"2.5"),
            (1.234, b"1.23"),
            (0.5, b"0.5"),
            (-0.001, b"0"),
            (100.10, b"100.1"),
        ],
    )
    def test_trailing_zeros_stripped(self, value: float, expected: bytes) -> None:
        assert format_float_with_units(value) == expected

    def test_metric_suffix(self) -> None:
        assert format_float_with_units(50, metric=True) == b"50 mm"
        assert format_float_with_units(2.25, True) == b"2.25 mm"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite(self, value: float) -> None:
        with pytest.raises(ValidationError, match="finite"):
            format_float_with_units(value, field="width")

    @pytest.mark.parametrize("value", [False, "1.0", None])
    def test_rejects_non_numbers(self, value: object) -> None:
        with pytest.raises(ValidationError, match="must be a number"):
            format_float_with_units(value)  # type: ignore[arg-type]


class TestStrings:
    def test_encode_text_default_utf8(self) -> None:
        assert encode_text("Ünï") == "Ünï".encode("utf-8")

    def test_encode_text_custom_codec(self) -> None:
        assert encode_text("é", "cp1252") == b"\xe9"

    def test_encode_text_unencodable(self) -> None:
        with pytest.raises(ValidationError, match="cannot be encoded as ascii") as exc_info:
            encode_text("é", "ascii", field="content")
        assert exc_info.value.field == "content"

    def test_encode_text_unknown_codec(self) -> None:
        with pytest.raises(ValidationError):
            encode_text("abc", "no-such-codec")

    def test_quote(self) -> None:
        assert quote("IMAGE1") == b'"IMAGE1"'
        assert quote("") == b'""'

    def test_quote_does_not_escape_embedded_quotes(self) -> None:
        # Firmware has no escape syntax; bytes pass through unchanged.
        assert quote('say "hi"') == b'"say "hi""'

    def test_format_allowed(self) -> None:
        assert format_allowed(ROTATION_ANGLES) == "[0,90,180,270]"
        assert format_allowed([]) == "[]"


class TestEncodeCommand:
    def test_name_only(self) -> None:
        assert encode_command("CLS") == b"CLS\r\n"

    def test_parameters(self) -> None:
        assert encode_command("REFERENCE", [b"10", b"20"]) == b"REFERENCE 10,20\r\n"

    def test_payload_after_separator(self) -> None:
        data = encode_command("BITMAP", [b"0", b"0", b"100", b"50", b"0"], b"\xff")
        assert data == b"BITMAP 0,0,100,50,0,\xff\r\n"

    def test_empty_payload_still_separated(self) -> None:
        assert encode_command("X", [b"1"], b"") == b"X 1,\r\n"

    def test_payload_bytes_are_raw(self) -> None:
        payload = b'\r\n",\x00'
        data = encode_command("DOWNLOAD", [b'"A"', b"5"], payload)
        assert data == b'DOWNLOAD "A",5,' + payload + b"\r\n"


def test_format_allowed_shows_empty_member() -> None:
    assert format_allowed(["", "F", "E"]) == '["",F,E]'


@pytest.mark.parametrize("value", [5, b"abc", None])
def test_encode_text_rejects_non_strings(value: object) -> None:
    with pytest.raises(ValidationError, match="name must be a string") as exc_info:
        encode_text(value, field="name")  # type: ignore[arg-type]
    assert exc_info.value.field == "name"
