"""
Text commands: TEXT (single line) and BLOCK (wrapped paragraph in a box).

Both take a font name, a rotation from ROTATION_ANGLES and horizontal and
vertical multipliers in [1, 10]. Content is quoted only when the caller asks
for it: unquoted content lets the firmware evaluate variables and
expressions.

Reference: TSPL/TSPL2 Programming Manual, "TEXT", "BLOCK"
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Final, Optional

from pytspl.commands.base import Command
from pytspl.formatting import (
    encode_text,
    format_float_with_units,
    format_int,
    quote,
)

__all__ = [
    "MULTIPLIER_MIN",
    "MULTIPLIER_MAX",
    "Alignment",
    "BlockFit",
    "Block",
    "Text",
]

MULTIPLIER_MIN: Final[int] = 1
MULTIPLIER_MAX: Final[int] = 10


class Alignment(IntEnum):
    """Horizontal justification, shared by TEXT, BLOCK and BARCODE."""

    DEFAULT = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3


class BlockFit(IntEnum):
    """Whether BLOCK shrinks the font to fit the box."""

    NO_SHRINK = 0
    SHRINK = 1


def _content_token(content: str, quoted: bool, encoding: str) -> bytes:
    if quoted:
        return quote(content, encoding, field="content")
    return encode_text(content, encoding, field="content")


# =============================================================================
# BLOCK
# =============================================================================


@dataclass(frozen=True, slots=True)
class Block(Command):
    """
    Print a paragraph of text wrapped inside a box.

    Command:
        BLOCK x,y,width,height,"font",rotation,x-mul,y-mul
              [,space][,alignment][,fit],content

    The optional trailing fields are written only when explicitly set, each
    preceded by its own separator.

    Example:
        >>> Block(
        ...     x=10, y=10, width=300, height=100, font="3",
        ...     rotation=0, x_multiplier=1, y_multiplier=1,
        ... ).with_content("Hello", quote=True).render()
        b'BLOCK 10,10,300,100,"3",0,1,1,"Hello"\\r\\n'
    """

    NAME: ClassVar[str] = "BLOCK"
    REQUIRED: ClassVar[tuple[str, ...]] = (
        "x",
        "y",
        "width",
        "height",
        "font",
        "rotation",
        "x_multiplier",
        "y_multiplier",
        "content",
    )

    x: Optional[int] = None
    y: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    font: Optional[str] = None
    rotation: Optional[int] = None
    x_multiplier: Optional[float] = None
    y_multiplier: Optional[float] = None
    space: Optional[int] = None
    alignment: Optional[Alignment] = None
    fit: Optional[BlockFit] = None
    content: Optional[str] = None
    quote_content: bool = False

    def with_x(self, x: int) -> "Block":
        return self._with(x=x)

    def with_y(self, y: int) -> "Block":
        return self._with(y=y)

    def with_width(self, dots: int) -> "Block":
        return self._with(width=dots)

    def with_height(self, dots: int) -> "Block":
        return self._with(height=dots)

    def with_font(self, name: str) -> "Block":
        return self._with(font=name)

    def with_rotation(self, angle: int) -> "Block":
        return self._with(rotation=angle)

    def with_x_multiplier(self, multiplier: float) -> "Block":
        return self._with(x_multiplier=multiplier)

    def with_y_multiplier(self, multiplier: float) -> "Block":
        return self._with(y_multiplier=multiplier)

    def with_space(self, dots: int) -> "Block":
        """Extra character spacing in dots."""
        return self._with(space=dots)

    def with_alignment(self, alignment: Alignment) -> "Block":
        return self._with(alignment=alignment)

    def with_fit(self, fit: BlockFit) -> "Block":
        return self._with(fit=fit)

    def with_content(self, content: str, quote: bool = False) -> "Block":
        """Set the text. ``quote=True`` wraps it in double quotes."""
        return self._with(content=content, quote_content=quote)

    def _check(self) -> None:
        self._check_rotation()
        self._check_range("x_multiplier", MULTIPLIER_MIN, MULTIPLIER_MAX)
        self._check_range("y_multiplier", MULTIPLIER_MIN, MULTIPLIER_MAX)
        self._check_choice("alignment", Alignment)
        self._check_choice("fit", BlockFit)

    def _parameters(self, encoding: str) -> list[bytes]:
        params = [
            format_int(self.x, field="x"),
            format_int(self.y, field="y"),
            format_int(self.width, field="width"),
            format_int(self.height, field="height"),
            quote(self.font, encoding, field="font"),
            format_int(self.rotation, field="rotation"),
            format_float_with_units(self.x_multiplier, field="x_multiplier"),
            format_float_with_units(self.y_multiplier, field="y_multiplier"),
        ]
        if self.space is not None:
            params.append(format_int(self.space, field="space"))
        if self.alignment is not None:
            params.append(format_int(self.alignment, field="alignment"))
        if self.fit is not None:
            params.append(format_int(self.fit, field="fit"))
        params.append(_content_token(self.content, self.quote_content, encoding))
        return params


# =============================================================================
# TEXT
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Command):
    """
    Print a single line of text.

    Command: TEXT x,y,"font",rotation,x-mul,y-mul[,alignment],content
    """

    NAME: ClassVar[str] = "TEXT"
    REQUIRED: ClassVar[tuple[str, ...]] = (
        "x",
        "y",
        "font",
        "rotation",
        "x_multiplier",
        "y_multiplier",
        "content",
    )

    x: Optional[int] = None
    y: Optional[int] = None
    font: Optional[str] = None
    rotation: Optional[int] = None
    x_multiplier: Optional[float] = None
    y_multiplier: Optional[float] = None
    alignment: Optional[Alignment] = None
    content: Optional[str] = None
    quote_content: bool = False

    def with_x(self, x: int) -> "Text":
        return self._with(x=x)

    def with_y(self, y: int) -> "Text":
        return self._with(y=y)

    def with_font(self, name: str) -> "Text":
        return self._with(font=name)

    def with_rotation(self, angle: int) -> "Text":
        return self._with(rotation=angle)

    def with_x_multiplier(self, multiplier: float) -> "Text":
        return self._with(x_multiplier=multiplier)

    def with_y_multiplier(self, multiplier: float) -> "Text":
        return self._with(y_multiplier=multiplier)

    def with_alignment(self, alignment: Alignment) -> "Text":
        return self._with(alignment=alignment)

    def with_content(self, content: str, quote: bool = False) -> "Text":
        return self._with(content=content, quote_content=quote)

    def _check(self) -> None:
        self._check_rotation()
        self._check_range("x_multiplier", MULTIPLIER_MIN, MULTIPLIER_MAX)
        self._check_range("y_multiplier", MULTIPLIER_MIN, MULTIPLIER_MAX)
        self._check_choice("alignment", Alignment)

    def _parameters(self, encoding: str) -> list[bytes]:
        params = [
            format_int(self.x, field="x"),
            format_int(self.y, field="y"),
            quote(self.font, encoding, field="font"),
            format_int(self.rotation, field="rotation"),
            format_float_with_units(self.x_multiplier, field="x_multiplier"),
            format_float_with_units(self.y_multiplier, field="y_multiplier"),
        ]
        if self.alignment is not None:
            params.append(format_int(self.alignment, field="alignment"))
        params.append(_content_token(self.content, self.quote_content, encoding))
        return params
