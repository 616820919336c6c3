"""
Bitmap and image-file placement commands.

BITMAP embeds raw row-packed pixel data in the command itself; PUTBMP and
PUTPCX place an image file that already resides in printer memory.

Reference: TSPL/TSPL2 Programming Manual, "Label Formatting Commands"
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional

from pytspl.commands.base import Command
from pytspl.formatting import format_int, quote

__all__ = [
    "BitmapMode",
    "Bitmap",
    "PutBmpBpp",
    "PutBmp",
    "PutPcx",
]


class BitmapMode(IntEnum):
    """
    How bitmap pixels combine with what is already in the image buffer.

    Rendered as the ordinal value.
    """

    OVERWRITE = 0
    OR = 1
    XOR = 2


class PutBmpBpp(IntEnum):
    """Bits per pixel of a printer-resident BMP file."""

    ONE_BIT = 1
    EIGHT_BIT = 8


# =============================================================================
# BITMAP
# =============================================================================


@dataclass(frozen=True, slots=True)
class Bitmap(Command):
    """
    Draw raw bitmap data.

    Command: BITMAP x,y,width,height,mode,bitmap data

    Attributes:
        x: Horizontal start in dots.
        y: Vertical start in dots.
        width: Image width in BYTES (8 dots per byte).
        height: Image height in dots.
        mode: BitmapMode (OVERWRITE, OR, XOR).
        data: Row-packed bitmap bytes, written raw with no length prefix.

    Example:
        >>> cmd = (
        ...     Bitmap()
        ...     .with_x(0).with_y(0)
        ...     .with_width(100).with_height(50)
        ...     .with_mode(BitmapMode.OVERWRITE)
        ...     .with_data(b"\\xff")
        ... )
        >>> cmd.render()
        b'BITMAP 0,0,100,50,0,\\xff\\r\\n'
    """

    NAME: ClassVar[str] = "BITMAP"
    REQUIRED: ClassVar[tuple[str, ...]] = (
        "x",
        "y",
        "width",
        "height",
        "mode",
        "data",
    )

    x: Optional[int] = None
    y: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    mode: Optional[BitmapMode] = None
    data: Optional[bytes] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.data is not None:
            object.__setattr__(self, "data", bytes(self.data))

    def with_x(self, x: int) -> "Bitmap":
        return self._with(x=x)

    def with_y(self, y: int) -> "Bitmap":
        return self._with(y=y)

    def with_width(self, width: int) -> "Bitmap":
        """Set width in bytes."""
        return self._with(width=width)

    def with_height(self, dots: int) -> "Bitmap":
        return self._with(height=dots)

    def with_mode(self, mode: BitmapMode) -> "Bitmap":
        return self._with(mode=mode)

    def with_data(self, data: bytes) -> "Bitmap":
        """Set the pixel payload. The bytes are copied."""
        return self._with(data=data)

    def _check(self) -> None:
        self._check_choice("mode", BitmapMode)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [
            format_int(self.x, field="x"),
            format_int(self.y, field="y"),
            format_int(self.width, field="width"),
            format_int(self.height, field="height"),
            format_int(self.mode, field="mode"),
        ]

    def _payload(self) -> Optional[bytes]:
        return self.data


# =============================================================================
# PUTBMP / PUTPCX
# =============================================================================


@dataclass(frozen=True, slots=True)
class PutBmp(Command):
    """
    Place a BMP file stored in printer memory.

    Command: PUTBMP x,y,"filename"[,bpp][,contrast]

    ``bpp`` and ``contrast`` are optional and only written when set.
    """

    NAME: ClassVar[str] = "PUTBMP"
    REQUIRED: ClassVar[tuple[str, ...]] = ("x", "y", "file_name")
    NON_EMPTY: ClassVar[tuple[str, ...]] = ("file_name",)

    x: Optional[int] = None
    y: Optional[int] = None
    file_name: Optional[str] = None
    bpp: Optional[PutBmpBpp] = None
    contrast: Optional[int] = None

    def with_x(self, x: int) -> "PutBmp":
        return self._with(x=x)

    def with_y(self, y: int) -> "PutBmp":
        return self._with(y=y)

    def with_file_name(self, file_name: str) -> "PutBmp":
        return self._with(file_name=file_name)

    def with_bpp(self, bpp: PutBmpBpp) -> "PutBmp":
        return self._with(bpp=bpp)

    def with_contrast(self, contrast: int) -> "PutBmp":
        return self._with(contrast=contrast)

    def _check(self) -> None:
        self._check_choice("bpp", PutBmpBpp)

    def _parameters(self, encoding: str) -> list[bytes]:
        params = [
            format_int(self.x, field="x"),
            format_int(self.y, field="y"),
            quote(self.file_name, encoding, field="file_name"),
        ]
        if self.bpp is not None:
            params.append(format_int(self.bpp, field="bpp"))
        if self.contrast is not None:
            params.append(format_int(self.contrast, field="contrast"))
        return params


@dataclass(frozen=True, slots=True)
class PutPcx(Command):
    """
    Place a PCX file stored in printer memory.

    Command: PUTPCX x,y,"filename"
    """

    NAME: ClassVar[str] = "PUTPCX"
    REQUIRED: ClassVar[tuple[str, ...]] = ("x", "y", "file_name")
    NON_EMPTY: ClassVar[tuple[str, ...]] = ("file_name",)

    x: Optional[int] = None
    y: Optional[int] = None
    file_name: Optional[str] = None

    def with_x(self, x: int) -> "PutPcx":
        return self._with(x=x)

    def with_y(self, y: int) -> "PutPcx":
        return self._with(y=y)

    def with_file_name(self, file_name: str) -> "PutPcx":
        return self._with(file_name=file_name)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [
            format_int(self.x, field="x"),
            format_int(self.y, field="y"),
            quote(self.file_name, encoding, field="file_name"),
        ]
