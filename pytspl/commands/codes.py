"""
Machine-readable code commands: 1D BARCODE and QRCODE.

The printer renders the symbol itself; only the symbology, geometry and
payload are sent. Content is always quoted for both commands.

Reference: TSPL/TSPL2 Programming Manual, "BARCODE", "QRCODE"
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, Final, Optional

from pytspl.commands.base import Command
from pytspl.commands.text import Alignment
from pytspl.formatting import encode_text, format_int, quote

__all__ = [
    "BarcodeType",
    "HumanReadable",
    "Barcode",
    "QrEccLevel",
    "QrMode",
    "QrModel",
    "QrCode",
]

QR_CELL_WIDTH_MIN: Final[int] = 1
QR_CELL_WIDTH_MAX: Final[int] = 10
QR_MASK_MAX: Final[int] = 8


class BarcodeType(str, Enum):
    """Symbology tokens accepted by BARCODE (written quoted)."""

    CODE128 = "128"
    CODE128M = "128M"
    EAN128 = "EAN128"
    INTERLEAVED_25 = "25"
    CODE39 = "39"
    CODE39_FULL = "39C"
    CODE93 = "93"
    EAN13 = "EAN13"
    EAN8 = "EAN8"
    UPCA = "UPCA"
    UPCE = "UPCE"
    CODABAR = "CODA"
    POSTNET = "POST"
    ITF14 = "ITF14"
    MSI = "MSI"


class HumanReadable(IntEnum):
    """Placement of the human-readable line under the bars."""

    NONE = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3


class QrEccLevel(str, Enum):
    L = "L"  # 7%
    M = "M"  # 15%
    Q = "Q"  # 25%
    H = "H"  # 30%


class QrMode(str, Enum):
    AUTO = "A"
    MANUAL = "M"


class QrModel(str, Enum):
    M1 = "M1"
    M2 = "M2"


# =============================================================================
# BARCODE
# =============================================================================


@dataclass(frozen=True, slots=True)
class Barcode(Command):
    """
    1D barcode.

    Command:
        BARCODE x,y,"type",height,human_readable,rotation,narrow,wide
                [,alignment],"content"

    Example:
        >>> Barcode(
        ...     x=10, y=10, code_type=BarcodeType.CODE128, height=100,
        ...     human_readable=HumanReadable.LEFT, rotation=0,
        ...     narrow=2, wide=2, content="12345",
        ... ).render()
        b'BARCODE 10,10,"128",100,1,0,2,2,"12345"\\r\\n'
    """

    NAME: ClassVar[str] = "BARCODE"
    REQUIRED: ClassVar[tuple[str, ...]] = (
        "x",
        "y",
        "code_type",
        "height",
        "human_readable",
        "rotation",
        "narrow",
        "wide",
        "content",
    )

    x: Optional[int] = None
    y: Optional[int] = None
    code_type: Optional[BarcodeType] = None
    height: Optional[int] = None
    human_readable: Optional[HumanReadable] = None
    rotation: Optional[int] = None
    narrow: Optional[int] = None
    wide: Optional[int] = None
    alignment: Optional[Alignment] = None
    content: Optional[str] = None

    def with_x(self, x: int) -> "Barcode":
        return self._with(x=x)

    def with_y(self, y: int) -> "Barcode":
        return self._with(y=y)

    def with_code_type(self, code_type: BarcodeType) -> "Barcode":
        return self._with(code_type=code_type)

    def with_height(self, dots: int) -> "Barcode":
        return self._with(height=dots)

    def with_human_readable(self, human_readable: HumanReadable) -> "Barcode":
        return self._with(human_readable=human_readable)

    def with_rotation(self, angle: int) -> "Barcode":
        return self._with(rotation=angle)

    def with_narrow(self, dots: int) -> "Barcode":
        return self._with(narrow=dots)

    def with_wide(self, dots: int) -> "Barcode":
        return self._with(wide=dots)

    def with_alignment(self, alignment: Alignment) -> "Barcode":
        return self._with(alignment=alignment)

    def with_content(self, content: str) -> "Barcode":
        return self._with(content=content)

    def _check(self) -> None:
        self._check_choice("code_type", BarcodeType)
        self._check_range("height", 1)
        self._check_choice("human_readable", HumanReadable)
        self._check_rotation()
        self._check_range("narrow", 1)
        self._check_range("wide", 1)
        self._check_choice("alignment", Alignment)

    def _parameters(self, encoding: str) -> list[bytes]:
        params = [
            format_int(self.x, field="x"),
            format_int(self.y, field="y"),
            quote(BarcodeType(self.code_type).value, encoding, field="code_type"),
            format_int(self.height, field="height"),
            format_int(self.human_readable, field="human_readable"),
            format_int(self.rotation, field="rotation"),
            format_int(self.narrow, field="narrow"),
            format_int(self.wide, field="wide"),
        ]
        if self.alignment is not None:
            params.append(format_int(self.alignment, field="alignment"))
        params.append(quote(self.content, encoding, field="content"))
        return params


# =============================================================================
# QRCODE
# =============================================================================


@dataclass(frozen=True, slots=True)
class QrCode(Command):
    """
    QR code.

    Command:
        QRCODE x,y,ecc,cell_width,mode,rotation[,model][,mask],"content"

    ``mask`` is 0-8 and written as S0..S8.

    Example:
        >>> QrCode(
        ...     x=10, y=10, ecc_level=QrEccLevel.H, cell_width=4,
        ...     mode=QrMode.AUTO, rotation=0, content="ABC",
        ... ).render()
        b'QRCODE 10,10,H,4,A,0,"ABC"\\r\\n'
    """

    NAME: ClassVar[str] = "QRCODE"
    REQUIRED: ClassVar[tuple[str, ...]] = (
        "x",
        "y",
        "ecc_level",
        "cell_width",
        "mode",
        "rotation",
        "content",
    )

    x: Optional[int] = None
    y: Optional[int] = None
    ecc_level: Optional[QrEccLevel] = None
    cell_width: Optional[int] = None
    mode: Optional[QrMode] = None
    rotation: Optional[int] = None
    model: Optional[QrModel] = None
    mask: Optional[int] = None
    content: Optional[str] = None

    def with_x(self, x: int) -> "QrCode":
        return self._with(x=x)

    def with_y(self, y: int) -> "QrCode":
        return self._with(y=y)

    def with_ecc_level(self, level: QrEccLevel) -> "QrCode":
        return self._with(ecc_level=level)

    def with_cell_width(self, dots: int) -> "QrCode":
        return self._with(cell_width=dots)

    def with_mode(self, mode: QrMode) -> "QrCode":
        return self._with(mode=mode)

    def with_rotation(self, angle: int) -> "QrCode":
        return self._with(rotation=angle)

    def with_model(self, model: QrModel) -> "QrCode":
        return self._with(model=model)

    def with_mask(self, mask: int) -> "QrCode":
        return self._with(mask=mask)

    def with_content(self, content: str) -> "QrCode":
        return self._with(content=content)

    def _check(self) -> None:
        self._check_choice("ecc_level", QrEccLevel)
        self._check_range("cell_width", QR_CELL_WIDTH_MIN, QR_CELL_WIDTH_MAX)
        self._check_choice("mode", QrMode)
        self._check_rotation()
        self._check_choice("model", QrModel)
        self._check_range("mask", 0, QR_MASK_MAX)

    def _parameters(self, encoding: str) -> list[bytes]:
        params = [
            format_int(self.x, field="x"),
            format_int(self.y, field="y"),
            encode_text(QrEccLevel(self.ecc_level).value, encoding, field="ecc_level"),
            format_int(self.cell_width, field="cell_width"),
            encode_text(QrMode(self.mode).value, encoding, field="mode"),
            format_int(self.rotation, field="rotation"),
        ]
        if self.model is not None:
            params.append(encode_text(QrModel(self.model).value, encoding, field="model"))
        if self.mask is not None:
            params.append(b"S" + format_int(self.mask, field="mask"))
        params.append(quote(self.content, encoding, field="content"))
        return params
