"""
TSPL command encoders.

One immutable class per TSPL command. Every class is a frozen dataclass
whose fields default to None; ``with_*`` setters return a new command and
``render()`` validates and returns the wire bytes.

Module Structure:
    commands/
    ├── __init__.py     # This file (public API exports)
    ├── base.py         # Command abstract base
    ├── setup.py        # SIZE, GAP, DIRECTION, DENSITY, SPEED, REFERENCE, CODEPAGE
    ├── control.py      # CLS, PRINT, FEED, SOUND
    ├── text.py         # TEXT, BLOCK
    ├── bitmap.py       # BITMAP, PUTBMP, PUTPCX
    ├── shapes.py       # BAR, BOX, CIRCLE, ERASE, REVERSE
    ├── codes.py        # BARCODE, QRCODE
    └── files.py        # DOWNLOAD, KILL, RUN, EOP

Usage:
    >>> from pytspl.commands import Bitmap, BitmapMode
    >>> cmd = Bitmap(x=0, y=0, width=1, height=1, mode=BitmapMode.OR, data=b"\\x00")
    >>> cmd.render()
    b'BITMAP 0,0,1,1,1,\\x00\\r\\n'
"""

# Base
from pytspl.commands.base import Command

# Bitmap commands
from pytspl.commands.bitmap import (
    Bitmap,
    BitmapMode,
    PutBmp,
    PutBmpBpp,
    PutPcx,
)

# Barcode and QR commands
from pytspl.commands.codes import (
    Barcode,
    BarcodeType,
    HumanReadable,
    QrCode,
    QrEccLevel,
    QrMode,
    QrModel,
)

# Print control commands
from pytspl.commands.control import (
    Cls,
    Feed,
    Print,
    Sound,
)

# File management commands
from pytspl.commands.files import (
    Download,
    DownloadStorage,
    Eop,
    Kill,
    Run,
)

# Setup commands
from pytspl.commands.setup import (
    Codepage,
    Density,
    Direction,
    Gap,
    Mirror,
    PrintDirection,
    Reference,
    Size,
    Speed,
)

# Shape commands
from pytspl.commands.shapes import (
    Bar,
    Box,
    Circle,
    Erase,
    Reverse,
)

# Text commands
from pytspl.commands.text import (
    Alignment,
    Block,
    BlockFit,
    Text,
)

__all__ = [
    "Command",
    # Bitmap
    "Bitmap",
    "BitmapMode",
    "PutBmp",
    "PutBmpBpp",
    "PutPcx",
    # Codes
    "Barcode",
    "BarcodeType",
    "HumanReadable",
    "QrCode",
    "QrEccLevel",
    "QrMode",
    "QrModel",
    # Control
    "Cls",
    "Feed",
    "Print",
    "Sound",
    # Files
    "Download",
    "DownloadStorage",
    "Eop",
    "Kill",
    "Run",
    # Setup
    "Codepage",
    "Density",
    "Direction",
    "Gap",
    "Mirror",
    "PrintDirection",
    "Reference",
    "Size",
    "Speed",
    # Shapes
    "Bar",
    "Box",
    "Circle",
    "Erase",
    "Reverse",
    # Text
    "Alignment",
    "Block",
    "BlockFit",
    "Text",
]
