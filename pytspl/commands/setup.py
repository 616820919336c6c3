"""
Setup and system commands: media size, gap, direction, density, speed,
reference point and code page.

SIZE and GAP take dimensions in inches by default, or millimetres when the
metric flag is set (each value then carries the " mm" unit suffix).

Reference: TSPL/TSPL2 Programming Manual, "Setup and System Commands"
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Final, Optional

from pytspl.commands.base import Command
from pytspl.formatting import encode_text, format_float_with_units, format_int

__all__ = [
    "DENSITY_MIN",
    "DENSITY_MAX",
    "PrintDirection",
    "Mirror",
    "Size",
    "Gap",
    "Direction",
    "Density",
    "Speed",
    "Reference",
    "Codepage",
]

DENSITY_MIN: Final[int] = 0
DENSITY_MAX: Final[int] = 15


class PrintDirection(IntEnum):
    FORWARD = 0
    REVERSE = 1


class Mirror(IntEnum):
    NORMAL = 0
    MIRROR = 1


# =============================================================================
# MEDIA
# =============================================================================


@dataclass(frozen=True, slots=True)
class Size(Command):
    """
    Label width and length.

    Command: SIZE width,height  (inches)
             SIZE width mm,height mm

    Example:
        >>> Size(width=100, height=60, metric=True).render()
        b'SIZE 100 mm,60 mm\\r\\n'
    """

    NAME: ClassVar[str] = "SIZE"
    REQUIRED: ClassVar[tuple[str, ...]] = ("width", "height")

    width: Optional[float] = None
    height: Optional[float] = None
    metric: bool = False

    def with_width(self, width: float) -> "Size":
        return self._with(width=width)

    def with_height(self, height: float) -> "Size":
        return self._with(height=height)

    def with_metric(self, metric: bool = True) -> "Size":
        return self._with(metric=metric)

    def _check(self) -> None:
        self._check_positive("width")
        self._check_positive("height")

    def _parameters(self, encoding: str) -> list[bytes]:
        return [
            format_float_with_units(self.width, self.metric, field="width"),
            format_float_with_units(self.height, self.metric, field="height"),
        ]


@dataclass(frozen=True, slots=True)
class Gap(Command):
    """
    Gap between labels and its offset.

    Command: GAP distance,offset  (inches, or " mm" when metric)
    Continuous media: GAP 0,0
    """

    NAME: ClassVar[str] = "GAP"
    REQUIRED: ClassVar[tuple[str, ...]] = ("distance", "offset")

    distance: Optional[float] = None
    offset: Optional[float] = None
    metric: bool = False

    def with_distance(self, distance: float) -> "Gap":
        return self._with(distance=distance)

    def with_offset(self, offset: float) -> "Gap":
        return self._with(offset=offset)

    def with_metric(self, metric: bool = True) -> "Gap":
        return self._with(metric=metric)

    def _check(self) -> None:
        self._check_range("distance", 0)
        self._check_range("offset", 0)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [
            format_float_with_units(self.distance, self.metric, field="distance"),
            format_float_with_units(self.offset, self.metric, field="offset"),
        ]


# =============================================================================
# PRINT ENGINE
# =============================================================================


@dataclass(frozen=True, slots=True)
class Direction(Command):
    """Command: DIRECTION n[,m]"""

    NAME: ClassVar[str] = "DIRECTION"
    REQUIRED: ClassVar[tuple[str, ...]] = ("direction",)

    direction: Optional[PrintDirection] = None
    mirror: Optional[Mirror] = None

    def with_direction(self, direction: PrintDirection) -> "Direction":
        return self._with(direction=direction)

    def with_mirror(self, mirror: Mirror) -> "Direction":
        return self._with(mirror=mirror)

    def _check(self) -> None:
        self._check_choice("direction", PrintDirection)
        self._check_choice("mirror", Mirror)

    def _parameters(self, encoding: str) -> list[bytes]:
        params = [format_int(self.direction, field="direction")]
        if self.mirror is not None:
            params.append(format_int(self.mirror, field="mirror"))
        return params


@dataclass(frozen=True, slots=True)
class Density(Command):
    """Print darkness. Command: DENSITY n  (0-15)"""

    NAME: ClassVar[str] = "DENSITY"
    REQUIRED: ClassVar[tuple[str, ...]] = ("level",)

    level: Optional[int] = None

    def with_level(self, level: int) -> "Density":
        return self._with(level=level)

    def _check(self) -> None:
        self._check_range("level", DENSITY_MIN, DENSITY_MAX)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [format_int(self.level, field="level")]


@dataclass(frozen=True, slots=True)
class Speed(Command):
    """Print speed in inches per second. Command: SPEED n"""

    NAME: ClassVar[str] = "SPEED"
    REQUIRED: ClassVar[tuple[str, ...]] = ("speed",)

    speed: Optional[float] = None

    def with_speed(self, speed: float) -> "Speed":
        return self._with(speed=speed)

    def _check(self) -> None:
        self._check_positive("speed")

    def _parameters(self, encoding: str) -> list[bytes]:
        return [format_float_with_units(self.speed, field="speed")]


@dataclass(frozen=True, slots=True)
class Reference(Command):
    """Origin for all later coordinates. Command: REFERENCE x,y"""

    NAME: ClassVar[str] = "REFERENCE"
    REQUIRED: ClassVar[tuple[str, ...]] = ("x", "y")

    x: Optional[int] = None
    y: Optional[int] = None

    def with_x(self, x: int) -> "Reference":
        return self._with(x=x)

    def with_y(self, y: int) -> "Reference":
        return self._with(y=y)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [format_int(self.x, field="x"), format_int(self.y, field="y")]


@dataclass(frozen=True, slots=True)
class Codepage(Command):
    """
    Select the printer code page.

    Command: CODEPAGE n  (e.g. 437, 1252, UTF-8). The name is not quoted.
    """

    NAME: ClassVar[str] = "CODEPAGE"
    REQUIRED: ClassVar[tuple[str, ...]] = ("name",)
    NON_EMPTY: ClassVar[tuple[str, ...]] = ("name",)

    name: Optional[str] = None

    def with_name(self, name: str) -> "Codepage":
        return self._with(name=name)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [encode_text(self.name, encoding, field="name")]
