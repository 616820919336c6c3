"""
Geometric drawing commands: BAR, BOX, CIRCLE, ERASE, REVERSE.

All coordinates and sizes are in dots.

Reference: TSPL/TSPL2 Programming Manual, "Label Formatting Commands"
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Self

from pytspl.commands.base import Command
from pytspl.formatting import format_int

__all__ = [
    "Bar",
    "Box",
    "Circle",
    "Erase",
    "Reverse",
]


@dataclass(frozen=True, slots=True)
class _Region(Command):
    """x,y,width,height region shared by BAR, ERASE and REVERSE."""

    REQUIRED: ClassVar[tuple[str, ...]] = ("x", "y", "width", "height")

    x: Optional[int] = None
    y: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def with_x(self, x: int) -> Self:
        return self._with(x=x)

    def with_y(self, y: int) -> Self:
        return self._with(y=y)

    def with_width(self, dots: int) -> Self:
        return self._with(width=dots)

    def with_height(self, dots: int) -> Self:
        return self._with(height=dots)

    def _check(self) -> None:
        self._check_range("width", 0)
        self._check_range("height", 0)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [
            format_int(self.x, field="x"),
            format_int(self.y, field="y"),
            format_int(self.width, field="width"),
            format_int(self.height, field="height"),
        ]


@dataclass(frozen=True, slots=True)
class Bar(_Region):
    """Filled black rectangle. Command: BAR x,y,width,height"""

    NAME: ClassVar[str] = "BAR"


@dataclass(frozen=True, slots=True)
class Erase(_Region):
    """Clear a region of the image buffer. Command: ERASE x,y,width,height"""

    NAME: ClassVar[str] = "ERASE"


@dataclass(frozen=True, slots=True)
class Reverse(_Region):
    """Invert a region. Command: REVERSE x,y,width,height"""

    NAME: ClassVar[str] = "REVERSE"


@dataclass(frozen=True, slots=True)
class Box(Command):
    """
    Rectangle outline.

    Command: BOX x,y,x_end,y_end,thickness[,radius]
    """

    NAME: ClassVar[str] = "BOX"
    REQUIRED: ClassVar[tuple[str, ...]] = ("x", "y", "x_end", "y_end", "thickness")

    x: Optional[int] = None
    y: Optional[int] = None
    x_end: Optional[int] = None
    y_end: Optional[int] = None
    thickness: Optional[int] = None
    radius: Optional[int] = None

    def with_x(self, x: int) -> "Box":
        return self._with(x=x)

    def with_y(self, y: int) -> "Box":
        return self._with(y=y)

    def with_x_end(self, x_end: int) -> "Box":
        return self._with(x_end=x_end)

    def with_y_end(self, y_end: int) -> "Box":
        return self._with(y_end=y_end)

    def with_thickness(self, dots: int) -> "Box":
        return self._with(thickness=dots)

    def with_radius(self, dots: int) -> "Box":
        """Corner radius for rounded boxes."""
        return self._with(radius=dots)

    def _check(self) -> None:
        self._check_range("thickness", 0)
        self._check_range("radius", 0)

    def _parameters(self, encoding: str) -> list[bytes]:
        params = [
            format_int(self.x, field="x"),
            format_int(self.y, field="y"),
            format_int(self.x_end, field="x_end"),
            format_int(self.y_end, field="y_end"),
            format_int(self.thickness, field="thickness"),
        ]
        if self.radius is not None:
            params.append(format_int(self.radius, field="radius"))
        return params


@dataclass(frozen=True, slots=True)
class Circle(Command):
    """Command: CIRCLE x,y,diameter,thickness"""

    NAME: ClassVar[str] = "CIRCLE"
    REQUIRED: ClassVar[tuple[str, ...]] = ("x", "y", "diameter", "thickness")

    x: Optional[int] = None
    y: Optional[int] = None
    diameter: Optional[int] = None
    thickness: Optional[int] = None

    def with_x(self, x: int) -> "Circle":
        return self._with(x=x)

    def with_y(self, y: int) -> "Circle":
        return self._with(y=y)

    def with_diameter(self, dots: int) -> "Circle":
        return self._with(diameter=dots)

    def with_thickness(self, dots: int) -> "Circle":
        return self._with(thickness=dots)

    def _check(self) -> None:
        self._check_range("diameter", 0)
        self._check_range("thickness", 0)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [
            format_int(self.x, field="x"),
            format_int(self.y, field="y"),
            format_int(self.diameter, field="diameter"),
            format_int(self.thickness, field="thickness"),
        ]
