"""Unit tests for BAR, BOX, CIRCLE, ERASE and REVERSE."""

import pytest

from pytspl.commands.shapes import Bar, Box, Circle, Erase, Reverse
from pytspl.exceptions import ValidationError


@pytest.mark.parametrize(
    "cls, name",
    [(Bar, b"BAR"), (Erase, b"ERASE"), (Reverse, b"REVERSE")],
)
def test_region_commands(cls: type, name: bytes) -> None:
    cmd = cls().with_x(10).with_y(20).with_width(300).with_height(4)
    assert isinstance(cmd, cls)
    assert cmd.render() == name + b" 10,20,300,4\r\n"


def test_region_rejects_negative_size() -> None:
    with pytest.raises(ValidationError, match="BAR: width"):
        Bar(x=0, y=0, width=-1, height=1).render()


def test_box() -> None:
    cmd = Box().with_x(0).with_y(0).with_x_end(100).with_y_end(50).with_thickness(3)
    assert cmd.render() == b"BOX 0,0,100,50,3\r\n"


def test_box_rounded() -> None:
    cmd = Box(x=0, y=0, x_end=100, y_end=50, thickness=3).with_radius(10)
    assert cmd.render() == b"BOX 0,0,100,50,3,10\r\n"


def test_circle() -> None:
    cmd = Circle().with_x(50).with_y(60).with_diameter(40).with_thickness(2)
    assert cmd.render() == b"CIRCLE 50,60,40,2\r\n"


def test_circle_negative_thickness() -> None:
    with pytest.raises(ValidationError, match="thickness"):
        Circle(x=0, y=0, diameter=10, thickness=-2).render()
