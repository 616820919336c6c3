"""
Buffer and print control commands: CLS, PRINT, FEED, SOUND.

Reference: TSPL/TSPL2 Programming Manual, "Action Commands"
"""

from dataclasses import dataclass
from typing import ClassVar, Final, Optional

from pytspl.commands.base import Command
from pytspl.formatting import format_int

__all__ = [
    "FEED_MIN",
    "FEED_MAX",
    "Cls",
    "Print",
    "Feed",
    "Sound",
]

FEED_MIN: Final[int] = 1
FEED_MAX: Final[int] = 9999

SOUND_LEVEL_MAX: Final[int] = 9
SOUND_INTERVAL_MAX: Final[int] = 4095


@dataclass(frozen=True, slots=True)
class Cls(Command):
    """Clear the image buffer. Command: CLS"""

    NAME: ClassVar[str] = "CLS"

    def _parameters(self, encoding: str) -> list[bytes]:
        return []


@dataclass(frozen=True, slots=True)
class Print(Command):
    """
    Print the image buffer.

    Command: PRINT m[,n]
        m: number of label sets
        n: copies of each label (optional)

    Example:
        >>> Print().with_sets(1).with_copies(2).render()
        b'PRINT 1,2\\r\\n'
    """

    NAME: ClassVar[str] = "PRINT"
    REQUIRED: ClassVar[tuple[str, ...]] = ("sets",)

    sets: Optional[int] = None
    copies: Optional[int] = None

    def with_sets(self, sets: int) -> "Print":
        return self._with(sets=sets)

    def with_copies(self, copies: int) -> "Print":
        return self._with(copies=copies)

    def _check(self) -> None:
        self._check_range("sets", 1)
        self._check_range("copies", 1)

    def _parameters(self, encoding: str) -> list[bytes]:
        params = [format_int(self.sets, field="sets")]
        if self.copies is not None:
            params.append(format_int(self.copies, field="copies"))
        return params


@dataclass(frozen=True, slots=True)
class Feed(Command):
    """Feed label forward. Command: FEED n  (1-9999 dots)"""

    NAME: ClassVar[str] = "FEED"
    REQUIRED: ClassVar[tuple[str, ...]] = ("dots",)

    dots: Optional[int] = None

    def with_dots(self, dots: int) -> "Feed":
        return self._with(dots=dots)

    def _check(self) -> None:
        self._check_range("dots", FEED_MIN, FEED_MAX)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [format_int(self.dots, field="dots")]


@dataclass(frozen=True, slots=True)
class Sound(Command):
    """Beep. Command: SOUND level,interval"""

    NAME: ClassVar[str] = "SOUND"
    REQUIRED: ClassVar[tuple[str, ...]] = ("level", "interval")

    level: Optional[int] = None
    interval: Optional[int] = None

    def with_level(self, level: int) -> "Sound":
        return self._with(level=level)

    def with_interval(self, interval: int) -> "Sound":
        return self._with(interval=interval)

    def _check(self) -> None:
        self._check_range("level", 0, SOUND_LEVEL_MAX)
        self._check_range("interval", 1, SOUND_INTERVAL_MAX)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [
            format_int(self.level, field="level"),
            format_int(self.interval, field="interval"),
        ]
