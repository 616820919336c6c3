"""
File management commands.

DOWNLOAD stores a named data block (image, font, program) in printer memory;
KILL deletes it, RUN executes a downloaded program and EOP closes a program
download.

Reference: TSPL/TSPL2 Programming Manual, "File Management Commands"
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional

from pytspl.commands.base import Command
from pytspl.formatting import encode_text, format_int, quote

__all__ = [
    "DownloadStorage",
    "Download",
    "Kill",
    "Run",
    "Eop",
]


class DownloadStorage(str, Enum):
    """
    Destination memory for DOWNLOAD / KILL.

    DRAM is the firmware default and is written as nothing at all.
    """

    DRAM = ""
    FLASH = "F"
    EXPANSION_MODULE = "E"


def _storage_params(storage: Optional[DownloadStorage], encoding: str) -> list[bytes]:
    if storage is None:
        return []
    token = DownloadStorage(storage).value
    if not token:
        return []
    return [encode_text(token, encoding, field="storage")]


@dataclass(frozen=True, slots=True)
class Download(Command):
    """
    Download a named data block.

    Command: DOWNLOAD [storage,]"name",size,data

    The payload length is written as a decimal field right before the raw
    bytes, which are neither quoted nor escaped.

    Example:
        >>> Download().with_name("IMAGE1").with_data(b"\\x01\\x02\\x03").render()
        b'DOWNLOAD "IMAGE1",3,\\x01\\x02\\x03\\r\\n'
    """

    NAME: ClassVar[str] = "DOWNLOAD"
    REQUIRED: ClassVar[tuple[str, ...]] = ("name", "data")
    NON_EMPTY: ClassVar[tuple[str, ...]] = ("name",)

    storage: Optional[DownloadStorage] = None
    name: Optional[str] = None
    data: Optional[bytes] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.data is not None:
            object.__setattr__(self, "data", bytes(self.data))

    def with_storage(self, storage: DownloadStorage) -> "Download":
        return self._with(storage=storage)

    def with_name(self, name: str) -> "Download":
        return self._with(name=name)

    def with_data(self, data: bytes) -> "Download":
        """Set the payload. The bytes are copied."""
        return self._with(data=data)

    def _check(self) -> None:
        self._check_choice("storage", DownloadStorage)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [
            *_storage_params(self.storage, encoding),
            quote(self.name, encoding, field="name"),
            format_int(len(self.data), field="data"),
        ]

    def _payload(self) -> Optional[bytes]:
        return self.data


@dataclass(frozen=True, slots=True)
class Kill(Command):
    """
    Delete a file from printer memory.

    Command: KILL [storage,]"name"
    """

    NAME: ClassVar[str] = "KILL"
    REQUIRED: ClassVar[tuple[str, ...]] = ("name",)
    NON_EMPTY: ClassVar[tuple[str, ...]] = ("name",)

    storage: Optional[DownloadStorage] = None
    name: Optional[str] = None

    def with_storage(self, storage: DownloadStorage) -> "Kill":
        return self._with(storage=storage)

    def with_name(self, name: str) -> "Kill":
        return self._with(name=name)

    def _check(self) -> None:
        self._check_choice("storage", DownloadStorage)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [
            *_storage_params(self.storage, encoding),
            quote(self.name, encoding, field="name"),
        ]


@dataclass(frozen=True, slots=True)
class Run(Command):
    """Command: RUN "name" """

    NAME: ClassVar[str] = "RUN"
    REQUIRED: ClassVar[tuple[str, ...]] = ("name",)
    NON_EMPTY: ClassVar[tuple[str, ...]] = ("name",)

    name: Optional[str] = None

    def with_name(self, name: str) -> "Run":
        return self._with(name=name)

    def _parameters(self, encoding: str) -> list[bytes]:
        return [quote(self.name, encoding, field="name")]


@dataclass(frozen=True, slots=True)
class Eop(Command):
    """End of a downloaded program. Command: EOP"""

    NAME: ClassVar[str] = "EOP"

    def _parameters(self, encoding: str) -> list[bytes]:
        return []
