"""
Label sequencer.

A Label is an ordered, immutable sequence of commands forming one
transmittable TSPL job. Rendering concatenates each command's bytes in
order; the first command that fails validation aborts the whole render.

Example:
    >>> from pytspl import Label
    >>> from pytspl.commands import Cls, Print, Size
    >>> label = (
    ...     Label()
    ...     .append(Size(width=50, height=30, metric=True))
    ...     .append(Cls())
    ...     .append(Print(sets=1))
    ... )
    >>> label.render()
    b'SIZE 50 mm,30 mm\\r\\nCLS\\r\\nPRINT 1\\r\\n'
"""

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final, Iterator, Optional

from pytspl.commands.base import Command
from pytspl.formatting import DEFAULT_TEXT_ENCODING

if TYPE_CHECKING:
    from pytspl.config import LabelConfig

__all__ = ["Label"]

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Label:
    """
    Ordered TSPL program.

    Attributes:
        commands: Commands in execution order. No deduplication or
            reordering is ever applied.
        encoding: Codec passed to every command's render().
    """

    commands: tuple[Command, ...] = ()
    encoding: str = DEFAULT_TEXT_ENCODING

    @classmethod
    def from_config(cls, config: "LabelConfig") -> "Label":
        """Empty label using the configured text encoding."""
        return cls(encoding=config.text_encoding)

    def append(self, command: Optional[Command]) -> "Label":
        """
        Return a new label with ``command`` at the end.

        ``None`` is ignored and the label is returned unchanged, so callers
        can build a command conditionally and append unconditionally.
        """
        if command is None:
            return self
        return replace(self, commands=self.commands + (command,))

    def extend(self, *commands: Optional[Command]) -> "Label":
        """Append several commands in order. ``None`` entries are skipped."""
        label = self
        for command in commands:
            label = label.append(command)
        return label

    def render(self) -> bytes:
        """
        Render every command and concatenate the results.

        Returns:
            The whole program as one buffer.

        Raises:
            ValidationError: The first command that fails validation. Its
                error propagates unchanged; nothing after it is rendered
                and no partial buffer is returned.
        """
        chunks = [command.render(self.encoding) for command in self.commands]
        data = b"".join(chunks)
        logger.debug(
            "Rendered label: %d command(s), %d bytes", len(self.commands), len(data)
        )
        return data

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)
