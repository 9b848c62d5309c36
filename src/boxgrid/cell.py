"""Cell - the smallest unit of table content."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from boxgrid.color import Font, background, colorize
from boxgrid.color import font as apply_font
from boxgrid.width import visible_width


@dataclass(frozen=True)
class Cell:
    """One or more lines of text with cached display width and height.

    ``width`` is measured in terminal columns with escape sequences ignored,
    so a colored cell reports the same width as its plain text.
    """

    lines: tuple[str, ...] = ("",)
    width: int = field(init=False, compare=False)
    height: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        lines = self.lines
        if isinstance(lines, str):
            lines = (lines,)
        # every stored line is free of newlines
        lines = tuple(
            part for line in lines for part in line.replace("\r\n", "\n").split("\n")
        ) or ("",)
        object.__setattr__(self, "lines", lines)
        object.__setattr__(self, "width", max(visible_width(line) for line in lines))
        object.__setattr__(self, "height", len(lines))

    @classmethod
    def from_text(cls, text: str) -> Cell:
        """Split *text* on newlines; a trailing newline leaves an empty last line."""
        return cls(text)

    def __str__(self) -> str:
        return "\n".join(self.lines)

    # -- decoration ----------------------------------------------------------

    def color(self, hex_code: str) -> Cell:
        """Foreground color from ``#RRGGBB``."""
        return colorize(self, hex_code)

    def bg(self, hex_code: str) -> Cell:
        """Background color from ``#RRGGBB``."""
        return background(self, hex_code)

    def font(self, attr: Font) -> Cell:
        return apply_font(self, attr)


@runtime_checkable
class SupportsCell(Protocol):
    """Objects that know how to present themselves as a table cell."""

    def __cell__(self) -> Cell: ...


def to_cell(value: Any) -> Cell:
    """Convert *value* to a :class:`Cell`.

    Cells pass through unchanged, objects implementing ``__cell__`` are asked
    for their own cell, and anything else is rendered with ``str()``.
    """
    if isinstance(value, Cell):
        return value
    if isinstance(value, SupportsCell):
        return value.__cell__()
    return Cell.from_text(str(value))
