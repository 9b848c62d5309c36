"""ANSI color and font decoration for cells.

Every line of a decorated cell is wrapped as ``<prefix><line>ESC[0m``. The
prefix is stripped again when measuring, so decoration never changes layout.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from boxgrid.cell import Cell

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"

_HEX_RE = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")

# SGR parameter selecting a 24-bit foreground / background color
_FOREGROUND = 38
_BACKGROUND = 48

Font = Literal[
    "bold",
    "light",
    "italic",
    "underlined",
    "slow_blinking",
    "blinking",
    "inverse",
    "invisible",
    "strikethrough",
]

FONT_CODES: dict[str, int] = {
    "bold": 1,
    "light": 2,
    "italic": 3,
    "underlined": 4,
    "slow_blinking": 5,
    "blinking": 6,
    "inverse": 7,
    "invisible": 8,
    "strikethrough": 9,
}


def hex_to_rgb(hex_code: str) -> tuple[int, int, int] | None:
    """Parse ``#RRGGBB`` into a tuple, or ``None`` if malformed."""
    m = _HEX_RE.fullmatch(hex_code)
    if m is None:
        return None
    r, g, b = (int(part, 16) for part in m.groups())
    return (r, g, b)


def ansi_color(hex_code: str, category: int = _FOREGROUND) -> str:
    """Return the 24-bit SGR sequence for *hex_code*, or ``""`` if malformed."""
    rgb = hex_to_rgb(hex_code)
    if rgb is None:
        logger.debug("Ignoring malformed hex color %r", hex_code)
        return ""
    r, g, b = rgb
    return f"\x1b[{category};2;{r};{g};{b}m"


def ansi_font(attr: Font) -> str:
    """Return the SGR sequence for a font attribute name."""
    try:
        code = FONT_CODES[attr]
    except KeyError:
        raise ValueError(
            f"Unknown font {attr!r}; expected one of {', '.join(FONT_CODES)}"
        ) from None
    return f"\x1b[{code}m"


def wrap_lines(cell: Cell, prefix: str) -> Cell:
    """Return a copy of *cell* with each line wrapped in *prefix* and a reset."""
    return dataclasses.replace(
        cell, lines=tuple(f"{prefix}{line}{RESET}" for line in cell.lines)
    )


def colorize(cell: Cell, hex_code: str) -> Cell:
    """Foreground color. A malformed code leaves only the trailing reset."""
    return wrap_lines(cell, ansi_color(hex_code, _FOREGROUND))


def background(cell: Cell, hex_code: str) -> Cell:
    """Background color. A malformed code leaves only the trailing reset."""
    return wrap_lines(cell, ansi_color(hex_code, _BACKGROUND))


def font(cell: Cell, attr: Font) -> Cell:
    return wrap_lines(cell, ansi_font(attr))
