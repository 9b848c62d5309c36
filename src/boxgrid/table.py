"""Table layout engine.

Resolves column widths from the header and rows, expands multi-line rows into
grid lines and joins everything with border glyphs::

    ╔════╤═════════╤═══════╗
    ║ ID │ Title   │ Price ║
    ╟────┼─────────┼───────╢
    ║ 1  │ Harry   │ 14.87 ║
    ║    │ Potter  │       ║
    ╚════╧═════════╧═══════╝
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Iterable, TextIO

from boxgrid.borders import Border, BorderStyle, get_border
from boxgrid.errors import ArityError
from boxgrid.row import Row

logger = logging.getLogger(__name__)

# Spaces added on each side of a cell's content
_PADDING = 1


class Table:
    """A header, data rows and a border style, rendered on demand.

    ``add_header`` / ``add_row`` return the table so calls can be chained.
    Column widths are not stored; :meth:`render` recomputes them each time.
    """

    def __init__(self, border: BorderStyle | Border = "default") -> None:
        self._header: Row | None = None
        self._rows: list[Row] = []
        self._border = get_border(border)

    # -- state ---------------------------------------------------------------

    @property
    def header(self) -> Row | None:
        return self._header

    @property
    def rows(self) -> tuple[Row, ...]:
        return tuple(self._rows)

    @property
    def border(self) -> Border:
        return self._border

    @property
    def column_count(self) -> int | None:
        """Number of columns, or ``None`` until a header or row is added."""
        if self._header is not None:
            return len(self._header)
        if self._rows:
            return len(self._rows[0])
        return None

    # -- construction ----------------------------------------------------------

    def add_header(self, cells: Row | Iterable[Any]) -> Table:
        """Set the header row, replacing any previous header."""
        row = Row.of(cells)
        if self._rows and len(row) != len(self._rows[0]):
            raise ArityError(len(self._rows[0]), len(row), role="header")
        self._header = row
        return self

    def add_row(self, cells: Row | Iterable[Any]) -> Table:
        """Append a data row."""
        row = Row.of(cells)
        expected = self.column_count
        if expected is not None and len(row) != expected:
            raise ArityError(expected, len(row))
        self._rows.append(row)
        return self

    def add_rows(self, rows: Iterable[Row | Iterable[Any]]) -> Table:
        for cells in rows:
            self.add_row(cells)
        return self

    def set_border(self, style: BorderStyle | Border) -> None:
        self._border = get_border(style)

    def with_border(self, style: BorderStyle | Border) -> Table:
        """Chainable form of :meth:`set_border`."""
        self.set_border(style)
        return self

    # -- layout ----------------------------------------------------------------

    def _sections(self) -> list[Row]:
        if self._header is None:
            return list(self._rows)
        return [self._header, *self._rows]

    def column_widths(self) -> list[int]:
        """Widest visible content per column, header included, without padding."""
        widths = [0] * (self.column_count or 0)
        for row in self._sections():
            for index, width in enumerate(row.widths()):
                if width > widths[index]:
                    widths[index] = width
        return widths

    def _rule(
        self, widths: list[int], left: str, fill: str, joint: str, right: str
    ) -> str:
        return left + joint.join(fill * (w + 2 * _PADDING) for w in widths) + right

    def _lines(self, row: Row, widths: list[int]) -> list[str]:
        b = self._border
        pad = " " * _PADDING
        return [
            b.left + b.middle.join(f"{pad}{text}{pad}" for text in columns) + b.right
            for columns in row.expand(widths)
        ]

    def render(self) -> str:
        """Return the full grid. No trailing newline; state is not modified."""
        b = self._border
        widths = self.column_widths()
        logger.debug("Column widths: %s", widths)

        out = [self._rule(widths, b.top_left, b.top, b.top_mid, b.top_right)]
        for index, row in enumerate(self._sections()):
            if index > 0:
                out.append(self._rule(widths, b.left_mid, b.mid, b.mid_mid, b.right_mid))
            out.extend(self._lines(row, widths))
        out.append(
            self._rule(widths, b.bottom_left, b.bottom, b.bottom_mid, b.bottom_right)
        )
        return "\n".join(out)

    def display(self, file: TextIO | None = None) -> None:
        """Write the rendered table and a newline to *file* in one write."""
        stream = file if file is not None else sys.stdout
        stream.write(self.render() + "\n")
        stream.flush()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Table(columns={self.column_count}, rows={len(self._rows)}, "
            f"header={self._header is not None})"
        )


def new_table(border: BorderStyle | Border = "default") -> Table:
    """Create an empty table."""
    return Table(border)
