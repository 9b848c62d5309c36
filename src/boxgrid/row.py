"""Row - one horizontal record of cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from boxgrid.cell import Cell, to_cell
from boxgrid.width import pad_to_width


@dataclass(frozen=True)
class Row:
    cells: tuple[Cell, ...] = ()

    @classmethod
    def of(cls, values: Row | Iterable[Any]) -> Row:
        """Build a row, converting each value with :func:`to_cell`."""
        if isinstance(values, Row):
            return values
        return cls(tuple(to_cell(v) for v in values))

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def height(self) -> int:
        """Number of grid lines this row occupies (its tallest cell)."""
        return max((cell.height for cell in self.cells), default=1)

    def widths(self) -> list[int]:
        """Visible width of each cell, in column order."""
        return [cell.width for cell in self.cells]

    def expand(self, widths: Sequence[int]) -> list[list[str]]:
        """Lay the row out as ``height`` lines of padded column strings.

        Cells shorter than the row get blank lines below their content, and
        every entry is right-padded to its column's width in display columns.

        Example, with widths ``[1, 1, 1]``::

            Row.of(["a", "b\\nc", "e"]).expand([1, 1, 1])
            # [["a", "b", "e"],
            #  [" ", "c", " "]]
        """
        height = self.height
        return [
            [
                pad_to_width(cell.lines[i] if i < cell.height else "", width)
                for cell, width in zip(self.cells, widths)
            ]
            for i in range(height)
        ]
