"""Build tables from dataclass instances or mappings.

Dataclass fields can tune their column through ``metadata["table"]``::

    @dataclass
    class Movie:
        id: int = field(metadata={"table": {"rename": "ID"}})
        title: str = field(metadata={"table": {"color": "#ff0000", "font": "bold"}})
        price: float = 0.0

    to_table(movies).display()

Recognized keys: ``rename``, ``color``, ``bg``, ``font`` and ``skip``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from boxgrid.cell import Cell, to_cell
from boxgrid.table import Table

_OPTION_KEYS = frozenset({"rename", "color", "bg", "font", "skip"})


@dataclass
class Column:
    """How one record attribute becomes a table column."""

    key: Any
    title: str
    color: str | None = None
    bg: str | None = None
    font: str | None = None

    def cell(self, value: Any) -> Cell:
        """Convert *value* and apply this column's decoration (color, bg, font)."""
        cell = to_cell(value)
        if self.color is not None:
            cell = cell.color(self.color)
        if self.bg is not None:
            cell = cell.bg(self.bg)
        if self.font is not None:
            cell = cell.font(self.font)  # type: ignore[arg-type]
        return cell


def dataclass_columns(record_type: type) -> list[Column]:
    """Columns for a dataclass type, honouring ``metadata["table"]`` options."""
    columns: list[Column] = []
    for f in dataclasses.fields(record_type):
        options = f.metadata.get("table", {})
        unknown = set(options) - _OPTION_KEYS
        if unknown:
            raise ValueError(
                f"Unknown table option(s) {sorted(unknown)} on field {f.name!r}"
            )
        if options.get("skip"):
            continue
        columns.append(
            Column(
                key=f.name,
                title=options.get("rename", f.name),
                color=options.get("color"),
                bg=options.get("bg"),
                font=options.get("font"),
            )
        )
    return columns


def _getter(record: Any) -> Callable[[str], Any]:
    if isinstance(record, Mapping):
        return lambda key: record.get(key, "")
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return lambda key: getattr(record, key)
    raise TypeError(
        f"Expected a dataclass instance or a mapping, got {type(record).__name__}"
    )


def to_table(records: Sequence[Any], record_type: type | None = None) -> Table:
    """Return a table with a header from the record fields and one row per record.

    Columns come from *record_type* when given, otherwise from the first
    record: its dataclass fields, or its keys for a mapping. An empty
    *records* with no *record_type* gives an empty table.
    """
    table = Table()
    if record_type is not None:
        columns = dataclass_columns(record_type)
    elif not records:
        return table
    elif isinstance(records[0], Mapping):
        columns = [Column(key=k, title=str(k)) for k in records[0]]
    elif dataclasses.is_dataclass(records[0]):
        columns = dataclass_columns(type(records[0]))
    else:
        raise TypeError(
            f"Expected dataclass instances or mappings, got {type(records[0]).__name__}"
        )

    table.add_header([c.title for c in columns])
    for record in records:
        get = _getter(record)
        table.add_row([c.cell(get(c.key)) for c in columns])
    return table
