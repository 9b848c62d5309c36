"""Tests for boxgrid.records -- tables from dataclasses and mappings."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from boxgrid.records import Column, dataclass_columns, to_table


@dataclass
class Movie:
    id: int = field(metadata={"table": {"rename": "ID"}})
    title: str = field(metadata={"table": {"rename": "Title"}})
    price: float = field(metadata={"table": {"rename": "Price €"}})


@dataclass
class Styled:
    name: str = field(metadata={"table": {"color": "#ff0000", "font": "bold"}})
    note: str = field(default="", metadata={"table": {"bg": "#000000"}})
    secret: str = field(default="", metadata={"table": {"skip": True}})


MOVIES = [
    Movie(id=1, title="Harry \nPotter", price=14.87),
    Movie(id=2, title="Spider-man", price=18.80),
]


class TestToTableFromDataclasses:
    def test_renamed_columns(self) -> None:
        assert to_table(MOVIES).render() == (
            "╔════╤════════════╤═════════╗\n"
            "║ ID │ Title      │ Price € ║\n"
            "╟────┼────────────┼─────────╢\n"
            "║ 1  │ Harry      │ 14.87   ║\n"
            "║    │ Potter     │         ║\n"
            "╟────┼────────────┼─────────╢\n"
            "║ 2  │ Spider-man │ 18.8    ║\n"
            "╚════╧════════════╧═════════╝"
        )

    def test_field_name_is_default_title(self) -> None:
        table = to_table([Styled(name="a")])
        assert [str(c) for c in table.header.cells] == ["name", "note"]  # type: ignore[union-attr]

    def test_decoration_applies_to_data_cells(self) -> None:
        table = to_table([Styled(name="a", note="n")])
        name, note = table.rows[0].cells
        assert name.lines == ("\x1b[1m\x1b[38;2;255;0;0ma\x1b[0m\x1b[0m",)
        assert note.lines == ("\x1b[48;2;0;0;0mn\x1b[0m",)

    def test_header_is_not_decorated(self) -> None:
        table = to_table([Styled(name="a")])
        assert table.header.cells[0].lines == ("name",)  # type: ignore[union-attr]

    def test_skipped_field(self) -> None:
        assert to_table([Styled(name="a", secret="s")]).column_count == 2

    def test_empty_with_type_is_header_only(self) -> None:
        table = to_table([], record_type=Movie)
        assert table.rows == ()
        assert table.column_widths() == [2, 5, 7]

    def test_empty_without_type(self) -> None:
        assert to_table([]).column_count is None

    def test_unknown_option_rejected(self) -> None:
        @dataclass
        class Bad:
            x: int = field(metadata={"table": {"colour": "#ffffff"}})

        with pytest.raises(ValueError, match="colour"):
            dataclass_columns(Bad)


class TestToTableFromMappings:
    def test_keys_of_first_mapping(self) -> None:
        table = to_table([{"a": 1, "b": 2}, {"b": 3, "a": 4}])
        assert [str(c) for c in table.header.cells] == ["a", "b"]  # type: ignore[union-attr]
        assert [str(c) for c in table.rows[1].cells] == ["4", "3"]

    def test_missing_key_is_empty(self) -> None:
        table = to_table([{"a": 1, "b": 2}, {"a": 3}])
        assert str(table.rows[1].cells[1]) == ""

    def test_unsupported_records(self) -> None:
        with pytest.raises(TypeError):
            to_table([(1, 2)])

    def test_mixed_records(self) -> None:
        with pytest.raises(TypeError):
            to_table([{"a": 1}, (1,)])


class TestColumn:
    def test_plain(self) -> None:
        assert Column(key="k", title="K").cell(5).lines == ("5",)

    def test_order_is_color_bg_font(self) -> None:
        cell = Column(key="k", title="K", color="#000000", bg="#ffffff", font="italic").cell("x")
        assert str(cell) == (
            "\x1b[3m\x1b[48;2;255;255;255m\x1b[38;2;0;0;0mx\x1b[0m\x1b[0m\x1b[0m"
        )
