"""CLI entry point for boxgrid. Uses Click for argument parsing."""

from __future__ import annotations

import csv
import json
import logging
from typing import Any, TextIO

import click

from boxgrid.borders import border_styles
from boxgrid.cell import Cell, to_cell
from boxgrid.config import Settings, load_settings
from boxgrid.errors import BoxgridError
from boxgrid.table import Table

logger = logging.getLogger(__name__)


def _read_csv(stream: TextIO) -> list[list[Any]]:
    try:
        return list(csv.reader(stream))
    except (UnicodeDecodeError, csv.Error) as e:
        raise click.ClickException(f"Invalid CSV input: {e}") from e


def _read_json(stream: TextIO) -> list[list[Any]]:
    """Read a list of objects or a list of lists into header + rows."""
    try:
        data = json.load(stream)
    except ValueError as e:
        raise click.ClickException(f"Invalid JSON input: {e}") from e
    if not isinstance(data, list):
        raise click.ClickException("JSON input must be a list")
    if not data:
        return []
    if all(isinstance(item, dict) for item in data):
        keys = list(data[0])
        return [keys, *([item.get(k, "") for k in keys] for item in data)]
    if all(isinstance(item, list) for item in data):
        return data
    raise click.ClickException("JSON input must be a list of objects or a list of lists")


def _header_cell(value: Any, settings: Settings) -> Cell:
    cell = to_cell(value)
    if settings.header_color:
        cell = cell.color(settings.header_color)
    if settings.header_font:
        cell = cell.font(settings.header_font)  # type: ignore[arg-type]
    return cell


def build_table(rows: list[list[Any]], settings: Settings, header: bool = True) -> Table:
    table = Table(settings.border)  # type: ignore[arg-type]
    if header and rows:
        table.add_header([_header_cell(v, settings) for v in rows[0]])
        rows = rows[1:]
    table.add_rows(rows)
    return table


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["csv", "json"]),
    default="csv",
    help="Input format",
)
@click.option(
    "--border",
    type=click.Choice(border_styles()),
    default=None,
    help="Border style (overrides the config file)",
)
@click.option("--no-header", is_flag=True, help="Treat the first record as data")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (default: $BOXGRID_CONFIG or ~/.boxgrid.json)",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
)
def main(source, fmt, border, no_header, config_path, log_level):
    """Render CSV or JSON from SOURCE (default: stdin) as a box-drawn table."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        settings = load_settings(config_path)
        if border is not None:
            settings.border = border
        rows = _read_json(source) if fmt == "json" else _read_csv(source)
        logger.debug("Read %d records from %s", len(rows), source.name)
        table = build_table(rows, settings, header=not no_header)
    except BoxgridError as e:
        raise click.ClickException(str(e)) from e

    table.display()


if __name__ == "__main__":
    main()
