"""boxgrid: box-drawn tables for terminal output."""

from boxgrid.borders import Border, BorderStyle, border_styles, get_border
from boxgrid.cell import Cell, SupportsCell, to_cell
from boxgrid.color import FONT_CODES, Font, background, colorize, font
from boxgrid.errors import ArityError, BoxgridError, ConfigError
from boxgrid.records import Column, to_table
from boxgrid.row import Row
from boxgrid.table import Table, new_table
from boxgrid.width import pad_to_width, strip_ansi, visible_width

__all__ = [
    # Cells
    "Cell",
    "SupportsCell",
    "to_cell",
    "Row",
    # Decoration
    "Font",
    "FONT_CODES",
    "colorize",
    "background",
    "font",
    # Borders
    "Border",
    "BorderStyle",
    "border_styles",
    "get_border",
    # Table
    "Table",
    "new_table",
    "Column",
    "to_table",
    # Width
    "visible_width",
    "strip_ansi",
    "pad_to_width",
    # Errors
    "BoxgridError",
    "ArityError",
    "ConfigError",
]
