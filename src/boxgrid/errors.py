"""Exceptions raised by boxgrid."""

from __future__ import annotations


class BoxgridError(Exception):
    """Base class for boxgrid errors."""


class ArityError(BoxgridError, ValueError):
    """A row's cell count does not match the table's column count."""

    def __init__(self, expected: int, actual: int, role: str = "row") -> None:
        self.expected = expected
        self.actual = actual
        self.role = role
        super().__init__(
            f"{role} has {actual} cell{'s' if actual != 1 else ''}, "
            f"table has {expected} column{'s' if expected != 1 else ''}"
        )


class ConfigError(BoxgridError):
    """A settings file exists but cannot be used."""
