"""Border glyph sets for drawing tables."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Literal

from boxgrid.width import visible_width

BorderStyle = Literal["default", "simple", "empty"]


@dataclass(frozen=True)
class Border:
    """The fifteen glyphs used to draw a table.

    ::

        top_left   top   top_mid     top     top_right
        left      cell   middle     cell     right
        left_mid   mid   mid_mid     mid     right_mid
        bottom_left bottom bottom_mid bottom bottom_right
    """

    top: str = "═"
    top_mid: str = "╤"
    top_left: str = "╔"
    top_right: str = "╗"
    bottom: str = "═"
    bottom_mid: str = "╧"
    bottom_left: str = "╚"
    bottom_right: str = "╝"
    left: str = "║"
    left_mid: str = "╟"
    middle: str = "│"
    right: str = "║"
    right_mid: str = "╢"
    mid: str = "─"
    mid_mid: str = "┼"

    def __post_init__(self) -> None:
        for f in fields(self):
            glyph = getattr(self, f.name)
            if visible_width(glyph) != 1:
                raise ValueError(
                    f"Border glyph {f.name!r} must be one column wide, got {glyph!r}"
                )

    @classmethod
    def simple(cls) -> Border:
        return cls(
            top="-",
            top_mid="+",
            top_left="+",
            top_right="+",
            bottom="-",
            bottom_mid="+",
            bottom_left="+",
            bottom_right="+",
            left="|",
            left_mid="+",
            middle="|",
            right="|",
            right_mid="+",
            mid="-",
            mid_mid="+",
        )

    @classmethod
    def empty(cls) -> Border:
        return cls(**{f.name: " " for f in fields(cls)})


_PRESETS: dict[str, Border] = {
    "default": Border(),
    "simple": Border.simple(),
    "empty": Border.empty(),
}


def get_border(style: BorderStyle | Border) -> Border:
    """Resolve a preset name to its :class:`Border`; borders pass through."""
    if isinstance(style, Border):
        return style
    try:
        return _PRESETS[style]
    except KeyError:
        raise ValueError(
            f"Unknown border style {style!r}; expected one of {', '.join(_PRESETS)}"
        ) from None


def border_styles() -> list[str]:
    """Names of the built-in presets."""
    return list(_PRESETS)
