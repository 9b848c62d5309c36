"""Visible width measurement for table content.

Strips ANSI SGR / erase-line sequences and measures what is left in terminal
display columns, so colored and plain text of the same length line up.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Regex patterns for ANSI sequences
# ---------------------------------------------------------------------------

# CSI sequences: ESC[ <params> m|K
_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[mK]")


def strip_ansi(text: str) -> str:
    """Remove ANSI ``ESC[...m`` / ``ESC[...K`` sequences from *text*.

    A ``[`` or digit run that is not preceded by the escape byte is ordinary
    content and is kept.
    """
    if "\x1b" not in text:
        return text
    return _ANSI_RE.sub("", text)


# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Control characters and anything wcwidth cannot classify -> 1
    2. Clusters led by an emoji (ZWJ sequences, skin tones, flags) -> 2
    3. Leading combining mark or format character -> 0
    4. Otherwise wcwidth of the first codepoint.

    A ZWJ or VS16 after a plain letter does not widen it.
    """
    if not g:
        return 0

    # NUL, "\r\n" and other C0/C1 controls
    if unicodedata.category(g[0]) == "Cc":
        return 1

    if len(g) == 1:
        w = _wcwidth.wcwidth(g)
        return 1 if w < 0 else w

    first_cp = ord(g[0])

    # Common emoji ranges (regional indicators and skin tones included)
    if first_cp >= 0x1F000:
        return 2

    # Miscellaneous symbols, dingbats
    if 0x2600 <= first_cp <= 0x27BF:
        return 2

    w = _wcwidth.wcwidth(g[0])
    return 1 if w < 0 else w


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------

def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    * Strips ANSI escape sequences.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    # Fast ASCII path: all codepoints in 0x20..0x7E
    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += _grapheme_width(g)

    return _cache_width(stripped, total)


def pad_to_width(text: str, width: int) -> str:
    """Right-pad *text* with spaces to *width* visible columns.

    Escape sequences in *text* are kept; only display columns are counted.
    Text already at or past *width* is returned unchanged.
    """
    padding = width - visible_width(text)
    if padding <= 0:
        return text
    return text + " " * padding
