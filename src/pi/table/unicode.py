"""Unicode measurement: grapheme iteration and terminal display width.

Cells are sized in terminal columns, not code points. Everything that
measures or cuts text for the table goes through this module so that wide
(CJK, emoji) and zero-width (combining marks) graphemes line up with the
header and body columns.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterator

import grapheme
import wcwidth as _wcwidth


# CSI (including colon sub-parameters), OSC 8 hyperlinks and APC blocks.
_ESCAPE_RE = re.compile(
    r"\x1b\[[0-9;:]*[mGKHJ]"
    r"|\x1b\]8;;[^\x07]*\x07"
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"
)

TAB_WIDTH = 3

_VS16 = 0xFE0F
_ZWJ = 0x200D
# Code point ranges whose presence anywhere in a cluster makes it an emoji.
_EMOJI_MODIFIERS = (
    (0x1F3FB, 0x1F3FF),  # skin tones
    (0x1F1E6, 0x1F1FF),  # regional indicators
)
# Ranges that make a multi-code-point cluster wide when they lead it.
_WIDE_LEADS = (
    (0x1F000, 0x10FFFF),
    (0x2600, 0x27BF),  # misc symbols, dingbats
)

_MAX_CACHED = 512
_measured: dict[str, int] = {}


def iterate_graphemes(text: str) -> Iterator[str]:
    """Lazily yield the grapheme clusters of *text*.

    Each call starts a fresh iteration, so the sequence is restartable by
    calling again.
    """
    return grapheme.graphemes(text)


def _in_ranges(cp: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(lo <= cp <= hi for lo, hi in ranges)


def _is_emoji_cluster(g: str) -> bool:
    for ch in g:
        cp = ord(ch)
        if cp in (_VS16, _ZWJ) or _in_ranges(cp, _EMOJI_MODIFIERS):
            return True
    return _in_ranges(ord(g[0]), _WIDE_LEADS)


def grapheme_width(g: str) -> int:
    """Return the number of terminal columns one grapheme cluster occupies.

    Control characters, combining marks and format characters take no
    columns; emoji clusters take two; everything else is measured by
    ``wcwidth`` on its base character.
    """
    if not g:
        return 0
    base = g[0]
    if len(g) == 1:
        if unicodedata.category(base) == "Cc":
            return 0
        return max(_wcwidth.wcwidth(base), 0)
    if _is_emoji_cluster(g):
        return 2
    if unicodedata.category(base)[0] == "M" or unicodedata.category(base) == "Cf":
        return 0
    return max(_wcwidth.wcwidth(base), 0)


def _column_width(g: str) -> int:
    return TAB_WIDTH if g == "\t" else grapheme_width(g)


def strip_ansi(text: str) -> str:
    """Remove CSI, OSC 8 and APC escape sequences from *text*."""
    return _ESCAPE_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies.

    Escape sequences are ignored and tabs count as three columns. Printable
    ASCII is measured by length; other text is measured per grapheme and
    the result cached.
    """
    text = strip_ansi(text).replace("\t", " " * TAB_WIDTH)
    if not text:
        return 0
    if text.isascii() and text.isprintable():
        return len(text)

    width = _measured.get(text)
    if width is None:
        width = sum(grapheme_width(g) for g in iterate_graphemes(text))
        if len(_measured) >= _MAX_CACHED:
            _measured.clear()
        _measured[text] = width
    return width


def take_columns(text: str, max_cols: int) -> str:
    """Return the longest grapheme prefix of *text* fitting in *max_cols* columns.

    Text that fits is returned as is. Otherwise escape sequences are removed
    before cutting, so a cut never lands inside one. A wide grapheme that
    would straddle the limit is dropped entirely.
    """
    if max_cols <= 0:
        return ""
    if visible_width(text) <= max_cols:
        return text
    text = strip_ansi(text)

    kept: list[str] = []
    used = 0
    for g in iterate_graphemes(text):
        used += _column_width(g)
        if used > max_cols:
            break
        kept.append(g)
    return "".join(kept)


def is_whitespace_char(char: str) -> bool:
    return char in (" ", "\t", "\n", "\r", "\f", "\v")
