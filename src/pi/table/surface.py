"""In-memory drawing surface: a cell grid with clipped child windows.

A ``Screen`` owns the cells. ``Window`` objects are rectangular views onto it;
children are clipped to their parent so drawing can never escape the region
it was given. ``Screen.render`` produces one ANSI-styled string per row, the
same line format every pi-tui component returns from ``render``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

from pi.table.style import DEFAULT_STYLE, RESET, Segment, Style
from pi.table.unicode import (
    TAB_WIDTH,
    grapheme_width,
    is_whitespace_char,
    iterate_graphemes,
    strip_ansi,
    visible_width,
)

WrapMode = Literal["grapheme", "word", "none"]


@dataclass
class Cell:
    """One terminal cell.

    ``width`` is 0 for the continuation cells that follow a wide grapheme.
    """

    char: str = " "
    width: int = 1
    style: Style = DEFAULT_STYLE


@dataclass
class PrintResult:
    col: int
    row: int
    overflow: bool
    written: int


class Screen:
    """A fixed-size grid of cells."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def window(self) -> Window:
        """Return a window covering the whole screen."""
        return Window(self, 0, 0, self.width, self.height)

    def clear(self) -> None:
        for row in self._cells:
            for x in range(self.width):
                row[x] = Cell()

    def read_cell(self, x: int, y: int) -> Cell | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._cells[y][x]
        return None

    def write_cell(self, x: int, y: int, cell: Cell) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        row = self._cells[y]

        # Overwriting half of a wide grapheme blanks the other half.
        old = row[x]
        if old.width == 0:
            lead = x - 1
            while lead >= 0 and row[lead].width == 0:
                lead -= 1
            if lead >= 0:
                row[lead] = Cell(" ", 1, row[lead].style)
            for i in range(lead + 1, x):
                row[i] = Cell(" ", 1, row[i].style)
        if old.width > 1:
            for i in range(x + 1, min(x + old.width, self.width)):
                row[i] = Cell(" ", 1, row[i].style)

        row[x] = cell

    def row_text(self, y: int) -> str:
        """Plain text of row *y*, without styling."""
        return "".join(c.char for c in self._cells[y] if c.width > 0)

    def render(self) -> list[str]:
        """Render every row as a string with SGR escapes."""
        lines: list[str] = []
        for row in self._cells:
            parts: list[str] = []
            current = DEFAULT_STYLE
            for cell in row:
                if cell.width == 0:
                    continue
                if cell.style != current:
                    parts.append(RESET)
                    parts.append(cell.style.sgr())
                    current = cell.style
                parts.append(cell.char)
            if current != DEFAULT_STYLE:
                parts.append(RESET)
            lines.append("".join(parts))
        return lines


class Window:
    """A clipped rectangular region of a ``Screen``.

    Offsets are absolute screen coordinates; ``width`` and ``height`` are
    already clipped to the parent.
    """

    def __init__(self, screen: Screen, x_off: int, y_off: int, width: int, height: int) -> None:
        self.screen = screen
        self.x_off = x_off
        self.y_off = y_off
        self.width = max(0, width)
        self.height = max(0, height)

    def __repr__(self) -> str:
        return (
            f"Window(x_off={self.x_off}, y_off={self.y_off}, "
            f"width={self.width}, height={self.height})"
        )

    def child(
        self,
        x_off: int = 0,
        y_off: int = 0,
        width: int | None = None,
        height: int | None = None,
    ) -> Window:
        """Create a child region at (*x_off*, *y_off*) relative to this window.

        *width* and *height* are limits; the child never extends past this
        window. Offsets outside the window yield an empty child.
        """
        max_w = max(0, self.width - x_off)
        max_h = max(0, self.height - y_off)
        w = max_w if width is None else min(width, max_w)
        h = max_h if height is None else min(height, max_h)
        return Window(self.screen, self.x_off + x_off, self.y_off + y_off, w, h)

    def write_cell(self, col: int, row: int, cell: Cell) -> None:
        if 0 <= col < self.width and 0 <= row < self.height:
            self.screen.write_cell(self.x_off + col, self.y_off + row, cell)

    def read_cell(self, col: int, row: int) -> Cell | None:
        if 0 <= col < self.width and 0 <= row < self.height:
            return self.screen.read_cell(self.x_off + col, self.y_off + row)
        return None

    def fill(self, style: Style) -> None:
        """Fill every cell of the window with a blank in *style*."""
        for row in range(self.height):
            for col in range(self.width):
                self.screen.write_cell(self.x_off + col, self.y_off + row, Cell(" ", 1, style))

    def clear(self) -> None:
        self.fill(DEFAULT_STYLE)

    def print(self, segments: Iterable[Segment], wrap: WrapMode = "grapheme") -> PrintResult:
        """Print styled *segments* starting at the top-left corner.

        ``grapheme`` wraps at any grapheme, ``word`` wraps at whitespace and
        falls back to grapheme breaks for words wider than the window,
        ``none`` clips each line at the right edge. Text past the bottom edge
        is dropped and reported as ``overflow``.
        """
        printer = _Printer(self)
        for segment in segments:
            text = strip_ansi(segment.text)
            if wrap == "word":
                printer.print_words(text, segment.style)
            else:
                printer.print_graphemes(text, segment.style, clip=wrap == "none")
            if printer.overflow:
                break
        return PrintResult(printer.col, printer.row, printer.overflow, printer.written)


class _Printer:
    """Cursor state for a single ``Window.print`` call."""

    def __init__(self, win: Window) -> None:
        self.win = win
        self.col = 0
        self.row = 0
        self.overflow = False
        self.written = 0

    def _newline(self) -> None:
        self.row += 1
        self.col = 0
        if self.row >= self.win.height:
            self.overflow = True

    def _put(self, g: str, w: int, style: Style) -> None:
        self.win.write_cell(self.col, self.row, Cell(g, w, style))
        for i in range(1, w):
            self.win.write_cell(self.col + i, self.row, Cell("", 0, style))
        self.col += w
        self.written += w

    def print_graphemes(self, text: str, style: Style, clip: bool = False) -> None:
        if self.win.height == 0 or self.win.width == 0:
            self.overflow = bool(text)
            return
        clipped = False
        for g in iterate_graphemes(text):
            if self.overflow:
                return
            if g in ("\n", "\r\n"):
                clipped = False
                self._newline()
                continue
            w = TAB_WIDTH if g == "\t" else grapheme_width(g)
            if w == 0 or clipped:
                continue
            if self.col + w > self.win.width:
                if clip:
                    clipped = True
                    continue
                self._newline()
                if self.overflow:
                    return
            if g == "\t":
                for _ in range(TAB_WIDTH):
                    self._put(" ", 1, style)
            else:
                self._put(g, w, style)

    def print_words(self, text: str, style: Style) -> None:
        if self.win.height == 0 or self.win.width == 0:
            self.overflow = bool(text)
            return
        for token in _split_words(text):
            if self.overflow:
                return
            if token == "\n":
                self._newline()
                continue
            w = visible_width(token)
            if is_whitespace_char(token[0]):
                # Whitespace never starts a soft-wrapped line.
                if self.col == 0 and self.row > 0:
                    continue
                if self.col + w > self.win.width:
                    self._newline()
                    continue
                self.print_graphemes(token, style)
                continue
            if self.col > 0 and self.col + w > self.win.width:
                self._newline()
                if self.overflow:
                    return
            self.print_graphemes(token, style)


def _split_words(text: str) -> list[str]:
    """Split *text* into runs of whitespace, runs of non-whitespace and newlines."""
    tokens: list[str] = []
    current: list[str] = []
    current_ws: bool | None = None
    for g in iterate_graphemes(text):
        if g in ("\n", "\r\n"):
            if current:
                tokens.append("".join(current))
                current = []
            tokens.append("\n")
            current_ws = None
            continue
        ws = is_whitespace_char(g)
        if current and ws != current_ws:
            tokens.append("".join(current))
            current = []
        current.append(g)
        current_ws = ws
    if current:
        tokens.append("".join(current))
    return tokens


def center(win: Window, width: int, height: int) -> Window:
    """Return a child of *win* of the given size, centered within it."""
    x_off = max(0, win.width - width) // 2
    y_off = max(0, win.height - height) // 2
    return win.child(x_off, y_off, width, height)
