"""Cell colors and text styles, encoded as ANSI SGR sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

UnderlineStyle = Literal["off", "single", "double", "curly", "dotted", "dashed"]

_UNDERLINE_CODES: dict[str, str] = {
    "single": "4:1",
    "double": "4:2",
    "curly": "4:3",
    "dotted": "4:4",
    "dashed": "4:5",
}

RESET = "\x1b[0m"


@dataclass(frozen=True)
class Color:
    """A terminal color: the default color, a 256-palette index, or RGB."""

    rgb: tuple[int, int, int] | None = None
    index: int | None = None

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        return cls(rgb=(r, g, b))

    @classmethod
    def from_index(cls, index: int) -> Color:
        return cls(index=index)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#rrggbb`` (the leading ``#`` is optional)."""
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Invalid hex color: {value!r}")
        return cls(rgb=(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)))

    @property
    def is_default(self) -> bool:
        return self.rgb is None and self.index is None

    def sgr_params(self, background: bool) -> str:
        """Return the SGR parameters selecting this color, or ``""``."""
        base = 48 if background else 38
        if self.rgb is not None:
            r, g, b = self.rgb
            return f"{base};2;{r};{g};{b}"
        if self.index is not None:
            return f"{base};5;{self.index}"
        return ""


DEFAULT_COLOR = Color()


@dataclass(frozen=True)
class Style:
    """Visual attributes of a terminal cell."""

    fg: Color = DEFAULT_COLOR
    bg: Color = DEFAULT_COLOR
    bold: bool = False
    italic: bool = False
    ul_style: UnderlineStyle = "off"

    def sgr(self) -> str:
        """Return the escape sequence that switches a reset terminal to this style."""
        params: list[str] = []
        if self.bold:
            params.append("1")
        if self.italic:
            params.append("3")
        if self.ul_style != "off":
            params.append(_UNDERLINE_CODES[self.ul_style])
        fg = self.fg.sgr_params(background=False)
        if fg:
            params.append(fg)
        bg = self.bg.sgr_params(background=True)
        if bg:
            params.append(bg)
        if not params:
            return ""
        return f"\x1b[{';'.join(params)}m"


DEFAULT_STYLE = Style()


@dataclass(frozen=True)
class Segment:
    """A run of text printed with one style."""

    text: str
    style: Style = DEFAULT_STYLE
