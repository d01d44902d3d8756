"""Column width policies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from pi.table.errors import IndexOutOfRangeError
from pi.table.unicode import visible_width


@dataclass(frozen=True)
class DynamicFill:
    """Equal widths that fill (nearly) the whole surface width."""


@dataclass(frozen=True)
class DynamicHeaderLength:
    """Each column is as wide as its header plus ``padding`` on both sides."""

    padding: int = 0


@dataclass(frozen=True)
class StaticAll:
    """Every column has the same fixed width."""

    width: int


@dataclass(frozen=True)
class StaticIndividual:
    """Fixed per-column widths, indexed by visible column position."""

    widths: Sequence[int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "widths", tuple(self.widths))


WidthPolicy = Union[DynamicFill, DynamicHeaderLength, StaticAll, StaticIndividual]


def column_width(
    col: int,
    headers: Sequence[str],
    policy: WidthPolicy,
    surface_width: int,
) -> int:
    """Return the width of column *col* under *policy*.

    Pure: the header row and every body row call this with the same
    arguments and get the same answer, which keeps the columns aligned.
    """
    if isinstance(policy, DynamicFill):
        num = len(headers)
        if num == 0:
            return 0
        width = surface_width // num
        # Round odd widths up to even, unless the columns already fill the
        # surface exactly.
        if width % 2 != 0 and width * num != surface_width:
            width += 1
        while width * num < surface_width - 1:
            width += 1
        return width
    if isinstance(policy, DynamicHeaderLength):
        if col >= len(headers):
            raise IndexOutOfRangeError(col, len(headers))
        return visible_width(headers[col]) + policy.padding * 2
    if isinstance(policy, StaticAll):
        return policy.width
    if isinstance(policy, StaticIndividual):
        if col >= len(policy.widths):
            raise IndexOutOfRangeError(col, len(policy.widths))
        return policy.widths[col]
    raise TypeError(f"Unknown width policy: {policy!r}")
