"""Per-draw scratch scope.

Drawing works in two modes. Without an arena, only text that already exists
is shown: strings pass through, anything that would have to be built (joined
lists, reprs, ellipses, copies of columnar data) degrades to a marker or a
hard cut. With an arena, those objects are built and registered with it, and
are released together when the arena is reset at the end of the draw.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ScratchArena:
    """Owns objects created during a single draw."""

    def __init__(self) -> None:
        self._held: list[Any] = []

    def __len__(self) -> int:
        return len(self._held)

    def keep(self, obj: T) -> T:
        """Register *obj* with the arena and return it."""
        self._held.append(obj)
        return obj

    def reset(self) -> None:
        """Drop every object the arena holds."""
        if self._held:
            logger.debug("Releasing %d scratch objects", len(self._held))
        self._held.clear()


@contextmanager
def scratch_arena() -> Iterator[ScratchArena]:
    """Yield a fresh arena that is reset when the block exits, even on error."""
    arena = ScratchArena()
    try:
        yield arena
    finally:
        arena.reset()
