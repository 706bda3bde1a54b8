"""Rectangles of screens and monitors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with its origin at the top-left corner."""

    x: int
    y: int
    width: int
    height: int

    def intersect(self, x: int, y: int, w: int, h: int) -> int:
        """Return the area shared by this rectangle and the one given."""
        dx = max(0, min(x + w, self.x + self.width) - max(x, self.x))
        dy = max(0, min(y + h, self.y + self.height) - max(y, self.y))
        return dx * dy


def unique_geometries(screens: Iterable[Rect]) -> list[Rect]:
    """Drop screens whose geometry repeats an earlier one, keeping the order."""
    seen: set[Rect] = set()
    unique: list[Rect] = []
    for screen in screens:
        rect = Rect(screen.x, screen.y, screen.width, screen.height)
        if rect not in seen:
            seen.add(rect)
            unique.append(rect)
    return unique