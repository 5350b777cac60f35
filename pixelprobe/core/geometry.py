"""Rectangle and point primitives used by discovery and mapping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; ``width`` and ``height`` are never negative."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        # Hosts may report negative sizes for collapsed nodes
        if self.width < 0:
            object.__setattr__(self, "width", 0)
        if self.height < 0:
            object.__setattr__(self, "height", 0)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Point) -> bool:
        """Half-open containment: the right and bottom edges are outside."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )

    def clamped(self, minimum: float = 1) -> Rect:
        """Return a copy with each dimension raised to at least *minimum*."""
        return Rect(self.x, self.y, max(minimum, self.width), max(minimum, self.height))


def scale_factors(
    width: float, height: float, image_width: int, image_height: int
) -> tuple[float, float]:
    """Per-axis zoom of a *width* x *height* area showing the given image."""
    return width / max(1, image_width), height / max(1, image_height)
