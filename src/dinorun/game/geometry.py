"""Axis-aligned bounding boxes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Hitbox:
    """An axis-aligned rectangle in board coordinates (y grows downward)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Hitbox") -> bool:
        """True when the two boxes overlap on both axes.

        Boxes that only share an edge do not intersect, and empty boxes
        never intersect anything.
        """
        if self.width <= 0 or self.height <= 0 or other.width <= 0 or other.height <= 0:
            return False
        return (self.x < other.right and other.x < self.right and
                self.y < other.bottom and other.y < self.bottom)

    def contains(self, px: float, py: float) -> bool:
        """True when the point lies inside the box (right/bottom edges excluded)."""
        return self.x <= px < self.right and self.y <= py < self.bottom
