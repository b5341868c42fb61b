"""Screen size and the simple shapes used for positions and collisions."""

from dataclasses import dataclass

WIN_WIDTH = 1024
WIN_HEIGHT = 768


@dataclass
class Point:
    """A position or a size in screen pixels."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def center(self) -> Point:
        """Return the middle point of the rectangle."""
        return Point(self.x + self.width / 2, self.y + self.height / 2)