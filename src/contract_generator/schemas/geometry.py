"""
Geometry value types in PDF user space (points, origin at the bottom-left).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its lower-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_pdf_array(cls, values) -> "Rect":
        """Build a rectangle from a PDF ``[x1 y1 x2 y2]`` array in any corner order."""
        x1, y1, x2, y2 = (float(v) for v in values)
        return cls(
            x=min(x1, x2),
            y=min(y1, y2),
            width=abs(x2 - x1),
            height=abs(y2 - y1),
        )

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class Placement:
    """Where and how large an image is drawn; ``rotation`` is counter-clockwise degrees."""

    x: float
    y: float
    width: float
    height: float
    rotation: float = 0

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def shifted(self, dx: float = 0, dy: float = 0) -> "Placement":
        return Placement(self.x + dx, self.y + dy, self.width, self.height, self.rotation)
