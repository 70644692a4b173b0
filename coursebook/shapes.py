"""Points, polygons and circles with their perimeters."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Point:
    """A point on the integer grid."""

    x: int
    y: int

    def magnitude(self) -> float:
        """Distance from the origin."""
        return math.sqrt(self.x**2 + self.y**2)

    def dist(self, other: Point) -> float:
        """Distance to ``other``."""
        return (self - other).magnitude()

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass
class Polygon:
    """A closed polygon given by its corner points in order."""

    points: list[Point] = field(default_factory=list)

    def add_point(self, point: Point) -> None:
        """Append a corner point."""
        self.points.append(point)

    def left_most_point(self) -> Point | None:
        """Return the point with the smallest x, the first one on a tie."""
        return min(self.points, key=lambda point: point.x, default=None)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def length(self) -> float:
        """Total length of the edges, including the closing edge."""
        if not self.points:
            return 0.0
        following = self.points[1:] + self.points[:1]
        return sum(a.dist(b) for a, b in zip(self.points, following))

    def perimeter(self) -> float:
        """Same as :meth:`length`."""
        return self.length()


@dataclass
class Circle:
    """A circle with an integer radius."""

    center: Point
    radius: int

    def circumference(self) -> float:
        """Length of the circle's boundary."""
        return 2.0 * math.pi * self.radius

    def dist(self, other: Circle) -> float:
        """Distance between the two centres."""
        return self.center.dist(other.center)

    def perimeter(self) -> float:
        """Same as :meth:`circumference`."""
        return self.circumference()


Shape = Union[Polygon, Circle]


def perimeter(shape: Shape) -> float:
    """Return the perimeter of a polygon or circle."""
    if not isinstance(shape, (Polygon, Circle)):
        raise TypeError(f"not a shape: {shape!r}")
    return shape.perimeter()