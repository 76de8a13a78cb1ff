"""Basic 2D geometry: coordinates, lines with step slopes, and rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field

from djinni.logger import default_logger


@dataclass
class Coordinate:
    """An integer point."""

    x: int
    y: int

    def inspect(self) -> None:
        """Log this coordinate at debug level."""
        default_logger.log_debug(
            "Djinni::Geometry::Coordinate( address:(%#x) x:(%d) y:(%d) )",
            id(self), self.x, self.y,
        )


@dataclass
class LineSlope:
    """Per-step change along a line."""

    dx: float = 0.0
    dy: float = 0.0


def slope(start: Coordinate, end: Coordinate) -> LineSlope:
    """Return the per-step delta from ``end`` towards ``start``.

    The number of steps is the larger absolute axis difference; a line of
    zero length has a zero slope.
    """
    ddx = start.x - end.x
    ddy = start.y - end.y
    steps = max(abs(ddx), abs(ddy))
    if steps == 0:
        return LineSlope(0.0, 0.0)
    return LineSlope(ddx / steps, ddy / steps)


@dataclass
class Line:
    """A segment between two coordinates, with its slope computed on creation."""

    start: Coordinate
    end: Coordinate
    slope: LineSlope = field(init=False)

    def __post_init__(self) -> None:
        self.slope = slope(self.start, self.end)

    def inspect(self) -> None:
        """Log this line at debug level."""
        default_logger.log_debug(
            "Djinni::Geometry::Line(\n\taddress:(%#x) \n\tx1:(%d) y1:(%d) "
            "\n\tx2:(%d) y2:(%d) \n\tdx:(%f) dy:(%f)\n)",
            id(self), self.start.x, self.start.y, self.end.x, self.end.y,
            self.slope.dx, self.slope.dy,
        )


@dataclass
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int
    y: int
    w: int
    h: int

    def position(self) -> Coordinate:
        """Return the top-left corner."""
        return Coordinate(self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        """Place the top-left corner at ``(x, y)``, keeping the size."""
        self.x = x
        self.y = y

    def inspect(self) -> None:
        """Log this rectangle at debug level."""
        default_logger.log_debug(
            "Djinni::Geometry::Rectangle( address:(%#x) x:(%d) y:(%d) w:(%d) h:(%d) )",
            id(self), self.x, self.y, self.w, self.h,
        )