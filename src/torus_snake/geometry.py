"""Board geometry and wrap-around coordinate translation."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple


class Direction(enum.Enum):
    """Headings with (dx, dy) values; y grows downwards."""

    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)
    # No heading: used by the placeholder head of an empty body.
    INVALID = (0, 0)


CARDINALS: tuple[Direction, ...] = (
    Direction.EAST,
    Direction.NORTH,
    Direction.WEST,
    Direction.SOUTH,
)


class Point(NamedTuple):
    """A board cell addressed as (x, y)."""

    x: int
    y: int

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


class Delta(NamedTuple):
    """A displacement along both axes."""

    dx: int
    dy: int


@dataclass(frozen=True)
class BoardMetric:
    """Board dimensions; the modulus for wrap-around on each axis."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be at least 1×1.")

    def contains(self, point: Point) -> bool:
        """Check whether a point lies on the board."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


def delta(direction: Direction) -> Delta:
    """Return the one-step displacement for *direction*."""
    return Delta(*direction.value)


def translate(point: Point, step: Delta, board_metric: BoardMetric) -> Point:
    """Move *point* by *step*, re-entering from the opposite edge.

    Adding the dimension before the modulus keeps the operand
    non-negative for any single step.
    """
    width, height = board_metric.width, board_metric.height
    return Point(
        (point.x + step.dx + width) % width,
        (point.y + step.dy + height) % height,
    )
