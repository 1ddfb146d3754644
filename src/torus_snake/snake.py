"""Snake representation and segment-following movement."""

from __future__ import annotations

from dataclasses import dataclass, replace

from torus_snake.geometry import BoardMetric, Direction, Point, delta, translate


@dataclass(frozen=True)
class SnakePart:
    """One body segment.

    ``direction`` is the heading that carried the segment to
    ``location``, not the snake's intended heading.
    """

    direction: Direction
    location: Point

    def to_dict(self) -> dict:
        return {
            "direction": self.direction.name,
            "location": self.location.to_dict(),
        }


# Stand-in head for a snake without a body.
SENTINEL_PART = SnakePart(Direction.INVALID, Point(-1, -1))


@dataclass(frozen=True)
class Snake:
    """A snake as an ordered tuple of segments.

    The head is ``body[0]``; the tail is ``body[-1]``. ``direction`` is
    the heading the head will take on the next tick.
    """

    direction: Direction
    body: tuple[SnakePart, ...]

    def __post_init__(self) -> None:
        # Accept any iterable, store an immutable copy.
        object.__setattr__(self, "body", tuple(self.body))

    def __len__(self) -> int:
        return len(self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "direction": self.direction.name,
            "body": [part.to_dict() for part in self.body],
        }


def head_of(snake: Snake) -> SnakePart:
    """Return the head segment, or the sentinel part for an empty body."""
    return snake.body[0] if snake.body else SENTINEL_PART


def turn(snake: Snake, direction: Direction) -> Snake:
    """Set the intended heading. ``INVALID`` leaves the snake untouched.

    Reversing straight into the body is allowed.
    """
    if direction is Direction.INVALID:
        return snake
    return replace(snake, direction=direction)


def slither(snake: Snake, board_metric: BoardMetric) -> Snake:
    """Move every segment one step.

    The head takes the snake's intended heading; each following segment
    takes the heading its predecessor had before this step, so it lands
    on the cell the predecessor just left.
    """
    incoming = snake.direction
    moved: list[SnakePart] = []
    for part in snake.body:
        outgoing = part.direction
        moved.append(
            SnakePart(
                incoming,
                translate(part.location, delta(incoming), board_metric),
            )
        )
        incoming = outgoing
    return Snake(snake.direction, tuple(moved))


def grow(snake: Snake, board_metric: BoardMetric) -> Snake:
    """Prepend a new head one step ahead along the current head's heading."""
    head = head_of(snake)
    new_head = SnakePart(
        head.direction,
        translate(head.location, delta(head.direction), board_metric),
    )
    return Snake(snake.direction, (new_head, *snake.body))


def grow_by(snake: Snake, count: int, board_metric: BoardMetric) -> Snake:
    """Apply :func:`grow` *count* times, building the new body once."""
    added: list[SnakePart] = []
    head = head_of(snake)
    for _ in range(count):
        head = SnakePart(
            head.direction,
            translate(head.location, delta(head.direction), board_metric),
        )
        added.append(head)
    return Snake(snake.direction, (*reversed(added), *snake.body))
