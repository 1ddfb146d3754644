"""Key identifier to heading mapping."""

from __future__ import annotations

from torus_snake.geometry import Direction

_KEY_MAP: dict[str, Direction] = {
    "arrowup": Direction.NORTH,
    "arrowdown": Direction.SOUTH,
    "arrowleft": Direction.WEST,
    "arrowright": Direction.EAST,
    "up": Direction.NORTH,
    "down": Direction.SOUTH,
    "left": Direction.WEST,
    "right": Direction.EAST,
}


def to_direction(key: object) -> Direction:
    """Map a key name such as ``"ArrowUp"`` to a heading.

    Unknown keys map to ``Direction.INVALID``, which turning ignores.
    """
    if not isinstance(key, str):
        return Direction.INVALID
    return _KEY_MAP.get(key.lower(), Direction.INVALID)
