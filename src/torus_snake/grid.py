"""Grid snapshot of a game state and its text rendering."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from torus_snake.engine import GameState


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    APPLE = 2


CELL_SYMBOLS: dict[CellType, str] = {
    CellType.EMPTY: ".",
    CellType.SNAKE: "X",
    CellType.APPLE: "O",
}


def to_grid(state: GameState) -> np.ndarray:
    """Project *state* onto a ``(height, width)`` array indexed ``[y, x]``.

    A fresh array is allocated on every call. The apple is painted last,
    so it stays visible when a segment covers the same cell.
    """
    metric = state.board_metric
    cells = np.full(
        (metric.height, metric.width), CellType.EMPTY, dtype=np.int8,
    )
    for part in state.snake.body:
        cells[part.location.y, part.location.x] = CellType.SNAKE
    cells[state.apple.y, state.apple.x] = CellType.APPLE
    return cells


def render_as_string(grid: np.ndarray, separator: str = " ") -> str:
    """Join each row's symbols with *separator* and rows with newlines."""
    return "\n".join(
        separator.join(CELL_SYMBOLS[CellType(code)] for code in row)
        for row in grid.tolist()
    )
