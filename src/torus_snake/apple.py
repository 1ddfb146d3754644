"""Random placement helpers for apples and starting headings."""

from __future__ import annotations

import numpy as np

from torus_snake.geometry import CARDINALS, BoardMetric, Direction, Point


def _ensure_rng(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def random_point(
    board_metric: BoardMetric, rng: np.random.Generator | None = None,
) -> Point:
    """Pick a cell uniformly per axis.

    Cells under the snake are not excluded.
    """
    rng = _ensure_rng(rng)
    x = int(rng.integers(0, board_metric.width))
    y = int(rng.integers(0, board_metric.height))
    return Point(x, y)


def random_direction(rng: np.random.Generator | None = None) -> Direction:
    """Pick one of the four cardinal headings."""
    rng = _ensure_rng(rng)
    return CARDINALS[int(rng.integers(0, len(CARDINALS)))]
