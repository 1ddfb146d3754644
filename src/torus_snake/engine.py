"""Tick transition over an immutable game state, plus a locked holder."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

import numpy as np

from torus_snake.apple import random_direction, random_point
from torus_snake.config import GameConfig
from torus_snake.controls import to_direction
from torus_snake.geometry import BoardMetric, Direction, Point
from torus_snake.grid import render_as_string, to_grid
from torus_snake.snake import (
    Snake,
    SnakePart,
    grow,
    grow_by,
    head_of,
    slither,
    turn,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    """The whole world for one tick."""

    board_metric: BoardMetric
    snake: Snake
    apple: Point

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "board": self.board_metric.to_dict(),
            "snake": self.snake.to_dict(),
            "apple": self.apple.to_dict(),
        }


def consume(
    snake: Snake,
    apple: Point,
    board_metric: BoardMetric,
    rng: np.random.Generator | None = None,
) -> tuple[Snake, Point]:
    """Grow the snake and relocate the apple if the head is on it."""
    if head_of(snake).location != apple:
        return snake, apple
    grown = grow(snake, board_metric)
    new_apple = random_point(board_metric, rng)
    logger.debug(
        "Apple at %s eaten; length now %d, next apple at %s.",
        tuple(apple), len(grown), tuple(new_apple),
    )
    return grown, new_apple


def advance(
    state: GameState, rng: np.random.Generator | None = None,
) -> GameState:
    """Advance the game by one tick.

    Consumption is checked against the head position reached on the
    previous tick, before the snake moves.
    """
    snake, apple = consume(state.snake, state.apple, state.board_metric, rng)
    snake = slither(snake, state.board_metric)
    return GameState(state.board_metric, snake, apple)


def create_random_game(
    config: GameConfig | None = None,
    rng: np.random.Generator | None = None,
) -> GameState:
    """Build a one-segment snake with a random heading and a random apple."""
    config = config if config is not None else GameConfig()
    rng = rng if rng is not None else np.random.default_rng(config.seed)
    metric = BoardMetric(config.board_width, config.board_height)
    heading = random_direction(rng)
    head = SnakePart(heading, random_point(metric, rng))
    return GameState(
        board_metric=metric,
        snake=Snake(heading, (head,)),
        apple=random_point(metric, rng),
    )


class GameEngine:
    """Owns one game and serializes ticks and turns.

    A single lock guards the state so a tick is never observed half
    applied, even when input and ticks arrive on different threads.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = np.random.default_rng(
            seed if seed is not None else self.config.seed,
        )
        state = create_random_game(self.config, self.rng)
        snake = grow_by(
            state.snake, self.config.initial_growth, state.board_metric,
        )
        self._state = GameState(state.board_metric, snake, state.apple)
        self._tick = 0
        self._lock = threading.Lock()

    @property
    def state(self) -> GameState:
        with self._lock:
            return self._state

    @property
    def tick(self) -> int:
        with self._lock:
            return self._tick

    def turn(self, direction: Direction) -> None:
        """Set the heading for the next tick; the latest call wins."""
        with self._lock:
            self._state = GameState(
                self._state.board_metric,
                turn(self._state.snake, direction),
                self._state.apple,
            )

    def turn_key(self, key: object) -> Direction:
        """Turn according to a key name and return the mapped heading."""
        direction = to_direction(key)
        self.turn(direction)
        return direction

    def step(self) -> dict:
        """Advance by one tick and return the serializable state."""
        with self._lock:
            self._state = advance(self._state, self.rng)
            self._tick += 1
        return self.get_state()

    def render(self) -> str:
        """Return the current grid as text."""
        return render_as_string(to_grid(self.state))

    def get_state(self) -> dict:
        """Return tick, state and rendered frame from one consistent read."""
        with self._lock:
            state, tick = self._state, self._tick
        return {
            "tick": tick,
            "state": state.to_dict(),
            "frame": render_as_string(to_grid(state)),
        }
