"""Torus Snake — wrap-around snake simulation engine."""

from torus_snake.config import GameConfig
from torus_snake.controls import to_direction
from torus_snake.engine import GameEngine, GameState, advance, create_random_game
from torus_snake.geometry import BoardMetric, Delta, Direction, Point, delta, translate
from torus_snake.grid import CellType, render_as_string, to_grid
from torus_snake.snake import Snake, SnakePart, grow, slither, turn

__all__ = [
    "BoardMetric",
    "CellType",
    "Delta",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Point",
    "Snake",
    "SnakePart",
    "advance",
    "create_random_game",
    "delta",
    "grow",
    "render_as_string",
    "slither",
    "to_direction",
    "to_grid",
    "translate",
    "turn",
]
