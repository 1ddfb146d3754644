"""Tests for the snake module."""

from torus_snake.geometry import BoardMetric, Direction, Point
from torus_snake.snake import (
    SENTINEL_PART,
    Snake,
    SnakePart,
    grow,
    grow_by,
    head_of,
    slither,
    turn,
)

BOARD = BoardMetric(10, 10)


def _snake(direction, *parts):
    return Snake(direction, tuple(SnakePart(d, Point(x, y)) for d, x, y in parts))


class TestSnakeInit:
    def test_body_stored_as_tuple(self):
        snake = Snake(Direction.EAST, [SnakePart(Direction.EAST, Point(1, 1))])
        assert isinstance(snake.body, tuple)
        assert len(snake) == 1

    def test_head_of(self):
        snake = _snake(Direction.EAST, (Direction.EAST, 3, 3), (Direction.EAST, 2, 3))
        assert head_of(snake).location == Point(3, 3)

    def test_head_of_empty_body_is_sentinel(self):
        assert head_of(Snake(Direction.EAST, ())) == SENTINEL_PART


class TestTurn:
    def test_turn_sets_direction_only(self):
        snake = _snake(Direction.EAST, (Direction.EAST, 3, 3))
        turned = turn(snake, Direction.NORTH)
        assert turned.direction == Direction.NORTH
        assert turned.body == snake.body
        assert snake.direction == Direction.EAST

    def test_invalid_is_noop(self):
        snake = _snake(Direction.EAST, (Direction.EAST, 3, 3))
        assert turn(snake, Direction.INVALID) is snake

    def test_reversal_allowed(self):
        snake = _snake(Direction.EAST, (Direction.EAST, 3, 3), (Direction.EAST, 2, 3))
        assert turn(snake, Direction.WEST).direction == Direction.WEST


class TestSlither:
    def test_single_segment_moves_along_snake_direction(self):
        snake = _snake(Direction.NORTH, (Direction.EAST, 4, 4))
        moved = slither(snake, BOARD)
        assert moved.body == (SnakePart(Direction.NORTH, Point(4, 3)),)
        assert moved.direction == Direction.NORTH

    def test_length_preserved(self):
        snake = _snake(
            Direction.SOUTH,
            (Direction.EAST, 5, 5), (Direction.EAST, 4, 5),
            (Direction.SOUTH, 3, 5), (Direction.SOUTH, 3, 4),
        )
        assert len(slither(snake, BOARD)) == len(snake)

    def test_follower_steps_into_old_head_cell(self):
        snake = _snake(Direction.NORTH, (Direction.EAST, 2, 2), (Direction.EAST, 1, 2))
        moved = slither(snake, BOARD)
        assert moved.body[0] == SnakePart(Direction.NORTH, Point(2, 1))
        assert moved.body[1] == SnakePart(Direction.EAST, Point(2, 2))

    def test_headings_shift_down_the_body(self):
        snake = _snake(
            Direction.WEST,
            (Direction.NORTH, 5, 4), (Direction.EAST, 4, 4), (Direction.EAST, 3, 4),
        )
        moved = slither(snake, BOARD)
        assert [p.direction for p in moved.body] == [
            Direction.WEST, Direction.NORTH, Direction.EAST,
        ]
        assert [p.location for p in moved.body] == [
            Point(4, 4), Point(4, 3), Point(4, 4),
        ]

    def test_wraps_every_segment(self):
        board = BoardMetric(3, 3)
        snake = _snake(Direction.EAST, (Direction.EAST, 2, 2), (Direction.EAST, 1, 2))
        moved = slither(snake, board)
        assert [p.location for p in moved.body] == [Point(0, 2), Point(2, 2)]

    def test_input_untouched(self):
        snake = _snake(Direction.SOUTH, (Direction.EAST, 2, 2))
        slither(snake, BOARD)
        assert snake.body == (SnakePart(Direction.EAST, Point(2, 2)),)


class TestGrow:
    def test_length_increases_by_one(self):
        snake = _snake(Direction.EAST, (Direction.EAST, 2, 2), (Direction.EAST, 1, 2))
        assert len(grow(snake, BOARD)) == 3

    def test_new_head_uses_head_heading(self):
        snake = _snake(Direction.NORTH, (Direction.EAST, 2, 2))
        grown = grow(snake, BOARD)
        assert grown.body[0] == SnakePart(Direction.EAST, Point(3, 2))
        assert grown.body[1:] == snake.body
        assert grown.direction == Direction.NORTH

    def test_new_head_wraps(self):
        snake = _snake(Direction.WEST, (Direction.WEST, 0, 7))
        assert grow(snake, BOARD).body[0].location == Point(9, 7)

    def test_empty_body_does_not_fail(self):
        grown = grow(Snake(Direction.EAST, ()), BOARD)
        assert len(grown) == 1
        assert grown.body[0].direction == Direction.INVALID
        assert BOARD.contains(grown.body[0].location)

    def test_grow_by_matches_repeated_grow(self):
        snake = _snake(Direction.SOUTH, (Direction.WEST, 1, 4), (Direction.WEST, 2, 4))
        expected = snake
        for _ in range(13):
            expected = grow(expected, BOARD)
        assert grow_by(snake, 13, BOARD) == expected

    def test_grow_by_zero(self):
        snake = _snake(Direction.EAST, (Direction.EAST, 2, 2))
        assert grow_by(snake, 0, BOARD) == snake

    def test_grow_by_empty_body(self):
        grown = grow_by(Snake(Direction.EAST, ()), 2, BOARD)
        assert grown == grow(grow(Snake(Direction.EAST, ()), BOARD), BOARD)


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = _snake(Direction.NORTH, (Direction.EAST, 2, 3))
        assert snake.to_dict() == {
            "direction": "NORTH",
            "body": [{"direction": "EAST", "location": {"x": 2, "y": 3}}],
        }
