"""Pydantic models for API request/response schemas."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field

from torus_snake.config import MAX_INITIAL_GROWTH


class GameStatus(str, enum.Enum):
    """Lifecycle states for a hosted game."""

    ACTIVE = "active"
    STOPPED = "stopped"


class CreateGameRequest(BaseModel):
    """Request body for POST /games."""

    board_width: int | None = Field(default=None, ge=1, le=200)
    board_height: int | None = Field(default=None, ge=1, le=200)
    initial_growth: int | None = Field(
        default=None, ge=0, le=MAX_INITIAL_GROWTH,
    )
    seed: int | None = Field(default=None, ge=0)


class TurnRequest(BaseModel):
    """Request body for POST /games/{game_id}/turn."""

    key: str = Field(min_length=1, max_length=32)


class GameSummary(BaseModel):
    """Compact game info for list endpoints."""

    game_id: str
    status: GameStatus
    board_width: int
    board_height: int
    tick_rate_ms: int
    tick: int


class TurnResponse(BaseModel):
    """Heading the key was mapped to; ``INVALID`` means ignored."""

    game_id: str
    direction: str
