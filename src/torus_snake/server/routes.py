"""REST API route handlers for hosted games."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from torus_snake.server.game_manager import GameManager
from torus_snake.server.models import (
    CreateGameRequest,
    GameSummary,
    TurnRequest,
    TurnResponse,
)

router = APIRouter(prefix="/games", tags=["games"])


def _get_manager(request: Request) -> GameManager:
    return request.app.state.game_manager


@router.post("", status_code=201)
async def create_game(body: CreateGameRequest, request: Request) -> GameSummary:
    """Create a game and start ticking it."""
    manager = _get_manager(request)
    try:
        game = manager.create_game(
            board_width=body.board_width,
            board_height=body.board_height,
            initial_growth=body.initial_growth,
            seed=body.seed,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return game.summary()


@router.get("")
async def list_games(request: Request) -> list[GameSummary]:
    """List running games."""
    return _get_manager(request).list_games()


@router.get("/{game_id}")
async def get_game(game_id: str, request: Request) -> dict:
    """Get game metadata and the current state snapshot."""
    game = _get_manager(request).get_game(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    result = game.summary().model_dump(mode="json")
    result["state"] = game.engine.get_state()
    return result


@router.post("/{game_id}/turn")
async def turn(game_id: str, body: TurnRequest, request: Request) -> TurnResponse:
    """Apply a key press; unmapped keys are accepted and ignored."""
    try:
        direction = _get_manager(request).turn(game_id, body.key)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return TurnResponse(game_id=game_id, direction=direction.name)


@router.delete("/{game_id}")
async def stop_game(game_id: str, request: Request) -> dict:
    """Stop a game's tick loop."""
    try:
        await _get_manager(request).stop_game(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"status": "stopped", "game_id": game_id}
