"""WebSocket handler streaming frames and accepting key presses."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from torus_snake.server.game_manager import GameManager
from torus_snake.server.models import GameStatus

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> GameManager:
    return ws.app.state.game_manager


@ws_router.websocket("/games/{game_id}/play")
async def play(websocket: WebSocket, game_id: str) -> None:
    """Send ``{"key": ...}`` messages, receive the game state each tick."""
    manager = _get_manager(websocket)
    game = manager.get_game(game_id)
    if game is None or game.status != GameStatus.ACTIVE:
        await websocket.close(code=4004, reason="Game not found.")
        return

    await websocket.accept()
    game.sockets.append(websocket)
    logger.info("Client connected to game %s.", game_id)

    # Initial snapshot so the client can draw before the next tick.
    await websocket.send_text(
        json.dumps(game.engine.get_state(), separators=(",", ":")),
    )

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue
            manager.turn(game_id, msg.get("key"))
    except WebSocketDisconnect:
        logger.info("Client disconnected from game %s.", game_id)
    finally:
        if websocket in game.sockets:
            game.sockets.remove(websocket)
