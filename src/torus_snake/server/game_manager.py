"""In-memory game registry, lifecycle management, and async tick loops."""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from torus_snake.config import GameConfig
from torus_snake.engine import GameEngine
from torus_snake.geometry import Direction
from torus_snake.server.models import GameStatus, GameSummary

logger = logging.getLogger(__name__)

_MAX_STOPPED_GAMES = 100


@dataclass
class GameInstance:
    """All state for a single hosted game."""

    game_id: str
    engine: GameEngine
    status: GameStatus = GameStatus.ACTIVE
    sockets: list[WebSocket] = field(default_factory=list)
    created_at: float = field(default_factory=time.monotonic)
    stopped_at: float | None = None
    _task: asyncio.Task | None = field(default=None, repr=False)

    @property
    def config(self) -> GameConfig:
        return self.engine.config

    def summary(self) -> GameSummary:
        return GameSummary(
            game_id=self.game_id,
            status=self.status,
            board_width=self.config.board_width,
            board_height=self.config.board_height,
            tick_rate_ms=self.config.tick_rate_ms,
            tick=self.engine.tick,
        )


class GameManager:
    """Central registry managing all hosted games."""

    def __init__(
        self,
        default_config: GameConfig | None = None,
        max_stopped_games: int = _MAX_STOPPED_GAMES,
    ) -> None:
        if max_stopped_games < 0:
            raise ValueError("max_stopped_games must be >= 0.")
        self.default_config = (
            default_config if default_config is not None else GameConfig()
        )
        self._games: dict[str, GameInstance] = {}
        self._max_stopped_games = max_stopped_games

    def create_game(
        self,
        board_width: int | None = None,
        board_height: int | None = None,
        initial_growth: int | None = None,
        seed: int | None = None,
    ) -> GameInstance:
        """Create a game and start its tick loop on the running event loop."""
        config = self.default_config.replace(
            board_width=board_width,
            board_height=board_height,
            initial_growth=initial_growth,
            seed=seed,
        )
        game_id = uuid.uuid4().hex[:12]
        instance = GameInstance(game_id=game_id, engine=GameEngine(config))
        self._games[game_id] = instance
        instance._task = asyncio.create_task(self._tick_loop(instance))
        logger.info(
            "Game %s created (%dx%d, tick %d ms).",
            game_id, config.board_width, config.board_height,
            config.tick_rate_ms,
        )
        return instance

    def get_game(self, game_id: str) -> GameInstance | None:
        return self._games.get(game_id)

    def list_games(self) -> list[GameSummary]:
        """Return summaries of running games."""
        return [
            g.summary() for g in self._games.values()
            if g.status == GameStatus.ACTIVE
        ]

    def turn(self, game_id: str, key: object) -> Direction:
        """Apply a key press to a game; unknown keys are ignored."""
        game = self._games.get(game_id)
        if game is None:
            raise KeyError(f"Game {game_id} not found.")
        if game.status != GameStatus.ACTIVE:
            return Direction.INVALID
        return game.engine.turn_key(key)

    async def stop_game(self, game_id: str) -> GameInstance:
        """Cancel a game's tick loop and disconnect its clients."""
        game = self._games.get(game_id)
        if game is None:
            raise KeyError(f"Game {game_id} not found.")
        task = game._task
        self._mark_game_stopped(game)
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        await self._close_connections(game)
        self._prune_stopped_games()
        logger.info("Game %s stopped at tick %d.", game_id, game.engine.tick)
        return game

    async def _tick_loop(self, game: GameInstance) -> None:
        """Run the game tick loop, broadcasting state each tick."""
        tick_interval = game.config.tick_rate_ms / 1000.0
        try:
            while game.status == GameStatus.ACTIVE:
                await asyncio.sleep(tick_interval)
                state = game.engine.step()
                await self._broadcast(game, state)
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled for game %s.", game.game_id)
        except Exception:
            logger.exception("Tick loop error in game %s.", game.game_id)
            self._mark_game_stopped(game)
            await self._close_connections(game)
            self._prune_stopped_games()

    def _mark_game_stopped(self, game: GameInstance) -> None:
        """Transition a game to stopped exactly once."""
        if game.status != GameStatus.STOPPED:
            game.status = GameStatus.STOPPED
            game.stopped_at = time.monotonic()

    async def _close_connections(self, game: GameInstance) -> None:
        """Close any live sockets for a stopped game."""
        for ws in list(game.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Game stopped.")
            except Exception:
                logger.warning("Failed closing socket in game %s.", game.game_id)
        game.sockets.clear()

    def _prune_stopped_games(self) -> None:
        """Bound retained stopped games to avoid unbounded registry growth."""
        stopped = [
            g for g in self._games.values() if g.status == GameStatus.STOPPED
        ]
        overflow = len(stopped) - self._max_stopped_games
        if overflow <= 0:
            return

        stopped.sort(
            key=lambda g: g.stopped_at if g.stopped_at is not None else g.created_at,
        )
        for stale in stopped[:overflow]:
            self._games.pop(stale.game_id, None)
        logger.info(
            "Pruned %d stopped games (retaining up to %d).",
            overflow,
            self._max_stopped_games,
        )

    async def _broadcast(self, game: GameInstance, state: dict) -> None:
        """Send game state to every connected socket."""
        payload = json.dumps(state, separators=(",", ":"))
        dead: list[WebSocket] = []

        # Iterate over a snapshot so disconnect handlers can mutate the
        # live list without affecting this send loop.
        for ws in list(game.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in game.sockets:
                game.sockets.remove(ws)

    async def cleanup(self) -> None:
        """Cancel all running tick loops."""
        tasks = [
            g._task for g in self._games.values()
            if g._task and not g._task.done()
        ]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("GameManager cleanup complete.")
