"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from torus_snake.config import GameConfig
from torus_snake.server.game_manager import GameManager
from torus_snake.server.routes import router
from torus_snake.server.websocket import ws_router


def create_app(default_config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    *default_config* seeds every game the app creates; request fields
    override it per game.
    """

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.game_manager = GameManager(default_config)
        yield
        await app.state.game_manager.cleanup()

    app = FastAPI(
        title="Torus Snake API", version="0.1.0", lifespan=_lifespan,
    )
    app.include_router(router)
    app.include_router(ws_router)
    return app
