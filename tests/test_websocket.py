"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from torus_snake.config import GameConfig
from torus_snake.server.app import create_app


@pytest.fixture()
def tc():
    """Starlette TestClient entered as a context manager so the lifespan
    runs and tick loops share one event loop with the sockets."""
    application = create_app(GameConfig(tick_rate_ms=20, seed=1))
    with TestClient(application) as client:
        yield client


def _create_game(tc, **body) -> str:
    resp = tc.post("/games", json=body)
    assert resp.status_code == 201
    return resp.json()["game_id"]


class TestPlayWebSocket:
    def test_connect_and_receive_initial_state(self, tc):
        game_id = _create_game(tc, board_width=8, board_height=6)

        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            state = json.loads(ws.receive_text())
            assert set(state) == {"tick", "state", "frame"}
            assert state["state"]["board"] == {"width": 8, "height": 6}
            assert len(state["frame"].splitlines()) == 6

    def test_receives_ticks(self, tc):
        game_id = _create_game(tc)

        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            first = json.loads(ws.receive_text())
            second = json.loads(ws.receive_text())
            assert second["tick"] > first["tick"]

    def test_key_changes_heading(self, tc):
        game_id = _create_game(tc)

        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            state = json.loads(ws.receive_text())
            key = "ArrowUp" if state["state"]["snake"]["direction"] != "NORTH" else "ArrowDown"
            expected = "NORTH" if key == "ArrowUp" else "SOUTH"
            ws.send_text(json.dumps({"key": key}))
            for _ in range(50):
                state = json.loads(ws.receive_text())
                if state["state"]["snake"]["direction"] == expected:
                    break
            assert state["state"]["snake"]["direction"] == expected

    def test_nonexistent_game_rejected(self, tc):
        with pytest.raises(WebSocketDisconnect), tc.websocket_connect(
            "/games/nonexistent/play",
        ):
            pass

    def test_stopped_game_rejected(self, tc):
        game_id = _create_game(tc)
        tc.delete(f"/games/{game_id}")
        with pytest.raises(WebSocketDisconnect), tc.websocket_connect(
            f"/games/{game_id}/play",
        ):
            pass


class TestMalformedMessages:
    def test_invalid_messages_ignored(self, tc):
        game_id = _create_game(tc)

        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            first = json.loads(ws.receive_text())
            # Garbage should be silently ignored.
            ws.send_text("not-json")
            ws.send_text("[]")
            ws.send_text("123")
            ws.send_text(json.dumps({"key": "Tab"}))
            ws.send_text(json.dumps({"no_key": True}))
            later = json.loads(ws.receive_text())
            assert later["tick"] > first["tick"]

    def test_disconnect_game_continues(self, tc):
        game_id = _create_game(tc)

        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            ws.receive_text()

        resp = tc.get(f"/games/{game_id}")
        assert resp.json()["status"] == "active"
