"""
Tests for the Flask API.
"""

import sys
import os
import random
import logging

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app  # noqa: E402
from domain.constants import INITIAL_SPEED_MS, RIGHT  # noqa: E402
from domain.engine import GameEngine  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from services.session import GameSession  # noqa: E402


@pytest.fixture
def session():
    return GameSession(GameEngine(rng=random.Random(5)))


@pytest.fixture
def client(session):
    app = create_app(session=session, autotick=False)
    app.config["TESTING"] = True
    return app.test_client()


def finish_game(session):
    session._state = GameState(
        snake=((19, 10), (18, 10)),
        food=(0, 0),
        direction=RIGHT,
        heading=RIGHT,
        score=3,
        tick_interval_ms=135,
    )
    session.tick()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_get_game_returns_snapshot(client):
    data = client.get("/api/game").get_json()

    assert data["snake"] == [[10, 10], [9, 10]]
    assert data["direction"] == "RIGHT"
    assert data["score"] == 0
    assert data["tickIntervalMs"] == INITIAL_SPEED_MS
    assert data["stepsPerSecond"] == 6.7
    assert data["status"] == "running"
    assert data["boardSize"] == 20
    assert len(data["cells"]) == 400
    assert data["food"] not in data["snake"]


def test_change_direction(client):
    response = client.post("/api/game/direction", json={"direction": "up"})
    assert response.status_code == 200
    assert response.get_json()["direction"] == "UP"


def test_opposite_direction_is_ignored(client):
    response = client.post("/api/game/direction", json={"direction": "LEFT"})
    assert response.status_code == 200
    assert response.get_json()["direction"] == "RIGHT"


def test_unknown_direction_is_bad_request(client):
    response = client.post("/api/game/direction", json={"direction": "NORTH"})
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_missing_direction_is_bad_request(client):
    response = client.post("/api/game/direction", json={})
    assert response.status_code == 400


def test_non_object_direction_body_is_bad_request(client):
    response = client.post("/api/game/direction", json=["UP"])
    assert response.status_code == 400
    assert response.get_json() == {"error": "Expected a JSON object"}


def test_non_object_key_body_is_bad_request(client):
    response = client.post("/api/game/key", json="w")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Expected a JSON object"}


def test_unknown_direction_after_game_over_is_bad_request(client, session):
    finish_game(session)

    response = client.post("/api/game/direction", json={"direction": "NORTH"})

    assert response.status_code == 400
    assert "error" in response.get_json()


def test_tick_advances_snake(client):
    data = client.post("/api/game/tick").get_json()
    assert data["snake"] == [[11, 10], [10, 10]]
    assert data["ticks"] == 1


def test_key_press_steers(client):
    data = client.post("/api/game/key", json={"key": "s"}).get_json()
    assert data["direction"] == "DOWN"


def test_missing_key_is_bad_request(client):
    assert client.post("/api/game/key", json={}).status_code == 400


def test_enter_restarts_finished_game(client, session):
    finish_game(session)
    assert client.get("/api/game").get_json()["status"] == "over"

    data = client.post("/api/game/key", json={"key": "Enter"}).get_json()

    assert data["status"] == "running"
    assert data["score"] == 0
    assert data["snake"] == [[10, 10], [9, 10]]


def test_reset_endpoint(client, session):
    finish_game(session)

    data = client.post("/api/game/reset").get_json()

    assert data["status"] == "running"
    assert data["tickIntervalMs"] == INITIAL_SPEED_MS
    assert data["endReason"] is None


def test_tick_after_game_over_changes_nothing(client, session):
    finish_game(session)
    before = client.get("/api/game").get_json()

    after = client.post("/api/game/tick").get_json()

    assert after == before
    assert after["endReason"] == "wall"


def test_unknown_route_is_404(client):
    assert client.get("/api/nope").status_code == 404


def test_autotick_starts_ticker(session):
    app = create_app(session=session, autotick=True)
    ticker = app.config["GAME_TICKER"]
    try:
        assert ticker is not None
        assert ticker.running
    finally:
        ticker.stop()


def test_bad_seed_is_ignored_with_warning(monkeypatch, caplog):
    monkeypatch.setenv("SNAKY_SEED", "not-a-number")

    with caplog.at_level(logging.WARNING):
        app = create_app(autotick=False)

    assert app.config["GAME_SESSION"].snapshot().status == "running"
    assert "SNAKY_SEED" in caplog.text


def test_integer_seed_makes_food_reproducible(monkeypatch):
    monkeypatch.setenv("SNAKY_SEED", "21")

    first = create_app(autotick=False).config["GAME_SESSION"].snapshot()
    second = create_app(autotick=False).config["GAME_SESSION"].snapshot()

    assert first.food == second.food
