import os
import random
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv

from domain.engine import GameEngine, InvalidDirectionError
from services.session import GameSession
from services.ticker import GameTicker

load_dotenv()

logging.basicConfig(level=logging.INFO)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _allowed_origins():
    # Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        return [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    # sensible defaults for local dev
    return [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]


def _session_from_env() -> GameSession:
    seed = os.getenv("SNAKY_SEED")
    rng = None
    if seed:
        try:
            rng = random.Random(int(seed))
        except ValueError:
            logging.warning(f"Ignoring SNAKY_SEED={seed!r}: not an integer")
    return GameSession(GameEngine(rng=rng))


def create_app(session: GameSession = None, autotick: bool = None) -> Flask:
    """
    Build the Flask app around a single game session.

    When autotick is on, the server runs the game timer itself and the
    browser only renders snapshots. Otherwise the client is expected to
    POST /api/game/tick once per tickIntervalMs.
    """
    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": _allowed_origins()}})

    if session is None:
        session = _session_from_env()
    if autotick is None:
        autotick = _env_flag("SNAKY_AUTOTICK")

    ticker = GameTicker(session) if autotick else None
    if ticker is not None:
        session.add_reset_listener(lambda state: ticker.start())
        ticker.start()

    app.config["GAME_SESSION"] = session
    app.config["GAME_TICKER"] = ticker

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/game", methods=["GET"])
    def get_game():
        """Current snapshot: snake, food, score, speed, status and board cells."""
        return jsonify(session.snapshot().to_dict())

    @app.route("/api/game/direction", methods=["POST"])
    def change_direction():
        """
        Request a direction change.

        Body: {"direction": "UP" | "DOWN" | "LEFT" | "RIGHT"}
        Rejected requests (same or opposite direction) leave the state as is.
        """
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return jsonify({"error": "Expected a JSON object"}), 400
        direction = payload.get("direction")
        if not isinstance(direction, str):
            return jsonify({"error": "Missing 'direction'"}), 400

        try:
            state = session.steer(direction.upper())
        except InvalidDirectionError as error:
            return jsonify({"error": str(error)}), 400

        return jsonify(state.to_dict())

    @app.route("/api/game/key", methods=["POST"])
    def press_key():
        """
        Forward a raw key press (KeyboardEvent.key).

        Arrow keys and WASD steer; Space or Enter restarts a finished game.
        """
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return jsonify({"error": "Expected a JSON object"}), 400
        key = payload.get("key")
        if not isinstance(key, str) or key == "":
            return jsonify({"error": "Missing 'key'"}), 400

        return jsonify(session.handle_key(key).to_dict())

    @app.route("/api/game/tick", methods=["POST"])
    def tick_game():
        return jsonify(session.tick().to_dict())

    @app.route("/api/game/reset", methods=["POST"])
    def reset_game():
        return jsonify(session.reset().to_dict())

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        logging.error(f"Unhandled error serving {request.path}: {error}")
        return jsonify({"error": "Internal server error"}), 500

    return app


if __name__ == "__main__":
    app = create_app()
    # Run the Flask app in debug mode.
    app.run(
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "5000")),
        debug=_env_flag("FLASK_DEBUG"),
    )
