"""
HTTP server for the Y game and its bots.

Endpoints:
- GET  /status                               health check
- POST /execute-move                         human move on the shared game, then the bot answers
- POST /reset                                start a fresh shared game
- POST /<api_version>/ybot/choose/<bot_id>   ask a bot for a move on a posted YEN position
"""
from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    GameY,
    GameYError,
    Placement,
    YBotRegistry,
    YEN,
    decode,
    default_registry,
    encode,
)

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = int(os.getenv("GAMEY_BOARD_SIZE", "5"))
DEFAULT_PORT = int(os.getenv("GAMEY_PORT", "3000"))
DEFAULT_BOT = "random_bot"
SUPPORTED_API_VERSIONS = ("v1",)
HUMAN_PLAYER = 0
BOT_PLAYER = 1


class GameSession:
    """The single game shared by every request. All access goes through the lock."""

    def __init__(self, board_size: int, bots: YBotRegistry):
        self.board_size = board_size
        self.bots = bots
        self.lock = threading.Lock()
        self.game = GameY(board_size)

    def reset(self) -> Dict[str, Any]:
        with self.lock:
            self.game = GameY(self.board_size)
            logger.info("Game reset (size %d)", self.board_size)
            return encode(self.game).to_dict()

    def play_human_move(self, index: int) -> Tuple[Dict[str, Any], Optional[GameYError]]:
        """Applies the human move and the bot reply. Returns (response body, rejection)."""
        with self.lock:
            game = self.game
            try:
                game.add_move(Placement(HUMAN_PLAYER, game.coords_of(index)))
            except GameYError as e:
                logger.warning("Rejected human move at %s: %s", index, e)
                return self._snapshot(), e

            if not game.check_game_over():
                bot = self.bots.find(DEFAULT_BOT)
                coords = bot.choose_move(game) if bot is not None else None
                if coords is not None:
                    game.add_move(Placement(BOT_PLAYER, coords))

            winner = game.winner()
            if winner is not None:
                logger.info("Player %d wins", winner)
            return self._snapshot(), None

    def _snapshot(self) -> Dict[str, Any]:
        return {"board": encode(self.game).to_dict(), "winner": self.game.winner()}


app = Flask(__name__)
session = GameSession(DEFAULT_BOARD_SIZE, default_registry())


def _error(status: int, message: str, **extra: Any) -> Any:
    body: Dict[str, Any] = {"ok": False, "error": message}
    body.update(extra)
    return jsonify(body), status


@app.get("/status")
def status() -> Any:
    return "OK"


@app.post("/execute-move")
def execute_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    index = body.get("index")
    if not isinstance(index, int) or isinstance(index, bool):
        return _error(400, "index (integer) required")
    result, err = session.play_human_move(index)
    if err is not None:
        return jsonify({"ok": False, "error": err.to_dict(), **result}), 400
    return jsonify(result)


@app.post("/reset")
def reset() -> Any:
    return jsonify(session.reset())


@app.post("/<api_version>/ybot/choose/<bot_id>")
def choose(api_version: str, bot_id: str) -> Any:
    if api_version not in SUPPORTED_API_VERSIONS:
        return _error(400, f"unsupported API version {api_version!r}")
    bot = session.bots.find(bot_id)
    if bot is None:
        return _error(404, f"bot {bot_id!r} not found", available=session.bots.names())
    body = request.get_json(force=True, silent=True)
    try:
        game = decode(YEN.from_dict(body))
    except GameYError as e:
        return _error(400, "invalid position", detail=e.to_dict())
    coords = bot.choose_move(game)
    if coords is None:
        return _error(409, "bot has no move for this position")
    return jsonify({"api_version": api_version, "bot_id": bot_id, "coords": coords.to_dict()})


if __name__ == "__main__":
    from gamey_core.cli import configure_logging

    configure_logging()
    app.run(host="0.0.0.0", port=DEFAULT_PORT)
