from __future__ import annotations

import logging
import math
import os
import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from fenster_core import config
from fenster_core.board import CellView
from fenster_core.cards import Card
from fenster_core.engine import FensterGame
from fenster_core.errors import (
    FensterError,
    InvalidGuessError,
    LockedStateError,
    PlayerRegistrationError,
    TurnError,
    UnknownCellError,
)
from fenster_core.state import GameEvent

logger = logging.getLogger(__name__)

app = Flask(__name__)

# One in-process game per id, oldest first. Games are dropped on DELETE or
# when more than MAX_GAMES are open.
GAMES: "OrderedDict[str, FensterGame]" = OrderedDict()
MAX_GAMES = config.MAX_GAMES
_GAMES_LOCK = threading.Lock()

_STATUS_BY_ERROR = (
    (LockedStateError, 409),
    (TurnError, 409),
    (InvalidGuessError, 400),
    (UnknownCellError, 400),
    (PlayerRegistrationError, 400),
)


def _card_to_json(card: Optional[Card]) -> Optional[Dict[str, Any]]:
    if card is None:
        return None
    return {"value": card.value, "suit": card.suit, "code": card.code}


def _cell_to_json(cell: CellView) -> Dict[str, Any]:
    # Face-down cards stay hidden from clients.
    return {
        "id": int(cell.id),
        "faceUp": bool(cell.face_up),
        "card": _card_to_json(cell.card) if cell.face_up else None,
    }


def state_to_json(game: FensterGame, game_id: str) -> Dict[str, Any]:
    snap = game.snapshot()
    return {
        "gameId": game_id,
        "cells": [_cell_to_json(c) for c in snap.cells],
        "players": list(snap.players),
        "currentPlayer": snap.current_player,
        "message": snap.message,
        "locked": snap.locked,
        "finished": snap.finished,
        "correctStreak": snap.correct_streak,
        "canPass": snap.can_pass,
        "anchor": _card_to_json(snap.anchor),
        "anchorId": snap.anchor_id,
        "deckSize": snap.deck_size,
    }


def _event_to_json(event: GameEvent) -> Dict[str, Any]:
    return {
        "kind": event.kind,
        "message": event.message,
        "cellId": event.cell_id,
        "card": _card_to_json(event.card),
        "correct": event.correct,
        "drinks": event.drink_count,
        "cluster": sorted(event.cluster),
        "player": event.player,
    }


def _error(message: str, status: int) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": message}), status


def _fenster_error(e: FensterError) -> Tuple[Any, int]:
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(e, cls):
            return _error(str(e), status)
    return _error(str(e), 400)


def _register(game_id: str, game: FensterGame) -> None:
    evicted = []
    with _GAMES_LOCK:
        GAMES[game_id] = game
        while len(GAMES) > MAX_GAMES:
            evicted.append(GAMES.popitem(last=False))
    for old_id, old in evicted:
        old.close()
        logger.info("Evicted game %s", old_id)


def _get_game(game_id: str) -> Optional[FensterGame]:
    with _GAMES_LOCK:
        return GAMES.get(game_id)


def _cell_from_body(body: Dict[str, Any]) -> int:
    try:
        return int(body["cell"])
    except (KeyError, TypeError, ValueError):
        raise UnknownCellError("cell required")


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    players = body.get("players")
    if not isinstance(players, list):
        return _error("players must be a list of names", 400)
    seed = body.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, str))):
        return _error("seed must be an integer or a string", 400)
    delay = body.get("penaltyDelay", None)
    if delay is not None and (
        isinstance(delay, bool) or not isinstance(delay, (int, float)) or not math.isfinite(delay) or delay < 0
    ):
        return _error("penaltyDelay must be a finite, non-negative number", 400)
    try:
        game = FensterGame(players, seed=seed, penalty_delay=delay)
    except FensterError as e:
        return _fenster_error(e)
    game_id = uuid.uuid4().hex
    _register(game_id, game)
    logger.info("Created game %s", game_id)
    return jsonify({"ok": True, "state": state_to_json(game, game_id)})


@app.get("/api/game/<game_id>")
def api_state(game_id: str) -> Any:
    game = _get_game(game_id)
    if game is None:
        return _error("unknown game", 404)
    return jsonify({"ok": True, "state": state_to_json(game, game_id)})


@app.get("/api/game/<game_id>/options/<int:cell_id>")
def api_options(game_id: str, cell_id: int) -> Any:
    game = _get_game(game_id)
    if game is None:
        return _error("unknown game", 404)
    try:
        tokens = game.available_guesses(cell_id)
    except FensterError as e:
        return _fenster_error(e)
    return jsonify({"ok": True, "cell": cell_id, "guesses": list(tokens)})


@app.post("/api/game/<game_id>/start")
def api_start(game_id: str) -> Any:
    game = _get_game(game_id)
    if game is None:
        return _error("unknown game", 404)
    body = request.get_json(force=True, silent=True) or {}
    try:
        event = game.select_start_card(_cell_from_body(body))
    except FensterError as e:
        return _fenster_error(e)
    return jsonify({"ok": True, "event": _event_to_json(event), "state": state_to_json(game, game_id)})


@app.post("/api/game/<game_id>/guess")
def api_guess(game_id: str) -> Any:
    game = _get_game(game_id)
    if game is None:
        return _error("unknown game", 404)
    body = request.get_json(force=True, silent=True) or {}
    guess = body.get("guess")
    if not isinstance(guess, str):
        return _error("guess required", 400)
    try:
        event = game.evaluate_guess(_cell_from_body(body), guess)
    except FensterError as e:
        return _fenster_error(e)
    return jsonify({"ok": True, "event": _event_to_json(event), "state": state_to_json(game, game_id)})


@app.post("/api/game/<game_id>/next")
def api_next(game_id: str) -> Any:
    game = _get_game(game_id)
    if game is None:
        return _error("unknown game", 404)
    try:
        player = game.next_player()
    except FensterError as e:
        return _fenster_error(e)
    return jsonify({"ok": True, "currentPlayer": player, "state": state_to_json(game, game_id)})


@app.delete("/api/game/<game_id>")
def api_delete(game_id: str) -> Any:
    with _GAMES_LOCK:
        game = GAMES.pop(game_id, None)
    if game is None:
        return _error("unknown game", 404)
    game.close()
    logger.info("Closed game %s", game_id)
    return jsonify({"ok": True})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
