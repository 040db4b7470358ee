from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from game import (
    GameState,
    Piece,
    render_text,
    solve,
)
from hanoi_core import config

logger = logging.getLogger(__name__)

app = Flask(__name__)


def piece_to_json(p: Piece) -> Dict[str, Any]:
    return {
        "num": int(p.num),
        "stack": int(p.state.stack),
        "height": int(p.state.height),
        "colour": p.colour().value,
    }


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "startStack": s.start_stack,
        "numStacks": s.num_stacks(),
        "pieces": [piece_to_json(p) for p in s.pieces_iter()],
        "complete": s.complete(),
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    _check_size(len(obj["pieces"]))
    # Pieces may arrive in any order; their "num" decides the slot.
    pieces = sorted(obj["pieces"], key=lambda p: int(p["num"]))
    if [int(p["num"]) for p in pieces] != list(range(len(pieces))):
        raise ValueError("piece numbers must be 0..n-1")
    placements = [(int(p["stack"]), int(p["height"])) for p in pieces]
    return GameState.restore(int(obj["startStack"]), int(obj["numStacks"]), placements)


def _bad_request(msg: str) -> Any:
    return jsonify({"ok": False, "error": msg}), 400


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValueError("request body must be a JSON object")
    return body


def _int_field(body: Dict[str, Any], key: str, default: Optional[int] = None) -> int:
    value = body.get(key, default)
    if value is None:
        raise ValueError(f"{key} required")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"bad {key}: {e}") from e


def _check_size(num_pieces: int) -> None:
    if num_pieces > config.MAX_PIECES:
        raise ValueError(f"at most {config.MAX_PIECES} pieces supported, got {num_pieces}")


def _body_new_state(body: Dict[str, Any]) -> GameState:
    num_pieces = _int_field(body, "numPieces", config.DEFAULT_PIECES)
    _check_size(num_pieces)
    return GameState(
        _int_field(body, "startStack", config.DEFAULT_START_STACK),
        _int_field(body, "numStacks", config.DEFAULT_STACKS),
        num_pieces,
    )


def _body_state(body: Dict[str, Any]) -> GameState:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    try:
        return json_to_state(s_in)
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"bad state: {e}") from e


@app.errorhandler(ValueError)
def handle_value_error(e: ValueError) -> Any:
    # HanoiError subclasses ValueError, so structural game errors land here too
    logger.debug("rejected request: %s", e)
    return _bad_request(str(e))


@app.post("/api/new")
def api_new() -> Any:
    state = _body_new_state(_json_body())
    return jsonify({"ok": True, "state": state_to_json(state)})


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    state = _body_state(body)
    moved = state.try_move(_int_field(body, "from"), _int_field(body, "to"))
    return jsonify({"ok": True, "moved": moved, "state": state_to_json(state)})


@app.post("/api/top")
def api_top() -> Any:
    body = _json_body()
    state = _body_state(body)
    stack = _int_field(body, "stack")
    if not state.valid_stack(stack):
        return _bad_request(f"stack {stack} is not below {state.num_stacks()}")
    top = state.stack_top(stack)
    return jsonify({"ok": True, "piece": piece_to_json(top) if top is not None else None})


@app.post("/api/render")
def api_render() -> Any:
    state = _body_state(_json_body())
    return jsonify({"ok": True, "text": render_text(state)})


@app.post("/api/solve")
def api_solve() -> Any:
    body = _json_body()
    state = _body_new_state(body)
    moves = solve(state, _int_field(body, "target"))
    return jsonify({"ok": True, "moves": [[int(f), int(t)] for f, t in moves]})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
