from __future__ import annotations

import logging
import os
import sys
import time
from typing import Any, Callable, Dict, List, Optional

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        Board,
        Bolt,
        COLOUR_RGB,
        GameConfig,
        IDLE,
        NutSortError,
        Selection,
        SolveCancelled,
        handle_bolt_interaction,
        legal_moves,
        new_game,
        solve,
        star_rating,
        undo,
    )
    from .nutsort_core.config import debug_enabled  # type: ignore
except ImportError:
    from game import (  # type: ignore
        Board,
        Bolt,
        COLOUR_RGB,
        GameConfig,
        IDLE,
        NutSortError,
        Selection,
        SolveCancelled,
        handle_bolt_interaction,
        legal_moves,
        new_game,
        solve,
        star_rating,
        undo,
    )
    from nutsort_core.config import debug_enabled  # type: ignore

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = GameConfig.from_env()
DEFAULT_SOLVE_TIMEOUT_MS = int(os.getenv("NUTSORT_SOLVE_TIMEOUT_MS", "10000"))

app = Flask(__name__)


class BadState(ValueError):
    """Request body does not describe a usable board state."""


# ---------- JSON <-> engine ----------

def bolt_to_json(b: Bolt) -> Dict[str, Any]:
    return {"capacity": int(b.capacity), "nuts": list(b.colours())}


def bolt_from_json(obj: Dict[str, Any]) -> Bolt:
    nuts = [str(c) for c in obj.get("nuts", [])]
    unknown = [c for c in nuts if c not in COLOUR_RGB]
    if unknown:
        raise BadState(f"bad state: unknown colour(s) {unknown}")
    capacity = int(obj["capacity"])
    if capacity <= 0:
        raise BadState("bad state: capacity must be positive")
    return Bolt.from_colours(capacity, nuts)


def board_to_json(board: Board) -> Dict[str, Any]:
    return {
        "bolts": [bolt_to_json(b) for b in board.bolts],
        "moveCount": int(board.move_count),
        "selected": board.selection.index,
        "undo": [[list(b.colours()) for b in snap] for snap in board.undo_history],
        "won": board.is_won(),
    }


def board_from_json(obj: Dict[str, Any]) -> Board:
    """Rebuilds a live board, including selection and undo history."""
    try:
        bolts = [bolt_from_json(b) for b in obj["bolts"]]
        board = Board(bolts, move_count=int(obj.get("moveCount", 0)))
        for snap in obj.get("undo", []):
            if len(snap) != len(bolts):
                raise BadState("undo snapshot has the wrong number of bolts")
            board.undo_history.append(
                [bolt_from_json({"capacity": b.capacity, "nuts": nuts}) for b, nuts in zip(bolts, snap)]
            )
        selected = obj.get("selected")
        if selected is not None:
            idx = int(selected)
            picked = board.bolt(idx)
            if picked.is_empty() or picked.is_complete():
                raise BadState(f"bad state: bolt {idx} cannot be selected")
            board.selection = Selection(idx, picked.top_run_length())
    except BadState:
        raise
    except (KeyError, TypeError, ValueError, IndexError) as e:
        raise BadState(f"bad state: {e}") from e
    if board.move_count < 0:
        raise BadState("bad state: moveCount must be >= 0")
    return board


def _json_body() -> Dict[str, Any]:
    return request.get_json(force=True, silent=True) or {}


def _board_from_body(body: Dict[str, Any]) -> Board:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise BadState("state required")
    return board_from_json(s_in)


def _deadline_check(timeout_ms: Optional[int]) -> Optional[Callable[[], bool]]:
    if timeout_ms is None or timeout_ms <= 0:
        return None
    deadline = time.monotonic() + timeout_ms / 1000.0
    return lambda: time.monotonic() >= deadline


@app.errorhandler(BadState)
def _bad_state(e: BadState) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


@app.errorhandler(NutSortError)
def _engine_error(e: NutSortError) -> Any:
    # Config and index errors come from client input.
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- Game API ----------

@app.get("/api/palette")
def api_palette() -> Any:
    return jsonify({"ok": True, "colours": dict(COLOUR_RGB)})


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    try:
        num_bolts = int(body.get("numBolts", DEFAULT_CONFIG.num_bolts))
        bolt_height = int(body.get("boltHeight", DEFAULT_CONFIG.bolt_height))
        num_colours = int(body.get("numColours", DEFAULT_CONFIG.num_colours))
    except (TypeError, ValueError) as e:
        raise BadState(f"bad config: {e}") from e
    config = GameConfig(
        num_bolts=num_bolts,
        bolt_height=bolt_height,
        num_colours=num_colours,
        min_moves=DEFAULT_CONFIG.min_moves,
    )
    seed = body.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise BadState("bad config: seed must be an integer")
    board = new_game(config, seed=seed)
    return jsonify({
        "ok": True,
        "state": board_to_json(board),
        "legalMoves": legal_moves(board.bolts),
    })


@app.post("/api/click")
def api_click() -> Any:
    body = _json_body()
    board = _board_from_body(body)
    if "bolt" not in body:
        raise BadState("bolt required")
    try:
        bolt_index = int(body["bolt"])
    except (TypeError, ValueError) as e:
        raise BadState(f"bad bolt: {e}") from e
    result = handle_bolt_interaction(board, bolt_index, star_rating, DEFAULT_CONFIG.min_moves)
    return jsonify({
        "ok": True,
        "state": board_to_json(board),
        "result": {
            "selected": result.selected,
            "highlighted": result.highlighted,
            "moveCount": result.move_count,
            "moved": result.moved,
            "won": result.won,
            "stars": result.stars,
        },
        "legalMoves": legal_moves(board.bolts),
    })


@app.post("/api/undo")
def api_undo() -> Any:
    board = _board_from_body(_json_body())
    undone = undo(board)
    return jsonify({"ok": True, "undone": undone, "state": board_to_json(board)})


@app.post("/api/legal")
def api_legal() -> Any:
    board = _board_from_body(_json_body())
    return jsonify({"ok": True, "legalMoves": legal_moves(board.bolts)})


@app.post("/api/solve")
def api_solve() -> Any:
    body = _json_body()
    board = _board_from_body(body)
    board.selection = IDLE
    timeout_ms = body.get("timeoutMs", DEFAULT_SOLVE_TIMEOUT_MS)
    try:
        timeout = int(timeout_ms) if timeout_ms is not None else None
    except (TypeError, ValueError) as e:
        raise BadState(f"bad timeoutMs: {e}") from e
    try:
        res = solve(board, should_stop=_deadline_check(timeout))
    except SolveCancelled as e:
        logger.info("Solve request cancelled: %s", e)
        return jsonify({"ok": False, "error": "solver timed out"}), 504
    moves: List[List[int]] = [[i, j] for i, j in res.moves]
    return jsonify({
        "ok": True,
        "solvable": res.solvable,
        "moves": moves,
        "statesExplored": res.states_explored,
        "elapsedMs": res.elapsed_ms,
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = debug_enabled() or os.getenv("FLASK_DEBUG", "0").lower() in ("1", "true", "yes", "on")
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
