from __future__ import annotations

import os
import random
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    MAX_DIMENSION,
    Coord,
    GameConfig,
    GameState,
    Grid,
    MoveAction,
    merge_score,
    parse_direction,
    split_actions,
)

app = Flask(__name__)

# Request decoding errors that map to HTTP 400
_BAD_REQUEST = (KeyError, ValueError, TypeError, IndexError)


def _coord_to_json(c: Optional[Coord]) -> Optional[List[int]]:
    if c is None:
        return None
    return [int(c[0]), int(c[1])]


def action_to_json(a: MoveAction) -> Dict[str, Any]:
    return {"source": _coord_to_json(a.source), "target": _coord_to_json(a.target), "value": int(a.value)}


def state_to_json(g: GameState) -> Dict[str, Any]:
    return {
        "dimension": int(g.dimension),
        "grid": g.grid.rows(),
        "target": int(g.config.winning_threshold),
        "fourProbability": float(g.config.four_probability),
    }


def _cell_value(v: Any) -> int:
    # bool is an int subclass; reject it along with floats and strings
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"tile values must be integers, got {v!r}")
    return v


def json_to_state(obj: Dict[str, Any], seed: Optional[int] = None) -> GameState:
    rows = obj["grid"]
    if not isinstance(rows, list) or not 1 <= len(rows) <= MAX_DIMENSION:
        raise ValueError(f"grid must be a list of 1 to {MAX_DIMENSION} rows")
    grid = Grid.from_rows([[_cell_value(v) for v in row] for row in rows])
    config = GameConfig.from_env(
        dimension=grid.dimension,
        winning_threshold=int(obj["target"]) if obj.get("target") is not None else None,
        four_probability=float(obj["fourProbability"]) if obj.get("fourProbability") is not None else None,
    )
    return GameState(config, rng=_rng(seed), grid=grid)


def _rng(seed: Any) -> Any:
    return random.Random(int(seed) if seed is not None else None).random


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise TypeError("request body must be a JSON object")
    return body


def _status_json(g: GameState) -> Dict[str, Any]:
    return {
        "won": g.user_has_won(),
        "lost": g.user_has_lost(),
        "score": g.score,
        "emptyCells": [_coord_to_json(c) for c in g.grid.empty_cells()],
    }


@app.post("/api/new")
def api_new() -> Any:
    try:
        body = _body()
        size = body.get("size")
        target = body.get("target")
        config = GameConfig.from_env(
            dimension=int(size) if size is not None else None,
            winning_threshold=int(target) if target is not None else None,
        )
        game = GameState(config, rng=_rng(body.get("seed")))
    except _BAD_REQUEST as e:
        return jsonify({"ok": False, "error": f"bad config: {e}"}), 400
    spawned = game.restart()
    return jsonify({
        "ok": True,
        "state": state_to_json(game),
        "spawned": [_coord_to_json(c) for c in spawned],
    })


@app.post("/api/move")
def api_move() -> Any:
    try:
        body = _body()
    except TypeError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return jsonify({"ok": False, "error": "state required"}), 400
    try:
        game = json_to_state(s_in, seed=body.get("seed"))
    except _BAD_REQUEST as e:
        return jsonify({"ok": False, "error": f"bad state: {e}"}), 400
    try:
        direction = parse_direction(body["direction"])
    except _BAD_REQUEST as e:
        return jsonify({"ok": False, "error": f"bad direction: {e}"}), 400

    result = game.play(direction)
    relocations, spawns = split_actions(result.actions)
    return jsonify({
        "ok": True,
        "moved": result.moved,
        "actions": [action_to_json(a) for a in result.actions],
        "relocations": [action_to_json(a) for a in relocations],
        "spawns": [action_to_json(a) for a in spawns],
        "gained": merge_score(result.actions),
        "spawned": _coord_to_json(result.spawned),
        "spawnedValue": result.spawned_value,
        "state": state_to_json(game),
        "won": result.won,
        "lost": result.lost,
        "score": result.score,
    })


@app.post("/api/status")
def api_status() -> Any:
    try:
        body = _body()
    except TypeError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return jsonify({"ok": False, "error": "state required"}), 400
    try:
        game = json_to_state(s_in)
    except _BAD_REQUEST as e:
        return jsonify({"ok": False, "error": f"bad state: {e}"}), 400
    out = {"ok": True}
    out.update(_status_json(game))
    return jsonify(out)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
