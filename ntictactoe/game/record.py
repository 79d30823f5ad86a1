"""Convert game states to and from JSON documents."""

from __future__ import annotations

import json
import uuid
from typing import Any, Iterable

from .board import Board, GameState
from .types import NO_MOVE


def board_to_dict(board: Board) -> dict[str, Any]:
    return {"dimension": board.dimension, "content": list(board.content)}


def board_from_dict(data: dict[str, Any]) -> Board:
    return Board(int(data["dimension"]), tuple(data["content"]))


def state_to_dict(state: GameState) -> dict[str, Any]:
    return {
        "gameId": str(state.game_id),
        "playerMarkers": list(state.player_markers),
        "currentPlayerIndex": state.current_player_index,
        "lastMove": state.last_move,
        "board": board_to_dict(state.board),
    }


def state_from_dict(data: dict[str, Any]) -> GameState:
    """Rebuild a GameState from a dict. A missing gameId gets a fresh one."""
    game_id = data.get("gameId")
    return GameState(
        board=board_from_dict(data["board"]),
        player_markers=tuple(data["playerMarkers"]),
        current_player_index=int(data["currentPlayerIndex"]),
        last_move=int(data.get("lastMove", NO_MOVE)),
        game_id=uuid.UUID(game_id) if game_id else uuid.uuid4(),
    )


def state_to_json(state: GameState) -> str:
    """Compact JSON, e.g. {"gameId":"...","playerMarkers":["X","O"],...}."""
    return json.dumps(state_to_dict(state), separators=(",", ":"))


def state_from_json(text: str) -> GameState:
    return state_from_dict(json.loads(text))


def replay_moves(state: GameState, moves: Iterable[int]) -> GameState:
    """Apply `moves` in turn order starting from `state`."""
    for move in moves:
        state = state.after_player_moves(move)
    return state
