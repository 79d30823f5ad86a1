from __future__ import annotations

import abc
from typing import Optional

from ntictactoe.bot.config import SearchBudget
from ntictactoe.game.board import GameState
from ntictactoe.game.types import GameServiceError

# Score anchors for the deterministic searches
MAX_SCORE = 100
MIN_SCORE = -100
DRAW_SCORE = 0


class BotStrategy(abc.ABC):
    """Chooses a move for the player to move in `state`."""

    def __init__(self, state: GameState, budget: Optional[SearchBudget] = None) -> None:
        self.state = state
        self.budget = budget if budget is not None else SearchBudget.empty()

    @abc.abstractmethod
    def best_move(self) -> int:
        """Return the board location this strategy wants to play."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def _root_moves(self) -> list[int]:
        moves = self.state.available_moves()
        if not moves:
            raise GameServiceError("No moves available")
        return moves


def require_two_players(state: GameState, strategy: str) -> None:
    if state.num_players != 2:
        raise ValueError(
            f"{strategy} requires exactly two players, got {state.num_players}"
        )
