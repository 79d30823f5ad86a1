"""MaxN: N-player search where every player maximizes its own score.

Each node evaluates to a score vector with one entry per player (indexed
like ``GameState.player_markers``). The player to move keeps whichever child
vector is best for itself and passes it up unchanged. There is no notion of
coalitions, so a player may skip blocking a threat it expects somebody else
to block.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ntictactoe.bot.base import MAX_SCORE, MIN_SCORE, BotStrategy
from ntictactoe.bot.config import SearchBudget
from ntictactoe.game.board import GameState

logger = logging.getLogger(__name__)


class MaxN(BotStrategy):
    def __init__(self, state: GameState, budget: Optional[SearchBudget] = None) -> None:
        super().__init__(state, budget)
        self.num_players = state.num_players

    def best_move(self) -> int:
        player = self.state.current_player_index
        best_move = None
        best_scores: Optional[np.ndarray] = None
        for move in self._root_moves():
            scores = self.maxn(self.state.after_player_moves(move), 0)
            logger.debug(
                "%s: location %d scores %s", self.state.current_player, move, scores.tolist()
            )
            if best_scores is None or scores[player] > best_scores[player]:
                best_scores = scores
                best_move = move
        return best_move

    def maxn(self, state: GameState, depth: int) -> np.ndarray:
        if state.last_player_has_chain():
            scores = np.full(self.num_players, MIN_SCORE + depth, dtype=np.int64)
            scores[state.last_player_index] = MAX_SCORE - depth
            return scores
        if not state.has_moves_available() or self.budget.exceeds_max_depth(depth):
            return np.zeros(self.num_players, dtype=np.int64)

        mover = state.current_player_index
        best_scores: Optional[np.ndarray] = None
        for move in state.available_moves():
            scores = self.maxn(state.after_player_moves(move), depth + 1)
            if best_scores is None or scores[mover] > best_scores[mover]:
                best_scores = scores
        return best_scores
