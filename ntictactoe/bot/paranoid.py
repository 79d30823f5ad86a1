"""Paranoid search: all opponents form one coalition against the player to move."""

from __future__ import annotations

import logging
import math
from typing import Optional

from ntictactoe.bot.base import MAX_SCORE, MIN_SCORE, BotStrategy
from ntictactoe.bot.config import SearchBudget
from ntictactoe.game.board import GameState

logger = logging.getLogger(__name__)


class Paranoid(BotStrategy):
    """Reduces an N-player game to max vs. min.

    The player to move at the root maximizes; every other player minimizes
    the root player's score. A full board or a depth cutoff counts as a loss
    (MIN_SCORE + depth), not a draw.
    """

    def __init__(self, state: GameState, budget: Optional[SearchBudget] = None) -> None:
        super().__init__(state, budget)
        self.maximizer = state.current_player
        self.maximizer_index = state.current_player_index

    def best_move(self) -> int:
        best_move = None
        best_score = -math.inf
        for move in self._root_moves():
            score = self.paranoid(self.state.after_player_moves(move), 0)
            logger.debug("%s: location %d score %d", self.maximizer, move, score)
            if score > best_score:
                best_score = score
                best_move = move
        return best_move

    def paranoid(self, state: GameState, depth: int) -> int:
        if state.has_chain(self.maximizer):
            return MAX_SCORE - depth
        if state.last_player_index != self.maximizer_index and state.last_player_has_chain():
            return MIN_SCORE + depth
        if not state.has_moves_available() or self.budget.exceeds_max_depth(depth):
            return MIN_SCORE + depth

        scores = (
            self.paranoid(state.after_player_moves(move), depth + 1)
            for move in state.available_moves()
        )
        if state.current_player_index == self.maximizer_index:
            return max(scores)
        return min(scores)
