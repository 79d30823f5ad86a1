"""Two-player minimax over the full game tree (optionally depth-limited)."""

from __future__ import annotations

import logging
import math
from typing import Optional

from ntictactoe.bot.base import DRAW_SCORE, MAX_SCORE, MIN_SCORE, BotStrategy, require_two_players
from ntictactoe.bot.config import SearchBudget
from ntictactoe.game.board import GameState

logger = logging.getLogger(__name__)


class Minimax(BotStrategy):
    """Exhaustive minimax from the point of view of the player to move.

    Wins score MAX_SCORE - depth and losses MIN_SCORE + depth, so the
    search prefers the quickest win and the slowest loss.
    """

    def __init__(self, state: GameState, budget: Optional[SearchBudget] = None) -> None:
        require_two_players(state, "Minimax")
        super().__init__(state, budget)
        self.maximizer = state.current_player
        self.opponent = next(m for m in state.player_markers if m != self.maximizer)

    def best_move(self) -> int:
        best_move = None
        best_score = -math.inf
        for move in self._root_moves():
            score = self.minimax(self.state.after_player_moves(move), False, 0)
            logger.debug("%s: location %d score %d", self.maximizer, move, score)
            if score > best_score:
                best_score = score
                best_move = move
        return best_move

    def minimax(self, state: GameState, is_maximizing: bool, depth: int) -> int:
        if state.has_chain(self.maximizer):
            return MAX_SCORE - depth
        if state.has_chain(self.opponent):
            return MIN_SCORE + depth
        if not state.has_moves_available() or self.budget.exceeds_max_depth(depth):
            return DRAW_SCORE

        scores = (
            self.minimax(state.after_player_moves(move), not is_maximizing, depth + 1)
            for move in state.available_moves()
        )
        return max(scores) if is_maximizing else min(scores)
