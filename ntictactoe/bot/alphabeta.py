"""Two-player minimax with alpha-beta pruning."""

from __future__ import annotations

import logging
import math
from typing import Optional

from ntictactoe.bot.base import DRAW_SCORE, MAX_SCORE, MIN_SCORE, BotStrategy, require_two_players
from ntictactoe.bot.config import SearchBudget
from ntictactoe.game.board import GameState

logger = logging.getLogger(__name__)


class AlphaBeta(BotStrategy):
    """Minimax with alpha-beta bounds. Picks the same move as Minimax."""

    def __init__(self, state: GameState, budget: Optional[SearchBudget] = None) -> None:
        require_two_players(state, "AlphaBeta")
        super().__init__(state, budget)
        self.maximizer = state.current_player
        self.opponent = next(m for m in state.player_markers if m != self.maximizer)

    def best_move(self) -> int:
        best_move = None
        best_score = -math.inf
        for move in self._root_moves():
            # Every root child gets a fresh window so its score is exact
            score = self.alphabeta(
                self.state.after_player_moves(move), False, -math.inf, math.inf, 0
            )
            logger.debug("%s: location %d score %d", self.maximizer, move, score)
            if score > best_score:
                best_score = score
                best_move = move
        return best_move

    def alphabeta(
        self,
        state: GameState,
        is_maximizing: bool,
        alpha: float,
        beta: float,
        depth: int,
    ) -> int:
        if state.has_chain(self.maximizer):
            return MAX_SCORE - depth
        if state.has_chain(self.opponent):
            return MIN_SCORE + depth
        if not state.has_moves_available() or self.budget.exceeds_max_depth(depth):
            return DRAW_SCORE

        if is_maximizing:
            value = -math.inf
            for move in state.available_moves():
                score = self.alphabeta(
                    state.after_player_moves(move), False, alpha, beta, depth + 1
                )
                value = max(value, score)
                if value > beta:
                    break
                alpha = max(alpha, value)
            return value

        value = math.inf
        for move in state.available_moves():
            score = self.alphabeta(
                state.after_player_moves(move), True, alpha, beta, depth + 1
            )
            value = min(value, score)
            if value < alpha:
                break
            beta = min(beta, value)
        return value
