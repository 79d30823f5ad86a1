from __future__ import annotations

import random
from typing import Optional

from ntictactoe.bot.base import BotStrategy
from ntictactoe.bot.config import SearchBudget
from ntictactoe.game.board import GameState


class RandomBot(BotStrategy):
    def __init__(
        self,
        state: GameState,
        budget: Optional[SearchBudget] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(state, budget)
        self.rng = rng if rng is not None else random.SystemRandom()

    def best_move(self) -> int:
        return self.rng.choice(self._root_moves())
