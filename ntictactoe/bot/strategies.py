"""Ready-made move functions and a name -> strategy registry.

Every factory takes a SearchBudget and returns a plain ``state -> move``
callable, which is what a game loop needs to drive a bot player.
"""

from __future__ import annotations

from typing import Callable, Optional

from ntictactoe.bot.alphabeta import AlphaBeta
from ntictactoe.bot.base import BotStrategy
from ntictactoe.bot.config import SearchBudget
from ntictactoe.bot.maxn import MaxN
from ntictactoe.bot.mcts import MonteCarloTreeSearch
from ntictactoe.bot.minimax import Minimax
from ntictactoe.bot.paranoid import Paranoid
from ntictactoe.bot.random_bot import RandomBot
from ntictactoe.game.board import GameState

MoveFunction = Callable[[GameState], int]

# Time cap for the ready-made MCTS move function
MCTS_STRATEGY_TIME_MILLIS = 2_000

STRATEGIES: dict[str, type[BotStrategy]] = {
    "random": RandomBot,
    "minimax": Minimax,
    "alphabeta": AlphaBeta,
    "maxn": MaxN,
    "paranoid": Paranoid,
    "mcts": MonteCarloTreeSearch,
}


def create_strategy(
    name: str, state: GameState, budget: Optional[SearchBudget] = None
) -> BotStrategy:
    try:
        strategy_cls = STRATEGIES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown strategy {name!r}, expected one of {sorted(STRATEGIES)}"
        ) from None
    return strategy_cls(state, budget)


def _move_function(name: str, budget: SearchBudget) -> MoveFunction:
    def best_move(state: GameState) -> int:
        return create_strategy(name, state, budget).best_move()

    best_move.__name__ = name
    return best_move


def random_strategy(budget: SearchBudget) -> MoveFunction:
    return _move_function("random", budget)


def minimax(budget: SearchBudget) -> MoveFunction:
    return _move_function("minimax", budget)


def alphabeta(budget: SearchBudget) -> MoveFunction:
    return _move_function("alphabeta", budget)


def maxn(budget: SearchBudget) -> MoveFunction:
    return _move_function("maxn", budget)


def paranoid(budget: SearchBudget) -> MoveFunction:
    return _move_function("paranoid", budget)


def mcts(budget: SearchBudget) -> MoveFunction:
    return _move_function("mcts", budget)


RANDOM = random_strategy(SearchBudget.empty())
MINIMAX = minimax(SearchBudget.empty())
ALPHABETA = alphabeta(SearchBudget.empty())
MAXN = maxn(SearchBudget.empty())
PARANOID = paranoid(SearchBudget.empty())
MCTS = mcts(SearchBudget.empty().with_max_time_millis(MCTS_STRATEGY_TIME_MILLIS))
DEFAULT = RANDOM
