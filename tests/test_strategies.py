import pytest

from ntictactoe.bot import strategies
from ntictactoe.bot.alphabeta import AlphaBeta
from ntictactoe.bot.config import SearchBudget
from ntictactoe.bot.mcts import MonteCarloTreeSearch
from ntictactoe.bot.random_bot import RandomBot
from ntictactoe.game.board import Board, GameState

BLOCK_ROWS = [["X", "X", "_"], ["O", "_", "_"], ["O", "_", "_"]]


@pytest.fixture
def block_state():
    return GameState(Board.from_rows(BLOCK_ROWS), ("X", "O"), 1)


class TestCreateStrategy:
    def test_known_names(self, block_state):
        assert isinstance(strategies.create_strategy("alphabeta", block_state), AlphaBeta)
        assert isinstance(strategies.create_strategy("Random", block_state), RandomBot)

    def test_budget_is_passed_through(self, block_state):
        budget = SearchBudget.empty().with_max_iterations(10)
        bot = strategies.create_strategy("mcts", block_state, budget)
        assert isinstance(bot, MonteCarloTreeSearch)
        assert bot.budget is budget

    def test_unknown_name(self, block_state):
        with pytest.raises(ValueError):
            strategies.create_strategy("negamax", block_state)

    def test_registry(self):
        assert set(strategies.STRATEGIES) == {
            "random", "minimax", "alphabeta", "maxn", "paranoid", "mcts",
        }


class TestMoveFunctions:
    @pytest.mark.parametrize(
        "move_function",
        [strategies.MINIMAX, strategies.ALPHABETA, strategies.MAXN],
    )
    def test_blocks(self, move_function, block_state):
        assert move_function(block_state) == 2

    def test_depth_limited_factory(self, block_state):
        move_function = strategies.minimax(SearchBudget.empty().with_max_depth(2))
        assert move_function(block_state) == 2

    def test_mcts_factory(self, block_state):
        move_function = strategies.mcts(SearchBudget.empty().with_max_iterations(20))
        assert move_function(block_state) in block_state.available_moves()

    def test_default_is_random(self, block_state):
        assert strategies.DEFAULT is strategies.RANDOM
        assert strategies.DEFAULT(block_state) in block_state.available_moves()

    def test_paranoid_factory_wins(self):
        state = GameState(Board.from_rows(BLOCK_ROWS), ("X", "O"), 0)
        assert strategies.PARANOID(state) == 2
