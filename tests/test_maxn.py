"""Tests for the N-player MaxN strategy."""

import numpy as np
import pytest

from ntictactoe.bot.base import MAX_SCORE, MIN_SCORE
from ntictactoe.bot.config import SearchBudget
from ntictactoe.bot.maxn import MaxN
from ntictactoe.game.board import Board, GameState
from ntictactoe.game.types import GameServiceError


def make_state(rows, markers=("X", "O"), index=0):
    return GameState(Board.from_rows(rows), markers, index)


THREE_PLAYER_ROWS = [["X", "X", "/"], ["O", "_", "/"], ["O", "_", "_"]]


# ---------------------------------------------------------------------------
# Two players: behaves like minimax
# ---------------------------------------------------------------------------

class TestTwoPlayers:
    def test_blocks_row(self):
        state = make_state([["X", "X", "_"], ["O", "_", "_"], ["O", "_", "_"]], index=1)
        assert MaxN(state).best_move() == 2

    @pytest.mark.parametrize(
        "rows",
        [
            [["X", "_", "_"], ["O", "X", "_"], ["O", "_", "_"]],
            [["X", "_", "_"], ["O", "X", "_"], ["O", "O", "_"]],
        ],
    )
    def test_blocks_diagonal(self, rows):
        assert MaxN(make_state(rows, index=1)).best_move() == 8

    @pytest.mark.parametrize(
        "rows, index, expected",
        [
            ([["X", "X", "_"], ["O", "_", "_"], ["O", "_", "_"]], 0, 2),
            ([["X", "_", "_"], ["O", "X", "_"], ["O", "_", "_"]], 0, 8),
            ([["_", "X", "_"], ["O", "X", "_"], ["O", "_", "_"]], 0, 7),
            ([["X", "X", "_"], ["O", "O", "_"], ["X", "_", "_"]], 1, 5),
            ([["O", "_", "_"], ["X", "O", "_"], ["X", "_", "_"]], 1, 8),
            ([["_", "X", "_"], ["O", "X", "_"], ["O", "_", "_"]], 1, 0),
        ],
    )
    def test_chooses_winning_move(self, rows, index, expected):
        assert MaxN(make_state(rows, index=index)).best_move() == expected


# ---------------------------------------------------------------------------
# More players
# ---------------------------------------------------------------------------

class TestMultiPlayer:
    @pytest.mark.parametrize(
        "markers",
        [("/", "X", "O"), ("X", "/", "O"), ("O", "/", "X")],
    )
    def test_wins_or_blocks_next_player(self, markers):
        # '/' completes column 2 at 8 unless it is taken first
        assert MaxN(make_state(THREE_PLAYER_ROWS, markers)).best_move() == 8

    def test_does_not_block_for_a_coalition(self):
        # X leaves 8 open: it expects O, who moves next, to block '/'
        state = make_state(THREE_PLAYER_ROWS, ("X", "O", "/"))
        assert MaxN(state).best_move() == 4

    def test_three_way_race(self):
        state = make_state(
            [["X", "X", "_"], ["O", "O", "_"], ["/", "/", "_"]], ("O", "X", "/")
        )
        assert MaxN(state).best_move() == 5

    def test_four_players_on_four_by_four(self):
        state = make_state(
            [
                ["A", "A", "A", "_"],
                ["B", "B", "B", "_"],
                ["C", "C", "_", "D"],
                ["D", "_", "D", "C"],
            ],
            ("B", "C", "D", "A"),
        )
        assert MaxN(state).best_move() == 7


# ---------------------------------------------------------------------------
# Score vectors
# ---------------------------------------------------------------------------

class TestScores:
    def test_winner_vector(self):
        state = make_state(THREE_PLAYER_ROWS, ("/", "X", "O"))
        scores = MaxN(state).maxn(state.after_player_moves(8), 0)
        assert scores.tolist() == [MAX_SCORE, MIN_SCORE, MIN_SCORE]

    def test_forced_win_vector(self):
        state = make_state([["X", "O", "_"], ["_", "X", "_"], ["_", "_", "O"]])
        scores = MaxN(state).maxn(state.after_player_moves(3), 0)
        assert scores.tolist() == [MAX_SCORE - 2, MIN_SCORE + 2]

    def test_depth_cutoff_is_all_zero(self):
        state = make_state([["X", "O", "_"], ["_", "X", "_"], ["_", "_", "O"]])
        bot = MaxN(state, SearchBudget.empty().with_max_depth(1))
        scores = bot.maxn(state.after_player_moves(3), 0)
        assert np.array_equal(scores, np.zeros(2))

    def test_full_board_is_all_zero(self):
        state = make_state([["X", "O", "X"], ["X", "O", "O"], ["O", "X", "_"]])
        bot = MaxN(state)
        assert bot.maxn(state.after_player_moves(8), 0).tolist() == [0, 0]


def test_no_moves_available():
    state = make_state([["X", "O", "X"], ["X", "O", "O"], ["O", "X", "X"]])
    with pytest.raises(GameServiceError):
        MaxN(state).best_move()
