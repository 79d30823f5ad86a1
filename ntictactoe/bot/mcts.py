"""Monte Carlo Tree Search for any number of players.

Each iteration runs the four classic phases:

  1. Selection: descend through fully expanded nodes by UCT
  2. Expansion: add one child for a random untried move
  3. Simulation: play uniformly random moves to the end of the game
  4. Backpropagation: add the per-player reward vector to every ancestor

The tree is stored as a flat list of nodes; nodes refer to their parent and
children by index. It lives only for one ``best_move()`` call.
"""

from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from ntictactoe.bot.base import BotStrategy
from ntictactoe.bot.config import SearchBudget
from ntictactoe.game.board import GameState
from ntictactoe.game.types import GameServiceError

logger = logging.getLogger(__name__)

# Rewards for a finished playout
WIN_REWARD = 1.0
LOSS_REWARD = -0.5
DRAW_REWARD = 0.0

# Budget used when the caller does not supply one
DEFAULT_MCTS_TIME_MILLIS = 1_000

ROOT = 0


@dataclass
class Node:
    state: GameState
    parent: Optional[int]
    rewards: np.ndarray
    children: list[int] = field(default_factory=list)
    visits: int = 0


class MonteCarloTreeSearch(BotStrategy):
    """UCT search bounded by a SearchBudget.

    A fresh tree is built on every ``best_move()`` call. The last tree stays in
    ``nodes`` until the next call so ``render()`` can dump it for debugging.
    """

    def __init__(
        self,
        state: GameState,
        budget: Optional[SearchBudget] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if budget is None:
            budget = SearchBudget.empty().with_max_time_millis(DEFAULT_MCTS_TIME_MILLIS)
        super().__init__(state, budget)
        self.rng = rng if rng is not None else random.Random()
        self.nodes: list[Node] = []

    def best_move(self) -> int:
        self._root_moves()
        if self.state.is_terminal:
            raise GameServiceError(
                f"Game is already won by {self.state.winner}, no move to search"
            )
        self.nodes = [self._new_node(self.state, None)]
        start = time.monotonic()

        iterations = 0
        while not self.budget.exceeds_max_time_millis(
            (time.monotonic() - start) * 1000
        ) and not self.budget.exceeds_max_iterations(iterations):
            iterations += 1
            node = self._tree_policy(ROOT)
            reward = self._simulate(self.nodes[node].state)
            self._backpropagate(node, reward)

        best = self._best_child(ROOT)
        move = self.nodes[best].state.last_move
        logger.debug(
            "MCTS: %d iterations in %.1f ms, selected %d",
            iterations,
            (time.monotonic() - start) * 1000,
            move,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("MCTS tree:\n%s", self.render())
        return move

    # ------------------------------------------------------------------
    # Tree phases
    # ------------------------------------------------------------------

    def _new_node(self, state: GameState, parent: Optional[int]) -> Node:
        return Node(state, parent, np.zeros(state.num_players, dtype=np.float64))

    def _is_fully_expanded(self, index: int) -> bool:
        node = self.nodes[index]
        return len(node.children) == len(node.state.available_moves())

    def _tree_policy(self, index: int) -> int:
        while not self.nodes[index].state.is_terminal:
            if not self._is_fully_expanded(index):
                return self._expand(index)
            index = self._select(index)
        return index

    def _select(self, index: int) -> int:
        """Pick the child with the highest UCT value; first one wins ties."""
        parent = self.nodes[index]
        player = parent.state.current_player_index
        log_visits = math.log(parent.visits)
        selected = None
        best_value = -math.inf
        for child_index in parent.children:
            child = self.nodes[child_index]
            value = child.rewards[player] / child.visits + math.sqrt(
                2 * log_visits / child.visits
            )
            if value > best_value:
                best_value = value
                selected = child_index
        return selected

    def _expand(self, index: int) -> int:
        node = self.nodes[index]
        tried = {self.nodes[c].state.last_move for c in node.children}
        untried = [m for m in node.state.available_moves() if m not in tried]
        move = self.rng.choice(untried)
        self.nodes.append(self._new_node(node.state.after_player_moves(move), index))
        child_index = len(self.nodes) - 1
        node.children.append(child_index)
        return child_index

    def _simulate(self, state: GameState) -> np.ndarray:
        while not state.is_terminal:
            state = state.after_player_moves(self.rng.choice(state.available_moves()))
        return self._reward(state)

    def _reward(self, state: GameState) -> np.ndarray:
        winner = state.winner
        if winner is None:
            return np.full(state.num_players, DRAW_REWARD)
        reward = np.full(state.num_players, LOSS_REWARD)
        reward[state.player_markers.index(winner)] = WIN_REWARD
        return reward

    def _backpropagate(self, index: Optional[int], reward: np.ndarray) -> None:
        while index is not None:
            node = self.nodes[index]
            node.visits += 1
            node.rewards += reward
            index = node.parent

    def _best_child(self, index: int) -> int:
        """Most visited child of `index`."""
        children = self.nodes[index].children
        if not children:
            raise GameServiceError("Search budget allowed no iterations")
        return max(children, key=lambda c: self.nodes[c].visits)

    # ------------------------------------------------------------------
    # Debugging
    # ------------------------------------------------------------------

    def render(self, index: int = ROOT, depth: int = 0) -> str:
        """Text dump of the subtree at `index`, one node per two lines."""
        node = self.nodes[index]
        state = node.state
        indent = "  " * depth
        if node.parent is None:
            label = "Root"
        else:
            label = f"{state.player_markers[state.last_player_index]} -> {state.last_move}"
        outcome = (
            "WINNER"
            if node.parent is not None and state.last_player_has_chain()
            else state.available_moves()
        )
        totals = ", ".join(
            f"{marker}: {total}" for marker, total in zip(state.player_markers, node.rewards)
        )
        lines = [f"{indent}{label} ({node.visits}) => {outcome}", f"{indent} ({totals})"]
        lines.extend(self.render(child, depth + 1) for child in node.children)
        return "\n".join(lines)
