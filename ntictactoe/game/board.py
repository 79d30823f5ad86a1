from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .types import BLANK, NO_MOVE, Cell, GameServiceError, InvalidMoveError, Marker


def _parse_cell(cell: Cell) -> Cell:
    return None if cell is None or cell == BLANK else cell


@dataclass(frozen=True)
class Board:
    """Square N x N board. Cells are stored row-major; None is unoccupied."""

    dimension: int
    content: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise ValueError(f"Dimension must be positive, got {self.dimension}")
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "content", tuple(self.content))
        if len(self.content) != self.dimension * self.dimension:
            raise ValueError(
                f"Content must be of length {self.dimension * self.dimension}"
            )

    @classmethod
    def empty(cls, dimension: int) -> Board:
        return cls(dimension, (None,) * (dimension * dimension))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> Board:
        """Build a board from rows of markers, '_' or None marking blanks."""
        dimension = len(rows)
        for row in rows:
            if len(row) != dimension:
                raise ValueError("Board rows must form a square")
        return cls(dimension, tuple(_parse_cell(c) for row in rows for c in row))

    def is_valid_move(self, location: int) -> bool:
        return 0 <= location < len(self.content) and self.content[location] is None

    def available_moves(self) -> list[int]:
        return [i for i, cell in enumerate(self.content) if cell is None]

    def has_moves_available(self) -> bool:
        return any(cell is None for cell in self.content)

    def is_empty(self) -> bool:
        return all(cell is None for cell in self.content)

    def has_chain(self, marker: Marker) -> bool:
        """True if `marker` fills a whole row, column or diagonal."""
        d = self.dimension
        c = self.content
        for i in range(d):
            if all(c[i * d + j] == marker for j in range(d)):
                return True
            if all(c[j * d + i] == marker for j in range(d)):
                return True
        if all(c[i * d + i] == marker for i in range(d)):
            return True
        return all(c[i * d + (d - 1 - i)] == marker for i in range(d))

    def with_move(self, marker: Marker, location: int) -> Board:
        """Return a new board with `marker` placed at `location`."""
        if not self.is_valid_move(location):
            raise InvalidMoveError(marker, location)
        content = list(self.content)
        content[location] = marker
        return Board(self.dimension, tuple(content))

    def rows(self) -> list[tuple[Cell, ...]]:
        d = self.dimension
        return [self.content[i * d:(i + 1) * d] for i in range(d)]

    def __str__(self) -> str:
        return "".join(
            "".join(BLANK if cell is None else cell for cell in row) + "\n"
            for row in self.rows()
        )


@dataclass(frozen=True)
class GameState:
    """One ply of a game: board, turn order, whose turn it is and the last move."""

    board: Board
    player_markers: tuple[Marker, ...]
    current_player_index: int
    last_move: int = NO_MOVE
    game_id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)

    def __post_init__(self) -> None:
        markers = tuple(self.player_markers)
        object.__setattr__(self, "player_markers", markers)
        if not markers:
            raise ValueError("At least one player marker is required")
        if any(marker is None or marker == BLANK for marker in markers):
            raise ValueError(f"Player markers cannot be blank: {list(markers)}")
        if len(set(markers)) != len(markers):
            raise ValueError(f"Player markers must be unique: {list(markers)}")
        if not 0 <= self.current_player_index < len(markers):
            raise ValueError(
                f"Current player index {self.current_player_index} out of range"
            )

    @property
    def num_players(self) -> int:
        return len(self.player_markers)

    @property
    def current_player(self) -> Marker:
        return self.player_markers[self.current_player_index]

    @property
    def last_player_index(self) -> int:
        n = len(self.player_markers)
        return (self.current_player_index - 1 + n) % n

    @property
    def last_player(self) -> Marker:
        if self.last_move < 0 or self.board.is_empty():
            raise GameServiceError("null last player")
        return self.player_markers[self.last_player_index]

    @property
    def is_terminal(self) -> bool:
        """True when no moves are left or some player holds a chain."""
        if not self.board.has_moves_available():
            return True
        return any(self.board.has_chain(m) for m in self.player_markers)

    @property
    def winner(self) -> Optional[Marker]:
        for marker in self.player_markers:
            if self.board.has_chain(marker):
                return marker
        return None

    def has_moves_available(self) -> bool:
        return self.board.has_moves_available()

    def available_moves(self) -> list[int]:
        return self.board.available_moves()

    def has_chain(self, marker: Marker) -> bool:
        return self.board.has_chain(marker)

    def last_player_has_chain(self) -> bool:
        return self.board.has_chain(self.last_player)

    def after_player_moves(self, location: int) -> GameState:
        """Place the current player's marker and pass the turn to the next player."""
        board = self.board.with_move(self.current_player, location)
        return GameState(
            board,
            self.player_markers,
            (self.current_player_index + 1) % len(self.player_markers),
            location,
            self.game_id,
        )
