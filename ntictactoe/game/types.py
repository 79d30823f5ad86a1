from __future__ import annotations

from typing import Optional

# Location sentinel for a state that has not seen a move yet
NO_MOVE = -1

# Rendering / parsing token for an unoccupied cell
BLANK = "_"

Marker = str
Cell = Optional[Marker]


class GameServiceError(Exception):
    """Raised when a board or game state is used outside its contract."""


class InvalidMoveError(GameServiceError):
    """Raised when a move targets an occupied or out-of-range location."""

    def __init__(self, marker: Marker, location: int) -> None:
        super().__init__(f"Invalid move: {marker}@{location}")
        self.marker = marker
        self.location = location
