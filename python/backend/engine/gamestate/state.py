"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.board import Board


class GameState:
    """Holds the current board and move counter."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    def get_tile(self, row: int, col: int) -> int:
        return self.board.get_tile(row, col)

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def reset_moves(self) -> None:
        self.moves = 0

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
