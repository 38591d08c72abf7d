"""Solvability checks for the fifteen puzzle."""

from __future__ import annotations

import logging

from backend.models.board import Board

logger = logging.getLogger(__name__)


class Parity:
    """Stateless parity helpers — all methods are static."""

    @staticmethod
    def count_inversions(board: Board) -> int:
        """Count pairs of non-blank tiles out of order in row-major order."""
        flat = [v for v in board.flat() if v != 0]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def blank_row_from_bottom(board: Board) -> int:
        """Distance of the blank's row from the bottom edge (last row is 1)."""
        row, _ = board.find_blank()
        return board.size - row

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        inversions = Parity.count_inversions(board)
        if board.size % 2 == 1:
            return inversions % 2 == 0
        distance = Parity.blank_row_from_bottom(board)
        return (distance % 2 == 0) == (inversions % 2 == 1)

    @staticmethod
    def repair(board: Board) -> None:
        """Flip the parity of an unsolvable *board* with a single swap.

        Starting from the bottom-right corner, the first non-blank tile is
        swapped with the next non-blank tile to its left in the same row.
        Solvable boards are left untouched.
        """
        if Parity.is_solvable(board):
            return

        for r in range(board.size - 1, -1, -1):
            row = board.tiles[r]
            for c in range(board.size - 1, -1, -1):
                if row[c] == 0:
                    continue
                for k in range(c - 1, -1, -1):
                    if row[k] == 0:
                        continue
                    logger.debug(
                        "repair: swapping %d and %d in row %d", row[c], row[k], r
                    )
                    board.swap((r, c), (r, k))
                    return
