"""Generates solvable fifteen puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.engine.gameparity import Parity
from backend.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles from a uniform random permutation."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved()

    @staticmethod
    def shuffle(board: Board, rng: random.Random | None = None) -> None:
        """Shuffle *board* in-place, then repair it until it is solvable.

        Only the tiles change; zeroing the move counter is up to the caller
        that owns it (see ``GamePlay.reset``).
        """
        rng = rng or random.Random()
        flat = board.flat()

        # Fisher–Yates
        for i in range(len(flat) - 1, 0, -1):
            j = rng.randint(0, i)
            flat[i], flat[j] = flat[j], flat[i]
        board.fill(flat)

        while not Parity.is_solvable(board):
            Parity.repair(board)

        logger.debug("shuffled board: %s", board.flat())

    @staticmethod
    def generate(rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board."""
        board = GameGenerator.solved()
        GameGenerator.shuffle(board, rng)
        return board
