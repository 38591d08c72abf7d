"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameparity import Parity
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


# -- move engine (direction = where the *blank* moves) ------------------------


def slide(state: GameState, direction: Direction) -> tuple[bool, int]:
    """Slide the tile next to the blank into it.

    The blank travels one cell in *direction*; the tile it lands on takes
    the blank's old cell.  E.g. ``Direction.LEFT`` pulls the tile on the
    blank's left one step to the right.

    Returns ``(applied, moves)``.  Moves that would take the blank off the
    board leave the state untouched.
    """
    board = state.board
    br, bc = board.find_blank()
    dr, dc = direction.offset
    tr, tc = br + dr, bc + dc

    if not board.in_bounds(tr, tc):
        return False, state.moves

    board.tiles[br][bc] = board.tiles[tr][tc]
    board.tiles[tr][tc] = 0
    state.increment_moves()
    logger.debug("moved %s: blank (%d, %d) -> (%d, %d)", direction, br, bc, tr, tc)
    return True, state.moves


# -- public API ---------------------------------------------------------------


def new_game(rng: random.Random | None = None) -> GameState:
    """Return a fresh shuffled, solvable state with a zero move count."""
    return GameState(GameGenerator.generate(rng))


def apply_move(state: GameState, direction: Direction) -> bool:
    """Attempt a move; return whether the board changed."""
    applied, _ = slide(state, direction)
    return applied


def _board(target: Board | GameState) -> Board:
    return target.board if isinstance(target, GameState) else target


def is_solved(target: Board | GameState) -> bool:
    return _board(target).is_solved()


def is_solvable(target: Board | GameState) -> bool:
    return Parity.is_solvable(_board(target))


# -- session ------------------------------------------------------------------


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.state = new_game(self._rng)

    @classmethod
    def from_board(
        cls, board: Board, rng: random.Random | None = None
    ) -> GamePlay:
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj._rng = rng or random.Random()
        obj.state = GameState(board)
        return obj

    @property
    def size(self) -> int:
        return self.state.board.size

    def move(self, direction: Direction) -> bool:
        """Move the blank in *direction*.

        Returns True if the move was valid.
        """
        applied = apply_move(self.state, direction)
        if applied and self.is_won:
            logger.info("puzzle solved in %d moves", self.state.moves)
        return applied

    def reset(self) -> None:
        """Reshuffle the board in place and zero the move counter."""
        GameGenerator.shuffle(self.state.board, self._rng)
        self.state.reset_moves()

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
