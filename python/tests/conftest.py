from __future__ import annotations

import pytest

from backend.models.board import Board


@pytest.fixture
def solved_board() -> Board:
    return Board.solved()


@pytest.fixture
def near_solved_board() -> Board:
    """Solvable: one slide away from the goal."""
    return Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])


@pytest.fixture
def unsolvable_board() -> Board:
    """The classic 14–15 swap."""
    return Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 14, 0])
