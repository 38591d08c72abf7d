"""Shuffle generator — permutation, solvability, determinism."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameparity import Parity
from backend.engine.gamestate import GameState
from backend.models.board import Board


class _RecordingRandom(random.Random):
    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return super().randint(a, b)


@pytest.mark.parametrize("seed", range(200))
def test_generated_boards_are_solvable_permutations(seed: int) -> None:
    board = GameGenerator.generate(random.Random(seed))

    assert sorted(board.flat()) == list(range(16))
    assert len(board.tiles) == 4 and all(len(row) == 4 for row in board.tiles)
    board.find_blank()
    assert Parity.is_solvable(board)


def test_shuffle_runs_fisher_yates_from_the_end() -> None:
    rng = _RecordingRandom(0)
    GameGenerator.shuffle(Board.solved(), rng)
    assert rng.calls == [(0, i) for i in range(15, 0, -1)]


def test_shuffle_is_deterministic_for_a_seed() -> None:
    a = GameGenerator.generate(random.Random(1234))
    b = GameGenerator.generate(random.Random(1234))
    assert a == b


def test_shuffle_mutates_in_place() -> None:
    board = Board.solved()
    rows = board.tiles
    GameGenerator.shuffle(board, random.Random(5))
    assert board.tiles is rows


def test_shuffles_vary() -> None:
    rng = random.Random(99)
    seen = {tuple(GameGenerator.generate(rng).flat()) for _ in range(20)}
    assert len(seen) > 1


def test_shuffle_leaves_move_counter_to_caller() -> None:
    state = GameState(Board.solved())
    state.moves = 7
    GameGenerator.shuffle(state.board, random.Random(2))
    assert state.moves == 7
