"""Board model for the fifteen puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

SIZE = 4
SOLVED_TILES: tuple[int, ...] = tuple(range(1, SIZE * SIZE)) + (0,)


class BoardInvariantError(AssertionError):
    """Raised when a board does not hold exactly one blank."""


class Direction(StrEnum):
    """Direction the *blank* travels on a move."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass
class Board:
    """The 4×4 puzzle grid.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    """

    tiles: list[list[int]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls) -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        return cls.from_flat(SOLVED_TILES)

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8,
                             9, 10, 11, 12, 13, 14, 0, 15])
        """
        flat = list(flat)
        if len(flat) != SIZE * SIZE:
            raise ValueError(
                f"Expected {SIZE * SIZE} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(SIZE * SIZE)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{SIZE * SIZE - 1}, "
                f"got {flat}."
            )
        tiles = [flat[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]
        return cls(tiles=tiles)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"Expected {SIZE} rows of {SIZE} tiles.")
        return cls.from_flat(v for row in rows for v in row)

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.tiles)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def find_blank(self) -> tuple[int, int]:
        """Return ``(row, col)`` of the unique blank cell."""
        found = [
            (r, c)
            for r, row in enumerate(self.tiles)
            for c, v in enumerate(row)
            if v == 0
        ]
        if len(found) != 1:
            raise BoardInvariantError(
                f"Board must hold exactly one blank, found {len(found)}."
            )
        return found[0]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return tuple(self.flat()) == SOLVED_TILES

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.tiles[row][col] == SOLVED_TILES[row * self.size + col]

    # -- mutation -------------------------------------------------------------

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        """Exchange the values of two cells. Coordinates are not checked."""
        (ar, ac), (br, bc) = a, b
        self.tiles[ar][ac], self.tiles[br][bc] = (
            self.tiles[br][bc],
            self.tiles[ar][ac],
        )

    def fill(self, flat: Sequence[int]) -> None:
        """Overwrite the cells in place from a row-major sequence."""
        for i, v in enumerate(flat):
            self.tiles[i // self.size][i % self.size] = v

    def copy(self) -> Board:
        return Board(tiles=[row[:] for row in self.tiles])

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{v:>2}" for v in row) for row in self.tiles)
