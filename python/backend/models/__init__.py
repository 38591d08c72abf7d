from backend.models.board import (
    SIZE,
    SOLVED_TILES,
    Board,
    BoardInvariantError,
    Direction,
)

__all__ = ["SIZE", "SOLVED_TILES", "Board", "BoardInvariantError", "Direction"]
