from backend.engine.gameplay import (
    GamePlay,
    apply_move,
    is_solvable,
    is_solved,
    new_game,
)
from backend.engine.gamestate import GameState
from backend.models import Board, BoardInvariantError, Direction

__all__ = [
    "Board",
    "BoardInvariantError",
    "Direction",
    "GamePlay",
    "GameState",
    "apply_move",
    "is_solvable",
    "is_solved",
    "new_game",
]
