from backend.engine.gameplay.game import (
    GamePlay,
    apply_move,
    is_solvable,
    is_solved,
    new_game,
    slide,
)

__all__ = [
    "GamePlay",
    "apply_move",
    "is_solvable",
    "is_solved",
    "new_game",
    "slide",
]
