"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import sys

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from frontend.cli.input_handler import get_key, to_direction


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _controls() -> str:
    return (
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_RED}R{_R}: shuffle  |  "
        f"{_C}H{_R}: help  |  "
        f"{_C}Q{_R}: quit"
    )


# -- screens ------------------------------------------------------------------


def _show_game(game: GamePlay, status: str = "") -> None:
    _clear()
    print(f"  Steps: {_Y}{game.state.moves}{_R}")
    print()
    print(f"  {_C}=== Fifteen Puzzle ==={_R}")
    print()
    print(_render_board(game.state.board))
    print()
    if game.is_won:
        print(f"  {_G}★ VICTORY! Solved in {game.state.moves} steps. ★{_R}")
        print()
    print(_controls())
    if status:
        print(f"\n  {status}")
    sys.stdout.flush()


def _show_help() -> None:
    _clear()
    print()
    print(f"  {_BOLD}=== HOW TO PLAY ==={_R}")
    print()
    print("  Arrange the tiles 1-15 in order, blank in the bottom-right.")
    print("  Each arrow key moves the blank one cell in that direction;")
    print("  the tile it lands on slides into the old blank cell.")
    print()
    print(f"  {_DIM}Press any key to go back.{_R}")
    get_key()


# -- game loop ----------------------------------------------------------------


def run(game: GamePlay) -> None:
    """Launch the vanilla CLI for *game*."""
    status = ""

    while True:
        _show_game(game, status)
        status = ""
        key = get_key()

        direction = to_direction(key)
        if direction is not None:
            game.move(direction)
        elif key == "shuffle":
            game.reset()
            status = f"{_Y}Shuffled!{_R}"
        elif key == "help":
            _show_help()
        elif key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
