#!/usr/bin/env python3
"""Fifteen Puzzle.

Usage::

    python main.py                        # interactive menu
    python main.py -f rich                # Rich terminal
    python main.py -f vanilla --seed 7    # reproducible shuffle
    python main.py --board 1,2,...,0 --check
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gameplay import GamePlay, is_solvable, is_solved  # noqa: E402
from backend.models.board import Board  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def _parse_board(raw: str) -> Board:
    try:
        flat = [int(v) for v in raw.split(",")]
        return Board.from_flat(flat)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--board") from exc


def _print_status(board: Board) -> None:
    print(board)
    print()
    print(f"  solvable: {'yes' if is_solvable(board) else 'no'}")
    print(f"  solved:   {'yes' if is_solved(board) else 'no'}")


def _launch(frontend: Frontend, game: GamePlay) -> None:
    logger.debug("launching %s frontend", frontend)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(game)


def _new_game(start: Optional[Board], rng: random.Random) -> GamePlay:
    """Return a fresh session, from a copy of *start* when one was given."""
    if start is not None:
        return GamePlay.from_board(start.copy(), rng)
    return GamePlay(rng)


def _menu_loop(start: Optional[Board], rng: random.Random) -> None:
    while True:
        print()
        print("  ====================================")
        print("       F I F T E E N   P U Z Z L E    ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            frontend = {"1": Frontend.vanilla, "2": Frontend.rich}[choice]
            _launch(frontend, _new_game(start, rng))
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle, for reproducible games.",
    ),
    board: Optional[str] = typer.Option(
        None, "--board",
        help="Start from 16 comma-separated tiles (row-major, 0 = blank).",
    ),
    check: bool = typer.Option(
        False, "--check",
        help="Print solvability of the starting board and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Enable debug logging.",
    ),
) -> None:
    """Fifteen Puzzle."""
    _configure_logging(verbose)
    rng = random.Random(seed)

    start = _parse_board(board) if board is not None else None

    if check:
        _print_status(_new_game(start, rng).state.board)
        return

    if frontend is None:
        _menu_loop(start, rng)
        return

    _launch(frontend, _new_game(start, rng))


if __name__ == "__main__":
    app()
