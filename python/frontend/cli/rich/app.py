"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from frontend.cli.input_handler import get_key, to_direction

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _steps(game: GamePlay) -> Text:
    steps = Text()
    steps.append("Steps: ", style="dim")
    steps.append(str(game.state.moves), style="bold yellow")
    return steps


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold red")
    controls.append("  shuffle   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append("  help   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    won = game.is_won
    parts: list[Align] = [Align.center(_render_board(game.state.board))]
    if won:
        victory = Text()
        victory.append("\n  ★ ", style="bold yellow")
        victory.append("VICTORY!", style="bold green")
        victory.append("  You solved it!  ", style="green")
        victory.append("★\n", style="bold yellow")
        parts.append(Align.center(victory))

    panel = Panel(
        Group(*parts),
        title="[bold cyan]Fifteen Puzzle[/bold cyan]",
        subtitle=_steps(game),
        border_style="bold green" if won else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _draw_help() -> None:
    console.clear()

    body = Text()
    body.append("Arrange the tiles 1-15 in order, blank in the bottom-right.\n")
    body.append("Each arrow key moves the blank one cell in that direction;\n")
    body.append("the tile it lands on slides into the old blank cell.")

    panel = Panel(
        body,
        title="[bold]HOW  TO  PLAY[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def run(game: GamePlay) -> None:
    """Launch the Rich CLI for *game*."""
    status = ""

    while True:
        _draw_game(game, status)
        status = ""
        key = get_key()

        direction = to_direction(key)
        if direction is not None:
            game.move(direction)
        elif key == "shuffle":
            game.reset()
            status = "[yellow]Shuffled![/yellow]"
        elif key == "help":
            _draw_help()
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
