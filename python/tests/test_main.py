"""CLI paths: the non-interactive check and the launch menu."""

from __future__ import annotations

from typer.testing import CliRunner

import main
from backend.models.board import Direction
from main import app

runner = CliRunner()

_SOLVABLE = "1,2,3,4,5,6,7,8,9,10,11,12,13,14,0,15"
_UNSOLVABLE = "1,2,3,4,5,6,7,8,9,10,11,12,13,15,14,0"


def test_check_solvable_board() -> None:
    result = runner.invoke(app, ["--board", _SOLVABLE, "--check"])
    assert result.exit_code == 0
    assert "solvable: yes" in result.output
    assert "solved:   no" in result.output


def test_check_accepts_spaced_board() -> None:
    spaced = _SOLVABLE.replace(",", ", ")
    result = runner.invoke(app, ["--board", spaced, "--check"])
    assert result.exit_code == 0
    assert "solvable: yes" in result.output


def test_check_unsolvable_board() -> None:
    result = runner.invoke(app, ["--board", _UNSOLVABLE, "--check"])
    assert result.exit_code == 0
    assert "solvable: no" in result.output


def test_check_shuffled_board() -> None:
    result = runner.invoke(app, ["--seed", "3", "--check"])
    assert result.exit_code == 0
    assert "solvable: yes" in result.output


def test_bad_board_is_rejected() -> None:
    result = runner.invoke(app, ["--board", "1,2,3", "--check"])
    assert result.exit_code == 2


def test_unknown_frontend_is_rejected() -> None:
    result = runner.invoke(app, ["--frontend", "pygame"])
    assert result.exit_code == 2


# -- interactive menu ---------------------------------------------------------


def _scripted_menu(monkeypatch, choices: list[str]) -> list[tuple[bool, int]]:
    """Drive the menu with *choices*; each launch makes the first legal move."""
    answers = iter(choices)
    seen: list[tuple[bool, int]] = []

    def fake_launch(frontend, game) -> None:
        seen.append((game.is_won, game.state.moves))
        for direction in (Direction.RIGHT, *Direction):
            if game.move(direction):
                break

    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))
    monkeypatch.setattr(main, "_launch", fake_launch)
    return seen


def test_menu_starts_a_fresh_game_per_launch(monkeypatch) -> None:
    seen = _scripted_menu(monkeypatch, ["1", "2", "0"])

    result = runner.invoke(app, ["--board", _SOLVABLE])

    assert result.exit_code == 0
    assert seen == [(False, 0), (False, 0)]


def test_menu_reshuffles_between_launches(monkeypatch) -> None:
    seen = _scripted_menu(monkeypatch, ["1", "1", "0"])

    result = runner.invoke(app, ["--seed", "5"])

    assert result.exit_code == 0
    assert [moves for _, moves in seen] == [0, 0]
