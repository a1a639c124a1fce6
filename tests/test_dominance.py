from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from dominance import CORNER_LABEL, build_table, format_table  # type: ignore[import-not-found]  # noqa: E402
from protocol import MoveSet, winner  # type: ignore[import-not-found]  # noqa: E402


@pytest.mark.parametrize("n", [3, 5, 7, 9])
def test_table_agrees_with_winner(n: int) -> None:
    moves = MoveSet.from_args([f"m{i}" for i in range(n)])
    rows = build_table(moves)

    assert [row.move for row in rows] == list(moves)
    for row in rows:
        assert [column for column, _ in row.cells] == list(moves)
        for column, value in row.cells:
            result = winner(moves, column, row.move)
            expected = {"draw": "Draw", "challenger_win": "Win", "opponent_win": "Lose"}[result]
            assert value == expected


def test_classic_table() -> None:
    rows = build_table(MoveSet.from_args(["rock", "paper", "scissors"]))
    rock = rows[0]
    assert rock.cell("rock") == "Draw"
    assert rock.cell("paper") == "Win"
    assert rock.cell("scissors") == "Lose"
    with pytest.raises(KeyError):
        rock.cell("lizard")


def test_format_table_labels_rows_and_columns() -> None:
    moves = MoveSet.from_args(["rock", "paper", "scissors"])
    text = format_table(build_table(moves), tablefmt="plain")
    lines = text.splitlines()

    assert CORNER_LABEL in text
    header = next(line for line in lines if CORNER_LABEL in line)
    assert header.index("rock") < header.index("paper") < header.index("scissors")
    for move in moves:
        assert any(line.lstrip().startswith(move) for line in lines)
    assert "Win" in text and "Lose" in text and "Draw" in text


def test_format_table_empty() -> None:
    assert format_table([]) == "(no moves)"
