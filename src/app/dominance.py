"""Pairwise outcome table for the help screen.

Rows are the computer's move, columns are the player's move, and each cell is
the player's result. Cells are derived from ``protocol.winner`` on every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from tabulate import tabulate

from protocol import Move, MoveSet, winner

Cell = Literal["Win", "Lose", "Draw"]

CORNER_LABEL = "PC \\ User"


@dataclass(frozen=True)
class DominanceRow:
    move: Move
    cells: tuple[tuple[Move, Cell], ...]

    def cell(self, column_move: Move) -> Cell:
        for move, value in self.cells:
            if move == column_move:
                return value
        raise KeyError(column_move)


def build_table(move_set: MoveSet) -> list[DominanceRow]:
    rows: list[DominanceRow] = []
    for row_move in move_set:
        cells: list[tuple[Move, Cell]] = []
        for column_move in move_set:
            if column_move == row_move:
                value: Cell = "Draw"
            elif winner(move_set, column_move, row_move) == "challenger_win":
                value = "Win"
            else:
                value = "Lose"
            cells.append((column_move, value))
        rows.append(DominanceRow(move=row_move, cells=tuple(cells)))
    return rows


def format_table(rows: list[DominanceRow], *, tablefmt: str = "grid") -> str:
    if not rows:
        return "(no moves)"

    headers = [CORNER_LABEL] + [move for move, _ in rows[0].cells]
    body = [[row.move] + [value for _, value in row.cells] for row in rows]
    intro = (
        "Rows are the computer's move, columns are your move.\n"
        "Each cell shows your result for that pair.\n"
    )
    return intro + tabulate(body, headers=headers, tablefmt=tablefmt)
