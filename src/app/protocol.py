from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Iterable, Iterator, Literal

from errors import EntropyError, InvalidMoveError, MoveSetError

Move = str
Outcome = Literal["challenger_win", "opponent_win", "draw"]

MIN_MOVES = 3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveSet:
    moves: tuple[Move, ...]

    def __post_init__(self) -> None:
        moves = tuple(self.moves)
        object.__setattr__(self, "moves", moves)
        if len(moves) < MIN_MOVES or len(moves) % 2 == 0:
            raise MoveSetError(moves, f"need an odd number of moves, at least {MIN_MOVES} (got {len(moves)})")
        if any(not m for m in moves):
            raise MoveSetError(moves, "move names must not be empty")
        duplicates = sorted({m for m in moves if moves.count(m) > 1})
        if duplicates:
            raise MoveSetError(moves, "moves must be unique, repeated: " + ", ".join(duplicates))

    @classmethod
    def from_args(cls, values: Iterable[str]) -> "MoveSet":
        return cls(tuple(values))

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __contains__(self, move: object) -> bool:
        return move in self.moves

    @property
    def half(self) -> int:
        return len(self.moves) // 2

    def index(self, move: Move) -> int:
        try:
            return self.moves.index(move)
        except ValueError:
            raise InvalidMoveError(move) from None

    def by_number(self, number: int) -> Move:
        """Look up a move by its 1-based menu number."""
        if not 1 <= number <= len(self.moves):
            raise InvalidMoveError(number)
        return self.moves[number - 1]


def random_move(move_set: MoveSet) -> Move:
    try:
        idx = secrets.randbelow(len(move_set))
    except (OSError, NotImplementedError) as exc:
        logger.error(f"[random-move] secure random source failed: {exc}")
        raise EntropyError("secure random source unavailable") from exc
    return move_set.moves[idx]


def winner(move_set: MoveSet, challenger: Move, opponent: Move) -> Outcome:
    """Decide a round under the circular dominance rule.

    Each move beats the ``half`` moves that precede it cyclically and loses to
    the ``half`` moves that follow it.
    """
    i = move_set.index(challenger)
    j = move_set.index(opponent)
    if challenger == opponent:
        return "draw"

    n = len(move_set)
    distance = ((j - i) % n + n) % n
    if 1 <= distance <= move_set.half:
        return "opponent_win"
    return "challenger_win"


def outcome_label(outcome: Outcome) -> str:
    return {
        "challenger_win": "You win!",
        "opponent_win": "Computer wins!",
        "draw": "Draw!",
    }[outcome]


@dataclass(frozen=True)
class Commitment:
    tag: str


@dataclass(frozen=True)
class Disclosure:
    key: str
    move: Move
