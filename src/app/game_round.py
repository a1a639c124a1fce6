from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from commit_reveal import authenticate, generate_key
from errors import RoundStateError
from protocol import Commitment, Disclosure, Move, MoveSet, Outcome, random_move, winner

logger = logging.getLogger(__name__)


class RoundState(str, Enum):
    IDLE = "idle"
    COMMITTED = "committed"
    RESOLVED = "resolved"
    DISCLOSED = "disclosed"


@dataclass
class GameRound:
    """One commit, resolve and disclose cycle against the computer.

    The key and the computer's move stay private until the round is resolved.
    Each instance owns exactly one key, so a new round needs a new instance.
    """

    move_set: MoveSet
    state: RoundState = field(default=RoundState.IDLE, init=False)
    challenger_move: Move | None = field(default=None, init=False)
    outcome: Outcome | None = field(default=None, init=False)
    _key: str | None = field(default=None, init=False, repr=False)
    _opponent_move: Move | None = field(default=None, init=False, repr=False)
    _commitment: Commitment | None = field(default=None, init=False, repr=False)

    def commit(self) -> Commitment:
        self._require(RoundState.IDLE)
        key = generate_key()
        opponent_move = random_move(self.move_set)
        commitment = Commitment(tag=authenticate(key, opponent_move))

        self._key = key
        self._opponent_move = opponent_move
        self._commitment = commitment
        self.state = RoundState.COMMITTED
        logger.debug(f"[commit] tag={commitment.tag}")
        return commitment

    @property
    def commitment(self) -> Commitment:
        if self._commitment is None:
            raise RoundStateError(RoundState.COMMITTED.value, self.state.value)
        return self._commitment

    def resolve(self, challenger_move: Move) -> Outcome:
        self._require(RoundState.COMMITTED)
        # winner() rejects unknown moves before any state changes.
        outcome = winner(self.move_set, challenger_move, self._committed_move())

        self.challenger_move = challenger_move
        self.outcome = outcome
        self.state = RoundState.RESOLVED
        logger.debug(f"[resolve] challenger={challenger_move} outcome={outcome}")
        return outcome

    def disclose(self) -> Disclosure:
        self._require(RoundState.RESOLVED)
        if self._key is None:
            raise RoundStateError(RoundState.COMMITTED.value, self.state.value)
        disclosure = Disclosure(key=self._key, move=self._committed_move())
        self.state = RoundState.DISCLOSED
        logger.debug(f"[disclose] opponent={disclosure.move}")
        return disclosure

    def _require(self, expected: RoundState) -> None:
        if self.state is not expected:
            raise RoundStateError(expected.value, self.state.value)

    def _committed_move(self) -> Move:
        if self._opponent_move is None:
            raise RoundStateError(RoundState.COMMITTED.value, self.state.value)
        return self._opponent_move
