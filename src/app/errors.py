"""Exceptions raised by the game core."""

from __future__ import annotations

from typing import Any, Sequence


class GameError(Exception):
    """Base class for every game fault."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.__class__.__name__, "message": str(self)}


class MoveSetError(GameError):
    """Raised when the move list is not odd, >= 3 and unique."""

    def __init__(self, moves: Sequence[str], reason: str):
        self.moves = tuple(moves)
        self.reason = reason
        super().__init__(f"Invalid move list: {reason}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update({"moves": list(self.moves), "reason": self.reason})
        return payload


class InvalidMoveError(GameError):
    """Raised when a move is not part of the move list."""

    def __init__(self, move: Any):
        self.move = move
        super().__init__(f"Unknown move: {move!r}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["move"] = self.move
        return payload


class EntropyError(GameError):
    """Raised when the secure random source fails. Never retried."""


class RoundStateError(GameError):
    """Raised when a round step is called out of order."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Round is {actual}, expected {expected}")
