"""Evaluation scores reported by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["EvalType", "EngineEval"]


class EvalType(Enum):
    """The kind of score the engine reported: centipawns or mate in N."""

    CENTIPAWN = "cp"
    MATE = "mate"

    @classmethod
    def from_descriptor(cls, descriptor: str) -> EvalType:
        """Return the type for a UCI score descriptor (``"cp"`` or ``"mate"``).

        Raises ValueError for any other descriptor.
        """
        for member in cls:
            if member.value == descriptor:
                return member
        raise ValueError(f"unknown evaluation type descriptor: {descriptor!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EngineEval:
    """An engine evaluation: its type and its numeric value.

    The value is in centipawns, or the number of moves to a forced mate,
    depending on ``eval_type``.
    """

    eval_type: EvalType
    value: int

    def __str__(self) -> str:
        return f"{self.eval_type} {self.value}"