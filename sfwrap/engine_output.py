"""The result of one engine search."""

from __future__ import annotations

from dataclasses import dataclass

from sfwrap.engine_eval import EngineEval

__all__ = ["EngineOutput"]


@dataclass(frozen=True)
class EngineOutput:
    """The engine's evaluation, best move and pondered move for a position.

    Moves are given in long algebraic UCI notation, e.g. ``"e2e4"``.
    ``pondered_move`` is None when the engine reported no ponder move.
    ``depth`` is the search depth reached when the output was produced.
    """

    eval: EngineEval
    best_move: str
    pondered_move: str | None
    depth: int

    def __str__(self) -> str:
        return f"{self.eval}_{self.best_move}"