"""A light wrapper for driving the Stockfish chess engine over UCI, with a demo command."""

__version__ = "0.2.11"
__all__ = ["engine", "engine_eval", "engine_output", "demo"]