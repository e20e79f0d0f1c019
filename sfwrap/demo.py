"""Command-line walkthroughs that drive a Stockfish engine."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from sfwrap.engine import Stockfish
from sfwrap.engine_output import EngineOutput

__all__ = ["default_engine_path", "main"]

_OPENING_MOVES = ("e2e4", "e7e5", "g1f3")
_CLOCK_MOVES = ("e2e4", "e7e5", "f1c4")
_CLOCK_WHITE_MS = 50_000
_CLOCK_BLACK_MS = 10
_CLOCK_FEN = "r1bqkb1r/pppp1ppp/2n2n2/4p3/4P3/2N2N2/PPPP1PPP/R1BQKB1R w KQkq - 0 1"


def default_engine_path() -> str:
    """Return the engine command used when none is given on the command line."""
    if sys.platform == "win32":
        return "./stockfish.exe"
    return "stockfish"


def _report(output: EngineOutput) -> None:
    print(
        f"engine output: {output} "
        f"(depth {output.depth}, ponder {output.pondered_move})"
    )


def _depth_demo(stockfish: Stockfish, args: argparse.Namespace) -> None:
    stockfish.setup_for_new_game()
    stockfish.print_board()
    print(f"Stockfish version: {stockfish.version}")

    stockfish.depth = args.depth
    _report(stockfish.go())

    for move in _OPENING_MOVES:
        stockfish.play_move(move)
        stockfish.print_board()
        _report(stockfish.go())

    stockfish.quit()


def _timed_demo(stockfish: Stockfish, args: argparse.Namespace) -> None:
    stockfish.setup_for_new_game()
    stockfish.print_board()
    _report(stockfish.go_for(args.seconds))


def _clock_demo(stockfish: Stockfish, args: argparse.Namespace) -> None:
    stockfish.setup_for_new_game()
    stockfish.print_board()
    _report(stockfish.go_based_on_times(_CLOCK_WHITE_MS, _CLOCK_BLACK_MS))

    stockfish.set_fen_position(_CLOCK_FEN)
    reported = stockfish.get_fen()
    if reported != _CLOCK_FEN:
        raise ValueError(f"engine reports position {reported!r}, expected {_CLOCK_FEN!r}")

    stockfish.play_moves(_CLOCK_MOVES)


_DEMOS: dict[str, Callable[[Stockfish, argparse.Namespace], None]] = {
    "depth": _depth_demo,
    "timed": _timed_demo,
    "clock": _clock_demo,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sfwrap-demo",
        description="Run a short session against a Stockfish engine.",
    )
    parser.add_argument(
        "--mode",
        choices=tuple(_DEMOS),
        default="depth",
        help="depth: fixed-depth searches over an opening; "
        "timed: one timed search; clock: a clock-based search and a set position",
    )
    parser.add_argument("--depth", type=int, default=20, help="search depth (depth mode)")
    parser.add_argument(
        "--seconds", type=float, default=5.0, help="search time in seconds (timed mode)"
    )
    parser.add_argument(
        "engine",
        nargs="*",
        help="engine command and its arguments (default: %(default)s)",
        default=[],
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected walkthrough; return 0 on success and 1 on failure."""
    args = _build_parser().parse_args(argv)
    engine = list(args.engine) if args.engine else default_engine_path()
    try:
        with Stockfish(engine) as stockfish:
            _DEMOS[args.mode](stockfish, args)
    except (OSError, EOFError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())