"""A UCI client for a running Stockfish process."""

from __future__ import annotations

import os
import queue
import subprocess
import threading
import time
from collections.abc import Iterable, Sequence
from datetime import timedelta

from sfwrap.engine_eval import EngineEval, EvalType
from sfwrap.engine_output import EngineOutput

__all__ = ["Stockfish"]

_DEFAULT_DEPTH = 15
_CLOSE_TIMEOUT = 5.0


class Stockfish:
    """Drives a Stockfish engine over its standard input and output.

    ``path`` is the engine executable, or a sequence of program arguments.
    Reads from the engine block until the expected output arrives; if the
    engine's output ends first, EOFError is raised.
    """

    def __init__(self, path: str | os.PathLike[str] | Sequence[str]) -> None:
        if isinstance(path, (str, os.PathLike)):
            args = [os.fspath(path)]
        else:
            args = [os.fspath(part) for part in path]

        self.depth: int = _DEFAULT_DEPTH
        self._lines: queue.Queue[str | None] = queue.Queue()
        self._process = subprocess.Popen(
            args,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            bufsize=1,
        )
        self._reader = threading.Thread(target=self._pump_output, daemon=True)
        self._reader.start()

        try:
            first_line = self._read_line()
        except EOFError:
            self.close()
            raise
        parts = first_line.split(" ")
        self.version: str | None = parts[1] if len(parts) > 1 else None

    def __enter__(self) -> Stockfish:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Ask the engine to quit, wait for it to exit and release its pipes."""
        process = self._process
        if process.poll() is None:
            try:
                self.quit()
            except (OSError, ValueError):
                pass
            try:
                process.wait(timeout=_CLOSE_TIMEOUT)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()
        for stream in (process.stdin, process.stdout):
            if stream is not None and not stream.closed:
                try:
                    stream.close()
                except OSError:
                    pass
        self._reader.join(timeout=_CLOSE_TIMEOUT)

    def setup_for_new_game(self) -> None:
        """Tell the engine the next position belongs to a different game."""
        self.ensure_ready()
        self.uci_send("ucinewgame")

    def set_fen_position(self, fen: str) -> None:
        """Set the current position from a FEN string."""
        self.uci_send(f"position fen {fen}")

    def reset_position(self) -> None:
        """Return to the standard starting position."""
        self.uci_send("position startpos")

    def ensure_ready(self) -> None:
        """Send ``isready`` and block until the engine answers ``readyok``."""
        self.uci_send("isready")
        while self._read_line() != "readyok":
            pass

    def get_fen(self) -> str:
        """Return the FEN of the engine's current position."""
        self.uci_send("d")
        while True:
            first, _, rest = self._read_line().partition(" ")
            if first == "Fen:":
                # The board display ends with the "Checkers" line.
                while "Checkers" not in self._read_line():
                    pass
                return rest

    def play_move(self, move: str) -> None:
        """Play one move (UCI notation) on the current position without searching."""
        fen = self.get_fen()
        self.uci_send(f"position fen {fen} moves {move}")

    def play_moves(self, moves: Iterable[str]) -> None:
        """Play a sequence of moves (UCI notation) without searching."""
        fen = self.get_fen()
        joined = " ".join(moves)
        self.uci_send(f"position fen {fen} moves {joined}")

    def go(self) -> EngineOutput:
        """Search to the configured depth and return the result."""
        self.uci_send(f"go depth {self.depth}")
        return self._engine_output()

    def go_for(self, seconds: float | timedelta) -> EngineOutput:
        """Search for the given time, blocking meanwhile, and return the result."""
        if isinstance(seconds, timedelta):
            seconds = seconds.total_seconds()
        self.uci_send("go")
        time.sleep(seconds)
        self.uci_send("stop")
        return self._engine_output()

    def go_based_on_times(
        self, white_time: int | None = None, black_time: int | None = None
    ) -> EngineOutput:
        """Search with the players' remaining clock times, in milliseconds."""
        command = "go"
        if white_time is not None:
            command += f" wtime {white_time}"
        if black_time is not None:
            command += f" btime {black_time}"
        self.uci_send(command)
        return self._engine_output()

    def board_display(self) -> str:
        """Return the engine's text drawing of the current board."""
        self.uci_send("d")
        lines: list[str] = []
        while True:
            line = self._read_line()
            if not line:
                continue
            if line.split(" ", 1)[0] == "Fen:":
                return "\n".join(lines)
            lines.append(line)

    def print_board(self) -> None:
        """Print the engine's drawing of the current board."""
        print(self.board_display())

    def set_option(self, name: str, value: object) -> None:
        """Set a UCI option of the engine."""
        self.uci_send(f"setoption name {name} value {value}")

    def set_hash(self, megabytes: int) -> None:
        """Set the transposition table size in megabytes."""
        self.set_option("Hash", megabytes)

    def set_threads(self, threads: int) -> None:
        """Set the number of search threads."""
        self.set_option("Threads", threads)

    def set_elo(self, elo: int) -> None:
        """Limit the engine's strength to an Elo rating; overrides the skill level."""
        self.set_option("UCI_LimitStrength", "true")
        self.set_option("Elo", elo)

    def set_skill_level(self, skill_level: int) -> None:
        """Set the skill level (0 to 20); overrides an Elo limit."""
        self.set_option("UCI_LimitStrength", "false")
        self.set_option("Skill Level", skill_level)

    def quit(self) -> None:
        """Send ``quit``, asking the engine to exit."""
        self.uci_send("quit")

    def uci_send(self, command: str) -> None:
        """Send a raw UCI command; any output it causes is left unread."""
        stdin = self._process.stdin
        if stdin is None or stdin.closed:
            raise ValueError("engine input is closed")
        stdin.write(command + "\n")
        stdin.flush()

    def _pump_output(self) -> None:
        stdout = self._process.stdout
        try:
            if stdout is not None:
                for line in stdout:
                    self._lines.put(line.rstrip("\r\n"))
        except (OSError, ValueError):
            pass
        finally:
            self._lines.put(None)

    def _read_line(self) -> str:
        line = self._lines.get()
        if line is None:
            self._lines.put(None)
            raise EOFError("engine output ended")
        return line

    def _engine_output(self) -> EngineOutput:
        fen = self.get_fen()
        # Scores are reported relative to the side to move; make them White-relative.
        multiplier = 1 if "w" in fen else -1

        previous: str | None = None
        while True:
            line = self._read_line()
            segments = line.split(" ")
            if segments[0] == "bestmove":
                break
            previous = line

        if previous is None:
            raise ValueError("engine reported a best move without an info line")

        info = previous.split(" ")
        score_type: str | None = None
        score_value: int | None = None
        depth: int | None = None
        try:
            for position, word in enumerate(info):
                if word == "depth":
                    depth = int(info[position + 1])
                elif word == "score":
                    score_type = info[position + 1]
                    score_value = int(info[position + 2]) * multiplier
                if depth is not None and score_type is not None:
                    break
        except (IndexError, ValueError) as error:
            raise ValueError(f"malformed engine info line: {previous!r}") from error

        if score_type is None or score_value is None or depth is None:
            raise ValueError(f"engine info line lacks score or depth: {previous!r}")
        if len(segments) < 2:
            raise ValueError(f"malformed best move line: {line!r}")

        pondered: str | None = None
        if len(segments) > 2 and segments[2] == "ponder":
            if len(segments) < 4:
                raise ValueError(f"malformed ponder entry: {line!r}")
            pondered = segments[3]

        evaluation = EngineEval(EvalType.from_descriptor(score_type), score_value)
        return EngineOutput(evaluation, segments[1], pondered, depth)