# sfwrap

A light, easy-to-use wrapper for the Stockfish chess engine. It starts a
Stockfish executable as a child process and talks to it over UCI through its
standard input and output.

## Installation

```
pip install .
```

A Stockfish binary must be installed separately. Either put it on your `PATH`
as `stockfish`, or, on Windows, as `stockfish.exe` in the working directory.

## Usage

```python
from sfwrap.engine import Stockfish

with Stockfish("stockfish") as engine:
    print(engine.version)              # taken from the engine's first line
    engine.setup_for_new_game()
    engine.print_board()

    engine.go_based_on_times(50_000, 55_000)   # clock times in milliseconds

    engine.play_moves(["e2e4", "e7e5", "g1f3"])
    print(engine.get_fen())

    engine.depth = 20                  # default depth is 15
    output = engine.go()
    print(output.best_move, output.pondered_move, output.depth)
    print(output.eval.eval_type, output.eval.value)
    print(output)                      # e.g. "cp 35_b8c6"

    output = engine.go_for(0.5)        # seconds, or a datetime.timedelta
```

`Stockfish(path)` takes the executable path, or a sequence of the program and
its arguments.

The main pieces are:

- **Creating and setting up** – `Stockfish(path)` starts the engine,
  `setup_for_new_game()` waits for `readyok` and sends `ucinewgame`, and
  `ensure_ready()` only waits for `readyok`. Use the object as a context
  manager, or call `close()` yourself; `quit()` only sends the `quit` command.
- **Setting the position** – `set_fen_position`, `reset_position`,
  `play_move`, `play_moves`, `get_fen`, `board_display`, `print_board`.
- **Searching** – `go` (to the `depth` attribute), `go_for`,
  `go_based_on_times`. Each returns an `EngineOutput`.
- **Results** – `EngineOutput` (in `sfwrap.engine_output`) holds an
  `EngineEval` (`eval`), `best_move`, `pondered_move` (or `None`) and `depth`.
  `EngineEval` and `EvalType` (`CENTIPAWN` / `MATE`) are in
  `sfwrap.engine_eval`. Scores are given from White's point of view.
- **Options** – `set_option`, `set_hash`, `set_threads`, `set_elo`,
  `set_skill_level`, and `uci_send` for raw UCI commands.

Reads from the engine block until the expected output arrives. If the
engine's output ends first, `EOFError` is raised; an engine reply that cannot
be parsed raises `ValueError`.

## Demo

```
sfwrap-demo [--mode {depth,timed,clock}] [--depth N] [--seconds S] [engine ...]
```

Runs a short session against the engine (by default `stockfish`, or
`./stockfish.exe` on Windows):

- `depth` (default): sets up a game, prints the board and the engine version,
  searches to `--depth` (default 20), then plays `e2e4`, `e7e5`, `g1f3`,
  printing the board and searching after each move.
- `timed`: one search lasting `--seconds` (default 5).
- `clock`: one clock-based search, then sets a position from a FEN, checks
  that the engine reports it back unchanged, and plays three moves.

The command exits with status 0 on success and 1 on error.

## What it does not do

The package has no chess logic of its own: it does not check moves or FEN
strings, and relies on the engine for the board display and positions. It
does not ship an engine.

## Tests

```
pip install ".[test]"
pytest
```