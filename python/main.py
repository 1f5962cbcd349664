#!/usr/bin/env python3
"""Eight Puzzle Solver.

Usage::

    python main.py                       # every strategy on the easy preset
    python main.py -a astar-manhattan -p hard --animate
    python main.py -b 1,3,4,8,6,2,7,0,5 -a bfs
    python main.py -r 25 --seed 7 -t 10  # random board, 10 s per strategy
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator, Preset  # noqa: E402
from backend.models.board import Board  # noqa: E402
from backend.models.config import SolverConfig  # noqa: E402
from backend.models.errors import InvalidBoard  # noqa: E402
from backend.models.strategy import Strategy  # noqa: E402


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _pick_board(
    board: Optional[str], preset: Preset, random_moves: Optional[int], seed: Optional[int]
) -> Board:
    if board is not None:
        return Board.parse(board)
    if random_moves is not None:
        return GameGenerator.generate(random_moves, seed=seed)
    return GameGenerator.preset(preset)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    strategy: Optional[Strategy] = typer.Option(
        None, "-a", "--strategy",
        help="Search strategy. Omit to compare all six.",
    ),
    preset: Preset = typer.Option(
        Preset.EASY, "-p", "--preset",
        help="Built-in start board.",
    ),
    board: Optional[str] = typer.Option(
        None, "-b", "--board",
        help="Start board, e.g. 1,3,4,8,6,2,7,0,5 (0 is the blank).",
    ),
    random_moves: Optional[int] = typer.Option(
        None, "-r", "--random",
        min=1,
        help="Scramble the goal with this many random moves.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    time_limit: Optional[float] = typer.Option(
        None, "-t", "--time-limit",
        min=0.001,
        envvar="EIGHT_PUZZLE_TIME_LIMIT",
        help="Wall-clock budget per strategy, in seconds.",
    ),
    animate: bool = typer.Option(
        False, "--animate",
        help="Replay the solution move by move (single strategy only).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every expansion and eviction.",
    ),
) -> None:
    """Eight Puzzle Solver."""
    _configure_logging(verbose)

    from frontend.cli.rich import app as rich_app

    try:
        start = _pick_board(board, preset, random_moves, seed)
    except InvalidBoard as exc:
        rich_app.console.print(f"[red]Invalid board:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    config = SolverConfig(time_limit=time_limit)
    strategies = [strategy] if strategy is not None else list(Strategy)
    rich_app.run(start, strategies, config, show_animation=animate)


if __name__ == "__main__":
    app()
