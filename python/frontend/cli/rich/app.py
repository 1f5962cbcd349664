"""Rich terminal frontend — boards, solution tables and strategy comparisons.

Renders what the backend reports; all searching happens in
``backend.engine.gamesolver``.
"""

from __future__ import annotations

import sys
import time
from typing import Iterable

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Cancelled, Exhausted, Outcome, Solved, Solver
from backend.models.board import Board
from backend.models.config import SolverConfig
from backend.models.strategy import Strategy

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    return f"{seconds:.2f} s"


def _status(outcome: Outcome) -> str:
    if isinstance(outcome, Solved):
        return "[bold green]solved[/bold green]"
    if isinstance(outcome, Exhausted):
        return "[red]exhausted[/red]"
    return "[yellow]cancelled[/yellow]"


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, goal: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c, goal):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- reports ------------------------------------------------------------------


def render_steps(outcome: Solved) -> Table:
    table = Table(box=rich.box.ROUNDED, border_style="dim")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Blank", style="cyan")
    # the moved tile's id is also the step cost
    table.add_column("Tile", justify="right", style="yellow")
    table.add_column("Total", justify="right", style="bold")
    table.add_column("Board", style="dim")
    for i, step in enumerate(outcome.steps, 1):
        table.add_row(
            str(i),
            step.action.value,
            str(step.step_cost),
            str(step.cumulative_cost),
            str(step.board),
        )
    return table


def render_summary(outcome: Outcome) -> Text:
    summary = Text.from_markup(f"  {outcome.strategy.label}: {_status(outcome)}")
    if isinstance(outcome, Solved):
        summary.append(f"   {outcome.depth} moves", style="bold yellow")
        summary.append(f"   cost {outcome.total_cost}", style="bold yellow")
    summary.append(f"   expanded {outcome.nodes_expanded}", style="dim")
    summary.append(f"   max frontier {outcome.max_frontier_size}", style="dim")
    summary.append(f"   {_format_time(outcome.elapsed)}", style="dim")
    return summary


def render_comparison(results: dict[Strategy, Outcome]) -> Table:
    """One row per strategy: outcome, cost, moves, expanded nodes, frontier, time."""
    table = Table(
        title="Strategy comparison",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("Strategy", style="bold")
    table.add_column("Outcome")
    table.add_column("Moves", justify="right", style="yellow")
    table.add_column("Cost", justify="right", style="yellow")
    table.add_column("Expanded", justify="right")
    table.add_column("Max frontier", justify="right")
    table.add_column("Time", justify="right", style="dim")

    for strategy, outcome in results.items():
        solved = isinstance(outcome, Solved)
        table.add_row(
            strategy.label,
            _status(outcome),
            str(outcome.depth) if solved else "-",
            str(outcome.total_cost) if solved else "-",
            str(outcome.nodes_expanded),
            str(outcome.max_frontier_size),
            _format_time(outcome.elapsed),
        )
    return table


def animate(board: Board, outcome: Solved, goal: Board, delay: float = 0.3) -> None:
    """Replay the solution on a board panel, one move per frame."""
    game = GamePlay.from_board(board, goal)
    total = len(outcome.moves)
    for i, direction in enumerate(outcome.moves):
        game.move(direction)
        console.clear()

        progress = Text()
        progress.append(f"  Move {i + 1}/{total} ", style="bold cyan")
        progress.append(f"(blank {direction.value}, cost {game.cost})", style="dim")

        panel = Panel(
            Align.center(render_board(game.board, goal)),
            title=f"[bold cyan]{outcome.strategy.label}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        sys.stdout.flush()
        time.sleep(delay)


# -- public entry points ------------------------------------------------------


def show_board(board: Board, goal: Board, title: str = "Start") -> None:
    panel = Panel(
        Group(Align.center(render_board(board, goal))),
        title=f"[bold]{title}[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(Align.center(panel))


def run(
    board: Board,
    strategies: Iterable[Strategy],
    config: SolverConfig,
    show_animation: bool = False,
) -> dict[Strategy, Outcome]:
    """Solve *board* with each strategy and print the results."""
    strategies = list(strategies)
    show_board(board, config.goal)

    if len(strategies) == 1:
        outcome = Solver.search(board, strategies[0], config)
        if isinstance(outcome, Solved):
            if show_animation:
                animate(board, outcome, config.goal)
            console.print(render_steps(outcome))
        elif isinstance(outcome, Cancelled):
            console.print(
                f"[yellow]Stopped after {config.time_limit} s without a solution.[/yellow]"
            )
        else:
            console.print("[red]No solution: the goal is unreachable from this board.[/red]")
        console.print(render_summary(outcome))
        return {strategies[0]: outcome}

    results = Solver.compare(board, strategies, config)
    console.print(render_comparison(results))
    return results
