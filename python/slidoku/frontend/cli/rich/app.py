"""Rich terminal frontend — tables, colours and panels.

A thin collaborator over the engine: it renders ``GamePlay`` state,
forwards keypresses as moves and records best scores.  Includes a
built-in menu for difficulty selection, play and best scores.
"""

from __future__ import annotations

import sys
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidoku.engine.gameplay import GamePlay
from slidoku.engine.gamesolver import Solver
from slidoku.frontend.cli.input_handler import get_key, get_key_timeout
from slidoku.models.board import Board, Direction, Position
from slidoku.models.difficulty import DIFFICULTIES
from slidoku.models.highscore import BestScores, open_store

console = Console()

_CURSOR_STEPS: dict[str, Position] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}

_SLIDES: dict[str, Direction] = {
    "slide_up": Direction.UP,
    "slide_down": Direction.DOWN,
    "slide_left": Direction.LEFT,
    "slide_right": Direction.RIGHT,
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _sum_cell(total: int, target_sum: int) -> str:
    style = "bold green" if total == target_sum else "red"
    return f"[{style}]{total}[/{style}]"


# -- board rendering ----------------------------------------------------------


def _render_board(
    board: Board,
    fixed: frozenset[Position],
    target_sum: int,
    cursor: Position | None = None,
    show_sums: bool = True,
) -> Table:
    """Return a Rich Table of the grid with row sums right and column sums below."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=3, justify="center")
    if show_sums:
        table.add_column(width=3, justify="center", style="dim")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cell = "·"
                style = "dim"
            elif (r, c) in fixed:
                cell = f"{val:>2}"
                style = "bold black on yellow"
            else:
                cell = f"{val:>2}"
                style = "bold white"
            if cursor == (r, c):
                style += " reverse"
            cells.append(f"[{style}]{cell}[/{style}]")
        if show_sums:
            cells.append(_sum_cell(sum(row), target_sum))
        table.add_row(*cells)

    if show_sums:
        table.add_section()
        table.add_row(*[_sum_cell(s, target_sum) for s in board.col_sums()], "")

    return table


def render_scores_table(scores: BestScores) -> Table | Text:
    rows = scores.all_scores()
    if not rows:
        return Text("  No best scores yet.", style="dim")

    table = Table(box=rich.box.ROUNDED, border_style="dim", show_lines=False)
    table.add_column("Date", style="dim")
    table.add_column("Difficulty", style="cyan")
    table.add_column("Best", justify="right", style="yellow")
    for date, difficulty, moves in rows:
        table.add_row(date, difficulty, f"{moves} moves")
    return table


# -- menu screen --------------------------------------------------------------


def _draw_menu(seed_key: str, sel: int) -> None:
    console.clear()

    levels = Text()
    for i, name in enumerate(DIFFICULTIES):
        if i:
            levels.append("  ")
        if i == sel:
            levels.append(f" {name} ", style="bold green on #313244")
        else:
            levels.append(f" {name} ", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="dim bold")
    opts.append("  Scores    ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(Text(f"Puzzle of {seed_key}", style="bold")),
        Text(""),
        Align.center(levels),
        Align.center(Text("  ← →  change difficulty", style="dim")),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    console.print()
    console.print(
        Align.center(
            Panel(
                body,
                title="[bold]S L I D O K U[/bold]",
                border_style="bright_blue",
                padding=(1, 4),
            )
        )
    )


# -- game screens -------------------------------------------------------------


def _draw_game(game: GamePlay, cursor: Position, best: int | None, status: str = "") -> None:
    console.clear()
    state = game.state
    puzzle = game.puzzle

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(state.elapsed_time), style="bold yellow")
    stats.append("    Best: ", style="dim")
    stats.append("-" if best is None else str(best), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    if puzzle.allow_revealing:
        controls.append("T", style="bold cyan")
        controls.append("  target   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(_render_board(state.board, state.fixed_tiles, state.target_sum, cursor)),
        title=(
            f"[bold cyan]Slidoku #{puzzle.puzzle_number}  "
            f"{puzzle.difficulty}  → {puzzle.target_sum}[/bold cyan]"
        ),
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_target(game: GamePlay) -> None:
    console.clear()
    state = game.state
    panel = Panel(
        Align.center(_render_board(state.target, state.fixed_tiles, state.target_sum)),
        title="[bold yellow]Target[/bold yellow]",
        border_style="yellow",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


def _draw_win(game: GamePlay, new_best: bool) -> None:
    console.clear()
    state = game.state

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("SOLVED!", style="bold green")
    congrats.append("  Every line sums to ", style="green")
    congrats.append(str(state.target_sum), style="bold green")
    congrats.append("  ★\n", style="bold yellow")

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(state.elapsed_time), style="bold yellow")
    if new_best:
        stats.append("    New best!", style="bold magenta")

    group = Group(
        Align.center(_render_board(state.board, state.fixed_tiles, state.target_sum)),
        Align.center(congrats),
        Align.center(stats),
    )
    console.print()
    console.print(
        Align.center(
            Panel(
                group,
                title=f"[bold green]Slidoku #{game.puzzle.puzzle_number}[/bold green]",
                border_style="bold green",
                padding=(1, 2),
            )
        )
    )


def _draw_scores(scores: BestScores) -> None:
    console.clear()
    console.print()
    console.print(
        Align.center(
            Panel(
                render_scores_table(scores),
                title="[bold]BEST  SCORES[/bold]",
                border_style="bright_blue",
                padding=(1, 2),
            )
        )
    )
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    move = Solver.hint(game)
    if move is None:
        return "[yellow]No hint available.[/yellow]"
    value = game.state.board.get_tile(*move)
    game.attempt_move(move)
    return f"[cyan]Hint:[/cyan] slid [bold]{value}[/bold]"


def _play_game(seed_key: str, difficulty: str, scores: BestScores) -> None:
    """Play one puzzle until solved or abandoned."""
    while True:
        game = GamePlay(seed_key, difficulty)
        cursor: Position = game.state.board.blank_pos
        status = ""

        while not game.is_won:
            _draw_game(game, cursor, scores.get_best(seed_key, difficulty), status)
            status = ""

            # Redraw on a short timeout so the clock keeps ticking.
            key = None
            while key is None:
                key = get_key_timeout(0.5)
                if key is None:
                    _draw_game(game, cursor, scores.get_best(seed_key, difficulty))

            if key in _CURSOR_STEPS:
                dr, dc = _CURSOR_STEPS[key]
                size = game.state.board.size
                cursor = (min(max(cursor[0] + dr, 0), size - 1), min(max(cursor[1] + dc, 0), size - 1))
            elif key == "click":
                if not game.attempt_chain_move(cursor):
                    status = "[dim]That tile can't slide.[/dim]"
            elif key in _SLIDES:
                game.move(_SLIDES[key])
            elif key == "hint":
                status = _apply_hint(game)
            elif key == "target":
                if game.puzzle.allow_revealing:
                    _draw_target(game)
                else:
                    status = "[yellow]The target is hidden on this difficulty.[/yellow]"
            elif key == "restart":
                break
            elif key == "quit":
                return
        else:
            # -- win -----------------------------------------------------------
            game.state.pause()
            new_best = scores.record(seed_key, difficulty, game.state.moves)
            _draw_win(game, new_best)
            console.print(
                Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
            )
            while True:
                key = get_key()
                if key == "restart":
                    break
                if key == "quit":
                    return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(seed_key: str, difficulty: str, scores: BestScores) -> None:
    sel = DIFFICULTIES.index(difficulty) if difficulty in DIFFICULTIES else 0

    while True:
        _draw_menu(seed_key, sel)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel = max(0, sel - 1)
        elif key == "right":
            sel = min(len(DIFFICULTIES) - 1, sel + 1)
        elif key in ("1", "click"):
            _play_game(seed_key, DIFFICULTIES[sel], scores)
        elif key == "2":
            _draw_scores(scores)


# -- public entry point -------------------------------------------------------


def run(seed_key: str, difficulty: str, data_dir: Path) -> None:
    """Launch the Rich CLI with interactive menu."""
    if not sys.stdin.isatty():
        console.print("[red]The interactive game needs a terminal.[/red]")
        return
    scores = BestScores(open_store(data_dir / "scores.json"))
    _menu_loop(seed_key, difficulty, scores)
