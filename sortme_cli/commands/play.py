"""
Play command: animate a sort in the terminal
"""

import time
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.live import Live
from rich.table import Table

from sortme.core.errors import SortmeError
from sortme.playback import PlaybackController
from sortme.render import RichRenderer

from .common import resolve_input

console = Console()


def play_command(
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-a", help="Algorithm name"),
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Number of random values"),
    speed: Optional[int] = typer.Option(None, "--speed", help="1 (slow) to 100 (fast)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    values: Optional[str] = typer.Option(None, "--values", "-v", help="Comma-separated input, e.g. 5,3,1"),
    height: int = typer.Option(16, "--height", help="Chart height in rows"),
    steps: Optional[int] = typer.Option(
        None, "--steps", min=1, help="Apply this many events one at a time, print the frame and stop"
    ),
):
    """
    Animate a sorting algorithm. Ctrl-C stops and prints a summary.

    With --steps the run is advanced manually, one event per step, and the
    resulting frame is printed instead of animated.

    Examples:
        sortme play
        sortme play -a quick -n 60 --speed 90
        sortme play -a insertion --values 5,3,1,4,2 --speed 10
        sortme play -a merge --values 4,2,3,1 --steps 5
    """
    try:
        settings, data = resolve_input(algorithm, size, speed, seed, values)
    except (SortmeError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    renderer = RichRenderer(console=console, height=height)
    controller = PlaybackController(
        data,
        algorithm=settings.algorithm,
        speed=settings.speed,
        renderer=renderer,
        random_source=settings.random_source(),
        size=settings.size,
    )

    if steps is not None:
        for _ in range(steps):
            if controller.step() is None:
                break
        console.print(renderer.last)
    else:
        _animate(controller, renderer)

    _print_summary(controller)
    raise typer.Exit(0)


def _animate(controller: PlaybackController, renderer: RichRenderer) -> None:
    with Live(renderer.build(controller.frame()), console=console, auto_refresh=False) as live:
        renderer.attach(live)
        try:
            controller.play(sleep=lambda seconds: _refresh_and_sleep(live, seconds))
        except KeyboardInterrupt:
            controller.pause()
        live.refresh()


def _print_summary(controller: PlaybackController) -> None:
    table = Table(show_header=False, box=None)
    table.add_row("Algorithm", f"[bold]{controller.algorithm}[/bold]")
    table.add_row("Status", controller.label)
    table.add_row("Comparisons", str(controller.replay.comparisons))
    table.add_row("Writes", str(controller.replay.writes))
    table.add_row("Events", f"{controller.replay.cursor}/{controller.replay.total}")
    console.print(table)


def _refresh_and_sleep(live: Live, seconds: float) -> None:
    live.refresh()
    time.sleep(seconds)
