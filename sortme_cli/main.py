#!/usr/bin/env python3
"""
sortme CLI - sorting algorithm visualizer

Main entrypoint for the sortme command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from sortme.logging_config import setup_logging
from sortme.runners import available_algorithms
from sortme_cli.commands import log, play, replay

app = typer.Typer(
    name="sortme",
    help="Event-log sorting algorithm visualizer",
    add_completion=False,
)

console = Console()

app.add_typer(log.app, name="log", help="Event log operations")

app.command(name="play")(play.play_command)
app.command(name="replay")(replay.replay_command)


@app.callback()
def _configure() -> None:
    setup_logging()


@app.command()
def algorithms():
    """List registered algorithms."""
    for name in available_algorithms():
        console.print(name)


@app.command()
def version():
    """Show version information."""
    from sortme_cli import __version__
    from sortme import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]sortme CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"v{engine_version}")
    table.add_row("Algorithms", ", ".join(available_algorithms()))

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
