"""
Event log commands: show, export
"""

import json
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from sortme.core.errors import SortmeError
from sortme.log import write_log_file
from sortme.runners import generate_log

from .common import resolve_input

app = typer.Typer()
console = Console()


def _describe(ev) -> str:
    data = ev.to_dict()
    data.pop("type")
    return " ".join(f"{k}={v}" for k, v in data.items())


@app.command()
def show(
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-a", help="Algorithm name"),
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Number of random values"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    values: Optional[str] = typer.Option(None, "--values", "-v", help="Comma-separated input, e.g. 5,3,1"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Show only the first N events"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the event log an algorithm produces for an input.

    Examples:
        sortme log show --values 5,3,1 --algorithm selection
        sortme log show -a quick -n 8 --seed 1 --json
    """
    try:
        settings, data = resolve_input(algorithm, size, None, seed, values)
        log = generate_log(settings.algorithm, data)
        events = list(log)[:limit] if limit else list(log)

        if json_output:
            print(json.dumps({
                "algorithm": log.algorithm,
                "values": data,
                "count": len(log),
                "digest": log.digest(),
                "events": [ev.to_dict() for ev in events],
            }, indent=2))
        else:
            table = Table(title=f"{log.algorithm} on {len(data)} values ({len(log)} events)")
            table.add_column("Seq", style="cyan", justify="right")
            table.add_column("Type", style="green")
            table.add_column("Fields", style="yellow")
            for seq, ev in enumerate(events):
                table.add_row(str(seq), ev.kind.value, _describe(ev))
            console.print(table)
            if limit and len(log) > limit:
                console.print(f"[dim]... {len(log) - limit} more events[/dim]")

        raise typer.Exit(0)

    except (SortmeError, ValidationError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)


@app.command()
def export(
    out: str = typer.Option(..., "--out", "-o", help="Destination JSONL file"),
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-a", help="Algorithm name"),
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Number of random values"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    values: Optional[str] = typer.Option(None, "--values", "-v", help="Comma-separated input, e.g. 5,3,1"),
):
    """
    Write an event log and its input to a hash-chained JSONL file.

    Examples:
        sortme log export --out /tmp/quick.jsonl -a quick -n 20 --seed 7
    """
    try:
        settings, data = resolve_input(algorithm, size, None, seed, values)
        log = generate_log(settings.algorithm, data)
        head = write_log_file(out, data, log)
        console.print(f"[green]✓ Wrote {len(log)} {log.algorithm} events to[/green] {out}")
        console.print(f"  Chain head: [yellow]{head}[/yellow]")
        raise typer.Exit(0)

    except (SortmeError, ValidationError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
