"""
Replay command: replay an event-log file and verify the result
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from sortme.core.errors import SortmeError
from sortme.log import read_log_file
from sortme.replay import replay as replay_events
from sortme.replay import verify_log

console = Console()


def replay_command(
    log_path: str = typer.Option(..., "--log", "-l", help="Path to event-log file"),
    until: Optional[int] = typer.Option(None, "--until", "-u", help="Replay until event index (inclusive)"),
    show_values: bool = typer.Option(False, "--show-values", "-s", help="Show the replayed sequence"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay an event-log file and verify the reconstructed sequence.

    Examples:
        sortme replay --log /tmp/quick.jsonl
        sortme replay --log /tmp/quick.jsonl --until 10 --show-values
        sortme replay --log /tmp/quick.jsonl --json
    """
    try:
        loaded = read_log_file(log_path)
        if until is None:
            result = verify_log(loaded.original, loaded.log)
        else:
            result = replay_events(loaded.original, loaded.log, to_index=until)
        snap = result.snapshot
        is_sorted = list(snap.values) == sorted(snap.values)
        state_hash = snap.state_hash()

        if json_output:
            output = {
                "success": True,
                "algorithm": loaded.log.algorithm,
                "events_replayed": result.applied,
                "total_events": len(loaded.log),
                "comparisons": snap.comparisons,
                "writes": snap.writes,
                "sorted": is_sorted,
                "state_hash": state_hash,
            }
            if show_values:
                output["values"] = list(snap.values)
            print(json.dumps(output, indent=2))
        else:
            console.print(f"[green]✓ Replayed {result.applied}/{len(loaded.log)} {loaded.log.algorithm} events[/green]")
            table = Table(show_header=False, box=None)
            table.add_row("Comparisons", f"[cyan]{snap.comparisons}[/cyan]")
            table.add_row("Writes", f"[cyan]{snap.writes}[/cyan]")
            table.add_row("Sorted", "[green]yes[/green]" if is_sorted else "[yellow]not yet[/yellow]")
            table.add_row("State hash", f"[yellow]{state_hash}[/yellow]")
            console.print(table)
            if show_values:
                console.print(f"  Values: {list(snap.values)}")

        raise typer.Exit(0)

    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Log file not found", "path": log_path}))
        else:
            console.print(f"[red]Error: Log file not found:[/red] {log_path}")
        raise typer.Exit(2)
    except SortmeError as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
