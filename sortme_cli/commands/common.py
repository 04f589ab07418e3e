"""
Helpers shared by the CLI commands.
"""

from typing import List, Optional, Tuple

import typer

from sortme.config import PlaybackSettings


def parse_values(raw: str) -> List[int]:
    """Parse "5,3,1" (spaces allowed) into [5, 3, 1]."""
    try:
        return [int(part) for part in raw.replace(" ", "").split(",") if part]
    except ValueError:
        raise typer.BadParameter(f"expected comma-separated integers, got {raw!r}")


def resolve_input(
    algorithm: Optional[str],
    size: Optional[int],
    speed: Optional[int],
    seed: Optional[int],
    values: Optional[str],
) -> Tuple[PlaybackSettings, List[int]]:
    """
    Merge CLI options over SORTME_* settings and produce the input sequence.

    Explicit --values win over random generation.
    """
    settings = PlaybackSettings.from_env(algorithm=algorithm, size=size, speed=speed, seed=seed)
    if values is not None:
        return settings, parse_values(values)
    return settings, settings.random_source().generate(settings.size)
