"""
Runner registry: name -> AlgorithmRunner.

Usage:
    register_runner(MyRunner())
    log = generate_log("quick", [3, 1, 2])
"""

from typing import Any, Dict, List, Sequence

from ..core.errors import UnknownAlgorithmError
from ..core.events import EventLog
from .base import AlgorithmRunner
from .bubble import BubbleRunner
from .insertion import InsertionRunner
from .merge import MergeRunner
from .quick import QuickRunner
from .selection import SelectionRunner

_RUNNERS: Dict[str, AlgorithmRunner] = {}


def register_runner(runner: AlgorithmRunner) -> None:
    """
    Register a runner under its name, replacing any previous one.

    Raises:
        ValueError: If the runner has no name
    """
    if not runner.name:
        raise ValueError(f"{type(runner).__name__} has no name")
    _RUNNERS[runner.name] = runner


def get_runner(name: str) -> AlgorithmRunner:
    """
    Look up a runner by name.

    Raises:
        UnknownAlgorithmError: If nothing is registered under name
    """
    try:
        return _RUNNERS[name]
    except KeyError:
        known = ", ".join(available_algorithms())
        raise UnknownAlgorithmError(f"Unknown algorithm {name!r} (known: {known})") from None


def available_algorithms() -> List[str]:
    return list(_RUNNERS)


def generate_log(name: str, values: Sequence[Any]) -> EventLog:
    return get_runner(name).generate_log(values)


for _runner in (BubbleRunner(), SelectionRunner(), InsertionRunner(), MergeRunner(), QuickRunner()):
    register_runner(_runner)
