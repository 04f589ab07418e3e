"""
Algorithm runners.

Each runner simulates one sorting algorithm against a private copy of the
input and returns the complete event log of the run.
"""

from .base import AlgorithmRunner, EventRecorder
from .bubble import BubbleRunner
from .selection import SelectionRunner
from .insertion import InsertionRunner
from .merge import MergeRunner
from .quick import QuickRunner
from .registry import available_algorithms, generate_log, get_runner, register_runner

__all__ = [
    "AlgorithmRunner",
    "EventRecorder",
    "BubbleRunner",
    "SelectionRunner",
    "InsertionRunner",
    "MergeRunner",
    "QuickRunner",
    "available_algorithms",
    "generate_log",
    "get_runner",
    "register_runner",
]
