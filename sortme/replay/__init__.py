"""
Replay system for sorting event logs.

ReplayState steps a cursor through a log; replay() and verify_log()
reconstruct or check a whole run offline.
"""

from .state import Highlight, ReplaySnapshot, ReplayState
from .runner import ReplayResult, replay, verify_log

__all__ = [
    "Highlight",
    "ReplaySnapshot",
    "ReplayState",
    "ReplayResult",
    "replay",
    "verify_log",
]
