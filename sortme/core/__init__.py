"""
Core event-log primitives.

This module provides the foundational abstractions for replayable sorting runs:
- Events: Immutable records of elementary sorting operations
- EventLog: Ordered, validated, immutable sequence of events
- Canonical: Deterministic serialization and digests
- Errors: Exception hierarchy
"""

from .events import (
    EventKind,
    Compare,
    Swap,
    Write,
    Pivot,
    MarkSorted,
    MarkRangeSorted,
    Done,
    Event,
    EventLog,
    event_from_dict,
)
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str, digest
from .errors import (
    SortmeError,
    ReplayInvariantError,
    ReplayExhaustedError,
    EventLogError,
    UnknownAlgorithmError,
    IntegrityError,
)

__all__ = [
    "EventKind",
    "Compare",
    "Swap",
    "Write",
    "Pivot",
    "MarkSorted",
    "MarkRangeSorted",
    "Done",
    "Event",
    "EventLog",
    "event_from_dict",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "digest",
    "SortmeError",
    "ReplayInvariantError",
    "ReplayExhaustedError",
    "EventLogError",
    "UnknownAlgorithmError",
    "IntegrityError",
]
