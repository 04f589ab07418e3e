"""
Event-log files in JSONL format.

Line 1 is a header: {"algorithm", "values", "count", "digest"}.
Every following line is a hash chain record for one event:
{"seq", "prev_hash", "event_hash", "event"}.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

from ..core.canonical import canonical_json_str
from ..core.errors import EventLogError, IntegrityError
from ..core.events import EventLog, event_from_dict
from .integrity import ZERO_HASH, chain_record, hash_event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogFile:
    """Contents of an event-log file: the unsorted input and its log."""

    original: Tuple[Any, ...]
    log: EventLog


def write_log_file(path: str, original: Sequence[Any], log: EventLog) -> str:
    """
    Write a log and the input it was generated from.

    Args:
        path: Destination file (parent directories are created)
        original: Unsorted input sequence
        log: Event log generated from original

    Returns:
        The last event hash (head of the chain)

    Raises:
        EventLogError: If the log does not fit the input
    """
    log.check_bounds(len(original))
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    header = {
        "algorithm": log.algorithm,
        "values": list(original),
        "count": len(log),
        "digest": log.digest(),
    }
    prev_hash = ZERO_HASH
    with open(path, "w", encoding="utf-8") as f:
        f.write(canonical_json_str(header) + "\n")
        for seq, ev in enumerate(log):
            rec = chain_record(prev_hash, seq, ev)
            f.write(canonical_json_str(rec) + "\n")
            prev_hash = rec["event_hash"]
        f.flush()
        os.fsync(f.fileno())

    logger.info("Wrote %s log (%d events) to %s", log.algorithm, len(log), path)
    return prev_hash


def read_log_file(path: str) -> LogFile:
    """
    Read and verify an event-log file.

    Raises:
        FileNotFoundError: If path does not exist
        IntegrityError: If the hash chain, count or digest does not verify
        EventLogError: If the file is not a well-formed event log
    """
    with open(path, "r", encoding="utf-8") as f:
        lines = [line for line in f if line.strip()]
    if not lines:
        raise EventLogError(f"empty event-log file: {path}")

    try:
        header = json.loads(lines[0])
        records: List[dict] = [json.loads(line) for line in lines[1:]]
    except json.JSONDecodeError as e:
        raise EventLogError(f"malformed JSON in {path}: {e}") from e
    if not isinstance(header, dict):
        raise EventLogError(f"header of {path} is not a JSON object")
    values = header.get("values", [])
    if not isinstance(values, list):
        raise EventLogError(f"header values of {path} is not a list")

    prev_hash = ZERO_HASH
    events = []
    for expected_seq, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise EventLogError(f"record {expected_seq} of {path} is not a JSON object")
        ev = event_from_dict(rec.get("event", {}))
        if rec.get("seq") != expected_seq:
            raise IntegrityError(f"sequence gap: expected {expected_seq}, got {rec.get('seq')}")
        if rec.get("prev_hash") != prev_hash:
            raise IntegrityError(f"hash chain broken at seq {expected_seq}")
        if hash_event(prev_hash, expected_seq, ev) != rec.get("event_hash"):
            raise IntegrityError(f"event hash mismatch at seq {expected_seq}")
        prev_hash = rec["event_hash"]
        events.append(ev)

    if header.get("count") != len(events):
        raise IntegrityError(f"header declares {header.get('count')} events, file has {len(events)}")

    log = EventLog(algorithm=header.get("algorithm", ""), events=tuple(events))
    if log.digest() != header.get("digest"):
        raise IntegrityError("log digest does not match header")

    original = tuple(values)
    log.check_bounds(len(original))
    return LogFile(original=original, log=log)
