"""
Hash chain for event-log files.

Each record carries the hash of the previous one, so editing, dropping or
reordering any event breaks every hash after it.
"""

import hashlib
from typing import Any, Dict

from ..core.canonical import canonical_json_bytes
from ..core.events import Event

ZERO_HASH = "0" * 64


def hash_event(prev_hash: str, seq: int, event: Event) -> str:
    """
    Compute hash of event chained to previous hash.

    Hash input: prev_hash + canonical_json({"seq", "event"})
    """
    b = prev_hash.encode("utf-8") + canonical_json_bytes({"seq": seq, "event": event.to_dict()})
    return hashlib.sha256(b).hexdigest()


def chain_record(prev_hash: str, seq: int, event: Event) -> Dict[str, Any]:
    """
    Create hash chain record for storage.

    Returns:
        Dict ready for JSONL serialization
    """
    return {
        "seq": seq,
        "prev_hash": prev_hash,
        "event_hash": hash_event(prev_hash, seq, event),
        "event": event.to_dict(),
    }
