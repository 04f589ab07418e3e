"""
Stable JSON encoding of event logs and replay snapshots.

EventLog.digest, ReplaySnapshot.state_hash and the log-file hash chain all
hash the bytes produced here, so the encoding must not depend on dict
insertion order or on how a caller happened to build its containers.
"""

import hashlib
import json
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Rebuild obj out of plain dicts and lists.

    Dict keys come out sorted, tuples become lists, and sets (the sorted-index
    set of a snapshot) become sorted lists.
    """
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (set, frozenset)):
        return [canonicalize(x) for x in sorted(obj)]
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """Compact UTF-8 JSON of canonicalize(obj): no whitespace, keys sorted."""
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    return canonical_json_bytes(obj).decode("utf-8")


def digest(obj: Any) -> str:
    """SHA-256 hex digest of the canonical JSON form of obj."""
    return hashlib.sha256(canonical_json_bytes(obj)).hexdigest()
