"""
Event-log files and integrity verification.

This module provides:
- write_log_file / read_log_file: JSONL persistence of one run
- Integrity: Hash chain over the file's event records
"""

from .file_store import LogFile, read_log_file, write_log_file
from .integrity import ZERO_HASH, chain_record, hash_event

__all__ = [
    "LogFile",
    "read_log_file",
    "write_log_file",
    "ZERO_HASH",
    "chain_record",
    "hash_event",
]
