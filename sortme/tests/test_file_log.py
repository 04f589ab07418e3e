"""
Tests for event-log files and their hash chain.

Critical: any edit to an exported log must be detected on read.
"""

import json

import pytest

from sortme.core.canonical import canonical_json_str
from sortme.core.errors import EventLogError, IntegrityError
from sortme.core.events import Compare, Done, EventLog
from sortme.log import ZERO_HASH, chain_record, read_log_file, write_log_file
from sortme.runners import generate_log


def _export(tmp_path, algorithm="quick", values=(3, 1, 2)):
    path = str(tmp_path / "run.jsonl")
    log = generate_log(algorithm, list(values))
    head = write_log_file(path, list(values), log)
    return path, log, head


def test_write_then_read(tmp_path):
    path, log, _ = _export(tmp_path)
    loaded = read_log_file(path)

    assert loaded.original == (3, 1, 2)
    assert loaded.log.events == log.events
    assert loaded.log.algorithm == "quick"
    assert loaded.log.digest() == log.digest()


def test_file_layout(tmp_path):
    path, log, head = _export(tmp_path)
    with open(path) as f:
        lines = [json.loads(line) for line in f]

    header, records = lines[0], lines[1:]
    assert header["algorithm"] == "quick"
    assert header["values"] == [3, 1, 2]
    assert header["count"] == len(log)
    assert records[0]["prev_hash"] == ZERO_HASH
    for prev, cur in zip(records, records[1:]):
        assert cur["prev_hash"] == prev["event_hash"]
    assert records[-1]["event_hash"] == head
    assert records[-1]["event"] == {"type": "done"}


def _rewrite(path, mutate):
    with open(path) as f:
        lines = f.readlines()
    lines = mutate(lines)
    with open(path, "w") as f:
        f.writelines(lines)


def test_tampered_event_detected(tmp_path):
    path, _, _ = _export(tmp_path)

    def mutate(lines):
        rec = json.loads(lines[1])
        rec["event"]["i"] = 0
        lines[1] = json.dumps(rec) + "\n"
        return lines

    _rewrite(path, mutate)
    with pytest.raises(IntegrityError):
        read_log_file(path)


def test_dropped_event_detected(tmp_path):
    path, _, _ = _export(tmp_path)
    _rewrite(path, lambda lines: lines[:2] + lines[3:])
    with pytest.raises(IntegrityError):
        read_log_file(path)


def test_tampered_header_values_detected(tmp_path):
    path, _, _ = _export(tmp_path, values=(3, 1, 2))

    def mutate(lines):
        header = json.loads(lines[0])
        header["values"] = [3]
        lines[0] = json.dumps(header) + "\n"
        return lines

    _rewrite(path, mutate)
    with pytest.raises(EventLogError):
        read_log_file(path)


def test_tampered_digest_detected(tmp_path):
    path, _, _ = _export(tmp_path)

    def mutate(lines):
        header = json.loads(lines[0])
        header["algorithm"] = "bubble"
        lines[0] = json.dumps(header) + "\n"
        return lines

    _rewrite(path, mutate)
    with pytest.raises(IntegrityError):
        read_log_file(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_log_file(str(tmp_path / "nope.jsonl"))


def test_empty_file(tmp_path):
    path = tmp_path / "empty.jsonl"
    path.write_text("")
    with pytest.raises(EventLogError):
        read_log_file(str(path))


def test_write_rejects_mismatched_input(tmp_path):
    log = generate_log("quick", [3, 1, 2])
    with pytest.raises(EventLogError):
        write_log_file(str(tmp_path / "bad.jsonl"), [1], log)


def _write_chained(path, header, events):
    """Write a file with a valid hash chain, whatever the events hold."""
    prev_hash = ZERO_HASH
    lines = [canonical_json_str(header) + "\n"]
    for seq, ev in enumerate(events):
        rec = chain_record(prev_hash, seq, ev)
        lines.append(canonical_json_str(rec) + "\n")
        prev_hash = rec["event_hash"]
    with open(path, "w") as f:
        f.writelines(lines)


def test_header_not_an_object(tmp_path):
    path, _, _ = _export(tmp_path)
    _rewrite(path, lambda lines: ["[1, 2, 3]\n"] + lines[1:])
    with pytest.raises(EventLogError, match="header"):
        read_log_file(path)


def test_header_values_not_a_list(tmp_path):
    path, _, _ = _export(tmp_path)

    def mutate(lines):
        header = json.loads(lines[0])
        header["values"] = "312"
        lines[0] = json.dumps(header) + "\n"
        return lines

    _rewrite(path, mutate)
    with pytest.raises(EventLogError, match="values"):
        read_log_file(path)


def test_record_not_an_object(tmp_path):
    path, _, _ = _export(tmp_path)

    def mutate(lines):
        lines[1] = "42\n"
        return lines

    _rewrite(path, mutate)
    with pytest.raises(EventLogError, match="record 0"):
        read_log_file(path)


def test_event_not_an_object(tmp_path):
    path, _, _ = _export(tmp_path)

    def mutate(lines):
        rec = json.loads(lines[1])
        rec["event"] = ["compare", 0, 1]
        lines[1] = json.dumps(rec) + "\n"
        return lines

    _rewrite(path, mutate)
    with pytest.raises(EventLogError, match="event must be an object"):
        read_log_file(path)


def test_rehashed_non_integer_index_rejected(tmp_path):
    """A consistent chain does not make a string index acceptable."""
    path = str(tmp_path / "rehashed.jsonl")
    events = (Compare("a", 1), Done())
    log = EventLog("quick", events)
    header = {"algorithm": "quick", "values": [2, 1], "count": 2, "digest": log.digest()}
    _write_chained(path, header, events)

    with pytest.raises(EventLogError, match="non-integer index"):
        read_log_file(path)


def test_rehashed_bool_index_rejected(tmp_path):
    path = str(tmp_path / "rehashed.jsonl")
    events = (Compare(True, 1), Done())
    log = EventLog("quick", events)
    header = {"algorithm": "quick", "values": [2, 1], "count": 2, "digest": log.digest()}
    _write_chained(path, header, events)

    with pytest.raises(EventLogError):
        read_log_file(path)
