"""
Test suite for the sorting replay engine.

Focus areas:
- Runner correctness and log invariants
- Replay determinism and reset
- Playback state machine
- Event-log files and integrity
"""
