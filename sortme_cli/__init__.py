"""
sortme CLI - sorting algorithm visualizer

Commands:
- sortme play - Animate a sort in the terminal
- sortme replay - Replay an exported event-log file
- sortme log show/export - Inspect or export an event log
- sortme algorithms - List registered algorithms
"""

__version__ = "0.1.0"
