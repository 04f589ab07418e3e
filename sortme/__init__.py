"""
Sorting Visualizer Engine

Event-log simulation engine and playback controller for animating comparison sorts.
"""

__version__ = "0.1.0"
