"""
Playback: the state machine that steps a replay at a controllable rate.
"""

from .controller import PlaybackController, PlaybackState
from .speed import clamp_speed, delay_from_speed

__all__ = [
    "PlaybackController",
    "PlaybackState",
    "clamp_speed",
    "delay_from_speed",
]
