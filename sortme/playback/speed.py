"""
Speed -> per-tick delay mapping.

Speed 1 is slowest (~139 ms per event), 100 fastest (4 ms floor).
"""

MIN_SPEED = 1
MAX_SPEED = 100
MIN_DELAY_MS = 4


def clamp_speed(speed: int) -> int:
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


def delay_from_speed(speed: int) -> int:
    """
    Delay in milliseconds for a speed in [1, 100].

    delay_ms = max(4, round(140 - 1.36 * speed)). Out-of-range speeds are
    clamped first.
    """
    return max(MIN_DELAY_MS, round(140 - 1.36 * clamp_speed(speed)))
