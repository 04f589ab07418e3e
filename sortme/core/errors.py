"""
Exception types for the sorting replay engine.
"""


class SortmeError(Exception):
    """Base class for all engine errors."""
    pass


class ReplayInvariantError(SortmeError):
    """Raised when replaying a log no longer reproduces the live state."""
    pass


class ReplayExhaustedError(ReplayInvariantError):
    """Raised when an event is requested past the end of the log."""
    pass


class EventLogError(SortmeError):
    """Raised when an event log is malformed."""
    pass


class UnknownAlgorithmError(SortmeError):
    """Raised when no runner is registered under the requested name."""
    pass


class IntegrityError(SortmeError):
    """Raised when an event-log file's hash chain or digest does not verify."""
    pass
