"""Exceptions raised by the registry, the timeline and the clock."""


class TimelineError(Exception):
    """Base exception for recording errors."""

    pass


class MissingComponentError(TimelineError):
    """Raised when an entity does not hold a requested component."""

    pass


class ConsistencyError(TimelineError):
    """Raised when the timeline is missing state a prior Activated should have created."""

    pass


class ClockWriteError(TimelineError):
    """Raised when the clock is written more than once in a single tick."""

    pass
