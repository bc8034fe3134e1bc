"""Read-only inspection and replay of recorded channels.

These helpers never mutate the timeline. They locate the event covering a
tick, read individual payload slots, and turn a payload into a replay curve:
the running sum of per-tick deltas, or the recorded absolute positions for
raw input events.
"""

import numpy as np

from gesture_timeline.models import Channel, Event, EventKind


def event_at(channel: Channel, time: int) -> Event | None:
    """Find the event covering `time`.

    Args:
        channel: Channel to search; its events are ordered by start time.
        time: Tick to look up.

    Returns:
        The covering Event, or None if `time` falls outside every event.
    """
    if not channel.events:
        return None
    starts = np.array([event.start_time for event in channel.events])
    idx = int(np.searchsorted(starts, time, side="right")) - 1
    if idx < 0:
        return None
    event = channel.events[idx]
    return event if time < event.end_time else None


def sample_at(event: Event, time: int):
    """Return the payload slot applied at `time`, or None outside the event."""
    if not event.start_time <= time < event.end_time:
        return None
    return event.payload.at(time - event.start_time)


def event_curve(event: Event) -> np.ndarray:
    """Replay an event as one value per covered tick.

    Translate events yield an (length, 2) array of accumulated offsets.
    Rotate, Scale and Scrub events yield a 1D array of accumulated deltas.
    Raw input events yield the (length, 2) absolute positions as recorded.

    Args:
        event: Event to replay.

    Returns:
        NumPy array with `event.length` rows.
    """
    payload = event.payload
    if event.kind is EventKind.TRANSLATE:
        offsets = np.array([[p.x, p.y] for p in payload.values], dtype=float)
        return np.cumsum(offsets, axis=0)
    if event.kind is EventKind.INPUT:
        return np.array(
            [[s.absolute.x, s.absolute.y] for _, s in sorted(payload.samples.items())],
            dtype=float,
        )
    return np.cumsum(np.array(payload.values, dtype=int))


def value_at(channel: Channel, time: int) -> np.ndarray | None:
    """Replayed value of the channel at `time`, or None if no event covers it."""
    event = event_at(channel, time)
    if event is None:
        return None
    return event_curve(event)[time - event.start_time]


def channel_extent(channel: Channel) -> tuple[int, int] | None:
    """Return (first start, last end) of the channel, or None if it is empty."""
    if not channel.events:
        return None
    return channel.events[0].start_time, channel.events[-1].end_time
