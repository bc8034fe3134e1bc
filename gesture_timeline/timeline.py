"""Mutation primitives for the Track/Channel/Event timeline.

An input sample observed at tick `t` takes effect from tick `t + 1`. An
interaction activated at tick `t` therefore opens an Event starting at
`t + 1` whose seed slot holds the activation sample, and a sample observed
while Active at tick `t` lands in slot `t - start_time + 1`.

Channels only ever grow by appending a new Event or by rewriting their last
Event, which keeps events non-overlapping and ordered by start time.
"""

import logging

from gesture_timeline.errors import ConsistencyError
from gesture_timeline.models import Channel, Color, Event, EventKind, Track
from gesture_timeline.registry import Registry

logger = logging.getLogger(__name__)


def ensure_track(registry: Registry, entity: int, label: str, color: Color) -> Track:
    """Return the entity's Track, creating it with `label` and `color` if absent.

    Args:
        registry: Entity store holding the Track component.
        entity: Owning entity.
        label: Label for a newly created track.
        color: Color for a newly created track.

    Returns:
        The existing or newly attached Track.
    """
    track = registry.try_get(entity, Track)
    if track is None:
        logger.debug(f"Creating track {label!r} for entity {entity}")
        track = registry.attach(entity, Track(label=label, color=color))
    return track


def ensure_channel(track: Track, kind: EventKind) -> tuple[Channel, bool]:
    """Return the channel for `kind`, creating an empty one if absent.

    Returns:
        Tuple of (channel, created) where `created` tells the caller to seed
        the channel's label and color.
    """
    channel = track.channels.get(kind)
    if channel is not None:
        return channel, False
    channel = Channel()
    track.channels[kind] = channel
    return channel, True


def push_event(channel: Channel, event: Event) -> Event:
    """Append `event` after the channel's current last event.

    The caller guarantees `event.start_time` is not before the end of the
    previous event.
    """
    channel.events.append(event)
    return event


def last_event(channel: Channel) -> Event:
    """Return the channel's most recent event.

    Raises:
        ConsistencyError: If the channel has no events yet.
    """
    if not channel.events:
        raise ConsistencyError(f"channel {channel.label!r} has no events")
    return channel.events[-1]


def find_channel(registry: Registry, entity: int, kind: EventKind) -> Channel:
    """Return the `kind` channel of the entity's Track.

    Raises:
        ConsistencyError: If the entity has no Track or no such channel.
    """
    track = registry.try_get(entity, Track)
    if track is None:
        raise ConsistencyError(f"entity {entity} has no track")
    channel = track.channels.get(kind)
    if channel is None:
        raise ConsistencyError(
            f"track {track.label!r} has no {kind.value} channel"
        )
    return channel


def slot_index(event: Event, tick: int) -> int:
    """Payload slot written by a sample observed at `tick`."""
    return tick - event.start_time + 1


def extend_last_event(channel: Channel, tick: int, value) -> bool:
    """Record `value`, observed at `tick`, into the channel's last event.

    A slot inside the payload is overwritten and every later slot dropped,
    so re-processing a tick is idempotent and stepping back in time
    truncates. A slot past the end is appended. Either way the event's
    length becomes `index + 1`, matching the payload size.

    Args:
        channel: Channel whose last event is extended.
        tick: Tick at which `value` was observed.
        value: Payload value for the slot.

    Returns:
        False if `tick` precedes the event (the sample is dropped), True otherwise.

    Raises:
        ConsistencyError: If the channel has no events.
    """
    event = last_event(channel)
    index = slot_index(event, tick)
    if index < 0:
        return False
    event.payload.write(index, value)
    event.length = index + 1
    return True
