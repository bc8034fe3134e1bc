"""Recording tools that turn lifecycle markers into timeline events.

Each tool kind is handled by three stage functions, invoked once per tick:

1. `on_activated`: select the entity and open a new Event on its channel
2. `on_active`: write the tick's sample into that Event (or rewrite the
   clock, for Scrub)
3. `on_deactivated`: release transient per-interaction state

Translate, Rotate and Scale share one recording routine parameterized by
the event kind. Scrub records nothing; it rewrites the shared Clock relative
to the value captured on activation. Stages never raise: a missing track,
channel or event is logged as a warning and the entity is skipped, and a
sample older than its event is dropped silently.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from gesture_timeline.clock import Clock
from gesture_timeline.errors import ConsistencyError
from gesture_timeline.models import (
    LIFECYCLE_MARKERS,
    Abort,
    Activated,
    Active,
    Color,
    Deactivated,
    Event,
    EventKind,
    InputPayload,
    InputPosition2D,
    MoveIntent,
    Name,
    Orientation,
    Position,
    RecorderParams,
    RotatePayload,
    ScalePayload,
    ScrubOrigin,
    Selected,
    Size,
    TranslatePayload,
)
from gesture_timeline.registry import Registry
from gesture_timeline.timeline import (
    ensure_channel,
    ensure_track,
    extend_last_event,
    find_channel,
    push_event,
)

logger = logging.getLogger(__name__)


class ToolKind(str, Enum):
    """Interaction modes available to the user."""

    SELECT = "select"
    TRANSLATE = "translate"
    ROTATE = "rotate"
    SCALE = "scale"
    SCRUB = "scrub"


# Component an entity must hold for the tool to start recording on it
TARGET_COMPONENTS: dict[ToolKind, type] = {
    ToolKind.TRANSLATE: Position,
    ToolKind.ROTATE: Orientation,
    ToolKind.SCALE: Size,
}


def event_kind_for(tool: ToolKind, params: RecorderParams) -> EventKind:
    """Channel kind a recording tool writes to."""
    if tool is ToolKind.TRANSLATE:
        if params.translate_payload == "input":
            return EventKind.INPUT
        return EventKind.TRANSLATE
    if tool is ToolKind.ROTATE:
        return EventKind.ROTATE
    if tool is ToolKind.SCALE:
        return EventKind.SCALE
    raise ValueError(f"{tool.value} tool does not record events")


def seed_payload(kind: EventKind, time: int, sample: InputPosition2D):
    """Build the one-slot payload for an Event opened at activation `time`."""
    if kind is EventKind.TRANSLATE:
        return TranslatePayload(values=[Position()])
    if kind is EventKind.ROTATE:
        return RotatePayload(values=[0])
    if kind is EventKind.SCALE:
        return ScalePayload(values=[0])
    if kind is EventKind.INPUT:
        return InputPayload(origin=time, samples={time: sample.model_copy(deep=True)})
    raise ValueError(f"no payload for {kind.value} events")


def sample_value(kind: EventKind, sample: InputPosition2D):
    """Derive the payload value stored for one tick of input."""
    if kind is EventKind.TRANSLATE:
        return sample.delta.model_copy()
    if kind in (EventKind.ROTATE, EventKind.SCALE):
        return int(sample.delta.x)
    if kind is EventKind.INPUT:
        return sample.model_copy(deep=True)
    raise ValueError(f"no payload for {kind.value} events")


def select(registry: Registry, entity: int) -> None:
    """Make `entity` the one selected entity."""
    registry.reset(Selected)
    registry.attach(entity, Selected())


def begin_event(
    registry: Registry,
    entity: int,
    tool: ToolKind,
    time: int,
    sample: InputPosition2D,
    params: RecorderParams,
) -> Event:
    """Open a new Event for an interaction activated at `time`.

    Creates the entity's Track and the tool's Channel on first use. Entities
    without a Name or Color get the configured fallback label and color.

    Args:
        registry: Entity store.
        entity: Entity being interacted with.
        tool: Recording tool.
        time: Tick of activation.
        sample: Input sample observed at activation.
        params: Recorder configuration.

    Returns:
        The Event pushed onto the channel.
    """
    name = registry.try_get(entity, Name)
    color = registry.try_get(entity, Color)
    label = name.text if name is not None else params.track_label_format.format(entity=entity)
    if color is None:
        color = params.default_track_color

    track = ensure_track(registry, entity, label, color.model_copy())
    kind = event_kind_for(tool, params)
    channel, created = ensure_channel(track, kind)
    if created:
        style = params.channel_style(kind)
        channel.label = style.label
        channel.color = style.color.model_copy()

    event = Event(
        start_time=time + 1,
        length=1,
        color=color.model_copy(),
        kind=kind,
        payload=seed_payload(kind, time, sample),
    )
    logger.debug(
        f"{tool.value} tool opened event at {event.start_time} on {track.label!r}"
    )
    return push_event(channel, event)


def record_sample(
    registry: Registry,
    entity: int,
    tool: ToolKind,
    time: int,
    sample: InputPosition2D,
    params: RecorderParams,
) -> bool:
    """Write the sample observed at `time` into the entity's open Event.

    Returns:
        False if the sample predates the Event and was dropped.

    Raises:
        ConsistencyError: If no prior activation created the Event.
    """
    kind = event_kind_for(tool, params)
    channel = find_channel(registry, entity, kind)
    return extend_last_event(channel, time, sample_value(kind, sample))


def on_activated(
    tool: ToolKind,
    registry: Registry,
    clock: Clock,
    record: bool = True,
    params: RecorderParams | None = None,
) -> None:
    """Handle every entity stamped with `Activated` this tick."""
    params = params or RecorderParams()

    if tool is ToolKind.SELECT:
        for entity in registry.view(Activated):
            select(registry, entity)

    elif tool is ToolKind.SCRUB:
        for entity in registry.view(Activated, InputPosition2D):
            registry.attach(entity, ScrubOrigin(time=clock.current_time))

    else:
        target = TARGET_COMPONENTS[tool]
        for entity in registry.view(Activated, InputPosition2D, target):
            select(registry, entity)
            if not record:
                continue
            activated = registry.get(entity, Activated)
            sample = registry.get(entity, InputPosition2D)
            begin_event(registry, entity, tool, activated.time, sample, params)


def on_active(
    tool: ToolKind,
    registry: Registry,
    clock: Clock,
    record: bool = True,
    params: RecorderParams | None = None,
) -> None:
    """Handle every entity stamped with `Active` and not `Abort` this tick.

    Args:
        tool: Tool in use.
        registry: Entity store.
        clock: Shared clock, written only by Scrub.
        record: Write the timeline when True; otherwise only preview.
        params: Recorder configuration.
    """
    params = params or RecorderParams()

    if tool is ToolKind.SELECT:
        return

    active_entities = registry.view(Active, InputPosition2D, exclude=(Abort,))

    if tool is ToolKind.SCRUB:
        for entity in active_entities:
            origin = registry.try_get(entity, ScrubOrigin)
            if origin is None:
                logger.warning(f"Scrub tool on entity {entity} was never activated")
                continue
            state = registry.get(entity, Active)
            if clock.written_at(state.time):
                logger.warning(
                    f"Scrub tool on entity {entity} ignored, clock already written this tick"
                )
                continue
            sample = registry.get(entity, InputPosition2D)
            # Sum first, then truncate toward zero
            clock.scrub(
                int(origin.time + sample.relative.x / params.scrub_scale_factor),
                state.time,
            )
        return

    for entity in active_entities:
        sample = registry.get(entity, InputPosition2D)
        if not record:
            if tool is ToolKind.TRANSLATE:
                registry.attach(entity, MoveIntent(x=sample.delta.x, y=sample.delta.y))
            continue

        state = registry.get(entity, Active)
        try:
            record_sample(registry, entity, tool, state.time, sample, params)
        except ConsistencyError as e:
            logger.warning(f"{tool.value.capitalize()} tool skipped entity {entity}: {e}")


def on_deactivated(
    tool: ToolKind,
    registry: Registry,
    clock: Clock,
    record: bool = True,
    params: RecorderParams | None = None,
) -> None:
    """Handle every entity stamped with `Deactivated` this tick.

    A recording tool warns when the entity has no channel to finish, and
    Scrub warns when it never captured an origin.
    """
    params = params or RecorderParams()

    if tool is ToolKind.SELECT:
        return

    for entity in registry.view(Deactivated):
        if tool is ToolKind.SCRUB:
            if not registry.has(entity, ScrubOrigin):
                logger.warning(f"Scrub tool on entity {entity} was never activated")
            registry.detach(entity, ScrubOrigin)
            continue

        if tool is ToolKind.TRANSLATE:
            registry.detach(entity, MoveIntent)
        if record:
            try:
                find_channel(registry, entity, event_kind_for(tool, params))
            except ConsistencyError as e:
                logger.warning(
                    f"{tool.value.capitalize()} tool skipped entity {entity}: {e}"
                )
                continue
        logger.debug(f"{tool.value} tool finished on entity {entity}")


def process_tick(
    registry: Registry,
    clock: Clock,
    tools: Iterable[ToolKind],
    record: bool = True,
    params: RecorderParams | None = None,
) -> None:
    """Run one processing tick for each tool in `tools`.

    For every tool, handles Activated, Active and Deactivated entities in
    that order.
    """
    params = params or RecorderParams()
    for tool in tools:
        on_activated(tool, registry, clock, record, params)
        on_active(tool, registry, clock, record, params)
        on_deactivated(tool, registry, clock, record, params)


def clear_lifecycle(registry: Registry) -> None:
    """Remove every lifecycle marker, ready for the next tick's input."""
    for marker in LIFECYCLE_MARKERS:
        registry.reset(marker)
