"""Track, channel and event models for recorded interaction.

A Track belongs to one entity and holds at most one Channel per EventKind.
A Channel is an append-mostly, chronologically ordered list of Events. An
Event covers the ticks `[start_time, start_time + length)` and owns a
payload with exactly one slot per covered tick: slot `i` holds the value
applied at tick `start_time + i`.

Payloads form a closed tagged union discriminated by `kind`, so every
Event's data is validated and typed rather than an opaque buffer.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

from gesture_timeline.models.component_models import InputPosition2D
from gesture_timeline.models.core_models import Color, Position


class EventKind(str, Enum):
    """Closed set of event kinds a Track can hold channels for."""

    SELECT = "select"
    TRANSLATE = "translate"
    ROTATE = "rotate"
    SCALE = "scale"
    SCRUB = "scrub"
    INPUT = "input"


class SequencePayload(BaseModel):
    """Per-tick payload stored as a list, one value per slot.

    Subclasses declare `values` and `fill_value`.
    """

    def __len__(self) -> int:
        return len(self.values)

    def fill_value(self):
        raise NotImplementedError

    def at(self, index: int):
        """Return the value stored in slot `index`."""
        return self.values[index]

    def write(self, index: int, value) -> None:
        """Overwrite or append slot `index`, keeping the slots contiguous.

        Writing inside the existing slots overwrites that slot and drops
        every later slot. Writing past the end fills any skipped slots with
        `fill_value()` before appending.

        Args:
            index: Non-negative slot index.
            value: Value to store.

        Raises:
            ValueError: If `index` is negative.
        """
        if index < 0:
            raise ValueError(f"slot index must be >= 0, got {index}")
        values = self.values
        if index < len(values):
            values[index] = value
            del values[index + 1 :]
            return
        while len(values) < index:
            values.append(self.fill_value())
        values.append(value)


class TranslatePayload(SequencePayload):
    """2D offsets, one per tick."""

    kind: Literal[EventKind.TRANSLATE] = EventKind.TRANSLATE
    values: list[Position] = Field(default_factory=list, description="Offsets per tick")

    def fill_value(self) -> Position:
        return Position()


class RotatePayload(SequencePayload):
    """Integer angle deltas, one per tick."""

    kind: Literal[EventKind.ROTATE] = EventKind.ROTATE
    values: list[int] = Field(default_factory=list, description="Angle deltas per tick")

    def fill_value(self) -> int:
        return 0


class ScalePayload(SequencePayload):
    """Integer scale deltas, one per tick."""

    kind: Literal[EventKind.SCALE] = EventKind.SCALE
    values: list[int] = Field(default_factory=list, description="Scale deltas per tick")

    def fill_value(self) -> int:
        return 0


class ScrubPayload(SequencePayload):
    """Integer time deltas, one per tick."""

    kind: Literal[EventKind.SCRUB] = EventKind.SCRUB
    values: list[int] = Field(default_factory=list, description="Time deltas per tick")

    def fill_value(self) -> int:
        return 0


class InputPayload(BaseModel):
    """Raw input samples keyed by the tick they were observed at.

    Attributes:
        origin: Tick observed for slot 0.
        samples: Mapping of tick to the raw sample observed at that tick.
    """

    kind: Literal[EventKind.INPUT] = EventKind.INPUT
    origin: int = Field(..., description="Tick of slot 0")
    samples: dict[int, InputPosition2D] = Field(
        default_factory=dict, description="Raw samples by tick"
    )

    def __len__(self) -> int:
        return len(self.samples)

    def at(self, index: int) -> InputPosition2D:
        return self.samples[self.origin + index]

    def write(self, index: int, value: InputPosition2D) -> None:
        """Store `value` for slot `index`.

        Same contiguity rules as `SequencePayload.write`; skipped ticks hold
        a copy of the last known sample.
        """
        if index < 0:
            raise ValueError(f"slot index must be >= 0, got {index}")
        tick = self.origin + index
        size = len(self.samples)
        if index < size:
            for stale in [t for t in self.samples if t > tick]:
                del self.samples[stale]
            self.samples[tick] = value
            return
        last = self.samples.get(self.origin + size - 1, value)
        for missing in range(self.origin + size, tick):
            self.samples[missing] = last.model_copy(deep=True)
        self.samples[tick] = value


Payload = Annotated[
    Union[TranslatePayload, RotatePayload, ScalePayload, ScrubPayload, InputPayload],
    Field(discriminator="kind"),
]


class Event(BaseModel):
    """A single recorded interaction span.

    Attributes:
        start_time: First tick covered by the event.
        length: Number of ticks covered (>= 1), always equal to the payload size.
        color: Display color captured when the event was created.
        kind: Event kind, matching the owning channel and the payload tag.
        payload: Per-tick data owned by this event.
    """

    start_time: int = Field(..., description="First tick covered")
    length: int = Field(1, ge=1, description="Number of ticks covered")
    color: Color = Field(default_factory=Color, description="Display color snapshot")
    kind: EventKind = Field(..., description="Event kind")
    payload: Payload = Field(..., description="Per-tick payload")

    @model_validator(mode="after")
    def _check_payload(self) -> "Event":
        if self.payload.kind != self.kind:
            raise ValueError(
                f"payload kind {EventKind(self.payload.kind).value!r} "
                f"does not match event kind {self.kind.value!r}"
            )
        if len(self.payload) != self.length:
            raise ValueError(
                f"payload has {len(self.payload)} slots but length is {self.length}"
            )
        return self

    @property
    def end_time(self) -> int:
        """First tick after the event."""
        return self.start_time + self.length


class Channel(BaseModel):
    """Chronological events of one kind within a Track."""

    label: str = Field("", description="Display label")
    color: Color = Field(default_factory=Color, description="Display color")
    events: list[Event] = Field(default_factory=list, description="Events in time order")


class Track(BaseModel):
    """Per-entity container of channels, at most one per event kind."""

    label: str = Field(..., description="Display label")
    color: Color = Field(default_factory=Color, description="Display color")
    channels: dict[EventKind, Channel] = Field(
        default_factory=dict, description="Channels by event kind"
    )
