"""Parameter models for recording configuration.

These models hold every tunable used by the recording tools: how Scrub
maps pointer travel to ticks, how new tracks and channels are labeled and
colored, and which payload the Translate tool records.
"""

from typing import Literal

from pydantic import BaseModel, Field

from gesture_timeline.models.core_models import Color
from gesture_timeline.models.timeline_models import EventKind


class ChannelStyle(BaseModel):
    """Label and color given to a channel when it is first created.

    Attributes:
        label: Channel display label.
        color: Channel display color.
    """

    label: str = Field(..., description="Channel display label")
    color: Color = Field(default_factory=Color, description="Channel display color")


def _default_channel_styles() -> dict[EventKind, ChannelStyle]:
    return {
        EventKind.TRANSLATE: ChannelStyle(
            label="Translate", color=Color.from_hsv(0.0, 0.75, 0.75)
        ),
        EventKind.ROTATE: ChannelStyle(
            label="Rotate", color=Color.from_hsv(0.33, 0.75, 0.75)
        ),
        EventKind.SCALE: ChannelStyle(
            label="Scale", color=Color.from_hsv(0.52, 0.75, 0.50)
        ),
        EventKind.INPUT: ChannelStyle(
            label="Translate Input", color=Color.from_hsv(0.0, 0.75, 0.75)
        ),
    }


class RecorderParams(BaseModel):
    """Configuration for the recording tools.

    Attributes:
        scrub_scale_factor: Pointer units per tick when scrubbing (>= 1, default 10).
            The clock becomes origin + relative.x / factor, truncated toward zero.
        default_track_color: Track color for entities without a Color component.
        track_label_format: Track label for entities without a Name component,
            formatted with `entity`.
        translate_payload: "offsets" records per-tick deltas, "input" records
            the raw input samples.
        channel_styles: Label and color seeded on newly created channels.
    """

    scrub_scale_factor: int = Field(
        10, ge=1, description="Pointer units per tick when scrubbing"
    )
    default_track_color: Color = Field(
        default_factory=lambda: Color.from_hsv(0.0, 0.0, 0.75),
        description="Fallback track color",
    )
    track_label_format: str = Field(
        "Entity {entity}", description="Fallback track label"
    )
    translate_payload: Literal["offsets", "input"] = Field(
        "offsets", description="Payload recorded by the Translate tool"
    )
    channel_styles: dict[EventKind, ChannelStyle] = Field(
        default_factory=_default_channel_styles,
        description="Styles seeded on newly created channels",
    )

    def channel_style(self, kind: EventKind) -> ChannelStyle:
        """Return the configured style for `kind`, or a plain one named after it."""
        style = self.channel_styles.get(kind)
        if style is None:
            return ChannelStyle(label=kind.value.capitalize())
        return style
