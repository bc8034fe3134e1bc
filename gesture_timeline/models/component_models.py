"""Entity components consumed and produced by the recording tools.

Components fall into three groups:

- Descriptive components owned by the application (Name, Orientation,
  Size, and the shared Position and Color value models).
- Lifecycle markers stamped by the input-translation layer for a single
  tick (Activated, Active, Deactivated, Abort) together with the typed input
  samples that accompany them.
- Markers written by the tools themselves (Selected, MoveIntent,
  ScrubOrigin).
"""

from pydantic import BaseModel, Field

from gesture_timeline.models.core_models import Position


class Name(BaseModel):
    """Human-readable entity name, used as the default track label."""

    text: str = Field(..., description="Entity display name")


class Orientation(BaseModel):
    """Rotation of an entity in whole degrees."""

    angle: int = Field(0, description="Rotation in degrees")


class Size(BaseModel):
    """Uniform scale of an entity."""

    value: int = Field(100, description="Scale in percent")


class Selected(BaseModel):
    """Marks the one entity currently selected."""


class MoveIntent(BaseModel):
    """Translation requested for the current tick while not recording.

    Attributes:
        x: Horizontal delta requested this tick.
        y: Vertical delta requested this tick.
    """

    x: float = Field(0.0, description="Horizontal delta")
    y: float = Field(0.0, description="Vertical delta")


class ScrubOrigin(BaseModel):
    """Clock value captured when a scrub interaction was activated."""

    time: int = Field(..., description="Clock value at activation")


class Activated(BaseModel):
    """The entity started being interacted with at `time`."""

    time: int = Field(..., description="Logical tick of activation")


class Active(BaseModel):
    """The entity is still being interacted with at `time`."""

    time: int = Field(..., description="Logical tick of the ongoing interaction")


class Deactivated(BaseModel):
    """The interaction with the entity ended at `time`."""

    time: int = Field(..., description="Logical tick of deactivation")


class Abort(BaseModel):
    """Stop accumulating for the entity without finalizing."""


class InputPosition2D(BaseModel):
    """Pointer-like 2D input sample, e.g. from a mouse or WASD keys.

    Attributes:
        absolute: Position in screen space.
        relative: Offset from where the interaction started.
        delta: Offset since the previous tick.
    """

    absolute: Position = Field(default_factory=Position, description="Screen position")
    relative: Position = Field(
        default_factory=Position, description="Offset since activation"
    )
    delta: Position = Field(default_factory=Position, description="Offset since last tick")


class InputPressure(BaseModel):
    """Pen pressure, e.g. from a tablet."""

    strength: float = Field(0.0, ge=0.0, le=1.0, description="Normalized pressure")


class InputPitch(BaseModel):
    """Pen tilt around the horizontal axis."""

    angle: float = Field(0.0, description="Pitch angle")


class InputYaw(BaseModel):
    """Pen rotation around the vertical axis."""

    angle: float = Field(0.0, description="Yaw angle")


LIFECYCLE_MARKERS = (Activated, Active, Deactivated, Abort)
