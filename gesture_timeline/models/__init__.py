"""Domain models for the gesture-timeline recorder.

This module provides a centralized location for all data models used
throughout the recorder. It includes:

- Core value models (Position, Color)
- Entity components, lifecycle markers and input samples
- The Track/Channel/Event timeline and its tagged payloads
- Configuration parameters for the recording tools

All models are built using Pydantic for data validation, ensuring type
safety and clear interfaces between the registry, the timeline and the tools.
"""

# Re-export core models
from gesture_timeline.models.core_models import Position, Color

# Re-export component models
from gesture_timeline.models.component_models import (
    Name,
    Orientation,
    Size,
    Selected,
    MoveIntent,
    ScrubOrigin,
    Activated,
    Active,
    Deactivated,
    Abort,
    InputPosition2D,
    InputPressure,
    InputPitch,
    InputYaw,
    LIFECYCLE_MARKERS,
)

# Re-export timeline models
from gesture_timeline.models.timeline_models import (
    EventKind,
    SequencePayload,
    TranslatePayload,
    RotatePayload,
    ScalePayload,
    ScrubPayload,
    InputPayload,
    Payload,
    Event,
    Channel,
    Track,
)

# Re-export setting models
from gesture_timeline.models.settings_models import ChannelStyle, RecorderParams
