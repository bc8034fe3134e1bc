"""Gesture-to-timeline recording library.

This package records continuous pointer-like input (position, pressure,
relative deltas) as discrete, replayable timeline events attached to
entities. It is the recording layer underneath an interactive editor: as
an entity is pressed, dragged and released, the tools decide when a new
event begins, extend it tick by tick, and leave a compact time-ordered log
that can be scrubbed, replayed or inspected.

The main pieces are:
1. An in-memory entity registry holding typed components
2. The Track/Channel/Event timeline model and its mutation primitives
3. Per-tool recording stages driven by Activated/Active/Deactivated markers
4. A shared clock that the Scrub tool rewrites
5. Read-only playback helpers for replaying recorded channels

Example:
    Recording a short drag with the Translate tool:

    >>> from gesture_timeline.clock import Clock
    >>> from gesture_timeline.registry import Registry
    >>> from gesture_timeline.tools import ToolKind, process_tick, clear_lifecycle
    >>> from gesture_timeline.models import Activated, InputPosition2D, Position
    >>>
    >>> registry, clock = Registry(), Clock()
    >>> box = registry.create(Position(), Activated(time=0), InputPosition2D())
    >>> process_tick(registry, clock, [ToolKind.TRANSLATE])
    >>> clear_lifecycle(registry)
"""
