import pytest

from gesture_timeline.clock import Clock
from gesture_timeline.models import (
    Color,
    InputPosition2D,
    Name,
    Orientation,
    Position,
    RecorderParams,
    Size,
)
from gesture_timeline.registry import Registry
from gesture_timeline.tools import clear_lifecycle, process_tick


def make_sample(delta=(0, 0), relative=(0, 0), absolute=(0, 0)):
    return InputPosition2D(
        absolute=Position(x=absolute[0], y=absolute[1]),
        relative=Position(x=relative[0], y=relative[1]),
        delta=Position(x=delta[0], y=delta[1]),
    )


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def params():
    return RecorderParams()


@pytest.fixture
def box(registry):
    # An entity every recording tool can act on
    return registry.create(
        Name(text="Box"),
        Color.from_hsv(0.6, 0.5, 0.5),
        Position(),
        Orientation(),
        Size(),
    )


@pytest.fixture
def stamp(registry):
    """Attach a lifecycle marker plus that tick's input sample."""

    def _stamp(entity, marker, **input_kwargs):
        registry.attach(entity, marker)
        registry.attach(entity, make_sample(**input_kwargs))

    return _stamp


@pytest.fixture
def run_tick(registry, clock):
    """Process one tick for a single tool, then clear the markers."""

    def _run(tool, record=True, params=None):
        process_tick(registry, clock, [tool], record, params)
        clear_lifecycle(registry)

    return _run
