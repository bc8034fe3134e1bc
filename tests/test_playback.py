import numpy as np
import pytest

from gesture_timeline.models import (
    Channel,
    Event,
    EventKind,
    InputPayload,
    InputPosition2D,
    Position,
    RotatePayload,
    TranslatePayload,
)
from gesture_timeline.playback import (
    channel_extent,
    event_at,
    event_curve,
    sample_at,
    value_at,
)


@pytest.fixture
def translate_channel():
    # Two drags: ticks 1-3 and ticks 10-11
    return Channel(
        label="Translate",
        events=[
            Event(
                start_time=1,
                length=3,
                kind=EventKind.TRANSLATE,
                payload=TranslatePayload(
                    values=[Position(), Position(x=2, y=1), Position(x=3, y=-1)]
                ),
            ),
            Event(
                start_time=10,
                length=2,
                kind=EventKind.TRANSLATE,
                payload=TranslatePayload(values=[Position(), Position(x=-4)]),
            ),
        ],
    )


def test_event_at(translate_channel):
    first, second = translate_channel.events
    assert event_at(translate_channel, 0) is None
    assert event_at(translate_channel, 1) is first
    assert event_at(translate_channel, 3) is first
    assert event_at(translate_channel, 4) is None
    assert event_at(translate_channel, 11) is second
    assert event_at(translate_channel, 12) is None
    assert event_at(Channel(), 5) is None


def test_sample_at(translate_channel):
    first = translate_channel.events[0]
    assert sample_at(first, 2) == Position(x=2, y=1)
    assert sample_at(first, 0) is None
    assert sample_at(first, 4) is None


def test_translate_curve_accumulates(translate_channel):
    curve = event_curve(translate_channel.events[0])
    assert curve.shape == (3, 2)
    np.testing.assert_allclose(curve, [[0, 0], [2, 1], [5, 0]])


def test_scalar_curve_accumulates():
    event = Event(
        start_time=0, length=4, kind=EventKind.ROTATE, payload=RotatePayload(values=[0, 5, -2, 1])
    )
    np.testing.assert_array_equal(event_curve(event), [0, 5, 3, 4])


def test_input_curve_uses_absolute_positions():
    samples = {
        t: InputPosition2D(absolute=Position(x=t * 10, y=1)) for t in (3, 4, 5)
    }
    event = Event(
        start_time=4,
        length=3,
        kind=EventKind.INPUT,
        payload=InputPayload(origin=3, samples=samples),
    )
    np.testing.assert_allclose(event_curve(event), [[30, 1], [40, 1], [50, 1]])


def test_value_at(translate_channel):
    np.testing.assert_allclose(value_at(translate_channel, 3), [5, 0])
    np.testing.assert_allclose(value_at(translate_channel, 11), [-4, 0])
    assert value_at(translate_channel, 7) is None


def test_channel_extent(translate_channel):
    assert channel_extent(translate_channel) == (1, 12)
    assert channel_extent(Channel()) is None
