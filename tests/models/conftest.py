import pytest
from gesture_timeline.models import Event, EventKind, Position, TranslatePayload


@pytest.fixture
def valid_position():
    return Position(x=1.5, y=-2.0)


@pytest.fixture
def valid_event():
    return Event(
        start_time=6,
        kind=EventKind.TRANSLATE,
        payload=TranslatePayload(values=[Position()]),
    )
