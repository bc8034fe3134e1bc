import pytest
from pydantic import ValidationError
from gesture_timeline.models import (
    Event,
    EventKind,
    InputPayload,
    InputPosition2D,
    Position,
    RotatePayload,
    ScalePayload,
    ScrubPayload,
    TranslatePayload,
    Track,
)


def test_event_end_time(valid_event):
    assert valid_event.length == 1
    assert valid_event.end_time == 7


def test_event_length_must_match_payload():
    with pytest.raises(ValidationError):
        Event(
            start_time=0,
            length=2,
            kind=EventKind.TRANSLATE,
            payload=TranslatePayload(values=[Position()]),
        )


def test_event_kind_must_match_payload():
    with pytest.raises(ValidationError):
        Event(start_time=0, kind=EventKind.SCALE, payload=RotatePayload(values=[0]))


def test_event_length_must_be_positive():
    with pytest.raises(ValidationError):
        Event(start_time=0, length=0, kind=EventKind.ROTATE, payload=RotatePayload())


def test_payload_union_is_discriminated_by_kind():
    event = Event.model_validate(
        {
            "start_time": 3,
            "kind": "scale",
            "payload": {"kind": "scale", "values": [0, 4]},
            "length": 2,
        }
    )
    assert isinstance(event.payload, ScalePayload)
    assert event.payload.values == [0, 4]


def test_sequence_payload_overwrite_truncates():
    payload = RotatePayload(values=[0, 1, 2, 3])
    payload.write(1, 9)
    assert payload.values == [0, 9]


def test_sequence_payload_append():
    payload = ScrubPayload(values=[0])
    payload.write(1, 5)
    assert payload.values == [0, 5]
    assert len(payload) == 2


def test_sequence_payload_fills_skipped_slots():
    payload = TranslatePayload(values=[Position()])
    payload.write(3, Position(x=2, y=1))
    assert payload.values == [Position(), Position(), Position(), Position(x=2, y=1)]


def test_sequence_payload_rejects_negative_index():
    with pytest.raises(ValueError):
        RotatePayload(values=[0]).write(-1, 1)


def test_input_payload_keys_by_tick():
    first = InputPosition2D(absolute=Position(x=1, y=1))
    second = InputPosition2D(absolute=Position(x=2, y=1))
    payload = InputPayload(origin=5, samples={5: first})
    payload.write(1, second)
    assert sorted(payload.samples) == [5, 6]
    assert payload.at(1) is second


def test_input_payload_gap_repeats_last_sample():
    first = InputPosition2D(absolute=Position(x=1, y=1))
    later = InputPosition2D(absolute=Position(x=4, y=1))
    payload = InputPayload(origin=0, samples={0: first})
    payload.write(3, later)
    assert len(payload) == 4
    assert payload.at(1) == first
    assert payload.at(2) == first
    assert payload.at(3) is later


def test_input_payload_overwrite_truncates():
    samples = {t: InputPosition2D(absolute=Position(x=t)) for t in range(10, 14)}
    payload = InputPayload(origin=10, samples=samples)
    replacement = InputPosition2D(absolute=Position(x=99))
    payload.write(1, replacement)
    assert sorted(payload.samples) == [10, 11]
    assert payload.at(1) is replacement


def test_track_starts_without_channels():
    track = Track(label="Box")
    assert track.channels == {}
