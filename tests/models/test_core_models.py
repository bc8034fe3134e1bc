import pytest
from pydantic import ValidationError
from gesture_timeline.models import Color, Position


def test_position_addition(valid_position):
    total = valid_position + Position(x=0.5, y=2.0)
    assert total == Position(x=2.0, y=0.0)


def test_position_defaults_to_origin():
    assert Position() == Position(x=0, y=0)


def test_color_from_hsv_red():
    c = Color.from_hsv(0.0, 0.75, 0.75)
    assert c.r == pytest.approx(0.75)
    assert c.g == pytest.approx(0.1875)
    assert c.b == pytest.approx(0.1875)
    assert c.a == 1.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"r": -0.1},
        {"g": 1.1},
        {"b": 2.0},
        {"a": -1.0},
    ],
)
def test_color_validation_raises(kwargs):
    with pytest.raises(ValidationError):
        Color(**kwargs)
