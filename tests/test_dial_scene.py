"""What the clock card paints, computed without a display."""

import logging
from collections import Counter

import pytest

from cards.clock_card import dial_scene, hand_segments, parse_smooth_sweep
from config import DIAL_SIZE, HANDS, THEME
from core.dial import LabelState
from core.timekeeping import PointInTime, describe, format_digital

CX = CY = DIAL_SIZE / 2


@pytest.fixture
def scene():
    return dial_scene(PointInTime(3, 5, 9, 500), THEME, CX, CY, 1.0)


def test_scene_readout_and_accessible_label(scene):
    point = PointInTime(3, 5, 9, 500)
    assert scene.readout == format_digital(point)
    assert scene.accessible_label == describe(point)
    assert scene.accessible_label.endswith(scene.readout)


def test_scene_has_sixty_minute_and_twelve_hour_labels(scene):
    assert len(scene.minute_labels) == 60
    assert [l.text for l in scene.hour_labels][0] == "12"
    assert len(scene.hour_labels) == 12


def test_scene_marks_one_label_per_hand(scene):
    states = Counter(s.label.state for s in scene.minute_labels)
    assert states[LabelState.ACTIVE_SECOND] == 1
    assert states[LabelState.ACTIVE_MINUTE] == 1
    assert states[LabelState.ACTIVE_HOUR] == 1
    by_text = {s.label.text: s for s in scene.minute_labels}
    assert by_text["9"].color == THEME["active_second"]
    assert by_text["5"].color == THEME["active_minute"]
    assert by_text["3"].color == THEME["active_hour"]
    assert by_text["4"].color == THEME["minute_label"]
    assert by_text["9"].bold and not by_text["4"].bold


def test_scene_uses_theme_overrides():
    theme = dict(THEME, active_second="#00ff00")
    scene = dial_scene(PointInTime(0, 0, 30), theme, CX, CY, 1.0)
    by_text = {s.label.text: s for s in scene.minute_labels}
    assert by_text["30"].color == "#00ff00"


def test_scene_scales_radii():
    small = dial_scene(PointInTime(0, 0, 0), THEME, CX, CY, 1.0)
    large = dial_scene(PointInTime(0, 0, 0), THEME, CX, CY, 2.0)
    # Label 12 sits straight above the centre
    assert CY - large.hour_labels[0].y == pytest.approx(2 * (CY - small.hour_labels[0].y))


def test_hand_segments_at_midnight_point_up():
    radius = DIAL_SIZE / 2
    hands = {h.name: h for h in hand_segments(PointInTime(0, 0, 0), CX, CY, radius)}
    assert list(hands) == ["hour", "minute", "second"]
    for name, hand in hands.items():
        assert hand.x == pytest.approx(CX)
        assert hand.y == pytest.approx(CY - HANDS[name]["length"] * radius)


def test_hand_segments_quarter_past_three():
    radius = 100
    hands = {h.name: h for h in hand_segments(PointInTime(3, 0, 15), 0, 0, radius)}
    # Seconds at 15 -> pointing right
    assert (hands["second"].x, hands["second"].y) == pytest.approx(
        (HANDS["second"]["length"] * radius, 0))


@pytest.mark.parametrize("value, expected", [
    (True, True),
    (False, False),
    (None, False),
])
def test_parse_smooth_sweep_booleans(value, expected):
    assert parse_smooth_sweep(value) is expected


@pytest.mark.parametrize("value", ["false", "true", 1, "yes"])
def test_parse_smooth_sweep_ignores_non_booleans(value, caplog):
    with caplog.at_level(logging.WARNING, logger="cards.clock_card"):
        assert parse_smooth_sweep(value) is False
    assert "smooth_sweep" in caplog.text
