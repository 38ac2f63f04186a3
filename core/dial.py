"""Dial geometry: where numerals and hand tips go.

Angle 0 is 12 o'clock and angles grow clockwise, so screen
coordinates use sin for x and -cos for y.
"""

import math
from enum import Enum
from typing import List, NamedTuple, Tuple

from core.timekeeping import PointInTime


class LabelState(Enum):
    DEFAULT = "default"
    ACTIVE_HOUR = "active-hour"
    ACTIVE_MINUTE = "active-minute"
    ACTIVE_SECOND = "active-second"


class DialLabel(NamedTuple):
    text: str
    x: float
    y: float
    state: LabelState = LabelState.DEFAULT


def label_position(index: int, count: int, cx: float, cy: float,
                   radius: float) -> Tuple[float, float]:
    """Position of label `index` out of `count` evenly spaced labels."""
    angle = index * (360 / count) * (math.pi / 180)
    return cx + radius * math.sin(angle), cy - radius * math.cos(angle)


def hand_endpoint(angle_deg: float, length: float, cx: float,
                  cy: float) -> Tuple[float, float]:
    """Tip of a hand of `length` rotated `angle_deg` around (cx, cy)."""
    angle = math.radians(angle_deg)
    return cx + length * math.sin(angle), cy - length * math.cos(angle)


def hour_labels(cx: float, cy: float, radius: float) -> List[DialLabel]:
    """Twelve hour numerals; '12' sits at the top."""
    labels = []
    for i in range(12):
        x, y = label_position(i, 12, cx, cy, radius)
        labels.append(DialLabel("12" if i == 0 else str(i), x, y))
    return labels


def classify_minute_label(index: int, point: PointInTime) -> LabelState:
    """Visual state of minute label `index` (1..60).

    Second beats minute beats hour. Zero seconds/minutes map to label
    60 and hour 0 (or 12) maps to label 12.
    """
    current_second = point.second or 60
    current_minute = point.minute or 60
    current_hour = point.hour % 12 or 12
    if index == current_second:
        return LabelState.ACTIVE_SECOND
    if index == current_minute:
        return LabelState.ACTIVE_MINUTE
    if index == current_hour:
        return LabelState.ACTIVE_HOUR
    return LabelState.DEFAULT


def minute_labels(point: PointInTime, cx: float, cy: float,
                  radius: float) -> List[DialLabel]:
    """Sixty minute labels, 1..60, with their active state for `point`."""
    labels = []
    for i in range(1, 61):
        x, y = label_position(i, 60, cx, cy, radius)
        labels.append(DialLabel(str(i), x, y, classify_minute_label(i, point)))
    return labels
