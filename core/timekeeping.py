"""Time model and hand-angle math for the clock face.

A PointInTime is what the ticker captures once per second. Hand angles
are derived from it on every render and never stored. Angles are in
degrees, clockwise from 12 o'clock, and are not wrapped.
"""

from dataclasses import dataclass
from datetime import datetime, time
from typing import NamedTuple


@dataclass(frozen=True)
class PointInTime:
    """Wall-clock time captured at the last tick."""

    hour: int
    minute: int
    second: int
    millisecond: int = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> "PointInTime":
        return cls(dt.hour, dt.minute, dt.second, dt.microsecond // 1000)

    def to_time(self) -> time:
        return time(self.hour, self.minute, self.second, self.millisecond * 1000)


class HandAngles(NamedTuple):
    hours_angle: float
    minutes_angle: float
    seconds_angle: float


def hand_angles(point: PointInTime) -> HandAngles:
    """Rotation of each hand for a point in time.

    Minutes include the seconds fraction and hours include the minutes
    fraction, so the hands sweep instead of jumping.
    """
    seconds = point.second + point.millisecond / 1000
    minutes = point.minute + seconds / 60
    hours = point.hour % 12 + minutes / 60
    return HandAngles(
        hours_angle=hours * 30,      # 360 / 12
        minutes_angle=minutes * 6,   # 360 / 60
        seconds_angle=seconds * 6,
    )


def format_digital(point: PointInTime) -> str:
    """Locale time representation, e.g. '15:05:09' or '3:05:09 PM'."""
    return point.to_time().strftime("%X")


def describe(point: PointInTime) -> str:
    """Accessible description of the clock face."""
    return f"Analog clock showing {format_digital(point)}"


class SystemClock:
    """Local wall clock. Anything with a now() -> datetime can stand in."""

    def now(self) -> datetime:
        return datetime.now()
