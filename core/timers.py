"""Timing loops that drive the clock face.

Both loops are fire-and-reschedule callbacks on a tkinter widget's
after() queue. Each owns exactly one pending after id at a time and
cancels it on stop(). stop() is safe to call any number of times,
including before start().

SecondTicker   -- publishes a PointInTime once per second, on the
                  second boundary
FrameRefresher -- re-arms a per-frame callback while running
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from config import FRAME_INTERVAL_MS, TICK_TOPIC
from core.event_bus import EventBus
from core.timekeeping import PointInTime, SystemClock

logger = logging.getLogger(__name__)


class ScheduledCall:
    """Owner of one pending after() id on a scheduler widget."""

    def __init__(self, scheduler):
        self._scheduler = scheduler
        self._after_id: Optional[str] = None

    @property
    def pending(self) -> bool:
        return self._after_id is not None

    def schedule(self, delay_ms: int, func: Callable):
        """Replace any pending call with func after delay_ms."""
        self.cancel()
        self._after_id = self._scheduler.after(delay_ms, func)

    def fired(self):
        """Forget the id of a call that has just run."""
        self._after_id = None

    def cancel(self):
        if self._after_id is None:
            return
        after_id, self._after_id = self._after_id, None
        self._scheduler.after_cancel(after_id)


# A firing this close to the boundary woke early; wait for the boundary
# rather than publish the second already on display.
EARLY_WAKE_MS = 10


def next_delay_ms(now: datetime) -> int:
    """Milliseconds from now to the next second boundary, in (0, 1000]."""
    return 1000 - (now.microsecond // 1000) % 1000


class SecondTicker:
    """Publishes the current time once per second, aligned to the wall clock.

    The delay is recomputed from real time on every firing instead of
    using a fixed 1000 ms interval, so dispatch latency never accumulates.
    """

    def __init__(self, scheduler, bus: EventBus, clock=None,
                 topic: str = TICK_TOPIC):
        self.bus = bus
        self.clock = clock or SystemClock()
        self.topic = topic
        self._call = ScheduledCall(scheduler)
        self._running = False
        self._published = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self):
        if self._running:
            return
        self._running = True
        self._published = False
        logger.debug("SecondTicker started on %s", self.topic)
        self._tick()

    def stop(self):
        if self._running:
            logger.debug("SecondTicker stopped on %s", self.topic)
        self._running = False
        self._call.cancel()

    def _tick(self):
        self._call.fired()
        if not self._running:
            return
        now = self.clock.now()
        delay = next_delay_ms(now)
        if self._published and delay <= EARLY_WAKE_MS:
            self._call.schedule(delay, self._tick)
            return
        self._published = True
        self.bus.publish(self.topic, PointInTime.from_datetime(now))
        # A subscriber may have torn us down during publish
        if self._running:
            self._call.schedule(delay, self._tick)


class FrameRefresher:
    """Re-arms a callback every display frame while running.

    With no on_frame callback the loop changes nothing; it only keeps
    a frame hook alive for views that want to animate between ticks.
    """

    def __init__(self, scheduler, interval_ms: int = FRAME_INTERVAL_MS,
                 on_frame: Optional[Callable[[], None]] = None):
        self.interval_ms = interval_ms
        self.on_frame = on_frame
        self._call = ScheduledCall(scheduler)
        self._running = False
        self.frames = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self):
        if self._running:
            return
        self._running = True
        self._call.schedule(self.interval_ms, self._loop)

    def stop(self):
        self._running = False
        self._call.cancel()

    def _loop(self):
        self._call.fired()
        if not self._running:
            return
        self.frames += 1
        if self.on_frame is not None:
            try:
                self.on_frame()
            except Exception as exc:
                logger.error("Frame callback error: %s", exc)
        if self._running:
            self._call.schedule(self.interval_ms, self._loop)
