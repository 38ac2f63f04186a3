"""Shared fixtures: a manual after() queue, a settable clock and a Tk root."""

import tkinter as tk
from datetime import datetime, timedelta

import pytest

from core.event_bus import EventBus


class FakeClock:
    """Clock whose now() only moves when advanced."""

    def __init__(self, start: datetime):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, ms: float):
        self.current += timedelta(milliseconds=ms)


class FakeScheduler:
    """Stands in for a tkinter widget's after()/after_cancel().

    Callbacks run only inside advance(), in due-time order. An attached
    FakeClock moves with the scheduler's virtual time.
    """

    def __init__(self, clock: FakeClock = None):
        self.clock = clock
        self.elapsed = 0
        self._calls = {}
        self._seq = 0

    def after(self, ms, func):
        self._seq += 1
        after_id = f"after#{self._seq}"
        self._calls[after_id] = (self.elapsed + ms, self._seq, func)
        return after_id

    def after_cancel(self, after_id):
        # Tk ignores ids that already ran or were cancelled
        self._calls.pop(after_id, None)

    @property
    def pending(self) -> int:
        return len(self._calls)

    def next_due(self):
        if not self._calls:
            return None
        return min(due for due, _, _ in self._calls.values())

    def advance(self, ms):
        target = self.elapsed + ms
        while True:
            due = [(t, seq, after_id) for after_id, (t, seq, _) in self._calls.items()
                   if t <= target]
            if not due:
                break
            t, _, after_id = min(due)
            func = self._calls.pop(after_id)[2]
            self._move_to(t)
            func()
        self._move_to(target)

    def _move_to(self, t):
        if self.clock is not None:
            self.clock.advance(t - self.elapsed)
        self.elapsed = t


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 1, 10, 0, 0, 250_000))


@pytest.fixture
def scheduler(clock):
    return FakeScheduler(clock)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def tk_root():
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"no display available: {exc}")
    root.geometry("600x400")
    yield root
    root.destroy()
