"""Event bus for the clock.

Timers publish events (e.g. a clock tick) and views subscribe by topic.
Everything runs on the tkinter main loop, so publish() delivers to
subscribers immediately, in subscription order.
"""

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


class EventBus:
    """Single update channel between timers and views."""

    def __init__(self):
        self._subscribers: Dict[str, List[Callable]] = {}

    def publish(self, topic: str, payload: Any):
        """Deliver payload to every subscriber of topic. Main thread only."""
        # Copy so a callback may unsubscribe itself mid-delivery
        for cb in list(self._subscribers.get(topic, [])):
            try:
                cb(payload)
            except Exception as exc:
                logger.error("EventBus callback error [%s]: %s", topic, exc)

    def subscribe(self, topic: str, callback: Callable):
        """Register a callback for a topic."""
        if topic not in self._subscribers:
            self._subscribers[topic] = []
        self._subscribers[topic].append(callback)

    def unsubscribe(self, topic: str, callback: Callable):
        """Remove a callback. Unknown callbacks are ignored."""
        if topic in self._subscribers:
            self._subscribers[topic] = [
                cb for cb in self._subscribers[topic] if cb != callback
            ]

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))
