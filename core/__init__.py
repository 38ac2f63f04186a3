"""Core framework for the Learn Clock window.

Architecture:
    EventBus       -- single update channel; timers publish, cards subscribe
    SecondTicker   -- publishes the current time on each second boundary
    FrameRefresher -- per-frame callback loop for animation
    BaseCard       -- tkinter Frame with a mount/unmount lifecycle
    Registry       -- registers card types by name
    timekeeping    -- PointInTime and the hand-angle calculator
    dial           -- numeral and hand geometry
"""

from core.event_bus import EventBus
from core.timers import FrameRefresher, SecondTicker
from core.base_card import BaseCard
from core.registry import CARD_REGISTRY, register_card
from core.timekeeping import HandAngles, PointInTime, hand_angles

__all__ = [
    "EventBus",
    "FrameRefresher",
    "SecondTicker",
    "BaseCard",
    "CARD_REGISTRY",
    "register_card",
    "HandAngles",
    "PointInTime",
    "hand_angles",
]
