"""Card implementations for Learn Clock.

Importing this package registers all built-in card types.
"""

from cards.clock_card import ClockCard
from cards.guide_card import GuideCard

__all__ = ["ClockCard", "GuideCard"]
