"""Learn Clock - Configuration

Dial geometry follows a 260x260 design grid. The canvas scales that grid
to whatever size the card gets, so all radii are expressed as insets
from the dial's half-width:

  hour numerals    cx - 36
  minute labels    cx - 20

Values here are defaults. clock.yaml may override the theme colours and
the card layout (see ui/app.py).
"""

# ---------------------------------------------------------------------------
# Timing
# ---------------------------------------------------------------------------
TICK_TOPIC = "clock.tick"   # EventBus topic carrying PointInTime
FRAME_INTERVAL_MS = 16      # ~60 fps; tkinter has no animation-frame hook

# ---------------------------------------------------------------------------
# Dial geometry (design units, scaled to the canvas)
# ---------------------------------------------------------------------------
DIAL_SIZE = 260
HOUR_RADIUS_INSET = 36
MINUTE_RADIUS_INSET = 20

# Hand length as a fraction of the dial radius, and stroke width in px
HANDS = {
    "hour": {"length": 0.50, "width": 7},
    "minute": {"length": 0.72, "width": 4},
    "second": {"length": 0.80, "width": 2},
}

# ---------------------------------------------------------------------------
# UI Theme
# ---------------------------------------------------------------------------
THEME = {
    "bg": "#1a1a2e",
    "card_bg": "#16213e",
    "dial_bg": "#fdfdf8",
    "dial_rim": "#0f3460",
    "accent": "#0f3460",
    "text": "#e0e0e0",
    "text_dim": "#9a9a9a",
    "numeral": "#1a1a2e",
    "minute_label": "#9a9a9a",
    "hour_hand": "#2d3436",
    "minute_hand": "#0984e3",
    "second_hand": "#ff1744",
    "active_second": "#ff1744",
    "active_minute": "#0984e3",
    "active_hour": "#2d3436",
}

# ---------------------------------------------------------------------------
# Window
# ---------------------------------------------------------------------------
WINDOW_TITLE = "Analog clock: learn time!"
WINDOW_GEOMETRY = "720x480"

# ---------------------------------------------------------------------------
# Default layout, used when clock.yaml is missing or has no cards
# ---------------------------------------------------------------------------
DEFAULT_LAYOUT = {
    "title": WINDOW_TITLE,
    "cards": [
        {"type": "clock", "label": "Clock", "smooth_sweep": False},
        {"type": "guide", "label": "How it works"},
    ],
}
