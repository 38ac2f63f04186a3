"""Clock card -- analog clock face with a digital readout.

The card owns its own SecondTicker and FrameRefresher. The ticker
publishes a PointInTime on the card's topic once per second; the card
keeps the latest one and repaints the dial from it. Both timers start
when the card is built and are cancelled when it is destroyed.

The dial is drawn on a 260x260 design grid scaled to the canvas, so it
grows with the window.
"""

import tkinter as tk
import logging
from typing import Dict, List, NamedTuple, Optional, Tuple

from config import (
    DIAL_SIZE, HANDS, HOUR_RADIUS_INSET, MINUTE_RADIUS_INSET, TICK_TOPIC,
)
from core.base_card import BaseCard
from core.dial import (
    DialLabel, LabelState, hand_endpoint, hour_labels, minute_labels,
)
from core.registry import register_card
from core.timekeeping import (
    PointInTime, SystemClock, describe, format_digital, hand_angles,
)
from core.timers import FrameRefresher, SecondTicker

logger = logging.getLogger(__name__)

# LabelState -> THEME key for the minute label colour
_STATE_COLORS = {
    LabelState.DEFAULT: "minute_label",
    LabelState.ACTIVE_HOUR: "active_hour",
    LabelState.ACTIVE_MINUTE: "active_minute",
    LabelState.ACTIVE_SECOND: "active_second",
}



class StyledLabel(NamedTuple):
    label: DialLabel
    color: str
    bold: bool


class HandSegment(NamedTuple):
    name: str
    x: float
    y: float


class DialScene(NamedTuple):
    """Everything the card paints for one PointInTime, in canvas coords."""

    readout: str
    accessible_label: str
    minute_labels: List[StyledLabel]
    hour_labels: List[DialLabel]
    hands: List[HandSegment]


def hand_segments(point: PointInTime, cx: float, cy: float,
                  radius: float) -> List[HandSegment]:
    """Tip of each hand for point; every hand starts at (cx, cy)."""
    angles = hand_angles(point)
    segments = []
    for name, angle in (
        ("hour", angles.hours_angle),
        ("minute", angles.minutes_angle),
        ("second", angles.seconds_angle),
    ):
        x, y = hand_endpoint(angle, HANDS[name]["length"] * radius, cx, cy)
        segments.append(HandSegment(name, x, y))
    return segments


def dial_scene(point: PointInTime, theme: Dict, cx: float, cy: float,
               scale: float) -> DialScene:
    """Lay out the dial for point on a canvas centred at (cx, cy)."""
    half = DIAL_SIZE / 2
    styled = [
        StyledLabel(label, theme[_STATE_COLORS[label.state]],
                    label.state is not LabelState.DEFAULT)
        for label in minute_labels(point, cx, cy,
                                   (half - MINUTE_RADIUS_INSET) * scale)
    ]
    return DialScene(
        readout=format_digital(point),
        accessible_label=describe(point),
        minute_labels=styled,
        hour_labels=hour_labels(cx, cy, (half - HOUR_RADIUS_INSET) * scale),
        hands=hand_segments(point, cx, cy, half * scale),
    )


def parse_smooth_sweep(value) -> bool:
    """Only a real boolean turns smooth sweep on; anything else is ignored."""
    if isinstance(value, bool):
        return value
    if value is not None:
        logger.warning("Ignoring smooth_sweep=%r: expected true or false", value)
    return False


@register_card("clock")
class ClockCard(BaseCard):
    """Analog dial, hour numerals, minute labels and a digital readout."""

    COLS = 2

    def __init__(self, parent, bus, config: Dict, clock=None):
        config.setdefault("label", "Clock")
        config.setdefault("topic", TICK_TOPIC)
        self._clock = clock or SystemClock()
        self._smooth = parse_smooth_sweep(config.get("smooth_sweep"))
        self.point = PointInTime.from_datetime(self._clock.now())
        self._accessible_label = describe(self.point)
        self._ticker: Optional[SecondTicker] = None
        self._refresher: Optional[FrameRefresher] = None
        super().__init__(parent, bus, config)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def setup_ui(self):
        bg = self.card_config.get("bg", self.theme["card_bg"])

        self._canvas = tk.Canvas(self, bg=bg, highlightthickness=0)
        self._canvas.pack(fill="both", expand=True, padx=8, pady=(8, 0))
        self._canvas.bind("<Configure>", lambda e: self.render())

        self._digital_lbl = tk.Label(
            self,
            text=format_digital(self.point),
            font=("Courier", 28, "bold"),
            bg=bg,
            fg=self.theme["text"],
        )
        self._digital_lbl.pack(anchor="center", pady=(4, 10))

    def on_mount(self):
        self._ticker = SecondTicker(self, self.bus, self._clock, self.topic)
        self._refresher = FrameRefresher(
            self, on_frame=self._sweep_hands if self._smooth else None,
        )
        self._ticker.start()
        self._refresher.start()
        logger.info("Clock card mounted (smooth sweep %s)",
                    "on" if self._smooth else "off")

    def on_unmount(self):
        if self._ticker:
            self._ticker.stop()
        if self._refresher:
            self._refresher.stop()
        logger.info("Clock card unmounted")

    def on_data(self, payload: PointInTime):
        self.point = payload
        self.render()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def accessible_label(self) -> str:
        """Text description of the dial for assistive technology."""
        return self._accessible_label

    def render(self):
        """Repaint the readout and the whole dial from self.point."""
        self._accessible_label = describe(self.point)
        self._digital_lbl.config(text=format_digital(self.point))

        geom = self._geometry()
        if geom is None:
            return  # not laid out yet
        cx, cy, scale = geom
        scene = dial_scene(self.point, self.theme, cx, cy, scale)
        canvas = self._canvas
        canvas.delete("all")

        rim = (DIAL_SIZE / 2 - 2) * scale
        canvas.create_oval(
            cx - rim, cy - rim, cx + rim, cy + rim,
            fill=self.theme["dial_bg"], outline=self.theme["dial_rim"],
            width=max(2, int(4 * scale)), tags="dial",
        )

        minute_font = ("Arial", max(6, int(7 * scale)))
        active_font = ("Arial", max(6, int(8 * scale)), "bold")
        for styled in scene.minute_labels:
            label = styled.label
            canvas.create_text(
                label.x, label.y, text=label.text,
                font=active_font if styled.bold else minute_font,
                fill=styled.color, tags=("minute", label.state.value),
            )

        hour_font = ("Arial", max(8, int(16 * scale)), "bold")
        for label in scene.hour_labels:
            canvas.create_text(
                label.x, label.y, text=label.text, font=hour_font,
                fill=self.theme["numeral"], tags="hour",
            )

        self._draw_hands(scene.hands, cx, cy, DIAL_SIZE / 2 * scale)

    def _geometry(self) -> Optional[Tuple[float, float, float]]:
        w = self._canvas.winfo_width()
        h = self._canvas.winfo_height()
        size = min(w, h)
        if size < 40:
            return None
        return w / 2, h / 2, size / DIAL_SIZE

    def _draw_hands(self, hands: List[HandSegment], cx, cy, radius):
        canvas = self._canvas
        canvas.delete("hand")
        for hand in hands:
            canvas.create_line(
                cx, cy, hand.x, hand.y, width=HANDS[hand.name]["width"],
                capstyle=tk.ROUND, fill=self.theme[f"{hand.name}_hand"],
                tags=("hand", f"hand-{hand.name}"),
            )
        cap = max(3, radius * 0.04)
        canvas.create_oval(
            cx - cap, cy - cap, cx + cap, cy + cap,
            fill=self.theme["second_hand"], outline="", tags="hand",
        )

    def _sweep_hands(self):
        """Frame callback: move the hands to live time between ticks."""
        geom = self._geometry()
        if geom is None:
            return
        cx, cy, scale = geom
        live = PointInTime.from_datetime(self._clock.now())
        radius = DIAL_SIZE / 2 * scale
        self._draw_hands(hand_segments(live, cx, cy, radius), cx, cy, radius)
