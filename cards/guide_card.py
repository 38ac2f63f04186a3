"""Guide card -- title, hand legend and a short explanation for kids.

Static text only. No topic, no timers.
"""

import tkinter as tk
from typing import Dict

from core.base_card import BaseCard
from core.registry import register_card

INTRO = (
    "Watch the hands: the thin red hand is seconds, the long hand is "
    "minutes, and the short hand is hours."
)

LEGEND = [
    ("second_hand", "Seconds (thin)"),
    ("minute_hand", "Minutes (long)"),
    ("hour_hand", "Hours (short)"),
]

STEPS = [
    "The short hand shows the hour (1-12).",
    "The long hand shows minutes. Every full turn is 60 minutes.",
    "The thin red hand shows seconds. It moves once every second.",
]


@register_card("guide")
class GuideCard(BaseCard):
    """Legend and 'how it works' text beside the clock."""

    def __init__(self, parent, bus, config: Dict):
        config.setdefault("label", "How it works")
        super().__init__(parent, bus, config)

    def setup_ui(self):
        bg = self.card_config.get("bg", self.theme["card_bg"])
        wrap = self.card_config.get("wraplength", 220)

        tk.Label(
            self, text=self.card_config.get("title", "Learn time!"),
            font=("Arial", 18, "bold"), bg=bg, fg=self.theme["text"],
        ).pack(anchor="w", padx=12, pady=(12, 4))

        tk.Label(
            self, text=INTRO, font=("Arial", 11), bg=bg,
            fg=self.theme["text_dim"], wraplength=wrap, justify="left",
        ).pack(anchor="w", padx=12)

        legend = tk.Frame(self, bg=bg)
        legend.pack(fill="x", padx=12, pady=(10, 6))
        for color_key, text in LEGEND:
            row = tk.Frame(legend, bg=bg)
            row.pack(anchor="w", pady=1)
            tk.Label(
                row, text="●", font=("Arial", 12), bg=bg,
                fg=self.theme[color_key],
            ).pack(side="left")
            tk.Label(
                row, text=text, font=("Arial", 11), bg=bg, fg=self.theme["text"],
            ).pack(side="left", padx=(4, 0))

        tk.Label(
            self, text=self.get_display_name(), font=("Arial", 13, "bold"),
            bg=bg, fg=self.theme["text"],
        ).pack(anchor="w", padx=12, pady=(8, 2))

        for i, step in enumerate(STEPS, start=1):
            tk.Label(
                self, text=f"{i}. {step}", font=("Arial", 10), bg=bg,
                fg=self.theme["text_dim"], wraplength=wrap, justify="left",
            ).pack(anchor="w", padx=12, pady=1)
