"""Learn Clock window.

Loads the layout from clock.yaml, instantiates registered card types
side by side and owns the EventBus they share. Cards own their own
timers; cleanup() destroys the cards, which cancels those timers.

Layout file (all keys optional):

    title: "Analog clock: learn time!"
    theme:
      dial_bg: "#ffffff"
    cards:
      - type: clock
        smooth_sweep: true
      - type: guide
"""

import tkinter as tk
import logging
from typing import Dict, List

import yaml

from config import DEFAULT_LAYOUT, THEME, WINDOW_GEOMETRY
from core import EventBus
from core.registry import CARD_REGISTRY

# Import card package to trigger registration
import cards  # noqa: F401

logger = logging.getLogger(__name__)

PAD = 8


def load_config(path: str) -> Dict:
    """Load layout config from a YAML file. Missing file -> {}."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning("Config file not found: %s", path)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return data


def _theme_mapping(value, where: str) -> Dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{where}: 'theme' must be a mapping, got {value!r}")
    return dict(value)


def resolve_layout(config: Dict) -> Dict:
    """Fill in defaults: title, theme overrides and the card list.

    Card entries that are not mappings are logged and skipped. A theme
    that is not a mapping raises ValueError.
    """
    theme = _theme_mapping(config.get("theme"), "layout")

    cards = config.get("cards") or DEFAULT_LAYOUT["cards"]
    if not isinstance(cards, list):
        logger.warning("Layout 'cards' is not a list, using defaults: %r", cards)
        cards = DEFAULT_LAYOUT["cards"]

    card_cfgs = []
    for idx, entry in enumerate(cards):
        if not isinstance(entry, dict):
            logger.warning("Skipping card #%d: expected a mapping, got %r", idx, entry)
            continue
        card_cfg = dict(entry)
        card_theme = _theme_mapping(card_cfg.get("theme"), f"card #{idx}")
        card_cfg["theme"] = {**theme, **card_theme}
        card_cfgs.append(card_cfg)

    return {
        "title": config.get("title") or DEFAULT_LAYOUT["title"],
        "theme": theme,
        "cards": card_cfgs,
    }


class ClockApp:
    """Top-level window holding the clock and its companion cards."""

    def __init__(self, root, config_path: str = "clock.yaml",
                 fullscreen: bool = False):
        self.root = root
        self._layout = resolve_layout(load_config(config_path))
        self._theme = {**THEME, **self._layout["theme"]}

        self.root.title(self._layout["title"])
        self.root.configure(bg=self._theme["bg"])
        self.root.geometry(WINDOW_GEOMETRY)
        self.root.attributes("-fullscreen", fullscreen)
        self.root.bind("<Escape>", self._toggle_fullscreen)
        self.root.protocol("WM_DELETE_WINDOW", self.root.quit)

        self.bus = EventBus()
        self.cards: List[tk.Frame] = []
        self._build_cards()

    def _build_cards(self):
        """Create cards from the layout and grid them in one row."""
        body = tk.Frame(self.root, bg=self._theme["bg"])
        body.pack(fill="both", expand=True, padx=PAD, pady=PAD)
        body.rowconfigure(0, weight=1)

        for card_cfg in self._layout["cards"]:
            card_type = card_cfg.get("type", "clock")
            cls = CARD_REGISTRY.get(card_type)
            if not cls:
                logger.warning("Unknown card type: %s", card_type)
                continue

            try:
                card = cls(body, self.bus, card_cfg)
            except Exception as exc:
                logger.error("Failed to create card %s: %s", card_type, exc)
                continue
            col = len(self.cards)
            body.columnconfigure(col, weight=getattr(card, "COLS", 1), uniform="card")
            card.grid(row=0, column=col, padx=PAD // 2, sticky="nsew")
            self.cards.append(card)

        logger.info("Learn Clock: %d cards built", len(self.cards))

    def _toggle_fullscreen(self, event=None):
        full = self.root.getboolean(self.root.attributes("-fullscreen"))
        self.root.attributes("-fullscreen", not full)

    def cleanup(self):
        """Destroy all cards. Safe to call more than once."""
        cards, self.cards = self.cards, []
        for card in cards:
            card.destroy()
