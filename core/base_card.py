"""Base card widget for Learn Clock.

A BaseCard is a tkinter Frame that may subscribe to an EventBus topic
and re-render when new events arrive. All card types inherit from this.

Lifecycle: building the card mounts it (setup_ui, subscribe, on_mount);
destroying the widget unmounts it (on_unmount, unsubscribe). Anything a
card starts in on_mount it must release in on_unmount.
"""

import tkinter as tk
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from config import THEME
from core.event_bus import EventBus

logger = logging.getLogger(__name__)


class BaseCard(tk.Frame, ABC):
    """Abstract card widget. Subclasses define how events are displayed."""

    # Relative width in the window grid. Cards can override.
    COLS = 1

    def __init__(self, parent, bus: EventBus, config: Dict):
        self.theme = dict(THEME)
        self.theme.update(config.get("theme") or {})
        bg = config.get("bg", self.theme["card_bg"])
        super().__init__(
            parent,
            bg=bg,
            highlightbackground=self.theme["accent"],
            highlightthickness=1,
        )
        self.bus = bus
        self.card_config = config
        self.topic = config.get("topic", "")
        self.mounted = False

        # Build the card UI (runs once)
        self.setup_ui()

        if self.topic:
            self.bus.subscribe(self.topic, self._on_data_wrapper)
        self.mounted = True
        self.on_mount()

    def _on_data_wrapper(self, payload: Any):
        if not self.mounted:
            return
        try:
            self.on_data(payload)
        except Exception as exc:
            logger.error("Card %s update error: %s", self.__class__.__name__, exc)

    @abstractmethod
    def setup_ui(self):
        """Create the card's tkinter widgets. Runs once at init."""
        ...

    def on_data(self, payload: Any):
        """Handle an event from the card's topic. Runs on main thread."""

    def on_mount(self):
        """Start timers or other resources owned by the card."""

    def on_unmount(self):
        """Release whatever on_mount acquired."""

    def destroy(self):
        if self.mounted:
            self.mounted = False
            try:
                self.on_unmount()
            finally:
                if self.topic:
                    self.bus.unsubscribe(self.topic, self._on_data_wrapper)
        super().destroy()

    def get_display_name(self) -> str:
        """Card title for headers and logs."""
        return self.card_config.get("label", self.__class__.__name__)
