"""Card registry for Learn Clock.

Register card types by name. The app loads its layout (YAML or dict)
and instantiates the right classes by looking them up here.

Usage:
    @register_card("clock")
    class ClockCard(BaseCard):
        ...
"""

import logging

logger = logging.getLogger(__name__)

CARD_REGISTRY = {}


def register_card(name):
    """Decorator to register a card class by type name."""
    def decorator(cls):
        CARD_REGISTRY[name] = cls
        logger.debug("Registered card type: %s -> %s", name, cls.__name__)
        return cls
    return decorator
