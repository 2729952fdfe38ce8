"""
Enum-keyed event bus.

The battle core publishes what happened; UI screens subscribe and
render it.

Usage:
    bus.subscribe(BattleEvent.VICTORY, on_victory)
    bus.publish(BattleEvent.VICTORY, exp=60, gold=90)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EngineEvent(Enum):
    GAME_START = auto()
    GAME_QUIT = auto()


class AudioEvent(Enum):
    """Audio events (for UI layers that synthesize sound themselves)."""
    SFX_PLAYED = auto()
    VOLUME_CHANGED = auto()


class UIEvent(Enum):
    SHOP_OPENED = auto()
    SHOP_CLOSED = auto()


@dataclass
class Event:
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]


class EventBus:
    """
    Publish/subscribe messaging keyed by Enum members.

    Handlers run synchronously in subscription order. A handler that
    raises is logged and the remaining handlers still run.
    """

    def __init__(self):
        self._handlers: dict[Enum, list[EventHandler]] = {}

    def subscribe(self, event_type: Enum, handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Deliver an event to every handler of its type.

        Returns:
            The Event that was delivered
        """
        event = Event(type=event_type, data=data)
        # Copy so handlers may unsubscribe while dispatching
        for handler in list(self._handlers.get(event_type, ())):
            try:
                handler(event)
            except Exception:
                logger.exception("Error in event handler for %s", event_type)
        return event
