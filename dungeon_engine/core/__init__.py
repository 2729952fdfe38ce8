"""
Core engine module.

Exports:
- Component, FrozenComponent: Pydantic data record bases
- EventBus, Event, EngineEvent, AudioEvent, UIEvent: Event system
- Scheduler, ScheduledTask: Virtual-clock deferred callbacks
- GameConfig: Session configuration
"""

from dungeon_engine.core.component import Component, FrozenComponent
from dungeon_engine.core.config import GameConfig
from dungeon_engine.core.events import EventBus, Event, EngineEvent, UIEvent, AudioEvent
from dungeon_engine.core.scheduler import Scheduler, ScheduledTask

__all__ = [
    # Data
    "Component",
    "FrozenComponent",
    # Config
    "GameConfig",
    # Events
    "EventBus",
    "Event",
    "EngineEvent",
    "UIEvent",
    "AudioEvent",
    # Scheduling
    "Scheduler",
    "ScheduledTask",
]
