"""
Dungeon Engine

Domain-agnostic infrastructure for the math dungeon game: data records,
typed events, a virtual-clock scheduler, audio and storage ports, and a
schema-validated data loader.

Quick Start:
    from dungeon_engine.core import EngineEvent, EventBus, Scheduler
    from dungeon_engine.storage import MemoryStore

    bus = EventBus()
    scheduler = Scheduler()
    scheduler.call_later(1.0, lambda: bus.publish(EngineEvent.GAME_START))
    scheduler.update(1.0)
"""

__version__ = "0.1.0"

from dungeon_engine.core import (
    Component,
    FrozenComponent,
    GameConfig,
    EventBus,
    Event,
    EngineEvent,
    Scheduler,
    ScheduledTask,
)
from dungeon_engine.audio import AudioPort, SilentAudio, EventAudio
from dungeon_engine.storage import KeyValueStore, MemoryStore, JsonFileStore

__all__ = [
    # Core
    "Component",
    "FrozenComponent",
    "GameConfig",
    "EventBus",
    "Event",
    "EngineEvent",
    "Scheduler",
    "ScheduledTask",
    # Audio
    "AudioPort",
    "SilentAudio",
    "EventAudio",
    # Storage
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
]
