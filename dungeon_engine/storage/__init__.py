"""
Storage module - key-value persistence port.
"""

from dungeon_engine.storage.store import KeyValueStore, MemoryStore, JsonFileStore

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
]
