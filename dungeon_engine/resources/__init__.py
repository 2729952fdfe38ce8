"""
Resources module - static data loading.
"""

from dungeon_engine.resources.database import Database, DataError

__all__ = [
    "Database",
    "DataError",
]
