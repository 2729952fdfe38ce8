"""
Save module - persistence of hero, game, leaderboard and progress.
"""

from math_dungeon.save.manager import SaveManager, SaveEvent, LeaderboardEntry

__all__ = [
    "SaveManager",
    "SaveEvent",
    "LeaderboardEntry",
]
