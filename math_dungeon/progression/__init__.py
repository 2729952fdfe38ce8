"""
Progression module - curriculum progress tracking.
"""

from math_dungeon.progression.progress import ProgressTracker

__all__ = [
    "ProgressTracker",
]
