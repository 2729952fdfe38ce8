"""
Dungeon module - curriculum data, searching, sorting and grade management.
"""

from math_dungeon.dungeon.curriculum import (
    CurriculumError,
    load_curriculum,
    DATA_PATH,
)
from math_dungeon.dungeon.searcher import (
    DungeonInfo,
    DungeonSearcher,
    binary_search_grade,
    binary_search_unit,
    linear_search_problems,
    linear_search_by_difficulty,
    linear_search_available_dungeons,
)
from math_dungeon.dungeon.leaderboard import (
    LeaderboardSorter,
    quicksort_leaderboard,
    bubble_sort,
    sort_leaderboard_by_score,
    sort_progress_by_completion,
    sort_inventory,
    sort_by_multiple_fields,
)
from math_dungeon.dungeon.manager import UnitManager, DungeonManager

__all__ = [
    # Curriculum
    "CurriculumError",
    "load_curriculum",
    "DATA_PATH",
    # Searching
    "DungeonInfo",
    "DungeonSearcher",
    "binary_search_grade",
    "binary_search_unit",
    "linear_search_problems",
    "linear_search_by_difficulty",
    "linear_search_available_dungeons",
    # Sorting
    "LeaderboardSorter",
    "quicksort_leaderboard",
    "bubble_sort",
    "sort_leaderboard_by_score",
    "sort_progress_by_completion",
    "sort_inventory",
    "sort_by_multiple_fields",
    # Management
    "UnitManager",
    "DungeonManager",
]
