"""
Dungeon searching.

Grades and units are found by binary search over collections sorted by
grade number and unit name; problem filters are linear scans.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from math_dungeon.components import GradeData, UnitData
from math_dungeon.math import Problem


@dataclass
class DungeonInfo:
    """A grade as shown on the dungeon selection screen."""
    grade: int
    name: str
    min_level: int
    units: tuple[UnitData, ...] = ()


def binary_search_grade(sorted_grades: Sequence[GradeData], target_grade: int) -> Optional[GradeData]:
    """Find a grade in a list sorted by grade number."""
    left, right = 0, len(sorted_grades) - 1
    while left <= right:
        mid = (left + right) // 2
        mid_grade = sorted_grades[mid]
        if mid_grade.grade == target_grade:
            return mid_grade
        if mid_grade.grade < target_grade:
            left = mid + 1
        else:
            right = mid - 1
    return None


def binary_search_unit(sorted_units: Sequence[UnitData], target_name: str) -> Optional[UnitData]:
    """Find a unit in a list sorted by name."""
    left, right = 0, len(sorted_units) - 1
    while left <= right:
        mid = (left + right) // 2
        mid_unit = sorted_units[mid]
        if mid_unit.name == target_name:
            return mid_unit
        if mid_unit.name < target_name:
            left = mid + 1
        else:
            right = mid - 1
    return None


def linear_search_problems(problems: Sequence[Problem], topic: str) -> list[Problem]:
    return [p for p in problems if p.topic == topic]


def linear_search_by_difficulty(
    problems: Sequence[Problem],
    min_difficulty: int,
    max_difficulty: int,
) -> list[Problem]:
    """Problems whose difficulty lies in [min_difficulty, max_difficulty]."""
    return [p for p in problems if min_difficulty <= p.difficulty <= max_difficulty]


def linear_search_available_dungeons(dungeons: Sequence[DungeonInfo], player_level: int) -> list[DungeonInfo]:
    return [d for d in dungeons if d.min_level <= player_level]


class DungeonSearcher:
    """
    Lookups over a loaded curriculum.

    Usage:
        searcher = DungeonSearcher(load_curriculum())
        grade = searcher.find_grade(7)
        unit = searcher.find_unit(7, "Probability")
    """

    def __init__(self, grades: Sequence[GradeData]):
        self.sorted_grades: list[GradeData] = sorted(grades, key=lambda g: g.grade)

    def find_grade(self, grade_number: int) -> Optional[GradeData]:
        return binary_search_grade(self.sorted_grades, grade_number)

    def find_unit(self, grade_number: int, unit_name: str) -> Optional[UnitData]:
        grade = self.find_grade(grade_number)
        if grade is None or not grade.units:
            return None
        sorted_units = sorted(grade.units, key=lambda u: u.name)
        return binary_search_unit(sorted_units, unit_name)

    def find_problems_by_topic(self, grade_number: int, topic: str) -> list[Problem]:
        grade = self.find_grade(grade_number)
        if grade is None:
            return []
        return linear_search_problems(grade.problems, topic)

    def find_problems_by_difficulty(
        self,
        grade_number: int,
        min_difficulty: int,
        max_difficulty: int,
    ) -> list[Problem]:
        grade = self.find_grade(grade_number)
        if grade is None:
            return []
        return linear_search_by_difficulty(grade.problems, min_difficulty, max_difficulty)

    def get_available_dungeons(self, player_level: int) -> list[DungeonInfo]:
        """Grades the hero's level unlocks, in grade order."""
        dungeons = [
            DungeonInfo(grade=g.grade, name=g.name, min_level=g.min_level, units=g.units)
            for g in self.sorted_grades
        ]
        return linear_search_available_dungeons(dungeons, player_level)
