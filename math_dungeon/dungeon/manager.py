"""
Dungeon management - which grade the hero is in and which unit is next.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from math_dungeon.battle import BattleManager, Difficulty, Hero
from math_dungeon.components import GradeData, UnitData
from math_dungeon.dungeon.curriculum import load_curriculum
from math_dungeon.dungeon.searcher import DungeonInfo, DungeonSearcher
from math_dungeon.math import Problem

logger = logging.getLogger(__name__)


class UnitManager:
    """Cursor over the units of one grade."""

    def __init__(self, grade_data: GradeData):
        self.grade = grade_data.grade
        self.grade_name = grade_data.name
        self.units: tuple[UnitData, ...] = grade_data.units
        self.current_unit_index = 0

    @property
    def current_unit(self) -> Optional[UnitData]:
        if not self.units:
            return None
        return self.units[self.current_unit_index]

    def next_unit(self) -> bool:
        """Advance the cursor. Returns False at the last unit."""
        if self.current_unit_index < len(self.units) - 1:
            self.current_unit_index += 1
            return True
        return False

    def previous_unit(self) -> bool:
        """Move the cursor back. Returns False at the first unit."""
        if self.current_unit_index > 0:
            self.current_unit_index -= 1
            return True
        return False

    def get_all_units(self) -> tuple[UnitData, ...]:
        return self.units

    def get_unit(self, index: int) -> Optional[UnitData]:
        if 0 <= index < len(self.units):
            return self.units[index]
        return None


class DungeonManager:
    """
    Grade selection and battle creation.

    Usage:
        dungeons = DungeonManager()
        if dungeons.load_dungeon(3):
            battle = dungeons.create_battle(hero, "medium", rng=rng)
            battle.start_battle()
    """

    def __init__(self, grades: Optional[Sequence[GradeData]] = None):
        self.grades: list[GradeData] = list(grades) if grades is not None else load_curriculum()
        self.searcher = DungeonSearcher(self.grades)
        self.current_grade: Optional[GradeData] = None
        self.current_unit_manager: Optional[UnitManager] = None

    def load_dungeon(self, grade_number: int) -> bool:
        """Enter a grade's dungeon. Returns False if the grade is unknown."""
        grade = self.searcher.find_grade(grade_number)
        if grade is None:
            logger.error("Grade %s not found", grade_number)
            return False
        self.current_grade = grade
        self.current_unit_manager = UnitManager(grade)
        logger.info("Entered %s (%s units)", grade.name, len(grade.units))
        return True

    @property
    def current_unit(self) -> Optional[UnitData]:
        if self.current_unit_manager is None:
            return None
        return self.current_unit_manager.current_unit

    def get_available_dungeons(self, player_level: int) -> list[DungeonInfo]:
        return self.searcher.get_available_dungeons(player_level)

    def get_available_grades(self) -> list[dict[str, Any]]:
        return [
            {
                "grade": g.grade,
                "gradeName": g.name,
                "minLevel": g.min_level,
                "unitCount": len(g.units),
            }
            for g in self.searcher.sorted_grades
        ]

    def get_units_for_grade(self, grade_number: int) -> list[dict[str, Any]]:
        grade = self.searcher.find_grade(grade_number)
        if grade is None:
            return []
        return [
            {
                "name": unit.name,
                "description": unit.description or unit.name,
                "topics": list(unit.topics),
                "difficulty": unit.difficulty or 1,
                "grade": grade_number,
            }
            for unit in grade.units
        ]

    def find_problems_by_topic(self, topic: str) -> list[Problem]:
        if self.current_grade is None:
            return []
        return self.searcher.find_problems_by_topic(self.current_grade.grade, topic)

    def find_problems_by_difficulty(self, min_difficulty: int, max_difficulty: int) -> list[Problem]:
        if self.current_grade is None:
            return []
        return self.searcher.find_problems_by_difficulty(
            self.current_grade.grade, min_difficulty, max_difficulty
        )

    def create_battle(
        self,
        hero: Hero,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
        **services: Any,
    ) -> Optional[BattleManager]:
        """
        Build a battle for the current unit of the loaded grade.

        Args:
            hero: The player's hero
            difficulty: Encounter difficulty id
            **services: Passed through to BattleManager (rng, scheduler, ...)

        Returns:
            The battle (not yet started), or None when no dungeon is loaded
        """
        if self.current_grade is None:
            logger.warning("create_battle called before a dungeon was loaded")
            return None
        return BattleManager(
            hero,
            self.current_grade.grade,
            self.current_unit,
            difficulty,
            **services,
        )
