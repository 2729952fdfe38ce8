"""
Curriculum components - grades and their units.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from dungeon_engine.core.component import FrozenComponent
from math_dungeon.math.problem import Problem


class UnitData(FrozenComponent):
    """
    One curriculum unit.

    Attributes:
        name: Unit name, resolved to a problem generator
        description: Dungeon selection text
        topics: Topic keywords covered by the unit
        difficulty: Optional enemy difficulty (1-5) for this unit's dungeon
    """
    name: str
    description: str = ""
    topics: tuple[str, ...] = ()
    difficulty: Optional[int] = Field(default=None, ge=1, le=5)


class GradeData(FrozenComponent):
    """
    One grade (1-9, or 10/20/30 for Math 10-1/20-1/30-1).

    Attributes:
        grade: Numeric grade
        name: Display name
        min_level: Hero level required to enter
        units: Units in teaching order
        problems: Optional hand-written problem bank
    """
    grade: int = Field(ge=1, le=30)
    name: str
    min_level: int = Field(default=1, ge=1, alias="minLevel")
    units: tuple[UnitData, ...] = ()
    problems: tuple[Problem, ...] = ()
