"""
Battle actors - the hero and the monsters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from math_dungeon.components import CharacterStats

HERO_MAX_HP = 100
HERO_ATTACK = 15
HERO_DEFENSE = 8

MAX_ENEMY_DIFFICULTY = 5


class EnemyType(str, Enum):
    """Monster family, banded by grade."""
    SLIME = "slime"
    GOBLIN = "goblin"
    SKELETON = "skeleton"
    DRAGON = "dragon"


ENEMY_NAMES: dict[EnemyType, list[str]] = {
    EnemyType.SLIME: ["Baby Slime", "Slime", "Giant Slime", "Elite Slime", "Slime King"],
    EnemyType.GOBLIN: ["Goblin Scout", "Goblin Warrior", "Goblin Chief", "Goblin Shaman", "Goblin Lord"],
    EnemyType.SKELETON: ["Skeleton", "Skeleton Warrior", "Dark Skeleton", "Bone Knight", "Skeleton King"],
    EnemyType.DRAGON: ["Whelpling", "Drake", "Dragon", "Elder Dragon", "Dragon Lord"],
}


@dataclass
class Hero:
    """The player's character. Its stats persist between battles."""
    stats: CharacterStats
    name: str = "Hero"

    @classmethod
    def create(
        cls,
        max_hp: int = HERO_MAX_HP,
        attack: int = HERO_ATTACK,
        defense: int = HERO_DEFENSE,
        level: int = 1,
        name: str = "Hero",
    ) -> Hero:
        """Create a fresh hero at full health."""
        stats = CharacterStats(max_hp=max_hp, attack=attack, defense=defense, level=level)
        return cls(stats=stats, name=name)

    def is_alive(self) -> bool:
        return self.stats.is_alive()


@dataclass
class Enemy:
    """
    A monster for one encounter.

    Stats derive from grade and difficulty; enemies are never persisted
    between battles.
    """
    name: str
    type: EnemyType
    grade: int
    difficulty: int
    stats: Optional[CharacterStats] = None

    def __post_init__(self):
        if self.stats is None:
            self.stats = CharacterStats(
                max_hp=50 + self.grade * 10 + self.difficulty * 20,
                attack=5 + self.grade + self.difficulty * 2,
                defense=3 + self.grade + self.difficulty * 2,
                level=self.grade + self.difficulty,
            )

    @staticmethod
    def type_for_grade(grade: int) -> EnemyType:
        if grade <= 3:
            return EnemyType.SLIME
        if grade <= 6:
            return EnemyType.GOBLIN
        if grade <= 9:
            return EnemyType.SKELETON
        return EnemyType.DRAGON

    @staticmethod
    def name_for_type(enemy_type: EnemyType, difficulty: int) -> str:
        names = ENEMY_NAMES[enemy_type]
        return names[min(max(difficulty, 1) - 1, len(names) - 1)]

    @classmethod
    def create_for_grade(cls, grade: int, difficulty: int = 1) -> Enemy:
        """Create the monster matching a grade band and difficulty (1-5)."""
        enemy_type = cls.type_for_grade(grade)
        return cls(
            name=cls.name_for_type(enemy_type, difficulty),
            type=enemy_type,
            grade=grade,
            difficulty=difficulty,
        )

    def is_alive(self) -> bool:
        return self.stats.is_alive()

    def scale(self, health_multiplier: float, attack_multiplier: float) -> None:
        """Apply encounter multipliers. Health is refilled to the new max."""
        self.stats.set_max_hp(max(1, math.floor(self.stats.max_hp * health_multiplier)))
        self.stats.attack = math.floor(self.stats.attack * attack_multiplier)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "grade": self.grade,
            "difficulty": self.difficulty,
            "stats": self.stats.model_dump(by_alias=True),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Enemy:
        stats_data: Optional[dict] = data.get("stats")
        return cls(
            name=data.get("name") or "Monster",
            type=EnemyType(data.get("type") or EnemyType.SLIME),
            grade=data.get("grade") or 1,
            difficulty=data.get("difficulty") or 1,
            stats=CharacterStats.model_validate(stats_data) if stats_data else None,
        )


def enemy_difficulty_for(grade: int, unit_difficulty: Optional[int], bonus: int = 0) -> int:
    """
    Enemy difficulty level (1-5) for an encounter.

    Uses the unit's own difficulty when set, else half the grade rounded up.
    """
    base = unit_difficulty or min(MAX_ENEMY_DIFFICULTY, math.ceil(grade / 2)) or 1
    base = min(MAX_ENEMY_DIFFICULTY, max(1, base))
    return min(MAX_ENEMY_DIFFICULTY, base + bonus)
