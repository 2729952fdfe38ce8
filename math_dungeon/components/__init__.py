"""
Math Dungeon components - data-only models.

All components are Pydantic models (or frozen dataclasses for combat
snapshots). Rules live in the battle, shop and math packages.
"""

from math_dungeon.components.combat import AttackerSnapshot, DefenderSnapshot
from math_dungeon.components.character import (
    CharacterStats,
    EquippedWeapon,
    MIN_LOADED_MAX_HP,
)
from math_dungeon.components.curriculum import GradeData, UnitData

__all__ = [
    "AttackerSnapshot",
    "DefenderSnapshot",
    "CharacterStats",
    "EquippedWeapon",
    "MIN_LOADED_MAX_HP",
    "GradeData",
    "UnitData",
]
