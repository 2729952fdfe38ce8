"""
Encounter difficulty presets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    NIGHTMARE = "nightmare"


@dataclass(frozen=True)
class DifficultySettings:
    """
    Multipliers applied to one encounter.

    Attributes:
        boss_health_multiplier: Scales enemy max HP
        boss_attack_multiplier: Scales enemy attack
        player_damage_multiplier: Scales every player hit
        experience_multiplier: Scales victory EXP and gold
        wrong_answer_penalty: Extra factor on hits after a wrong answer
        enemy_level_bonus: Added to the enemy's difficulty level (max 5)
        emoji: Shown in the opening message
    """
    boss_health_multiplier: float
    boss_attack_multiplier: float
    player_damage_multiplier: float
    experience_multiplier: float
    wrong_answer_penalty: float
    enemy_level_bonus: int = 0
    emoji: str = ""


DIFFICULTY_SETTINGS: dict[Difficulty, DifficultySettings] = {
    Difficulty.EASY: DifficultySettings(0.6, 0.5, 1.5, 0.8, 0.3, 0, "🌱"),
    Difficulty.MEDIUM: DifficultySettings(1.0, 1.0, 1.0, 1.2, 0.5, 0, "⚔️"),
    Difficulty.HARD: DifficultySettings(1.5, 1.3, 0.8, 2.5, 0.3, 1, "🔥"),
    Difficulty.NIGHTMARE: DifficultySettings(2.0, 1.8, 0.6, 5.0, 0.2, 2, "💀"),
}


def resolve_difficulty(value: Difficulty | str) -> Difficulty:
    """Parse a difficulty id, falling back to medium for unknown ids."""
    if isinstance(value, Difficulty):
        return value
    try:
        return Difficulty(str(value).strip().lower())
    except ValueError:
        logger.warning("Unknown difficulty %r, using medium", value)
        return Difficulty.MEDIUM
