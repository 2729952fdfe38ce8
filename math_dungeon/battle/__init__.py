"""
Battle module - turn-based math combat.
"""

from math_dungeon.battle.actions import (
    calculate_damage,
    enemy_attack_damage,
    critical_hit,
)
from math_dungeon.battle.turns import TurnOwner, TurnSystem
from math_dungeon.battle.difficulty import (
    Difficulty,
    DifficultySettings,
    DIFFICULTY_SETTINGS,
    resolve_difficulty,
)
from math_dungeon.battle.actor import Hero, Enemy, EnemyType, enemy_difficulty_for
from math_dungeon.battle.system import (
    BattleManager,
    BattleState,
    BattleEvent,
    AnswerResult,
    NOT_YOUR_TURN,
)

__all__ = [
    "calculate_damage",
    "enemy_attack_damage",
    "critical_hit",
    "TurnOwner",
    "TurnSystem",
    "Difficulty",
    "DifficultySettings",
    "DIFFICULTY_SETTINGS",
    "resolve_difficulty",
    "Hero",
    "Enemy",
    "EnemyType",
    "enemy_difficulty_for",
    "BattleManager",
    "BattleState",
    "BattleEvent",
    "AnswerResult",
    "NOT_YOUR_TURN",
]
