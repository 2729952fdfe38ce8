"""
Battle actions - damage formulas.

Pure functions over stat snapshots; randomness comes from the caller.
"""

from __future__ import annotations

import math
import random

from math_dungeon.components.combat import AttackerSnapshot, DefenderSnapshot

WRONG_ANSWER_FACTOR = 0.5
DEFENSE_FACTOR = 0.5
VARIANCE_RANGE = 5

CRITICAL_CHANCE = 0.15
CRITICAL_MULTIPLIER = 1.5

# Enemy damage scaling against the hero
LEVEL_BONUS_PER_LEVEL = 0.05
FAIRNESS_CAP = 0.20


def calculate_damage(
    attacker: AttackerSnapshot,
    defender: DefenderSnapshot,
    correct: bool,
    rng: random.Random,
) -> int:
    """
    Damage dealt by one attack.

    Args:
        attacker: Attack stat and weapon bonus
        defender: Defense stat
        correct: Whether the attacker answered correctly (halves base if not)
        rng: Source of the 0-4 variance roll

    Returns:
        Damage, never below 1
    """
    base = attacker.attack + attacker.weapon_bonus
    if not correct:
        base = math.floor(base * WRONG_ANSWER_FACTOR)

    variance = math.floor(rng.random() * VARIANCE_RANGE)
    reduction = math.floor(defender.defense * DEFENSE_FACTOR)
    return max(1, base + variance - reduction)


def enemy_attack_damage(base_damage: int, hero_level: int, hero_max_hp: int) -> int:
    """
    Scale enemy damage by hero level, capped at 20% of hero max HP.

    The cap guarantees the hero survives at least five hits from full health.
    """
    multiplier = 1 + max(0, hero_level - 1) * LEVEL_BONUS_PER_LEVEL
    boosted = base_damage * multiplier
    cap = hero_max_hp * FAIRNESS_CAP
    return max(1, math.floor(min(boosted, cap)))


def critical_hit(base_damage: int, rng: random.Random) -> int:
    """15% chance to deal 1.5x damage."""
    if rng.random() < CRITICAL_CHANCE:
        return math.floor(base_damage * CRITICAL_MULTIPLIER)
    return base_damage
