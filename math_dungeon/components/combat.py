"""
Combat components - value snapshots handed to the damage calculator.

The calculator never sees a live CharacterStats; it gets a frozen copy
of just the numbers it needs, so ownership of the stats stays with the
hero or enemy that holds them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AttackerSnapshot:
    """
    Offensive numbers of one attacker at the moment of the hit.

    Attributes:
        attack: Base attack stat
        weapon_bonus: Flat bonus from the equipped weapon
    """
    attack: int
    weapon_bonus: int = 0


@dataclass(frozen=True)
class DefenderSnapshot:
    """Defensive numbers of one defender at the moment of the hit."""
    defense: int
