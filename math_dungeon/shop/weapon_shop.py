"""
Weapon shop - gold for weapons.

Only one weapon is held at a time; buying replaces it. Ownership is
inferred from the equipped weapon id alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from math_dungeon.components import CharacterStats
from math_dungeon.shop.catalog import ALL_WEAPONS, Weapon

logger = logging.getLogger(__name__)


@dataclass
class PurchaseResult:
    """Outcome of a purchase."""
    success: bool
    message: str
    weapon: Optional[Weapon] = None


class WeaponShop:
    """Catalog lookups and purchase transactions against CharacterStats."""

    def __init__(self, weapons: Iterable[Weapon] = ALL_WEAPONS):
        self._weapons: dict[str, Weapon] = {w.id: w for w in weapons}

    def get_all_weapons(self) -> list[Weapon]:
        return list(self._weapons.values())

    def get_weapon(self, weapon_id: str) -> Optional[Weapon]:
        return self._weapons.get(weapon_id)

    def can_afford(self, stats: CharacterStats, weapon_id: str) -> bool:
        weapon = self.get_weapon(weapon_id)
        if weapon is None:
            return False
        return stats.gold >= weapon.price

    def buy_weapon(self, stats: CharacterStats, weapon_id: str) -> PurchaseResult:
        """
        Buy and equip a weapon.

        Returns:
            The result; failures leave stats untouched
        """
        weapon = self.get_weapon(weapon_id)
        if weapon is None:
            return PurchaseResult(False, "That weapon doesn't exist!")

        if stats.gold < weapon.price:
            shortfall = weapon.price - stats.gold
            return PurchaseResult(False, f"Not enough gold! You need {shortfall} more.")

        stats.gold -= weapon.price
        stats.equipped_weapon = weapon.to_equipped()
        logger.info("Bought %s for %s gold (%s left)", weapon.name, weapon.price, stats.gold)
        return PurchaseResult(
            True,
            f"You bought the {weapon.name}! +{weapon.damage_bonus} damage!",
            weapon,
        )

    @staticmethod
    def add_gold(stats: CharacterStats, amount: int) -> int:
        """Credit gold. Returns the new balance."""
        return stats.add_gold(amount)

    @staticmethod
    def get_weapon_damage_bonus(stats: CharacterStats) -> int:
        return stats.equipped_weapon.damage_bonus

    @staticmethod
    def is_owned(stats: CharacterStats, weapon_id: str) -> bool:
        return stats.equipped_weapon.id == weapon_id
