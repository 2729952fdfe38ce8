"""
Weapon catalog.
"""

from __future__ import annotations

from pydantic import Field

from dungeon_engine.core.component import FrozenComponent
from math_dungeon.components import EquippedWeapon


class Weapon(FrozenComponent):
    """
    A weapon for sale.

    Attributes:
        id: Unique catalog id
        name: Display name
        price: Cost in gold
        damage_bonus: Flat damage added to every player hit
        description: Shop text
        icon: Display glyph
    """
    id: str
    name: str
    price: int = Field(ge=0)
    damage_bonus: int = Field(ge=0, alias="damageBonus")
    description: str = ""
    icon: str = ""

    def to_equipped(self) -> EquippedWeapon:
        return EquippedWeapon(
            id=self.id,
            name=self.name,
            damage_bonus=self.damage_bonus,
            description=self.description,
            icon=self.icon,
        )


ALL_WEAPONS: tuple[Weapon, ...] = (
    Weapon(
        id="wooden_sword",
        name="Wooden Sword",
        price=0,
        damage_bonus=0,
        description="A basic training sword. Better than nothing!",
        icon="🪵",
    ),
    Weapon(
        id="iron_blade",
        name="Iron Blade",
        price=100,
        damage_bonus=5,
        description="A sturdy iron blade. +5 damage per hit!",
        icon="🔪",
    ),
    Weapon(
        id="steel_sword",
        name="Steel Sword",
        price=250,
        damage_bonus=10,
        description="Forged from fine steel. +10 damage per hit!",
        icon="⚔️",
    ),
    Weapon(
        id="flame_sword",
        name="Flame Sword",
        price=500,
        damage_bonus=18,
        description="Burns with magical fire! +18 damage per hit!",
        icon="🔥",
    ),
    Weapon(
        id="dragon_slayer",
        name="Dragon Slayer",
        price=1000,
        damage_bonus=30,
        description="Legendary blade of heroes! +30 damage per hit!",
        icon="🐉",
    ),
)
