"""
Character components - stats, experience, gold, equipped weapon.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import Field

from dungeon_engine.core.component import Component
from math_dungeon.components.combat import AttackerSnapshot, DefenderSnapshot

DEFAULT_MAX_HP = 400
DEFAULT_ATTACK = 10
DEFAULT_DEFENSE = 5
DEFAULT_EXP_TO_NEXT = 100

# Saves from before the HP rebalance are raised to this on load
MIN_LOADED_MAX_HP = 400

# Growth applied per level
HP_GROWTH = 1.2
ATTACK_GROWTH = 1.15
DEFENSE_GROWTH = 1.1
EXP_CURVE = 1.5


class EquippedWeapon(Component):
    """
    The one weapon a character is holding.

    Attributes:
        id: Catalog id (ownership is inferred from this alone)
        name: Display name
        damage_bonus: Flat damage added to every hit
        description: Flavour text
        icon: Display glyph
    """
    id: str = "wooden_sword"
    name: str = "Wooden Sword"
    damage_bonus: int = Field(default=0, ge=0, alias="damageBonus")
    description: str = "A basic training sword"
    icon: str = ""


class CharacterStats(Component):
    """
    Mutable numeric record for a hero or an enemy.

    Attributes:
        max_hp: Maximum HP
        current_hp: Current HP, never above max_hp
        attack: Attack stat
        defense: Defense stat
        level: Current level
        experience: Experience toward the next level
        experience_to_next_level: Threshold for the next level
        gold: Currency
        equipped_weapon: Currently held weapon
    """
    max_hp: int = Field(default=DEFAULT_MAX_HP, gt=0, alias="maxHP")
    current_hp: Optional[int] = Field(default=None, ge=0, alias="currentHP")
    attack: int = Field(default=DEFAULT_ATTACK, ge=0)
    defense: int = Field(default=DEFAULT_DEFENSE, ge=0)
    level: int = Field(default=1, ge=1)
    experience: int = Field(default=0, ge=0)
    experience_to_next_level: int = Field(
        default=DEFAULT_EXP_TO_NEXT, gt=0, alias="experienceToNextLevel"
    )
    gold: int = Field(default=0, ge=0)
    equipped_weapon: EquippedWeapon = Field(
        default_factory=EquippedWeapon, alias="equippedWeapon"
    )

    def model_post_init(self, __context: Any) -> None:
        """Start at full health and never above max."""
        if self.current_hp is None or self.current_hp > self.max_hp:
            self.current_hp = self.max_hp

    @property
    def hp_percentage(self) -> float:
        """Get HP as a fraction (0-1)."""
        return self.current_hp / self.max_hp

    def is_alive(self) -> bool:
        return self.current_hp > 0

    def take_damage(self, damage: float) -> int:
        """
        Take already-mitigated damage.

        Args:
            damage: Final damage amount (floored, minimum 1)

        Returns:
            Damage applied
        """
        actual = max(1, math.floor(damage))
        self.current_hp = max(0, self.current_hp - actual)
        return actual

    def heal(self, amount: int) -> int:
        """
        Heal up to max HP.

        Returns:
            Actual amount healed
        """
        old = self.current_hp
        self.current_hp = min(self.max_hp, self.current_hp + max(0, amount))
        return self.current_hp - old

    def reset(self) -> None:
        """Restore to full health."""
        self.current_hp = self.max_hp

    def set_max_hp(self, value: int, refill: bool = True) -> None:
        """Change max HP, keeping current HP within bounds."""
        if value < self.current_hp:
            self.current_hp = value
        self.max_hp = value
        if refill:
            self.current_hp = value

    def add_experience(self, exp: int) -> bool:
        """
        Add experience and level up as many times as it allows.

        Returns:
            True if at least one level was gained
        """
        if exp <= 0:
            return False

        self.experience += exp
        leveled_up = False
        while self.experience >= self.experience_to_next_level:
            self.experience -= self.experience_to_next_level
            self.level_up()
            leveled_up = True
        return leveled_up

    def level_up(self) -> None:
        """Apply one level of growth. The HP gained is also healed."""
        self.level += 1
        old_max = self.max_hp
        self.max_hp = math.floor(self.max_hp * HP_GROWTH)
        self.current_hp = min(self.max_hp, self.current_hp + (self.max_hp - old_max))
        self.attack = math.floor(self.attack * ATTACK_GROWTH)
        self.defense = math.floor(self.defense * DEFENSE_GROWTH)
        self.experience_to_next_level = math.floor(self.experience_to_next_level * EXP_CURVE)

    def add_gold(self, amount: int) -> int:
        """Credit gold. Returns the new balance."""
        self.gold += max(0, amount)
        return self.gold

    def attacker_snapshot(self) -> AttackerSnapshot:
        return AttackerSnapshot(
            attack=self.attack,
            weapon_bonus=self.equipped_weapon.damage_bonus,
        )

    def defender_snapshot(self) -> DefenderSnapshot:
        return DefenderSnapshot(defense=self.defense)

    # --- Persistence shape ---

    def to_snapshot(self) -> dict[str, Any]:
        """Serialize to the persisted (camelCase) shape."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> CharacterStats:
        """
        Restore from a persisted snapshot.

        Missing or zero fields fall back to defaults. Max HP is raised to
        at least MIN_LOADED_MAX_HP; when that raises it, the character is
        fully healed.
        """
        stored_max = data.get("maxHP") or 0
        max_hp = max(MIN_LOADED_MAX_HP, stored_max or DEFAULT_MAX_HP)
        current_hp = data.get("currentHP") or max_hp
        if max_hp > stored_max:
            current_hp = max_hp

        weapon_data = data.get("equippedWeapon")
        weapon = EquippedWeapon.model_validate(weapon_data) if weapon_data else EquippedWeapon()

        return cls(
            max_hp=max_hp,
            current_hp=min(current_hp, max_hp),
            attack=data.get("attack") or DEFAULT_ATTACK,
            defense=data.get("defense") or DEFAULT_DEFENSE,
            level=data.get("level") or 1,
            experience=data.get("experience") or 0,
            experience_to_next_level=data.get("experienceToNextLevel") or DEFAULT_EXP_TO_NEXT,
            gold=data.get("gold") or 0,
            equipped_weapon=weapon,
        )
