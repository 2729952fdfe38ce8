"""
Shop module - weapon catalog and purchases.
"""

from math_dungeon.shop.catalog import Weapon, ALL_WEAPONS
from math_dungeon.shop.weapon_shop import WeaponShop, PurchaseResult

__all__ = [
    "Weapon",
    "ALL_WEAPONS",
    "WeaponShop",
    "PurchaseResult",
]
