"""
Problem generator rule sets, grouped by grade band.
"""

from math_dungeon.math.rules.base import RuleSet, js_round, round_to
from math_dungeon.math.rules.elementary import ElementaryRules
from math_dungeon.math.rules.junior import JuniorRules
from math_dungeon.math.rules.senior import SeniorRules
from math_dungeon.math.rules.basic import BasicRules

__all__ = [
    "RuleSet",
    "ElementaryRules",
    "JuniorRules",
    "SeniorRules",
    "BasicRules",
    "js_round",
    "round_to",
]
