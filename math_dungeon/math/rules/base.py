"""
Shared plumbing for the generator rule sets.
"""

from __future__ import annotations

import math
import random
from typing import Optional, Sequence

from math_dungeon.math.problem import Answer, Problem


def js_round(value: float) -> int:
    """Round half up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def round_to(value: float, places: int) -> float:
    """Round half up to a number of decimal places."""
    scale = 10 ** places
    return js_round(value * scale) / scale


def fmt(value: float) -> str:
    """Format a number for question text (2.0 -> '2', 2.5 -> '2.5')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def signed(value: int) -> str:
    """Inline sign for a trailing term: 3 -> '+3', -3 -> '-3'."""
    return f"+{value}" if value >= 0 else str(value)


class RuleSet:
    """
    Base for the generator mixins.

    Rules draw from self.rng and build their result through
    self.create_problem so option handling stays in one place.
    """

    rng: random.Random

    def create_problem(
        self,
        question: str,
        answer: Answer,
        topic: str,
        grade: int,
        multiple_choice: bool = False,
        options: Optional[Sequence[Answer]] = None,
    ) -> Problem:
        raise NotImplementedError
