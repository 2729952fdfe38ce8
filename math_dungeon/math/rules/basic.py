"""
Grade-scaled arithmetic used when nothing more specific matches.
"""

from __future__ import annotations

from math_dungeon.math.problem import Problem
from math_dungeon.math.rules.base import RuleSet


def _operand_limit(grade: int) -> int:
    if grade <= 2:
        return 20
    if grade <= 4:
        return 100
    return 1000


class BasicRules(RuleSet):
    """The four operations, sized by grade."""

    def gen_addition(self, grade: int) -> Problem:
        limit = _operand_limit(grade)
        a = self.rng.randint(1, limit)
        b = self.rng.randint(1, max(1, limit - a))
        return self.create_problem(f"{a} + {b} = ?", a + b, "Addition", grade, grade <= 3)

    def gen_subtraction(self, grade: int) -> Problem:
        limit = _operand_limit(grade)
        half = limit // 2
        a = self.rng.randint(half, half + limit - 1)
        b = self.rng.randint(1, half)
        return self.create_problem(f"{a} - {b} = ?", a - b, "Subtraction", grade, grade <= 3)

    def gen_multiplication(self, grade: int) -> Problem:
        limit = 10 if grade <= 4 else 12
        a = self.rng.randint(1, limit)
        b = self.rng.randint(1, limit)
        return self.create_problem(f"{a} × {b} = ?", a * b, "Multiplication", grade, grade <= 4)

    def gen_division(self, grade: int) -> Problem:
        divisor = self.rng.randint(1, 12)
        quotient = self.rng.randint(1, 12)
        return self.create_problem(
            f"{divisor * quotient} ÷ {divisor} = ?", quotient, "Division", grade, grade <= 4
        )
