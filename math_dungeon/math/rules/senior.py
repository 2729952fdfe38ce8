"""
Generator rules for Math 10-1, 20-1 and 30-1.
"""

from __future__ import annotations

import math

from math_dungeon.math.problem import Problem
from math_dungeon.math.rules.base import RuleSet, round_to, signed

# Two-decimal values for the special angles
TRIG_VALUES = {
    ("sin", 30): 0.5, ("sin", 45): 0.71, ("sin", 60): 0.87,
    ("cos", 30): 0.87, ("cos", 45): 0.71, ("cos", 60): 0.5,
    ("tan", 30): 0.58, ("tan", 45): 1, ("tan", 60): 1.73,
}

UNIT_CIRCLE_SIN = {0: 0, 30: 0.5, 45: 0.71, 60: 0.87, 90: 1, 180: 0, 270: -1}


class SeniorRules(RuleSet):
    """High school streams: factoring, trigonometry, functions, counting."""

    # --- Math 10-1 ---

    def gen_measurement_conversions(self, grade: int) -> Problem:
        kind = self.rng.randint(0, 3)

        if kind == 0:
            feet = self.rng.randint(1, 10)
            return self.create_problem(f"{feet} feet = ? inches", feet * 12, "Unit Conversions", grade, True)
        if kind == 1:
            meters = self.rng.randint(1, 5)
            return self.create_problem(
                f"{meters} meters = ? centimeters", meters * 100, "Unit Conversions", grade, True
            )
        if kind == 2:
            km = self.rng.randint(1, 5)
            return self.create_problem(f"{km} kilometers = ? meters", km * 1000, "Unit Conversions", grade, True)

        inches = self.rng.randint(5, 14)
        return self.create_problem(
            f"{inches} inches ≈ ? cm (use 1 inch = 2.54 cm)",
            round_to(inches * 2.54, 1),
            "Unit Conversions",
            grade,
            True,
        )

    def gen_factoring_polynomials(self, grade: int) -> Problem:
        a = self.rng.randint(1, 5)
        b = self.rng.randint(1, 5)
        return self.create_problem(
            f"Factor x² + {a + b}x + {a * b}. The factors are (x+?)(x+?)",
            f"{a}, {b}",
            "Factoring Polynomials",
            grade,
        )

    def gen_linear_relations(self, grade: int) -> Problem:
        m = self.rng.randint(-3, 2)
        b = self.rng.randint(-5, 4)
        return self.create_problem(f"y-intercept of y = {m}x {signed(b)}?", b, "Linear Relations", grade)

    def gen_systems_of_equations(self, grade: int) -> Problem:
        x = self.rng.randint(1, 5)
        y = self.rng.randint(1, 5)
        return self.create_problem(
            f"x + y = {x + y}, x - y = {x - y}. Find x.", x, "Systems of Equations", grade
        )

    def gen_right_triangle_trig(self, grade: int) -> Problem:
        angle = self.rng.choice([30, 45, 60])
        func = self.rng.choice(["sin", "cos", "tan"])
        return self.create_problem(
            f"{func}({angle}°) = ? (2 decimals)", TRIG_VALUES[(func, angle)], "Trigonometry", grade
        )

    # --- Math 20-1 ---

    def gen_absolute_value(self, grade: int) -> Problem:
        a = self.rng.randint(-15, 14)
        return self.create_problem(f"|{a}| = ?", abs(a), "Absolute Value", grade)

    def gen_radicals(self, grade: int) -> Problem:
        perfect = self.rng.choice([4, 9, 16, 25, 36, 49, 64, 81, 100])
        return self.create_problem(f"√{perfect} = ?", math.isqrt(perfect), "Radicals", grade)

    def gen_rational_expressions(self, grade: int) -> Problem:
        a = self.rng.randint(2, 6)
        return self.create_problem(f"Simplify: {a}x/{a} = ?", "x", "Rational Expressions", grade)

    def gen_quadratic_equations(self, grade: int) -> Problem:
        r1 = self.rng.randint(-3, 2)
        r2 = self.rng.randint(-3, 2)
        b = -(r1 + r2)
        c = r1 * r2
        return self.create_problem(
            f"x² {signed(b)}x {signed(c)} = 0. Find one root.", r1, "Quadratic Equations", grade
        )

    def gen_sequences_series(self, grade: int) -> Problem:
        a1 = self.rng.randint(1, 5)
        d = self.rng.randint(1, 4)
        n = self.rng.randint(5, 9)
        return self.create_problem(
            f"Arithmetic: {a1}, {a1 + d}, {a1 + 2 * d}... Term {n}?",
            a1 + (n - 1) * d,
            "Sequences",
            grade,
        )

    def gen_geometric_sequence(self, grade: int) -> Problem:
        a1 = self.rng.randint(1, 3)
        n = self.rng.randint(3, 5)
        return self.create_problem(
            f"Geometric: {a1}, {a1 * 2}, {a1 * 4}... Term {n}?",
            a1 * 2 ** (n - 1),
            "Geometric Sequences",
            grade,
        )

    def gen_unit_circle_trig(self, grade: int) -> Problem:
        angle = self.rng.choice(list(UNIT_CIRCLE_SIN))
        return self.create_problem(f"sin({angle}°) = ?", UNIT_CIRCLE_SIN[angle], "Unit Circle", grade)

    # --- Math 30-1 ---

    def gen_function_transformations(self, grade: int) -> Problem:
        h = self.rng.randint(1, 5)
        k = self.rng.randint(1, 5)
        return self.create_problem(
            f"f(x) = x². Vertex of f(x-{h}) + {k}?", f"({h}, {k})", "Function Transformations", grade
        )

    def gen_exponential_functions(self, grade: int) -> Problem:
        base = self.rng.choice([2, 3, 5])
        exp = self.rng.randint(2, 5)
        return self.create_problem(f"{base}^{exp} = ?", base ** exp, "Exponential Functions", grade)

    def gen_logarithmic_functions(self, grade: int) -> Problem:
        base = self.rng.choice([2, 10])
        exp = self.rng.randint(1, 4)
        value = base ** exp
        question = f"log({value})" if base == 10 else f"log₂({value})"
        return self.create_problem(f"{question} = ?", exp, "Logarithmic Functions", grade)

    def gen_log_laws(self, grade: int) -> Problem:
        a = self.rng.randint(2, 6)
        b = self.rng.randint(2, 6)
        return self.create_problem(f"log({a}) + log({b}) = log(?)", a * b, "Log Laws", grade)

    def gen_polynomial_functions(self, grade: int) -> Problem:
        a = self.rng.randint(1, 3)
        return self.create_problem(f"Degree of x³ + {a}x² - x + 5?", 3, "Polynomial Functions", grade)

    def gen_trig_equations(self, grade: int) -> Problem:
        return self.create_problem(
            "Solve: sin(x) = 0.5 for 0° ≤ x ≤ 90°", 30, "Trigonometric Equations", grade
        )

    def gen_permutations_combinations(self, grade: int) -> Problem:
        if self.rng.random() > 0.5:
            return self.gen_permutations(grade)
        return self.gen_combinations(grade)

    def gen_permutations(self, grade: int) -> Problem:
        n = self.rng.randint(4, 6)
        r = self.rng.randint(2, 3)
        return self.create_problem(
            f"P({n},{r}) = Arrange {r} from {n} items?", math.perm(n, r), "Permutations", grade
        )

    def gen_combinations(self, grade: int) -> Problem:
        n = self.rng.randint(4, 7)
        r = self.rng.randint(2, 3)
        return self.create_problem(
            f"C({n},{r}) = Choose {r} from {n} items?", math.comb(n, r), "Combinations", grade
        )

    def gen_binomial(self, grade: int) -> Problem:
        n = self.rng.randint(3, 5)
        return self.create_problem(
            f"(x+1)^{n}: coefficient of x²?", math.comb(n, 2), "Binomial Theorem", grade
        )
