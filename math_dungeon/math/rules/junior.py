"""
Generator rules for grades 5-9.
"""

from __future__ import annotations

import math

from math_dungeon.math.problem import Problem
from math_dungeon.math.rules.base import RuleSet, fmt, round_to, signed


class JuniorRules(RuleSet):
    """Large numbers, fractions, early algebra, geometry and statistics."""

    # --- Grade 5 ---

    def gen_operations_million(self, grade: int) -> Problem:
        a = self.rng.randint(10000, 59999)
        b = self.rng.randint(5000, 34999)
        return self.create_problem(
            f"{a:,} + {b:,} = ?", a + b, "Large Number Operations", grade
        )

    def gen_multi_digit_mult(self, grade: int) -> Problem:
        a = self.rng.randint(10, 99)
        b = self.rng.randint(10, 99)
        return self.create_problem(f"{a} × {b} = ?", a * b, "Multi-digit Multiplication", grade)

    def gen_fractions(self, grade: int) -> Problem:
        denom = self.rng.choice([2, 3, 4, 5, 6])
        n1 = self.rng.randint(1, denom - 1)
        n2 = self.rng.randint(1, denom - n1)
        return self.create_problem(
            f"{n1}/{denom} + {n2}/{denom} = ?", f"{n1 + n2}/{denom}", "Fractions", grade
        )

    def gen_algebraic_expressions(self, grade: int) -> Problem:
        a = self.rng.randint(2, 6)
        x = self.rng.randint(1, 10)
        return self.create_problem(
            f"If x = {x}, what is {a}x?", a * x, "Algebraic Expressions", grade
        )

    def gen_symmetry(self, grade: int) -> Problem:
        name, lines = self.rng.choice([
            ("square", 4),
            ("rectangle", 2),
            ("equilateral triangle", 3),
            ("isosceles triangle", 1),
            ("regular hexagon", 6),
            ("regular pentagon", 5),
        ])
        candidates = [n for n in (lines, lines + 1, lines - 1, lines + 2) if n >= 0]
        return self.create_problem(
            f"How many lines of symmetry does a {name} have?",
            lines,
            "Symmetry",
            grade,
            True,
            candidates,
        )

    def gen_perimeter_area(self, grade: int) -> Problem:
        length = self.rng.randint(3, 12)
        width = self.rng.randint(2, 9)
        return self.create_problem(
            f"Perimeter of rectangle: length={length}, width={width}",
            2 * (length + width),
            "Perimeter & Area",
            grade,
        )

    # --- Grade 6 ---

    def gen_four_operations(self, grade: int) -> Problem:
        kind = self.rng.randint(0, 2)

        if kind == 0:
            a = self.rng.randint(2, 11)
            b = self.rng.randint(2, 7)
            c = self.rng.randint(2, 7)
            return self.create_problem(f"{a} + {b} × {c} = ?", a + b * c, "BEDMAS", grade, True)

        if kind == 1:
            a = self.rng.randint(2, 6)
            b = self.rng.randint(2, 6)
            c = self.rng.randint(2, 5)
            return self.create_problem(f"({a} + {b}) × {c} = ?", (a + b) * c, "BEDMAS", grade, True)

        a = self.rng.randint(20, 49)
        divisor = self.rng.randint(2, 5)
        dividend = divisor * self.rng.randint(2, 6)
        return self.create_problem(
            f"{a} - {dividend} ÷ {divisor} = ?", a - dividend // divisor, "BEDMAS", grade, True
        )

    def gen_multiplying_fractions(self, grade: int) -> Problem:
        n = self.rng.randint(1, 5)
        d = self.rng.randint(2, 5)
        w = self.rng.randint(2, 6)
        return self.create_problem(
            f"{n}/{d} × {w} = ?", f"{n * w}/{d}", "Multiplying Fractions", grade
        )

    def gen_area_volume(self, grade: int) -> Problem:
        length = self.rng.randint(2, 7)
        width = self.rng.randint(2, 6)
        height = self.rng.randint(2, 5)
        return self.create_problem(
            f"Volume: length={length}, width={width}, height={height}",
            length * width * height,
            "Volume",
            grade,
        )

    def gen_algebraic_equations(self, grade: int) -> Problem:
        x = self.rng.randint(1, 10)
        a = self.rng.randint(2, 6)
        return self.create_problem(f"Solve: {a}x = {a * x}", x, "Algebraic Equations", grade)

    def gen_data_interpretation(self, grade: int) -> Problem:
        return self.create_problem(
            "Mean of: 10, 15, 20, 25, 30 = ?", 20, "Mean (Average)", grade
        )

    # --- Grade 7 ---

    def gen_integer_operations(self, grade: int) -> Problem:
        a = self.rng.randint(-10, 9)
        b = self.rng.randint(-10, 9)
        op = self.rng.choice(["+", "-", "×"])
        if op == "+":
            answer = a + b
        elif op == "-":
            answer = a - b
        else:
            answer = a * b
        return self.create_problem(f"({a}) {op} ({b}) = ?", answer, "Integer Operations", grade)

    def gen_fraction_operations(self, grade: int) -> Problem:
        n1 = self.rng.randint(1, 3)
        n2 = self.rng.randint(1, 3)
        return self.create_problem(
            f"{n1}/2 × {n2}/3 = ?", f"{n1 * n2}/6", "Fraction Operations", grade
        )

    def gen_two_sided_equations(self, grade: int) -> Problem:
        x = self.rng.randint(1, 10)
        a = self.rng.randint(2, 4)
        b = self.rng.randint(1, 10)
        return self.create_problem(
            f"Solve: {a}x + {b} = {a * x + b}", x, "Two-sided Equations", grade
        )

    def gen_circles_cylinders(self, grade: int) -> Problem:
        r = self.rng.randint(2, 6)
        return self.create_problem(
            f"Circumference of circle with radius {r}? (Use π=3.14, round to 1 decimal)",
            round_to(2 * 3.14 * r, 1),
            "Circles",
            grade,
        )

    def gen_functions_intro(self, grade: int) -> Problem:
        x = self.rng.randint(1, 5)
        m = self.rng.randint(2, 4)
        b = self.rng.randint(0, 4)
        return self.create_problem(f"If f(x) = {m}x + {b}, find f({x})", m * x + b, "Functions", grade)

    def gen_probability(self, grade: int) -> Problem:
        total = self.rng.randint(4, 11)
        favorable = self.rng.randint(1, total - 1)
        return self.create_problem(
            f"P(red) if {favorable} red out of {total} total? Answer as fraction.",
            f"{favorable}/{total}",
            "Probability",
            grade,
        )

    # --- Grade 8 ---

    def gen_rational_numbers(self, grade: int) -> Problem:
        a = self.rng.randint(1, 10) / 2
        b = self.rng.randint(1, 10) / 2
        return self.create_problem(f"{fmt(a)} + {fmt(b)} = ?", a + b, "Rational Numbers", grade)

    def gen_polynomials_intro(self, grade: int) -> Problem:
        a = self.rng.randint(1, 5)
        b = self.rng.randint(1, 5)
        return self.create_problem(f"Simplify: {a}x + {b}x = ?", f"{a + b}x", "Polynomials", grade)

    def gen_linear_equations(self, grade: int) -> Problem:
        x = self.rng.randint(-5, 4)
        a = self.rng.randint(2, 6)
        b = self.rng.randint(-5, 4)
        return self.create_problem(f"Solve: {a}x + {b} = {a * x + b}", x, "Linear Equations", grade)

    def gen_surface_area(self, grade: int) -> Problem:
        length = self.rng.randint(2, 6)
        width = self.rng.randint(2, 5)
        height = self.rng.randint(2, 4)
        area = 2 * (length * width + width * height + length * height)
        return self.create_problem(
            f"Surface area of box: {length}×{width}×{height}", area, "Surface Area", grade
        )

    def gen_slope_of_lines(self, grade: int) -> Problem:
        m = self.rng.randint(-5, 4)
        b = self.rng.randint(-5, 4)
        return self.create_problem(f"Slope of y = {m}x {signed(b)}?", m, "Slope", grade)

    def gen_data_distributions(self, grade: int) -> Problem:
        kind = self.rng.randint(0, 2)

        if kind == 0:
            return self.create_problem(
                "In a histogram, the HEIGHT of each bar represents...?",
                "frequency",
                "Histograms",
                grade,
                True,
                ["frequency", "mean", "range", "mode"],
            )
        if kind == 1:
            return self.create_problem(
                "Which graph is best for showing continuous data (like heights)?",
                "histogram",
                "Data Representation",
                grade,
                True,
                ["histogram", "pie chart", "pictograph", "bar graph"],
            )
        return self.create_problem(
            "The SHAPE of a distribution can be described as...?",
            "skewed or symmetric",
            "Distribution Shape",
            grade,
            True,
            ["skewed or symmetric", "tall or short", "wide or narrow", "positive or negative"],
        )

    # --- Grade 9 ---

    def gen_real_numbers(self, grade: int) -> Problem:
        kind = self.rng.randint(0, 2)

        if kind == 0:
            num = self.rng.choice([4, 9, 16, 25, 36, 49, 64, 81, 100])
            return self.create_problem(
                f"Is √{num} a rational or irrational number?",
                "rational",
                "Real Numbers",
                grade,
                True,
                ["rational", "irrational", "integer", "whole number"],
            )
        if kind == 1:
            num = self.rng.choice([2, 3, 5, 7, 10, 11, 13, 17, 19, 23])
            return self.create_problem(
                f"Is √{num} a rational or irrational number?",
                "irrational",
                "Real Numbers",
                grade,
                True,
                ["irrational", "rational", "integer", "natural number"],
            )

        num = self.rng.randint(30, 49)
        lower = math.isqrt(num)
        upper = lower + 1
        correct = f"{lower} and {upper}"
        return self.create_problem(
            f"√{num} is between which two consecutive integers?",
            correct,
            "Estimating Roots",
            grade,
            True,
            [correct, f"{lower - 1} and {lower}", f"{upper} and {upper + 1}", f"{lower} and {upper + 1}"],
        )

    def gen_polynomial_operations(self, grade: int) -> Problem:
        a = self.rng.randint(1, 4)
        b = self.rng.randint(1, 4)
        return self.create_problem(
            f"Expand: (x+{a})(x+{b}). Coefficient of x?",
            a + b,
            "Polynomial Operations (FOIL)",
            grade,
        )

    def gen_linear_inequalities(self, grade: int) -> Problem:
        a = self.rng.randint(2, 5)
        b = self.rng.randint(5, 24)
        largest = b // a - (1 if b % a == 0 else 0)
        return self.create_problem(
            f"Largest integer x where {a}x < {b}?", largest, "Linear Inequalities", grade
        )

    def gen_quadratic_intro(self, grade: int) -> Problem:
        r = self.rng.randint(1, 6)
        return self.create_problem(
            f"Solve: x² - {r * 2}x + {r * r} = 0", r, "Quadratic Equations Intro", grade
        )

    def gen_function_notation(self, grade: int) -> Problem:
        m = self.rng.randint(2, 5)
        b = self.rng.randint(0, 4)
        x = self.rng.randint(1, 5)
        return self.create_problem(
            f"f(x) = {m}x + {b}. Find f({x}).", m * x + b, "Function Notation", grade
        )

    def gen_box_plots(self, grade: int) -> Problem:
        question, correct, options = self.rng.choice([
            (
                "In a box plot, the LINE inside the box represents...?",
                "median",
                ["median", "mean", "mode", "range"],
            ),
            (
                "The LEFT edge of the box in a box plot represents...?",
                "Q1 (first quartile)",
                ["Q1 (first quartile)", "minimum", "median", "Q3 (third quartile)"],
            ),
            (
                "The WHISKERS on a box plot extend to...?",
                "minimum and maximum",
                ["minimum and maximum", "Q1 and Q3", "mean and median", "outliers only"],
            ),
            (
                "The Interquartile Range (IQR) is calculated as...?",
                "Q3 - Q1",
                ["Q3 - Q1", "Max - Min", "Mean - Median", "Q2 - Q1"],
            ),
        ])
        return self.create_problem(question, correct, "Box Plots", grade, True, options)

    def gen_probability_events(self, grade: int) -> Problem:
        p1 = self.rng.randint(1, 4) / 10
        p2 = self.rng.randint(1, 4) / 10

        if self.rng.randint(0, 1) == 0:
            return self.create_problem(
                f"P(A) = {fmt(p1)}, P(B) = {fmt(p2)}. "
                "If A and B are MUTUALLY EXCLUSIVE, P(A or B) = ?",
                round_to(p1 + p2, 1),
                "Probability Events",
                grade,
                True,
            )
        return self.create_problem(
            "Two events that CANNOT happen at the same time are called...?",
            "mutually exclusive",
            "Probability Events",
            grade,
            True,
            ["mutually exclusive", "independent", "dependent", "complementary"],
        )
