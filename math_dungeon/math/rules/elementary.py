"""
Generator rules for grades 1-4.
"""

from __future__ import annotations

from math_dungeon.math.problem import Problem
from math_dungeon.math.rules.base import RuleSet


class ElementaryRules(RuleSet):
    """Counting, place value, basic shapes, time and simple data."""

    # --- Grade 1 ---

    def gen_add_sub_to_20(self, grade: int) -> Problem:
        kind = self.rng.randint(1, 4)

        if kind == 1:
            a = self.rng.randint(1, 10)
            b = self.rng.randint(1, 10)
            return self.create_problem(f"{a} + {b} = ?", a + b, "Addition", grade, True)

        if kind == 2:
            a = self.rng.randint(5, 14)
            b = self.rng.randint(1, 5)
            return self.create_problem(f"{a} - {b} = ?", a - b, "Subtraction", grade, True)

        if kind == 3:
            total = self.rng.randint(5, 14)
            part = self.rng.randint(1, 5)
            return self.create_problem(
                f"{part} + ? = {total}", total - part, "Missing Number", grade, True
            )

        apples = self.rng.randint(3, 7)
        more = self.rng.randint(1, 4)
        question = (
            f"You have {apples} apples. You get {more} more. "
            "How many apples do you have?"
        )
        return self.create_problem(question, apples + more, "Word Problem", grade, True)

    def gen_shapes(self, grade: int) -> Problem:
        kind = self.rng.randint(1, 3)

        if kind == 1:
            sides = {"square": 4, "rectangle": 4, "triangle": 3}
            shape = self.rng.choice(list(sides))
            return self.create_problem(
                f"How many sides does a {shape} have?", sides[shape], "Shapes", grade, True
            )

        if kind == 2:
            corners = {"triangle": 3, "square": 4, "circle": 0}
            shape = self.rng.choice(list(corners))
            return self.create_problem(
                f"How many corners does a {shape} have?", corners[shape], "Corners", grade, True
            )

        return self.create_problem("Which shape is round?", "circle", "Shape ID", grade)

    def gen_measurement_basics(self, grade: int) -> Problem:
        if self.rng.randint(0, 1) == 0:
            short = self.rng.randint(2, 11)
            long = self.rng.randint(15, 24)
            return self.create_problem(
                f"Which is longer: {short}cm or {long}cm?", long, "Measuring", grade, True
            )

        hands = self.rng.randint(3, 7)
        return self.create_problem(
            f"The table is {hands} hands long. If you use smaller hands, "
            "will the number be bigger or smaller?",
            "bigger",
            "Measuring",
            grade,
        )

    def gen_time_concepts(self, grade: int) -> Problem:
        kind = self.rng.randint(0, 2)
        if kind == 0:
            return self.create_problem("How many months are in one year?", 12, "Calendar", grade, True)
        if kind == 1:
            return self.create_problem("How many days are in a week?", 7, "Calendar", grade, True)
        return self.create_problem("Which takes longer?", "sleeping at night", "Time", grade)

    # --- Grade 2 ---

    def gen_add_sub_to_100(self, grade: int) -> Problem:
        if self.rng.random() > 0.5:
            a = self.rng.randint(10, 59)
            b = self.rng.randint(10, 10 + (50 - a % 50) - 1)
            return self.create_problem(f"{a} + {b} = ?", a + b, "Addition to 100", grade, True)

        a = self.rng.randint(50, 99)
        b = self.rng.randint(5, 44)
        return self.create_problem(f"{a} - {b} = ?", a - b, "Subtraction to 100", grade, True)

    def gen_shape_sorting(self, grade: int) -> Problem:
        names = {3: "triangle", 4: "quadrilateral", 5: "pentagon", 6: "hexagon"}
        sides = self.rng.randint(3, 6)
        correct = names[sides]
        distractors = [name for name in names.values() if name != correct]
        return self.create_problem(
            f"A shape with {sides} sides is called a...?",
            correct,
            "Shape Sorting",
            grade,
            True,
            [correct, *distractors],
        )

    def gen_measuring_length(self, grade: int) -> Problem:
        cm = self.rng.randint(10, 59)
        return self.create_problem(
            f"A pencil is {cm} cm long. How many centimeters is that?",
            cm,
            "Measuring Length",
            grade,
            True,
            [cm, cm + 10, cm // 2, cm - 5],
        )

    def gen_time_duration(self, grade: int) -> Problem:
        weeks = self.rng.randint(1, 4)
        days = weeks * 7
        return self.create_problem(
            f"How many days are in {weeks} week(s)?",
            days,
            "Time Duration",
            grade,
            True,
            [days, days + 2, days - 1, weeks * 5],
        )

    def gen_data_graphing(self, grade: int) -> Problem:
        apples = self.rng.randint(2, 11)
        oranges = self.rng.randint(2, 11)
        return self.create_problem(
            f"A pictograph shows {apples} apples and {oranges} oranges. How many fruits in total?",
            apples + oranges,
            "Data & Graphing",
            grade,
            True,
        )

    # --- Grade 3 ---

    def gen_add_sub_to_1000(self, grade: int) -> Problem:
        a = self.rng.randint(200, 699)
        b = self.rng.randint(100, 399)
        return self.create_problem(f"{a} + {b} = ?", a + b, "Addition to 1000", grade)

    def gen_multiplication_facts(self, grade: int) -> Problem:
        a = self.rng.randint(1, 10)
        b = self.rng.randint(1, 10)
        return self.create_problem(
            f"{a} × {b} = ?", a * b, "Multiplication Facts", grade, grade <= 4
        )

    def gen_geometry_lines(self, grade: int) -> Problem:
        kind = self.rng.randint(0, 2)

        if kind == 0:
            return self.create_problem(
                "Lines that NEVER meet (even if extended forever) are called...?",
                "parallel",
                "Geometry Lines",
                grade,
                True,
                ["parallel", "perpendicular", "intersecting", "diagonal"],
            )
        if kind == 1:
            return self.create_problem(
                "Lines that meet at exactly 90° (a right angle) are called...?",
                "perpendicular",
                "Geometry Lines",
                grade,
                True,
                ["perpendicular", "parallel", "slanted", "curved"],
            )
        return self.create_problem(
            "Two lines that cross each other are called...?",
            "intersecting",
            "Geometry Lines",
            grade,
            True,
            ["intersecting", "parallel", "perpendicular", "adjacent"],
        )

    def gen_metric_measurement(self, grade: int) -> Problem:
        meters = self.rng.randint(1, 10)
        return self.create_problem(
            f"How many centimeters are in {meters} meter(s)?",
            meters * 100,
            "Metric Measurement",
            grade,
        )

    def gen_telling_time(self, grade: int) -> Problem:
        hours = self.rng.randint(1, 11)
        minutes = self.rng.choice([0, 15, 30, 45])
        return self.create_problem(
            f"What time is it when the hour hand is on {hours} and minute hand on {minutes // 5}?",
            f"{hours}:{minutes:02d}",
            "Telling Time",
            grade,
        )

    # --- Grade 4 ---

    def gen_operations_to_10000(self, grade: int) -> Problem:
        a = self.rng.randint(1000, 5999)
        b = self.rng.randint(500, 3499)
        return self.create_problem(f"{a} + {b} = ?", a + b, "Operations to 10,000", grade)

    def gen_mult_div(self, grade: int) -> Problem:
        a = self.rng.randint(10, 99)
        b = self.rng.randint(2, 10)
        return self.create_problem(f"{a} × {b} = ?", a * b, "Multiplication & Division", grade)

    def gen_classify_shapes(self, grade: int) -> Problem:
        kind = self.rng.randint(0, 2)

        if kind == 0:
            angle = self.rng.choice([30, 45, 60, 85, 90, 100, 120, 150])
            if angle < 90:
                correct = "acute"
            elif angle == 90:
                correct = "right"
            else:
                correct = "obtuse"
            return self.create_problem(
                f"An angle measuring {angle}° is classified as...?",
                correct,
                "Classifying Angles",
                grade,
                True,
                ["acute", "right", "obtuse", "straight"],
            )

        if kind == 1:
            name, desc = self.rng.choice([
                ("equilateral", "all 3 sides are EQUAL"),
                ("isosceles", "exactly 2 sides are EQUAL"),
                ("scalene", "NO sides are equal"),
            ])
            return self.create_problem(
                f"A triangle where {desc} is called...?",
                name,
                "Classifying Triangles",
                grade,
                True,
                ["equilateral", "isosceles", "scalene", "right"],
            )

        name, desc = self.rng.choice([
            ("square", "4 equal sides AND 4 right angles"),
            ("rectangle", "opposite sides equal AND 4 right angles"),
            ("rhombus", "4 equal sides but angles are NOT 90°"),
            ("trapezoid", "exactly ONE pair of parallel sides"),
        ])
        return self.create_problem(
            f"A quadrilateral with {desc} is called...?",
            name,
            "Classifying Quadrilaterals",
            grade,
            True,
            ["square", "rectangle", "rhombus", "trapezoid"],
        )

    def gen_area_rectangles(self, grade: int) -> Problem:
        length = self.rng.randint(2, 13)
        width = self.rng.randint(2, 9)
        return self.create_problem(
            f"Area of rectangle: length={length}, width={width}",
            length * width,
            "Area of Rectangles",
            grade,
        )

    def gen_data_representation(self, grade: int) -> Problem:
        values = [self.rng.randint(5, 24) for _ in range(3)]
        return self.create_problem(
            f"Bar graph shows: {values[0]}, {values[1]}, {values[2]}. Total?",
            sum(values),
            "Data Representation",
            grade,
        )
