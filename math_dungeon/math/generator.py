"""
Problem generator.

Resolves a curriculum unit name or a topic keyword to a generator rule
and builds the resulting Problem. Unit and topic names are closed enums
with one rule each; anything that doesn't resolve falls through to a
grade-banded default, so generation always yields a problem.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Any, Callable, Optional, Sequence, TypeVar

from math_dungeon.math.problem import (
    MAX_OPTIONS,
    MIN_OPTIONS,
    OPTION_LABELS,
    Answer,
    Problem,
    ProblemOption,
    ProblemType,
    option_key,
)
from math_dungeon.math.rules import BasicRules, ElementaryRules, JuniorRules, SeniorRules, js_round
from math_dungeon.math.validator import AnswerValidator

logger = logging.getLogger(__name__)

# Distractor draws before switching to a deterministic sequence
MAX_DISTRACTOR_ATTEMPTS = 100


class UnitId(str, Enum):
    """Curriculum unit names (lowercase) with a dedicated generator."""

    # Grade 1
    ADD_SUB_TO_20 = "addition & subtraction to 20"
    SHAPES_2D_3D = "2d and 3d shapes"
    MEASUREMENT_BASICS = "measurement basics"
    TIME_CONCEPTS = "time concepts"
    # Grade 2
    ADD_SUB_TO_100 = "addition & subtraction to 100"
    SHAPE_SORTING = "shape sorting"
    MEASURING_LENGTH = "measuring length"
    TIME_DURATION = "time duration"
    DATA_GRAPHING = "data & graphing"
    # Grade 3
    ADD_SUB_TO_1000 = "addition & subtraction to 1000"
    MULTIPLICATION_FACTS = "multiplication facts"
    GEOMETRY_LINES = "geometry lines & shapes"
    METRIC_MEASUREMENT = "metric measurement"
    TELLING_TIME = "telling time"
    # Grade 4
    OPERATIONS_TO_10000 = "operations to 10,000"
    MULT_DIV = "multiplication & division"
    CLASSIFYING_SHAPES = "classifying shapes"
    AREA_OF_RECTANGLES = "area of rectangles"
    DATA_REPRESENTATION = "data representation"
    # Grade 5
    OPERATIONS_TO_MILLION = "operations to 1,000,000"
    MULTI_DIGIT_MULTIPLICATION = "multi-digit multiplication"
    FRACTIONS = "fractions"
    ALGEBRAIC_EXPRESSIONS = "algebraic expressions"
    SYMMETRY = "symmetry & shapes"
    PERIMETER_AREA = "perimeter & area"
    # Grade 6
    FOUR_OPERATIONS = "four operations mastery"
    MULTIPLYING_FRACTIONS = "multiplying fractions"
    AREA_VOLUME = "area & volume"
    ALGEBRAIC_EQUATIONS = "algebraic equations"
    DATA_INTERPRETATION = "data interpretation"
    # Grade 7
    INTEGER_OPERATIONS = "integer operations"
    FRACTION_OPERATIONS = "fraction operations"
    TWO_SIDED_EQUATIONS = "two-sided equations"
    CIRCLES_CYLINDERS = "circles & cylinders"
    FUNCTIONS_INTRO = "functions intro"
    PROBABILITY = "probability"
    # Grade 8
    RATIONAL_NUMBERS = "rational numbers"
    POLYNOMIALS_INTRO = "polynomials intro"
    LINEAR_EQUATIONS = "linear equations"
    SURFACE_AREA = "surface area"
    SLOPE_OF_LINES = "slope of lines"
    DATA_DISTRIBUTIONS = "data distributions"
    # Grade 9
    REAL_NUMBERS = "real numbers"
    POLYNOMIAL_OPERATIONS = "polynomial operations"
    LINEAR_INEQUALITIES = "linear inequalities"
    QUADRATIC_INTRO = "quadratic equations intro"
    FUNCTION_NOTATION = "function notation"
    BOX_PLOTS = "box plots & statistics"
    PROBABILITY_EVENTS = "probability events"
    # Math 10-1
    MEASUREMENT_CONVERSIONS = "measurement & conversions"
    FACTORING_POLYNOMIALS = "factoring polynomials"
    LINEAR_RELATIONS = "linear relations"
    SYSTEMS_OF_EQUATIONS = "systems of equations"
    RIGHT_TRIANGLE_TRIG = "right triangle trigonometry"
    # Math 20-1
    ABSOLUTE_VALUE = "absolute value"
    RADICALS = "radicals"
    RATIONAL_EXPRESSIONS = "rational expressions"
    QUADRATIC_EQUATIONS = "quadratic equations"
    SEQUENCES_SERIES = "sequences & series"
    UNIT_CIRCLE = "trigonometry - unit circle"
    # Math 30-1
    FUNCTION_TRANSFORMATIONS = "function transformations"
    EXPONENTIAL_FUNCTIONS = "exponential functions"
    LOGARITHMIC_FUNCTIONS = "logarithmic functions"
    POLYNOMIAL_FUNCTIONS = "polynomial functions"
    TRIG_EQUATIONS = "trigonometric equations"
    PERMUTATIONS_COMBINATIONS = "permutations & combinations"

    @classmethod
    def lookup(cls, name: str) -> Optional[UnitId]:
        return _lookup(cls, name)


class TopicId(str, Enum):
    """Topic keywords (lowercase) used when no unit matches."""

    # Basic operations
    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    MULTIPLICATION = "multiplication"
    DIVISION = "division"
    TIMES_TABLES = "times tables"
    # Fractions
    FRACTIONS = "fractions"
    ADDING_FRACTIONS = "adding fractions"
    MULTIPLYING_FRACTIONS = "multiplying fractions"
    DIVIDING_FRACTIONS = "dividing fractions"
    # Integers
    INTEGERS = "integers"
    ADDING_INTEGERS = "adding integers"
    NEGATIVE_NUMBERS = "negative numbers"
    # Algebra
    EQUATIONS = "equations"
    SOLVING_EQUATIONS = "solving equations"
    VARIABLES = "variables"
    POLYNOMIALS = "polynomials"
    FACTORING = "factoring"
    FOIL = "foil"
    # Geometry
    AREA = "area"
    PERIMETER = "perimeter"
    VOLUME = "volume"
    CIRCLES = "circles"
    # Linear
    SLOPE = "slope"
    LINEAR_FUNCTIONS = "linear functions"
    SYSTEMS = "systems"
    # Trigonometry
    SINE = "sine"
    COSINE = "cosine"
    TANGENT = "tangent"
    SOH_CAH_TOA = "soh cah toa"
    TRIGONOMETRIC = "trigonometric"
    UNIT_CIRCLE = "unit circle"
    # Advanced
    QUADRATIC = "quadratic"
    QUADRATICS = "quadratics"
    RADICALS = "radicals"
    ABSOLUTE_VALUE = "absolute value"
    # Sequences
    SEQUENCES = "sequences"
    ARITHMETIC_SEQUENCES = "arithmetic sequences"
    GEOMETRIC_SEQUENCES = "geometric sequences"
    SERIES = "series"
    # Exponential & logarithms
    EXPONENTIAL = "exponential"
    LOGARITHMS = "logarithms"
    LOG_LAWS = "log laws"
    # Probability
    PROBABILITY = "probability"
    THEORETICAL_PROBABILITY = "theoretical probability"
    OUTCOMES = "outcomes"
    # Counting
    PERMUTATIONS = "permutations"
    COMBINATIONS = "combinations"
    FACTORIAL = "factorial"
    COUNTING_PRINCIPLES = "counting principles"
    BINOMIAL = "binomial"
    BINOMIAL_THEOREM = "binomial theorem"

    @classmethod
    def lookup(cls, name: str) -> Optional[TopicId]:
        return _lookup(cls, name)


E = TypeVar("E", UnitId, TopicId)


def _lookup(enum_cls: type[E], name: str) -> Optional[E]:
    """Exact match first, then the first member (in order) that contains or is contained by name."""
    key = name.strip().lower()
    exact = enum_cls._value2member_map_.get(key)
    if exact is not None:
        return exact
    for member in enum_cls:
        if member.value in key or key in member.value:
            return member
    return None


Rule = Callable[["ProblemGenerator", int], Problem]


class ProblemGenerator(ElementaryRules, JuniorRules, SeniorRules, BasicRules):
    """
    Builds math problems for a grade and a unit or topic.

    Usage:
        generator = ProblemGenerator(random.Random(7))
        problem = generator.generate_problem_by_unit(3, "Multiplication Facts")
        generator.validate_answer(problem, "42")
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    # --- Resolution ---

    def generate_problem_by_unit(self, grade: int, unit_name: str) -> Problem:
        """Generate for a curriculum unit, falling back to topic search."""
        unit = UnitId.lookup(unit_name)
        if unit is not None:
            logger.debug(
                "Unit %r resolved to %s (%s)",
                unit_name, unit.name, "exact" if unit.value == unit_name.strip().lower() else "partial",
            )
            return UNIT_RULES[unit](self, grade)

        logger.debug("No unit match for %r, trying topics", unit_name)
        return self.generate_problem(grade, unit_name)

    def generate_problem(self, grade: int, topic: str) -> Problem:
        """Generate for a topic keyword, falling back to a grade default."""
        match = TopicId.lookup(topic)
        if match is not None:
            logger.debug("Topic %r resolved to %s", topic, match.name)
            return TOPIC_RULES[match](self, grade)

        logger.debug("No topic match for %r, using grade %s default", topic, grade)
        return self.grade_default(grade)

    def grade_default(self, grade: int) -> Problem:
        if grade >= 20:
            return self.gen_logarithmic_functions(grade)
        if grade >= 10:
            return self.gen_factoring_polynomials(grade)
        if grade >= 7:
            return self.gen_linear_equations(grade)
        if grade >= 4:
            return self.gen_multiplication(grade)
        return self.gen_addition(grade)

    def validate_answer(self, problem: Problem, answer: Any) -> bool:
        return AnswerValidator.validate(problem, answer)

    # --- Construction ---

    def create_problem(
        self,
        question: str,
        answer: Answer,
        topic: str,
        grade: int,
        multiple_choice: bool = False,
        options: Optional[Sequence[Answer]] = None,
    ) -> Problem:
        """
        Build a Problem.

        Args:
            question: Question text
            answer: Canonical answer
            topic: Display topic
            grade: Grade level, used as difficulty
            multiple_choice: Present as labeled options
            options: Candidate values for multiple-choice; distractors are
                generated when fewer than two usable values are given
        """
        difficulty = min(max(grade, 1), 30)
        if not multiple_choice:
            return Problem(question=question, answer=answer, topic=topic, difficulty=difficulty)

        formatted = None
        if options is not None and len(options) >= MIN_OPTIONS:
            formatted = self.format_custom_options(options, answer)
        if formatted is None:
            formatted = self.generate_multiple_choice_options(answer, MAX_OPTIONS)

        return Problem(
            question=question,
            answer=answer,
            topic=topic,
            difficulty=difficulty,
            type=ProblemType.MULTIPLE_CHOICE,
            options=tuple(formatted),
        )

    def format_custom_options(
        self, options: Sequence[Answer], correct: Answer
    ) -> Optional[list[ProblemOption]]:
        """
        Label explicit candidates A-D.

        The correct answer is always kept; duplicates are dropped and up to
        three distractors are picked at random.

        Returns:
            The labeled options, or None if fewer than two distinct values
        """
        seen = {option_key(correct)}
        distractors = []
        for value in options:
            key = option_key(value)
            if key in seen:
                continue
            seen.add(key)
            distractors.append(value)

        self.rng.shuffle(distractors)
        chosen = [correct, *distractors[:MAX_OPTIONS - 1]]
        if len(chosen) < MIN_OPTIONS:
            return None

        self.rng.shuffle(chosen)
        return _label(chosen)

    def generate_multiple_choice_options(
        self, correct: Answer, num_options: int = MAX_OPTIONS
    ) -> list[ProblemOption]:
        """
        Auto-generate distractors around a numeric answer.

        Non-numeric answers get "Option N" placeholders.
        """
        values: list[Answer] = [correct]
        used = {option_key(correct)}
        numeric = isinstance(correct, (int, float)) and not isinstance(correct, bool)
        attempts = 0
        placeholder = 2

        while len(values) < num_options:
            attempts += 1
            if numeric and attempts <= MAX_DISTRACTOR_ATTEMPTS:
                variance = max(3, abs(correct) * 0.3)
                sign = 1 if self.rng.random() > 0.5 else -1
                distractor: Answer = js_round(correct + sign * (self.rng.random() * variance + 1))
                if correct >= 0 and distractor < 0:
                    distractor = abs(distractor)
            elif numeric:
                distractor = js_round(correct) + attempts - MAX_DISTRACTOR_ATTEMPTS
            else:
                distractor = f"Option {placeholder}"
                placeholder += 1

            key = option_key(distractor)
            if key not in used:
                values.append(distractor)
                used.add(key)

        self.rng.shuffle(values)
        return _label(values)


def _label(values: Sequence[Answer]) -> list[ProblemOption]:
    return [ProblemOption(label=OPTION_LABELS[i], value=value) for i, value in enumerate(values)]


UNIT_RULES: dict[UnitId, Rule] = {
    UnitId.ADD_SUB_TO_20: ProblemGenerator.gen_add_sub_to_20,
    UnitId.SHAPES_2D_3D: ProblemGenerator.gen_shapes,
    UnitId.MEASUREMENT_BASICS: ProblemGenerator.gen_measurement_basics,
    UnitId.TIME_CONCEPTS: ProblemGenerator.gen_time_concepts,
    UnitId.ADD_SUB_TO_100: ProblemGenerator.gen_add_sub_to_100,
    UnitId.SHAPE_SORTING: ProblemGenerator.gen_shape_sorting,
    UnitId.MEASURING_LENGTH: ProblemGenerator.gen_measuring_length,
    UnitId.TIME_DURATION: ProblemGenerator.gen_time_duration,
    UnitId.DATA_GRAPHING: ProblemGenerator.gen_data_graphing,
    UnitId.ADD_SUB_TO_1000: ProblemGenerator.gen_add_sub_to_1000,
    UnitId.MULTIPLICATION_FACTS: ProblemGenerator.gen_multiplication_facts,
    UnitId.GEOMETRY_LINES: ProblemGenerator.gen_geometry_lines,
    UnitId.METRIC_MEASUREMENT: ProblemGenerator.gen_metric_measurement,
    UnitId.TELLING_TIME: ProblemGenerator.gen_telling_time,
    UnitId.OPERATIONS_TO_10000: ProblemGenerator.gen_operations_to_10000,
    UnitId.MULT_DIV: ProblemGenerator.gen_mult_div,
    UnitId.CLASSIFYING_SHAPES: ProblemGenerator.gen_classify_shapes,
    UnitId.AREA_OF_RECTANGLES: ProblemGenerator.gen_area_rectangles,
    UnitId.DATA_REPRESENTATION: ProblemGenerator.gen_data_representation,
    UnitId.OPERATIONS_TO_MILLION: ProblemGenerator.gen_operations_million,
    UnitId.MULTI_DIGIT_MULTIPLICATION: ProblemGenerator.gen_multi_digit_mult,
    UnitId.FRACTIONS: ProblemGenerator.gen_fractions,
    UnitId.ALGEBRAIC_EXPRESSIONS: ProblemGenerator.gen_algebraic_expressions,
    UnitId.SYMMETRY: ProblemGenerator.gen_symmetry,
    UnitId.PERIMETER_AREA: ProblemGenerator.gen_perimeter_area,
    UnitId.FOUR_OPERATIONS: ProblemGenerator.gen_four_operations,
    UnitId.MULTIPLYING_FRACTIONS: ProblemGenerator.gen_multiplying_fractions,
    UnitId.AREA_VOLUME: ProblemGenerator.gen_area_volume,
    UnitId.ALGEBRAIC_EQUATIONS: ProblemGenerator.gen_algebraic_equations,
    UnitId.DATA_INTERPRETATION: ProblemGenerator.gen_data_interpretation,
    UnitId.INTEGER_OPERATIONS: ProblemGenerator.gen_integer_operations,
    UnitId.FRACTION_OPERATIONS: ProblemGenerator.gen_fraction_operations,
    UnitId.TWO_SIDED_EQUATIONS: ProblemGenerator.gen_two_sided_equations,
    UnitId.CIRCLES_CYLINDERS: ProblemGenerator.gen_circles_cylinders,
    UnitId.FUNCTIONS_INTRO: ProblemGenerator.gen_functions_intro,
    UnitId.PROBABILITY: ProblemGenerator.gen_probability,
    UnitId.RATIONAL_NUMBERS: ProblemGenerator.gen_rational_numbers,
    UnitId.POLYNOMIALS_INTRO: ProblemGenerator.gen_polynomials_intro,
    UnitId.LINEAR_EQUATIONS: ProblemGenerator.gen_linear_equations,
    UnitId.SURFACE_AREA: ProblemGenerator.gen_surface_area,
    UnitId.SLOPE_OF_LINES: ProblemGenerator.gen_slope_of_lines,
    UnitId.DATA_DISTRIBUTIONS: ProblemGenerator.gen_data_distributions,
    UnitId.REAL_NUMBERS: ProblemGenerator.gen_real_numbers,
    UnitId.POLYNOMIAL_OPERATIONS: ProblemGenerator.gen_polynomial_operations,
    UnitId.LINEAR_INEQUALITIES: ProblemGenerator.gen_linear_inequalities,
    UnitId.QUADRATIC_INTRO: ProblemGenerator.gen_quadratic_intro,
    UnitId.FUNCTION_NOTATION: ProblemGenerator.gen_function_notation,
    UnitId.BOX_PLOTS: ProblemGenerator.gen_box_plots,
    UnitId.PROBABILITY_EVENTS: ProblemGenerator.gen_probability_events,
    UnitId.MEASUREMENT_CONVERSIONS: ProblemGenerator.gen_measurement_conversions,
    UnitId.FACTORING_POLYNOMIALS: ProblemGenerator.gen_factoring_polynomials,
    UnitId.LINEAR_RELATIONS: ProblemGenerator.gen_linear_relations,
    UnitId.SYSTEMS_OF_EQUATIONS: ProblemGenerator.gen_systems_of_equations,
    UnitId.RIGHT_TRIANGLE_TRIG: ProblemGenerator.gen_right_triangle_trig,
    UnitId.ABSOLUTE_VALUE: ProblemGenerator.gen_absolute_value,
    UnitId.RADICALS: ProblemGenerator.gen_radicals,
    UnitId.RATIONAL_EXPRESSIONS: ProblemGenerator.gen_rational_expressions,
    UnitId.QUADRATIC_EQUATIONS: ProblemGenerator.gen_quadratic_equations,
    UnitId.SEQUENCES_SERIES: ProblemGenerator.gen_sequences_series,
    UnitId.UNIT_CIRCLE: ProblemGenerator.gen_unit_circle_trig,
    UnitId.FUNCTION_TRANSFORMATIONS: ProblemGenerator.gen_function_transformations,
    UnitId.EXPONENTIAL_FUNCTIONS: ProblemGenerator.gen_exponential_functions,
    UnitId.LOGARITHMIC_FUNCTIONS: ProblemGenerator.gen_logarithmic_functions,
    UnitId.POLYNOMIAL_FUNCTIONS: ProblemGenerator.gen_polynomial_functions,
    UnitId.TRIG_EQUATIONS: ProblemGenerator.gen_trig_equations,
    UnitId.PERMUTATIONS_COMBINATIONS: ProblemGenerator.gen_permutations_combinations,
}

TOPIC_RULES: dict[TopicId, Rule] = {
    TopicId.ADDITION: ProblemGenerator.gen_addition,
    TopicId.SUBTRACTION: ProblemGenerator.gen_subtraction,
    TopicId.MULTIPLICATION: ProblemGenerator.gen_multiplication,
    TopicId.DIVISION: ProblemGenerator.gen_division,
    TopicId.TIMES_TABLES: ProblemGenerator.gen_multiplication_facts,
    TopicId.FRACTIONS: ProblemGenerator.gen_fractions,
    TopicId.ADDING_FRACTIONS: ProblemGenerator.gen_fractions,
    TopicId.MULTIPLYING_FRACTIONS: ProblemGenerator.gen_multiplying_fractions,
    TopicId.DIVIDING_FRACTIONS: ProblemGenerator.gen_fraction_operations,
    TopicId.INTEGERS: ProblemGenerator.gen_integer_operations,
    TopicId.ADDING_INTEGERS: ProblemGenerator.gen_integer_operations,
    TopicId.NEGATIVE_NUMBERS: ProblemGenerator.gen_integer_operations,
    TopicId.EQUATIONS: ProblemGenerator.gen_linear_equations,
    TopicId.SOLVING_EQUATIONS: ProblemGenerator.gen_linear_equations,
    TopicId.VARIABLES: ProblemGenerator.gen_algebraic_expressions,
    TopicId.POLYNOMIALS: ProblemGenerator.gen_polynomials_intro,
    TopicId.FACTORING: ProblemGenerator.gen_factoring_polynomials,
    TopicId.FOIL: ProblemGenerator.gen_polynomial_operations,
    TopicId.AREA: ProblemGenerator.gen_area_rectangles,
    TopicId.PERIMETER: ProblemGenerator.gen_perimeter_area,
    TopicId.VOLUME: ProblemGenerator.gen_area_volume,
    TopicId.CIRCLES: ProblemGenerator.gen_circles_cylinders,
    TopicId.SLOPE: ProblemGenerator.gen_slope_of_lines,
    TopicId.LINEAR_FUNCTIONS: ProblemGenerator.gen_linear_relations,
    TopicId.SYSTEMS: ProblemGenerator.gen_systems_of_equations,
    TopicId.SINE: ProblemGenerator.gen_right_triangle_trig,
    TopicId.COSINE: ProblemGenerator.gen_right_triangle_trig,
    TopicId.TANGENT: ProblemGenerator.gen_right_triangle_trig,
    TopicId.SOH_CAH_TOA: ProblemGenerator.gen_right_triangle_trig,
    TopicId.TRIGONOMETRIC: ProblemGenerator.gen_trig_equations,
    TopicId.UNIT_CIRCLE: ProblemGenerator.gen_unit_circle_trig,
    TopicId.QUADRATIC: ProblemGenerator.gen_quadratic_equations,
    TopicId.QUADRATICS: ProblemGenerator.gen_quadratic_equations,
    TopicId.RADICALS: ProblemGenerator.gen_radicals,
    TopicId.ABSOLUTE_VALUE: ProblemGenerator.gen_absolute_value,
    TopicId.SEQUENCES: ProblemGenerator.gen_sequences_series,
    TopicId.ARITHMETIC_SEQUENCES: ProblemGenerator.gen_sequences_series,
    TopicId.GEOMETRIC_SEQUENCES: ProblemGenerator.gen_geometric_sequence,
    TopicId.SERIES: ProblemGenerator.gen_sequences_series,
    TopicId.EXPONENTIAL: ProblemGenerator.gen_exponential_functions,
    TopicId.LOGARITHMS: ProblemGenerator.gen_logarithmic_functions,
    TopicId.LOG_LAWS: ProblemGenerator.gen_log_laws,
    TopicId.PROBABILITY: ProblemGenerator.gen_probability,
    TopicId.THEORETICAL_PROBABILITY: ProblemGenerator.gen_probability,
    TopicId.OUTCOMES: ProblemGenerator.gen_probability,
    TopicId.PERMUTATIONS: ProblemGenerator.gen_permutations,
    TopicId.COMBINATIONS: ProblemGenerator.gen_combinations,
    TopicId.FACTORIAL: ProblemGenerator.gen_permutations,
    TopicId.COUNTING_PRINCIPLES: ProblemGenerator.gen_permutations,
    TopicId.BINOMIAL: ProblemGenerator.gen_binomial,
    TopicId.BINOMIAL_THEOREM: ProblemGenerator.gen_binomial,
}


def _check_exhaustive(table: dict, enum_cls: type[Enum]) -> None:
    missing = [member.name for member in enum_cls if member not in table]
    if missing:
        raise RuntimeError(f"{enum_cls.__name__} members without a rule: {missing}")


_check_exhaustive(UNIT_RULES, UnitId)
_check_exhaustive(TOPIC_RULES, TopicId)
