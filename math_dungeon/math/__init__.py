"""
Math module - problem generation and answer checking.
"""

from math_dungeon.math.problem import Problem, ProblemOption, ProblemType, option_key
from math_dungeon.math.validator import AnswerValidator
from math_dungeon.math.generator import (
    ProblemGenerator,
    UnitId,
    TopicId,
    UNIT_RULES,
    TOPIC_RULES,
)

__all__ = [
    "Problem",
    "ProblemOption",
    "ProblemType",
    "option_key",
    "AnswerValidator",
    "ProblemGenerator",
    "UnitId",
    "TopicId",
    "UNIT_RULES",
    "TOPIC_RULES",
]
