"""
Answer validation.

Pure functions: every input resolves to a boolean, malformed answers
are simply wrong.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from math_dungeon.math.problem import Problem, ProblemType

TOLERANCE = 0.01


def _parse_float(text: str) -> Optional[float]:
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class AnswerValidator:
    """Compares a submitted answer to a problem's canonical answer."""

    @classmethod
    def validate(cls, problem: Problem, user_answer: Any) -> bool:
        """
        Check a player's answer.

        Multiple-choice answers are the clicked option's value, so both
        problem types go through the same comparison.
        """
        if user_answer is None or user_answer == "":
            return False
        return cls.compare_answers(problem.answer, user_answer)

    @classmethod
    def compare_answers(cls, correct: Any, user: Any) -> bool:
        """Compare numerically within tolerance, else as trimmed lowercase text."""
        correct_num = cls.parse_to_number(correct)
        user_num = cls.parse_to_number(user)

        if correct_num is not None and user_num is not None:
            return abs(user_num - correct_num) < TOLERANCE

        try:
            correct_str = str(correct).strip().lower()
            user_str = str(user).strip().lower()
        except ValueError:
            # Integer past the interpreter's str() digit limit
            return False

        if "/" in correct_str or "/" in user_str:
            return cls.compare_fractions(correct_str, user_str)

        return correct_str == user_str

    @staticmethod
    def parse_to_number(value: Any) -> Optional[float]:
        """
        Parse a number or numeric string ("3", "-2.5", "3/4").

        Returns:
            The value, or None if it isn't a finite number
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            try:
                number = float(value)
            except OverflowError:
                return None
            return number if math.isfinite(number) else None
        if not isinstance(value, str):
            return None

        if "/" in value:
            parts = value.split("/")
            if len(parts) != 2:
                return None
            num = _parse_float(parts[0])
            denom = _parse_float(parts[1])
            if num is None or denom is None or denom == 0:
                return None
            return num / denom

        return _parse_float(value)

    @classmethod
    def compare_fractions(cls, a: str, b: str) -> bool:
        a_num = cls.parse_to_number(a)
        b_num = cls.parse_to_number(b)
        if a_num is not None and b_num is not None:
            return abs(a_num - b_num) < TOLERANCE
        return a == b

    @staticmethod
    def is_valid_format(answer: Any, problem_type: ProblemType | str) -> bool:
        """
        Pre-check raw input before submission.

        Multiple-choice accepts anything non-empty; fill-in-blank wants a
        number or an a/b fraction with numeric parts.
        """
        if answer is None or answer == "":
            return False

        if problem_type != ProblemType.FILL_IN_BLANK:
            return True

        text = str(answer).strip()
        if "/" in text:
            parts = text.split("/")
            return (
                len(parts) == 2
                and _parse_float(parts[0]) is not None
                and _parse_float(parts[1]) is not None
            )
        return _parse_float(text) is not None
