"""
Problem value objects.

A Problem is immutable once generated. Multiple-choice problems carry
2-4 labeled options containing the answer exactly once.
"""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Optional, Union

from pydantic import Field, computed_field, model_validator

from dungeon_engine.core.component import FrozenComponent

Answer = Union[int, float, str]

OPTION_LABELS = "ABCD"
MIN_OPTIONS = 2
MAX_OPTIONS = 4


class ProblemType(str, Enum):
    """How the player answers a problem."""
    MULTIPLE_CHOICE = "multiple-choice"
    FILL_IN_BLANK = "fill-in-blank"


def option_key(value: Answer) -> tuple[str, Union[float, str]]:
    """
    Type-aware identity for an option value.

    Numbers compare by value (12 == 12.0), text case-insensitively.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return ("number", float(value))
    return ("text", str(value).strip().lower())


class ProblemOption(FrozenComponent):
    """One labeled multiple-choice option."""
    label: str
    value: Answer


class Problem(FrozenComponent):
    """
    A generated math problem.

    Attributes:
        question: Text shown to the player
        answer: Canonical answer
        topic: Display topic
        difficulty: Grade-scaled difficulty (1-30)
        type: Presentation type
        options: Labeled options, only for multiple-choice
    """
    question: str
    answer: Answer
    topic: str
    difficulty: int = Field(ge=1, le=30)
    type: ProblemType = ProblemType.FILL_IN_BLANK
    options: Optional[tuple[ProblemOption, ...]] = None

    @computed_field
    @property
    def id(self) -> str:
        """Stable id derived from topic and question text."""
        digest = hashlib.sha1(f"{self.topic}|{self.question}".encode("utf-8"))
        return digest.hexdigest()[:12]

    @property
    def is_multiple_choice(self) -> bool:
        return self.type == ProblemType.MULTIPLE_CHOICE

    @model_validator(mode="after")
    def _check_options(self) -> Problem:
        if not self.is_multiple_choice:
            if self.options is not None:
                raise ValueError("fill-in-blank problems take no options")
            return self

        if self.options is None or not MIN_OPTIONS <= len(self.options) <= MAX_OPTIONS:
            raise ValueError(
                f"multiple-choice problems need {MIN_OPTIONS}-{MAX_OPTIONS} options"
            )

        keys = [option_key(opt.value) for opt in self.options]
        if len(set(keys)) != len(keys):
            raise ValueError("multiple-choice options must be distinct")
        if keys.count(option_key(self.answer)) != 1:
            raise ValueError("multiple-choice options must contain the answer exactly once")
        return self

    def option_values(self) -> list[Answer]:
        return [opt.value for opt in self.options or ()]
