"""
Progress tracking - grades, units and problems completed, plus totals.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

PersistCallback = Callable[[dict[str, Any]], None]


def _empty_stats() -> dict[str, Any]:
    return {
        "totalProblemsSolved": 0,
        "correctAnswers": 0,
        "incorrectAnswers": 0,
        "totalBattlesWon": 0,
        "totalBattlesLost": 0,
        "totalTimePlayed": 0,
        "accuracy": 0,
    }


class ProgressTracker:
    """
    Tracks player progress through the curriculum.

    Every mutation hands the serialized state to the persist callback,
    so the owner (normally the SaveManager) decides where it goes.

    Usage:
        progress = ProgressTracker(persist=save_manager.save_progress)
        progress.complete_problem(3, problem.id, correct=True)
        progress.get_grade_completion(3, total_units=5)
    """

    def __init__(self, persist: Optional[PersistCallback] = None):
        self._persist = persist

        self.completed_grades: set[int] = set()
        self.completed_units: dict[int, set[str]] = {}
        self.completed_problems: dict[int, set[str]] = {}
        self.stats: dict[str, Any] = _empty_stats()

    def set_persist(self, persist: Optional[PersistCallback]) -> None:
        self._persist = persist

    # --- Mutations ---

    def complete_grade(self, grade: int) -> None:
        self.completed_grades.add(grade)
        self.save()

    def complete_unit(self, grade: int, unit_name: str) -> None:
        self.completed_units.setdefault(grade, set()).add(unit_name)
        logger.debug("Unit completed: grade %s, %s", grade, unit_name)
        self.save()

    def complete_problem(self, grade: int, problem_id: str, correct: bool) -> None:
        """Record one answered problem and update accuracy."""
        self.completed_problems.setdefault(grade, set()).add(problem_id)

        self.stats["totalProblemsSolved"] += 1
        if correct:
            self.stats["correctAnswers"] += 1
        else:
            self.stats["incorrectAnswers"] += 1
        self.stats["accuracy"] = self.stats["correctAnswers"] / self.stats["totalProblemsSolved"]
        self.save()

    def record_battle(self, won: bool) -> None:
        if won:
            self.stats["totalBattlesWon"] += 1
        else:
            self.stats["totalBattlesLost"] += 1
        self.save()

    def add_time_played(self, seconds: float) -> None:
        """Accumulate play time. Not persisted until the next mutation."""
        self.stats["totalTimePlayed"] += seconds

    def reset(self) -> None:
        """Forget all progress."""
        self.completed_grades.clear()
        self.completed_units.clear()
        self.completed_problems.clear()
        self.stats = _empty_stats()
        self.save()

    # --- Queries ---

    def is_grade_completed(self, grade: int) -> bool:
        return grade in self.completed_grades

    def is_unit_completed(self, grade: int, unit_name: str) -> bool:
        return unit_name in self.completed_units.get(grade, ())

    def get_grade_completion(self, grade: int, total_units: int) -> float:
        """
        Completion of a grade as a percentage (0-100).

        Args:
            grade: Grade number
            total_units: Number of units the grade has
        """
        if total_units == 0:
            return 0
        completed = len(self.completed_units.get(grade, ()))
        return completed / total_units * 100

    def get_overall_progress(self) -> dict[str, Any]:
        return {
            "completedGrades": len(self.completed_grades),
            "totalProblemsSolved": self.stats["totalProblemsSolved"],
            "accuracy": self.stats["accuracy"],
            "battlesWon": self.stats["totalBattlesWon"],
            "battlesLost": self.stats["totalBattlesLost"],
        }

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted shape (grade keys become strings)."""
        return {
            "completedGrades": sorted(self.completed_grades),
            "completedUnits": {
                str(grade): sorted(units) for grade, units in self.completed_units.items()
            },
            "completedProblems": {
                str(grade): sorted(ids) for grade, ids in self.completed_problems.items()
            },
            "stats": dict(self.stats),
        }

    def load_dict(self, data: dict[str, Any]) -> None:
        """Replace state with persisted data. Missing sections are left as they are."""
        if data.get("completedGrades"):
            self.completed_grades = {int(g) for g in data["completedGrades"]}
        if data.get("completedUnits"):
            self.completed_units = {
                int(grade): set(units) for grade, units in data["completedUnits"].items()
            }
        if data.get("completedProblems"):
            self.completed_problems = {
                int(grade): set(ids) for grade, ids in data["completedProblems"].items()
            }
        if data.get("stats"):
            self.stats = {**self.stats, **data["stats"]}

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        persist: Optional[PersistCallback] = None,
    ) -> ProgressTracker:
        tracker = cls(persist=persist)
        tracker.load_dict(data)
        return tracker

    def save(self) -> None:
        if self._persist is not None:
            self._persist(self.to_dict())
