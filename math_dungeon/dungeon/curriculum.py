"""
Curriculum loading.

The packaged curriculum lives in math_dungeon/data/curriculum and is
validated against data/schemas/curriculum.schema.json before it is
turned into GradeData records.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from dungeon_engine.resources import Database, DataError
from math_dungeon.components import GradeData

logger = logging.getLogger(__name__)

DATA_PATH = Path(__file__).resolve().parent.parent / "data"
CURRICULUM_DOCUMENT = "curriculum/alberta_curriculum.json"
CURRICULUM_SCHEMA = "curriculum.schema.json"


class CurriculumError(DataError):
    """The curriculum data is missing or invalid."""


def _parse_grades(data: dict[str, Any], source: Any) -> list[GradeData]:
    try:
        return [GradeData.model_validate(grade) for grade in data.get("grades", [])]
    except ValidationError as e:
        raise CurriculumError(f"Invalid curriculum in {source}: {e}") from e


def load_curriculum(path: Optional[str | Path] = None) -> list[GradeData]:
    """
    Load the curriculum, sorted by grade.

    Args:
        path: A curriculum JSON file, or a directory of them whose grades are
            merged (later files win). Defaults to the packaged curriculum.

    Raises:
        CurriculumError: If the data cannot be loaded or is invalid
    """
    database = Database(DATA_PATH)

    if path is not None and Path(path).is_dir():
        grades: dict[int, GradeData] = {}
        for name, document in database.load_category(Path(path).resolve(), CURRICULUM_SCHEMA).items():
            for grade in _parse_grades(document, name):
                grades[grade.grade] = grade
        if not grades:
            raise CurriculumError(f"No curriculum documents in {path}")
        result = list(grades.values())
    else:
        try:
            if path is None:
                document = database.load_document(CURRICULUM_DOCUMENT, CURRICULUM_SCHEMA)
            else:
                document = database.load_file(path, CURRICULUM_SCHEMA)
        except DataError as e:
            raise CurriculumError(str(e)) from e
        result = _parse_grades(document, path or CURRICULUM_DOCUMENT)

    result.sort(key=lambda g: g.grade)
    logger.info(
        "Loaded curriculum: %s grades, %s units",
        len(result), sum(len(g.units) for g in result),
    )
    return result
