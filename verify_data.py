import sys
import logging
from pathlib import Path

from math_dungeon.dungeon import CurriculumError, load_curriculum
from math_dungeon.math import ProblemGenerator, UnitId


def main():
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger("DataVerification")

    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None

    try:
        logger.info("Loading curriculum...")
        grades = load_curriculum(path)
    except CurriculumError as e:
        logger.error(f"VERIFICATION FAILED: {e}")
        sys.exit(1)

    generator = ProblemGenerator()
    failures = []

    for grade in grades:
        if not grade.units:
            failures.append(f"{grade.name} has no units")
        for unit in grade.units:
            # Every unit must name its generator exactly, not by partial match
            unit_id = UnitId.lookup(unit.name)
            if unit_id is None or unit_id.value != unit.name.strip().lower():
                failures.append(f"{grade.name}: unit {unit.name!r} has no exact generator")
                continue
            problem = generator.generate_problem_by_unit(grade.grade, unit.name)
            if not problem.question:
                failures.append(f"{grade.name}: unit {unit.name!r} produced an empty question")

    for failure in failures:
        logger.error(failure)

    if failures:
        logger.error(f"VERIFICATION FAILED: {len(failures)} problem(s)")
        sys.exit(1)

    unit_count = sum(len(g.units) for g in grades)
    logger.info(f"VERIFICATION SUCCESSFUL: {len(grades)} grades, {unit_count} units validated.")


if __name__ == "__main__":
    main()
