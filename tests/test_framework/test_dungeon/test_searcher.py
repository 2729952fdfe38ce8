import pytest
from math_dungeon.components import GradeData, UnitData
from math_dungeon.dungeon import (
    DungeonInfo,
    DungeonSearcher,
    binary_search_grade,
    binary_search_unit,
    linear_search_available_dungeons,
)
from math_dungeon.math import Problem

def problem(question, topic, difficulty):
    return Problem(question=question, answer=1, topic=topic, difficulty=difficulty)

@pytest.fixture
def grades():
    return [
        GradeData(grade=7, name="Grade 7", minLevel=7, units=(
            UnitData(name="Probability"),
            UnitData(name="Integer Operations"),
            UnitData(name="Circles & Cylinders"),
        ), problems=(
            problem("a", "Probability", 4),
            problem("b", "Integers", 6),
            problem("c", "Probability", 9),
        )),
        GradeData(grade=1, name="Grade 1", units=(UnitData(name="Time Concepts"),)),
        GradeData(grade=20, name="Math 20-1", minLevel=12),
    ]

def test_binary_search_grade(grades):
    ordered = sorted(grades, key=lambda g: g.grade)
    assert binary_search_grade(ordered, 20).name == "Math 20-1"
    assert binary_search_grade(ordered, 1).name == "Grade 1"
    assert binary_search_grade(ordered, 5) is None
    assert binary_search_grade([], 1) is None

def test_binary_search_unit():
    units = [UnitData(name=n) for n in ("Area", "Fractions", "Radicals", "Time")]
    assert binary_search_unit(units, "Radicals").name == "Radicals"
    assert binary_search_unit(units, "radicals") is None

def test_find_unit_sorts_by_name(grades):
    searcher = DungeonSearcher(grades)
    assert searcher.find_unit(7, "Circles & Cylinders").name == "Circles & Cylinders"
    assert searcher.find_unit(7, "Probability").name == "Probability"
    assert searcher.find_unit(20, "Probability") is None
    assert searcher.find_unit(8, "Probability") is None

def test_find_problems(grades):
    searcher = DungeonSearcher(grades)

    assert [p.question for p in searcher.find_problems_by_topic(7, "Probability")] == ["a", "c"]
    assert [p.question for p in searcher.find_problems_by_difficulty(7, 6, 9)] == ["b", "c"]
    assert searcher.find_problems_by_topic(8, "Probability") == []
    assert searcher.find_problems_by_difficulty(1, 1, 30) == []

def test_available_dungeons(grades):
    searcher = DungeonSearcher(grades)

    assert [d.grade for d in searcher.get_available_dungeons(7)] == [1, 7]
    assert [d.grade for d in searcher.get_available_dungeons(12)] == [1, 7, 20]

def test_linear_search_available_dungeons():
    dungeons = [DungeonInfo(1, "One", 1), DungeonInfo(2, "Two", 5)]
    assert linear_search_available_dungeons(dungeons, 4) == [dungeons[0]]
