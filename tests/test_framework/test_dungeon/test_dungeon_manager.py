import random
import pytest
from math_dungeon.battle import BattleManager, BattleState, Hero
from math_dungeon.components import GradeData, UnitData
from math_dungeon.dungeon import DungeonManager, UnitManager

GRADE_3 = GradeData(grade=3, name="Grade 3", minLevel=3, units=(
    UnitData(name="Multiplication Facts", description="Times tables", topics=("multiplication",), difficulty=2),
    UnitData(name="Telling Time"),
))
GRADE_10 = GradeData(grade=10, name="Math 10-1", minLevel=10)

@pytest.fixture
def dungeons():
    return DungeonManager([GRADE_10, GRADE_3])

def test_unit_manager_cursor():
    units = UnitManager(GRADE_3)

    assert units.current_unit.name == "Multiplication Facts"
    assert not units.previous_unit()
    assert units.next_unit()
    assert units.current_unit.name == "Telling Time"
    assert not units.next_unit()
    assert units.get_unit(0).name == "Multiplication Facts"
    assert units.get_unit(2) is None
    assert len(units.get_all_units()) == 2

def test_unit_manager_without_units():
    assert UnitManager(GRADE_10).current_unit is None

def test_load_dungeon(dungeons):
    assert dungeons.current_unit is None
    assert dungeons.load_dungeon(3)
    assert dungeons.current_grade is GRADE_3
    assert dungeons.current_unit.name == "Multiplication Facts"

def test_load_unknown_dungeon(dungeons, caplog):
    assert not dungeons.load_dungeon(11)
    assert dungeons.current_grade is None
    assert "Grade 11 not found" in caplog.text

def test_available_grades(dungeons):
    assert dungeons.get_available_grades() == [
        {"grade": 3, "gradeName": "Grade 3", "minLevel": 3, "unitCount": 2},
        {"grade": 10, "gradeName": "Math 10-1", "minLevel": 10, "unitCount": 0},
    ]
    assert [d.grade for d in dungeons.get_available_dungeons(9)] == [3]

def test_units_for_grade(dungeons):
    units = dungeons.get_units_for_grade(3)

    assert units[0] == {
        "name": "Multiplication Facts",
        "description": "Times tables",
        "topics": ["multiplication"],
        "difficulty": 2,
        "grade": 3,
    }
    # Missing description and difficulty get defaults
    assert units[1]["description"] == "Telling Time"
    assert units[1]["difficulty"] == 1
    assert dungeons.get_units_for_grade(4) == []

def test_problem_search_needs_a_dungeon(dungeons):
    assert dungeons.find_problems_by_topic("Addition") == []
    assert dungeons.find_problems_by_difficulty(1, 30) == []

def test_create_battle(dungeons, hero):
    assert dungeons.create_battle(hero) is None

    dungeons.load_dungeon(3)
    battle = dungeons.create_battle(hero, "hard", rng=random.Random(8))

    assert isinstance(battle, BattleManager)
    assert battle.state == BattleState.WAITING
    assert battle.unit.name == "Multiplication Facts"
    battle.start_battle()
    # Unit difficulty 2 plus the hard level bonus
    assert battle.enemy.difficulty == 3

def test_packaged_curriculum_is_default():
    dungeons = DungeonManager()
    assert dungeons.load_dungeon(30)
    assert dungeons.current_grade.name == "Math 30-1"
