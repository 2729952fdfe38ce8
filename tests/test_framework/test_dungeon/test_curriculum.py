import json
import pytest
from math_dungeon.dungeon import CurriculumError, load_curriculum
from math_dungeon.math import UnitId

def write_curriculum(path, grades):
    path.write_text(json.dumps({"grades": grades}), encoding="utf-8")
    return path

def test_packaged_curriculum_loads():
    grades = load_curriculum()

    assert [g.grade for g in grades] == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 20, 30]
    assert grades[9].name == "Math 10-1"
    assert grades[9].min_level == 10
    assert sum(len(g.units) for g in grades) == len(UnitId)

def test_every_packaged_unit_has_a_generator():
    for grade in load_curriculum():
        for unit in grade.units:
            # Exact value match, not the partial fallback
            assert UnitId(unit.name.strip().lower())
            assert 1 <= unit.difficulty <= 5

def test_load_single_file(tmp_path):
    path = write_curriculum(tmp_path / "custom.json", [
        {"grade": 4, "name": "Four", "units": [{"name": "Fractions"}]},
        {"grade": 2, "name": "Two"},
    ])

    grades = load_curriculum(path)

    assert [g.grade for g in grades] == [2, 4]
    assert grades[0].min_level == 1
    assert grades[1].units[0].difficulty is None

def test_invalid_file_raises(tmp_path):
    path = write_curriculum(tmp_path / "bad.json", [{"grade": 0, "name": "Zero"}])

    with pytest.raises(CurriculumError):
        load_curriculum(path)

def test_missing_file_raises(tmp_path):
    with pytest.raises(CurriculumError):
        load_curriculum(tmp_path / "missing.json")

def test_directory_merges_by_grade(tmp_path):
    write_curriculum(tmp_path / "a_base.json", [
        {"grade": 1, "name": "Old One"},
        {"grade": 3, "name": "Three"},
    ])
    write_curriculum(tmp_path / "b_override.json", [{"grade": 1, "name": "New One"}])
    (tmp_path / "c_broken.json").write_text("{", encoding="utf-8")

    grades = load_curriculum(tmp_path)

    assert [(g.grade, g.name) for g in grades] == [(1, "New One"), (3, "Three")]

def test_empty_directory_raises(tmp_path):
    with pytest.raises(CurriculumError):
        load_curriculum(tmp_path)
