import pytest
import json
from dungeon_engine.resources.database import Database, DataError

@pytest.fixture
def mock_db_path(tmp_path):
    # Setup mock directory structure in tmp_path
    schemas = tmp_path / "schemas"
    schemas.mkdir()
    (tmp_path / "units").mkdir()

    unit_schema = {
        "type": "object",
        "required": ["name", "difficulty"],
        "properties": {
            "name": {"type": "string"},
            "difficulty": {"type": "integer"}
        }
    }
    with open(schemas / "unit.schema.json", "w") as f:
        json.dump(unit_schema, f)

    return tmp_path

def test_load_document(mock_db_path):
    with open(mock_db_path / "units" / "fractions.json", "w") as f:
        json.dump({"name": "Fractions", "difficulty": 3}, f)

    db = Database(mock_db_path)
    data = db.load_document("units/fractions.json", "unit.schema.json")

    assert data["difficulty"] == 3

def test_validation_error(mock_db_path):
    with open(mock_db_path / "units" / "broken.json", "w") as f:
        json.dump({"name": "Broken"}, f)

    db = Database(mock_db_path)
    with pytest.raises(DataError, match="Validation error"):
        db.load_document("units/broken.json", "unit.schema.json")

def test_missing_schema(mock_db_path):
    with open(mock_db_path / "units" / "fractions.json", "w") as f:
        json.dump({"name": "Fractions", "difficulty": 3}, f)

    (mock_db_path / "schemas" / "unit.schema.json").unlink()

    db = Database(mock_db_path)
    with pytest.raises(DataError, match="No schema"):
        db.load_document("units/fractions.json", "unit.schema.json")

def test_malformed_json(mock_db_path):
    (mock_db_path / "units" / "bad.json").write_text("{not json", encoding="utf-8")

    db = Database(mock_db_path)
    with pytest.raises(DataError, match="Failed to load"):
        db.load_document("units/bad.json", "unit.schema.json")

def test_load_category_skips_invalid_files(mock_db_path):
    with open(mock_db_path / "units" / "fractions.json", "w") as f:
        json.dump({"name": "Fractions", "difficulty": 3}, f)
    with open(mock_db_path / "units" / "broken.json", "w") as f:
        json.dump({"name": "Broken"}, f)

    db = Database(mock_db_path)
    loaded = db.load_category("units", "unit.schema.json")

    assert list(loaded) == ["fractions"]

def test_load_category_missing_directory(mock_db_path):
    db = Database(mock_db_path)
    assert db.load_category("nowhere", "unit.schema.json") == {}
