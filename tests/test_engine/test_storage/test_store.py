import pytest
from unittest.mock import patch
from dungeon_engine.storage import JsonFileStore, MemoryStore

def test_memory_store(memory_store):
    assert memory_store.load("hero") is None
    assert memory_store.save("hero", '{"level": 2}')
    assert memory_store.load("hero") == '{"level": 2}'
    assert memory_store.exists("hero")
    assert memory_store.keys() == ["hero"]

    assert memory_store.delete("hero")
    assert not memory_store.delete("hero")
    assert not memory_store.exists("hero")

def test_memory_store_rejects_non_strings(memory_store):
    assert not memory_store.save("hero", {"level": 2})
    assert memory_store.load("hero") is None

def test_file_store_round_trip(tmp_path):
    store = JsonFileStore(tmp_path / "saves")

    assert store.load("math_dungeon_save") is None
    assert store.save("math_dungeon_save", "[1, 2]")
    assert (tmp_path / "saves" / "math_dungeon_save.json").read_text(encoding="utf-8") == "[1, 2]"
    assert store.load("math_dungeon_save") == "[1, 2]"

    assert store.delete("math_dungeon_save")
    assert not store.delete("math_dungeon_save")

def test_file_store_invalid_key(tmp_path):
    store = JsonFileStore(tmp_path)
    assert not store.save("../escape", "x")
    assert store.load("../escape") is None
    assert not store.delete("../escape")

def test_file_store_write_failure_reported(tmp_path):
    store = JsonFileStore(tmp_path)
    with patch("pathlib.Path.write_text", side_effect=OSError("disk full")):
        assert not store.save("hero", "{}")
    assert store.load("hero") is None
