import json
import pytest
from dungeon_engine.core.config import GameConfig

def test_defaults():
    config = GameConfig()
    assert config.enemy_turn_delay == 1.0
    assert config.difficulty == "medium"
    assert config.curriculum_path is None
    assert (config.hero_max_hp, config.hero_attack, config.hero_defense) == (100, 15, 8)

def test_from_dict_round_trip():
    config = GameConfig.from_dict({"enemy_turn_delay": 0.25, "difficulty": "hard"})
    assert config.enemy_turn_delay == 0.25
    assert GameConfig.from_dict(config.to_dict()).to_dict() == config.to_dict()

def test_unknown_keys_rejected():
    with pytest.raises(ValueError, match="turn_speed"):
        GameConfig.from_dict({"turn_speed": 2})

def test_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"save_path": "elsewhere", "hero_attack": 20}))

    config = GameConfig.from_file(path)

    assert config.save_path == "elsewhere"
    assert config.hero_attack == 20
