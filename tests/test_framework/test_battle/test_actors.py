import pytest
from math_dungeon.battle import (
    DIFFICULTY_SETTINGS,
    Difficulty,
    Enemy,
    EnemyType,
    Hero,
    enemy_difficulty_for,
    resolve_difficulty,
)

def test_hero_defaults(hero):
    assert hero.name == "Hero"
    assert hero.stats.max_hp == 100
    assert hero.stats.current_hp == 100
    assert hero.stats.attack == 15
    assert hero.stats.defense == 8
    assert hero.is_alive()

@pytest.mark.parametrize("grade, enemy_type", [
    (1, EnemyType.SLIME),
    (3, EnemyType.SLIME),
    (4, EnemyType.GOBLIN),
    (6, EnemyType.GOBLIN),
    (9, EnemyType.SKELETON),
    (10, EnemyType.DRAGON),
    (30, EnemyType.DRAGON),
])
def test_enemy_type_banding(grade, enemy_type):
    assert Enemy.type_for_grade(grade) == enemy_type

def test_enemy_stat_formula():
    enemy = Enemy.create_for_grade(3, 2)
    assert enemy.name == "Slime"
    assert enemy.stats.max_hp == 50 + 30 + 40
    assert enemy.stats.attack == 5 + 3 + 4
    assert enemy.stats.defense == 3 + 3 + 4
    assert enemy.stats.level == 5

def test_enemy_names_clamped():
    assert Enemy.name_for_type(EnemyType.DRAGON, 5) == "Dragon Lord"
    assert Enemy.name_for_type(EnemyType.DRAGON, 9) == "Dragon Lord"
    assert Enemy.name_for_type(EnemyType.GOBLIN, 0) == "Goblin Scout"

def test_enemy_scale_refills():
    enemy = Enemy.create_for_grade(3, 2)
    enemy.scale(1.5, 1.3)
    assert enemy.stats.max_hp == 180
    assert enemy.stats.current_hp == 180
    assert enemy.stats.attack == 15

def test_enemy_dict_round_trip():
    enemy = Enemy.create_for_grade(20, 4)
    enemy.stats.take_damage(10)

    restored = Enemy.from_dict(enemy.to_dict())

    assert restored == enemy
    assert restored.type == EnemyType.DRAGON

def test_enemy_difficulty_for():
    assert enemy_difficulty_for(3, None) == 2
    assert enemy_difficulty_for(1, None) == 1
    assert enemy_difficulty_for(30, None) == 5
    assert enemy_difficulty_for(3, 4) == 4
    assert enemy_difficulty_for(3, 4, bonus=2) == 5

def test_difficulty_table():
    medium = DIFFICULTY_SETTINGS[Difficulty.MEDIUM]
    assert medium.player_damage_multiplier == 1.0
    assert medium.wrong_answer_penalty == 0.5

    nightmare = DIFFICULTY_SETTINGS[Difficulty.NIGHTMARE]
    assert nightmare.boss_health_multiplier == 2.0
    assert nightmare.experience_multiplier == 5.0

def test_resolve_difficulty(caplog):
    assert resolve_difficulty("HARD") is Difficulty.HARD
    assert resolve_difficulty(Difficulty.EASY) is Difficulty.EASY
    assert resolve_difficulty("impossible") is Difficulty.MEDIUM
    assert "Unknown difficulty" in caplog.text
