import random
import pytest
from math_dungeon.battle import calculate_damage, critical_hit, enemy_attack_damage
from math_dungeon.components import AttackerSnapshot, DefenderSnapshot

def test_correct_answer_damage(fixed_rng):
    # base 15 + variance floor(0.99*5)=4 - floor(8*0.5)=4
    damage = calculate_damage(AttackerSnapshot(15), DefenderSnapshot(8), True, fixed_rng(0.99))
    assert damage == 15

def test_wrong_answer_halves_base(fixed_rng):
    damage = calculate_damage(AttackerSnapshot(15), DefenderSnapshot(8), False, fixed_rng(0.0))
    # floor(15*0.5)=7 + 0 - 4
    assert damage == 3

def test_weapon_bonus_adds_to_base(fixed_rng):
    damage = calculate_damage(AttackerSnapshot(15, weapon_bonus=30), DefenderSnapshot(8), True, fixed_rng(0.0))
    assert damage == 41

def test_damage_floor_is_one():
    rng = random.Random(3)
    for attack in range(0, 20):
        for defense in range(0, 200, 7):
            for correct in (True, False):
                damage = calculate_damage(AttackerSnapshot(attack), DefenderSnapshot(defense), correct, rng)
                assert damage >= 1

def test_enemy_damage_fairness_cap():
    for base in range(1, 500, 13):
        for level in range(1, 30):
            for max_hp in (5, 100, 400, 1337):
                damage = enemy_attack_damage(base, level, max_hp)
                assert 1 <= damage
                assert damage <= max(1, int(max_hp * 0.20))

def test_enemy_damage_level_bonus():
    # +5% per level above 1
    assert enemy_attack_damage(20, 1, 1000) == 20
    assert enemy_attack_damage(20, 11, 1000) == 30

def test_enemy_damage_capped_at_twenty_percent():
    assert enemy_attack_damage(90, 1, 100) == 20

def test_critical_hit(fixed_rng):
    assert critical_hit(10, fixed_rng(0.1)) == 15
    assert critical_hit(10, fixed_rng(0.15)) == 10
