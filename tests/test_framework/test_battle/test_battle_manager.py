import math
import random
from unittest.mock import MagicMock
import pytest
from dungeon_engine.core.scheduler import Scheduler
from math_dungeon.battle import (
    BattleEvent,
    BattleManager,
    BattleState,
    DIFFICULTY_SETTINGS,
    Difficulty,
    Hero,
    NOT_YOUR_TURN,
)
from math_dungeon.components import UnitData

UNIT = UnitData(name="Multiplication Facts", topics=("multiplication",), difficulty=2)

@pytest.fixture
def battle(hero, scheduler):
    return BattleManager(hero, 3, UNIT, Difficulty.MEDIUM, rng=random.Random(7), scheduler=scheduler)

def answer_correctly(battle):
    return battle.submit_answer(battle.current_problem.answer)

def test_start_battle(battle):
    battle.start_battle()

    assert battle.state == BattleState.PLAYER_TURN
    assert battle.state.value == "player-turn"
    assert battle.enemy.name == "Slime"
    assert battle.enemy.stats.max_hp == 120
    emoji = DIFFICULTY_SETTINGS[Difficulty.MEDIUM].emoji
    assert battle.get_battle_log() == [f"{emoji} MEDIUM Mode - Slime appeared!"]
    assert battle.current_problem is not None
    assert battle.turn_count == 1

def test_answer_before_start_is_rejected(battle):
    result = battle.submit_answer("12")

    assert not result.success
    assert result.message == NOT_YOUR_TURN
    assert battle.state == BattleState.WAITING

def test_correct_hit(battle):
    battle.start_battle()
    result = answer_correctly(battle)

    # 15 attack + 0..4 variance - floor(10 * 0.5)
    assert result.success and result.correct
    assert 10 <= result.damage <= 14
    assert result.enemy_hp == 120 - result.damage
    assert result.enemy_max_hp == 120
    assert battle.state == BattleState.ENEMY_TURN
    assert len(battle.scheduler.pending) == 1

def test_wrong_hit_is_reduced(battle):
    battle.start_battle()
    result = battle.submit_answer("not a number")

    assert result.success
    assert not result.correct
    # floor(15 * 0.5) + 0..4 - 5, then halved again
    assert 1 <= result.damage <= 3
    assert result.message.startswith("✗ Wrong!")

def test_second_answer_in_enemy_turn_is_rejected(battle):
    battle.start_battle()
    answer_correctly(battle)
    hp = battle.enemy.stats.current_hp

    result = answer_correctly(battle)

    assert not result.success
    assert result.message == NOT_YOUR_TURN
    assert battle.enemy.stats.current_hp == hp

def test_enemy_turn_runs_after_delay(battle, hero):
    battle.start_battle()
    answer_correctly(battle)
    first_problem = battle.current_problem

    assert battle.scheduler.update(0.5) == 0
    assert hero.stats.current_hp == 100

    assert battle.scheduler.update(0.5) == 1
    # 12 attack + 0..4 variance - floor(8 * 0.5)
    assert 8 <= 100 - hero.stats.current_hp <= 12
    assert battle.state == BattleState.PLAYER_TURN
    assert battle.turn_count == 3
    assert battle.current_problem is not first_problem

def test_enemy_turn_outside_enemy_state(battle):
    assert battle.enemy_turn() is None
    battle.start_battle()
    assert battle.enemy_turn() is None

def test_dispose_cancels_pending_enemy_turn(battle, hero):
    battle.start_battle()
    answer_correctly(battle)

    battle.dispose()
    battle.scheduler.update(5.0)

    assert hero.stats.current_hp == 100
    assert battle.is_disposed
    assert battle.enemy_turn() is None
    assert battle.submit_answer("1").message == NOT_YOUR_TURN

def test_victory_end_to_end():
    hero = Hero.create(max_hp=1000)
    scheduler = Scheduler()
    audio = MagicMock()
    save_manager = MagicMock()
    progress = MagicMock()
    battle = BattleManager(
        hero, 3, UNIT, "medium",
        rng=random.Random(11), scheduler=scheduler, audio=audio,
        save_manager=save_manager, progress=progress,
    )
    battle.start_battle()

    result = None
    for _ in range(50):
        result = answer_correctly(battle)
        if battle.is_battle_over():
            break
        scheduler.update(1.0)

    assert battle.state == BattleState.VICTORY
    assert result.victory
    assert result.enemy_hp == 0
    # Enemy level = grade 3 + difficulty 2
    assert result.exp_gained == math.floor(5 * 10 * 1.2)
    assert result.gold_gained == math.floor(5 * 15 * 1.2)
    assert hero.stats.gold == result.gold_gained
    assert not result.leveled_up

    audio.play_victory_sound.assert_called_once()
    save_manager.save_hero.assert_called_once_with(hero.stats)
    progress.record_battle.assert_called_once_with(True)
    progress.complete_unit.assert_called_once_with(3, "Multiplication Facts")
    assert progress.complete_problem.call_count >= 1

def test_terminal_state_ignores_calls():
    hero = Hero.create(attack=1000)
    battle = BattleManager(hero, 3, UNIT, rng=random.Random(1))
    battle.start_battle()
    answer_correctly(battle)
    assert battle.state == BattleState.VICTORY
    log = battle.get_battle_log()
    gold = hero.stats.gold

    assert not answer_correctly(battle).success
    assert battle.enemy_turn() is None
    assert battle.state == BattleState.VICTORY
    assert battle.get_battle_log() == log
    assert hero.stats.gold == gold

def test_defeat():
    hero = Hero.create(max_hp=1)
    audio = MagicMock()
    progress = MagicMock()
    battle = BattleManager(hero, 3, UNIT, rng=random.Random(3), audio=audio, progress=progress)
    battle.start_battle()
    answer_correctly(battle)

    battle.scheduler.update(1.0)

    assert battle.state == BattleState.DEFEAT
    assert not hero.is_alive()
    audio.play_defeat_sound.assert_called_once()
    progress.record_battle.assert_called_once_with(False)

    hp = hero.stats.current_hp
    log_len = len(battle.get_battle_log())
    result = answer_correctly(battle)

    assert not result.success
    assert result.message == NOT_YOUR_TURN
    assert hero.stats.current_hp == hp
    assert len(battle.get_battle_log()) == log_len
    assert battle.enemy_turn() is None
    assert hero.stats.current_hp == hp
    assert len(battle.get_battle_log()) == log_len
    assert battle.state == BattleState.DEFEAT

def test_level_up_on_nightmare(event_bus):
    hero = Hero.create(max_hp=5000, attack=1000)
    audio = MagicMock()
    seen = []
    event_bus.subscribe(BattleEvent.LEVEL_UP, lambda e: seen.append(e["level"]))
    battle = BattleManager(
        hero, 3, UNIT, Difficulty.NIGHTMARE,
        rng=random.Random(5), audio=audio, events=event_bus,
    )
    battle.start_battle()

    # Level bonus 2 on top of unit difficulty 2
    assert battle.enemy.name == "Elite Slime"
    assert battle.enemy.stats.max_hp == 320
    assert battle.get_battle_log()[0] == "💀 NIGHTMARE Mode - Elite Slime appeared!"

    result = answer_correctly(battle)

    assert result.victory
    assert result.exp_gained == 350
    assert result.leveled_up
    assert hero.stats.level == 3
    assert seen == [3]
    audio.play_level_up_sound.assert_called_once()

def test_easy_mode_scales_enemy(hero):
    battle = BattleManager(hero, 3, UNIT, "easy", rng=random.Random(2))
    battle.start_battle()

    assert battle.enemy.stats.max_hp == 72
    assert battle.enemy.stats.current_hp == 72
    assert battle.enemy.stats.attack == 6
    assert battle.get_battle_log()[0].startswith("🌱 EASY Mode")

def test_battle_without_unit_poses_addition(hero):
    battle = BattleManager(hero, 2, rng=random.Random(4))
    battle.start_battle()

    assert battle.current_problem.topic == "Addition"
    assert battle.enemy.name == "Slime"

def test_events_published(event_bus, hero):
    received = []
    for event_type in BattleEvent:
        event_bus.subscribe(event_type, lambda e: received.append(e.type))
    battle = BattleManager(hero, 3, UNIT, rng=random.Random(9), events=event_bus)

    battle.start_battle()
    answer_correctly(battle)
    battle.scheduler.update(1.0)

    assert received == [
        BattleEvent.BATTLE_STARTED,
        BattleEvent.PROBLEM_CREATED,
        BattleEvent.ANSWER_SUBMITTED,
        BattleEvent.ENEMY_ATTACKED,
        BattleEvent.PROBLEM_CREATED,
    ]

def test_stats_queries(battle):
    assert battle.get_enemy_stats() is None
    battle.start_battle()

    assert battle.get_hero_stats() == {
        "currentHP": 100, "maxHP": 100, "level": 1, "attack": 15, "defense": 8,
    }
    assert battle.get_enemy_stats()["name"] == "Slime"
