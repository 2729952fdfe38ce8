"""
Battle system - one turn-based encounter between the hero and a monster.

The player attacks by answering math problems; a non-lethal hit
schedules the monster's counter-attack on the injected scheduler.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Optional

from dungeon_engine.audio import AudioPort, SilentAudio
from dungeon_engine.core.config import GameConfig
from dungeon_engine.core.events import EventBus
from dungeon_engine.core.scheduler import ScheduledTask, Scheduler
from math_dungeon.battle.actions import calculate_damage, enemy_attack_damage
from math_dungeon.battle.actor import Enemy, Hero, enemy_difficulty_for
from math_dungeon.battle.difficulty import (
    DIFFICULTY_SETTINGS,
    Difficulty,
    DifficultySettings,
    resolve_difficulty,
)
from math_dungeon.battle.turns import TurnOwner, TurnSystem
from math_dungeon.components import UnitData
from math_dungeon.math import Problem, ProblemGenerator

if TYPE_CHECKING:
    from math_dungeon.progression.progress import ProgressTracker
    from math_dungeon.save.manager import SaveManager

logger = logging.getLogger(__name__)

NOT_YOUR_TURN = "Not your turn!"

EXP_PER_ENEMY_LEVEL = 10
GOLD_PER_ENEMY_LEVEL = 15


class BattleState(str, Enum):
    """State of the battle."""
    WAITING = "waiting"
    PLAYER_TURN = "player-turn"
    ENEMY_TURN = "enemy-turn"
    VICTORY = "victory"
    DEFEAT = "defeat"


class BattleEvent(Enum):
    """Events published while a battle runs."""
    BATTLE_STARTED = auto()
    PROBLEM_CREATED = auto()
    ANSWER_SUBMITTED = auto()
    ENEMY_ATTACKED = auto()
    LEVEL_UP = auto()
    VICTORY = auto()
    DEFEAT = auto()


@dataclass
class AnswerResult:
    """Outcome of one submitted answer."""
    success: bool
    message: str
    correct: bool = False
    damage: int = 0
    enemy_hp: int = 0
    enemy_max_hp: int = 0
    victory: bool = False
    exp_gained: int = 0
    gold_gained: int = 0
    leveled_up: bool = False


class BattleManager:
    """
    Turn-based battle controller.

    States: waiting -> player-turn <-> enemy-turn, ending in victory
    (after a player hit) or defeat (after an enemy hit). Calls made in
    the wrong state change nothing.

    Usage:
        battle = BattleManager(hero, grade=3, unit=unit, rng=random.Random(1))
        battle.start_battle()
        result = battle.submit_answer("12")
        battle.scheduler.update(1.0)  # enemy counter-attacks
    """

    def __init__(
        self,
        hero: Hero,
        grade: int,
        unit: Optional[UnitData] = None,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
        *,
        rng: Optional[random.Random] = None,
        scheduler: Optional[Scheduler] = None,
        audio: Optional[AudioPort] = None,
        events: Optional[EventBus] = None,
        save_manager: Optional[SaveManager] = None,
        progress: Optional[ProgressTracker] = None,
        config: Optional[GameConfig] = None,
    ):
        self.hero = hero
        self.grade = grade
        self.unit = unit
        self.difficulty = resolve_difficulty(difficulty)
        self.settings: DifficultySettings = DIFFICULTY_SETTINGS[self.difficulty]

        self.rng = rng or random.Random()
        self.scheduler = scheduler or Scheduler()
        self.audio = audio or SilentAudio()
        self.events = events
        self.save_manager = save_manager
        self.progress = progress
        self.config = config or GameConfig()

        self.enemy: Optional[Enemy] = None
        self.turn_system = TurnSystem()
        self.problem_generator = ProblemGenerator(self.rng)
        self.current_problem: Optional[Problem] = None
        self.state = BattleState.WAITING
        self.battle_log: list[str] = []

        self._pending_enemy_turn: Optional[ScheduledTask] = None
        self._disposed = False

    # --- Flow ---

    def start_battle(self) -> None:
        """Create the monster, reset turns and pose the first problem."""
        if self._disposed:
            logger.warning("start_battle called on a disposed battle")
            return
        self._cancel_pending()

        level = enemy_difficulty_for(
            self.grade,
            self.unit.difficulty if self.unit else None,
            self.settings.enemy_level_bonus,
        )
        self.enemy = Enemy.create_for_grade(self.grade, level)
        self.enemy.scale(self.settings.boss_health_multiplier, self.settings.boss_attack_multiplier)

        self.turn_system.reset()
        self.turn_system.start_turn(TurnOwner.PLAYER)
        self.state = BattleState.PLAYER_TURN

        opening = (
            f"{self.settings.emoji} {self.difficulty.value.upper()} Mode - "
            f"{self.enemy.name} appeared!"
        )
        self.battle_log = [opening]
        logger.info(
            "Battle started: grade %s, %s, %s (HP %s, ATK %s, DEF %s)",
            self.grade, self.difficulty.value, self.enemy.name,
            self.enemy.stats.max_hp, self.enemy.stats.attack, self.enemy.stats.defense,
        )
        self._publish(BattleEvent.BATTLE_STARTED, enemy=self.enemy.name, message=opening)

        self.create_new_problem()

    def create_new_problem(self) -> Problem:
        """Pose a problem for the current unit, or simple addition without one."""
        if self.unit is not None and self.grade:
            problem = self.problem_generator.generate_problem_by_unit(self.grade, self.unit.name or "")
        else:
            problem = self.problem_generator.generate_problem(self.grade or 1, "addition")

        self.current_problem = problem
        self.turn_system.set_waiting_for_answer(True)
        self._publish(BattleEvent.PROBLEM_CREATED, problem=problem)
        return problem

    def submit_answer(self, answer: Any) -> AnswerResult:
        """
        Resolve the player's attack.

        Returns:
            The result; success is False when it isn't the player's turn
        """
        if self._disposed or self.state != BattleState.PLAYER_TURN:
            return AnswerResult(success=False, message=NOT_YOUR_TURN)

        if self.current_problem is None:
            self.create_new_problem()

        problem = self.current_problem
        correct = self.problem_generator.validate_answer(problem, answer)
        enemy = self.enemy

        damage = calculate_damage(
            self.hero.stats.attacker_snapshot(),
            enemy.stats.defender_snapshot(),
            correct,
            self.rng,
        )
        damage = math.floor(damage * self.settings.player_damage_multiplier)
        if not correct:
            damage = math.floor(damage * self.settings.wrong_answer_penalty)

        hp_before = enemy.stats.current_hp
        damage = enemy.stats.take_damage(damage)
        logger.debug("Player hit %s for %s (HP %s -> %s)", enemy.name, damage, hp_before, enemy.stats.current_hp)

        if correct:
            message = f"✓ Correct! You dealt {damage} damage to {enemy.name}!"
        else:
            message = f"✗ Wrong! You dealt {damage} damage (reduced)."
        self.battle_log.append(message)
        self.audio.play_attack_sound()

        if self.progress is not None:
            self.progress.complete_problem(self.grade, problem.id, correct)

        result = AnswerResult(
            success=True,
            message=message,
            correct=correct,
            damage=damage,
            enemy_hp=enemy.stats.current_hp,
            enemy_max_hp=enemy.stats.max_hp,
        )
        self._publish(BattleEvent.ANSWER_SUBMITTED, result=result)

        if not enemy.is_alive():
            self._win(result)
        else:
            self.turn_system.start_turn(TurnOwner.ENEMY)
            self.state = BattleState.ENEMY_TURN
            self._pending_enemy_turn = self.scheduler.call_later(
                self.config.enemy_turn_delay, self.enemy_turn
            )

        return result

    def enemy_turn(self) -> Optional[int]:
        """
        Resolve the monster's counter-attack.

        Returns:
            Damage dealt to the hero, or None if it wasn't the enemy's turn
        """
        if self._disposed or self.state != BattleState.ENEMY_TURN:
            return None
        self._cancel_pending()

        base = calculate_damage(
            self.enemy.stats.attacker_snapshot(),
            self.hero.stats.defender_snapshot(),
            True,
            self.rng,
        )
        damage = enemy_attack_damage(base, self.hero.stats.level, self.hero.stats.max_hp)
        hp_before = self.hero.stats.current_hp
        damage = self.hero.stats.take_damage(damage)
        logger.debug("%s hit hero for %s (HP %s -> %s)", self.enemy.name, damage, hp_before, self.hero.stats.current_hp)

        message = f"{self.enemy.name} attacks! {damage} damage!"
        self.battle_log.append(message)
        self._publish(BattleEvent.ENEMY_ATTACKED, damage=damage, message=message)

        if not self.hero.is_alive():
            self._lose()
        else:
            self.turn_system.start_turn(TurnOwner.PLAYER)
            self.state = BattleState.PLAYER_TURN
            self.create_new_problem()

        return damage

    def dispose(self) -> None:
        """Cancel the pending counter-attack and ignore all later calls."""
        self._cancel_pending()
        self._disposed = True

    # --- Outcomes ---

    def _win(self, result: AnswerResult) -> None:
        self.state = BattleState.VICTORY
        stats = self.hero.stats
        enemy_level = self.enemy.stats.level
        multiplier = self.settings.experience_multiplier

        exp = math.floor(enemy_level * EXP_PER_ENEMY_LEVEL * multiplier)
        gold = math.floor(enemy_level * GOLD_PER_ENEMY_LEVEL * multiplier)
        leveled_up = stats.add_experience(exp)
        stats.add_gold(gold)

        if self.save_manager is not None:
            self.save_manager.save_hero(stats)
        if self.progress is not None:
            self.progress.record_battle(True)
            if self.unit is not None:
                self.progress.complete_unit(self.grade, self.unit.name)

        result.victory = True
        result.exp_gained = exp
        result.gold_gained = gold
        result.leveled_up = leveled_up

        self.battle_log.append(f"Victory! Gained {exp} EXP and {gold} gold! 💰")
        self.audio.play_victory_sound()
        logger.info("Victory over %s: +%s EXP, +%s gold", self.enemy.name, exp, gold)
        self._publish(BattleEvent.VICTORY, exp=exp, gold=gold)

        if leveled_up:
            self.battle_log.append(f"Level up! Now level {stats.level}!")
            self.audio.play_level_up_sound()
            logger.info("Hero reached level %s", stats.level)
            self._publish(BattleEvent.LEVEL_UP, level=stats.level)

    def _lose(self) -> None:
        self.state = BattleState.DEFEAT
        self.battle_log.append("Defeat! You were knocked out!")
        self.audio.play_defeat_sound()
        if self.progress is not None:
            self.progress.record_battle(False)
        logger.info("Defeated by %s", self.enemy.name)
        self._publish(BattleEvent.DEFEAT, enemy=self.enemy.name)

    # --- Queries ---

    def get_current_problem(self) -> Optional[Problem]:
        return self.current_problem

    def get_battle_state(self) -> BattleState:
        return self.state

    def get_battle_log(self) -> list[str]:
        return list(self.battle_log)

    def is_battle_over(self) -> bool:
        return self.state in (BattleState.VICTORY, BattleState.DEFEAT)

    def get_hero_stats(self) -> dict[str, int]:
        stats = self.hero.stats
        return {
            "currentHP": stats.current_hp,
            "maxHP": stats.max_hp,
            "level": stats.level,
            "attack": stats.attack,
            "defense": stats.defense,
        }

    def get_enemy_stats(self) -> Optional[dict[str, Any]]:
        if self.enemy is None:
            return None
        return {
            "name": self.enemy.name,
            "currentHP": self.enemy.stats.current_hp,
            "maxHP": self.enemy.stats.max_hp,
            "level": self.enemy.stats.level,
        }

    @property
    def turn_count(self) -> int:
        return self.turn_system.turn_count

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # --- Internals ---

    def _cancel_pending(self) -> None:
        if self._pending_enemy_turn is not None:
            self._pending_enemy_turn.cancel()
            self._pending_enemy_turn = None

    def _publish(self, event: BattleEvent, **data: Any) -> None:
        if self.events is not None:
            self.events.publish(event, **data)
