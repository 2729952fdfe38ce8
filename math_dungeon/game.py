"""
Game session facade.

MathDungeonGame wires the engine services (events, scheduler, audio,
storage) to the game rules and exposes the operations a UI needs:
entering a dungeon, fighting, shopping and recording scores.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Optional

from dungeon_engine.audio import AudioPort, SilentAudio
from dungeon_engine.core import EngineEvent, EventBus, GameConfig, Scheduler, UIEvent
from dungeon_engine.storage import JsonFileStore, KeyValueStore
from math_dungeon.battle import AnswerResult, BattleManager, Difficulty, Hero, NOT_YOUR_TURN
from math_dungeon.dungeon import DungeonManager, LeaderboardSorter, load_curriculum
from math_dungeon.progression import ProgressTracker
from math_dungeon.save import SaveManager
from math_dungeon.shop import PurchaseResult, WeaponShop

logger = logging.getLogger(__name__)


class MathDungeonGame:
    """
    One player's game session.

    The host calls update(dt) every frame; that advances the scheduler
    which runs the monster's delayed counter-attack.

    Usage:
        game = MathDungeonGame(GameConfig(save_path="saves"))
        game.enter_dungeon(3)
        game.start_battle("hard")
        game.submit_answer("12")
        game.update(1.0)
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        store: Optional[KeyValueStore] = None,
        audio: Optional[AudioPort] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

        # Core services
        self.event_bus = EventBus()
        self.scheduler = Scheduler()
        self.audio = audio or SilentAudio()
        self.store = store or JsonFileStore(self.config.save_path)
        self.save_manager = SaveManager(self.store, event_bus=self.event_bus)

        # Game data
        self.dungeons = DungeonManager(load_curriculum(self.config.curriculum_path))
        self.shop = WeaponShop()
        self.sorter = LeaderboardSorter()

        self.hero = self._load_hero()
        self.battle: Optional[BattleManager] = None
        self.shop_open = False

        self.event_bus.publish(EngineEvent.GAME_START)

    def _load_hero(self) -> Hero:
        stats = self.save_manager.load_hero()
        if stats is not None:
            return Hero(stats=stats)
        return Hero.create(
            max_hp=self.config.hero_max_hp,
            attack=self.config.hero_attack,
            defense=self.config.hero_defense,
        )

    @property
    def progress(self) -> ProgressTracker:
        return self.save_manager.progress

    def update(self, dt: float) -> None:
        """Advance game time."""
        self.scheduler.update(dt)
        self.progress.add_time_played(dt)

    # --- Dungeons and battles ---

    def enter_dungeon(self, grade: int) -> bool:
        """Enter a grade's dungeon. Leaves any running battle first."""
        self.leave_battle()
        return self.dungeons.load_dungeon(grade)

    def start_battle(self, difficulty: Difficulty | str | None = None) -> Optional[BattleManager]:
        """
        Start a battle in the current dungeon.

        Returns:
            The running battle, or None if no dungeon has been entered
        """
        self.leave_battle()
        battle = self.dungeons.create_battle(
            self.hero,
            difficulty or self.config.difficulty,
            rng=self.rng,
            scheduler=self.scheduler,
            audio=self.audio,
            events=self.event_bus,
            save_manager=self.save_manager,
            progress=self.progress,
            config=self.config,
        )
        if battle is None:
            return None
        battle.start_battle()
        self.battle = battle
        return battle

    def submit_answer(self, answer: Any) -> AnswerResult:
        if self.battle is None:
            return AnswerResult(success=False, message=NOT_YOUR_TURN)
        return self.battle.submit_answer(answer)

    def leave_battle(self) -> None:
        """Dispose the current battle, cancelling its pending counter-attack."""
        if self.battle is not None:
            self.battle.dispose()
            self.battle = None

    def rest(self) -> None:
        """Restore the hero to full health."""
        self.hero.stats.reset()

    # --- Shop ---

    def open_shop(self) -> None:
        self.shop_open = True
        self.event_bus.publish(UIEvent.SHOP_OPENED)

    def buy_weapon(self, weapon_id: str) -> PurchaseResult:
        """Buy a weapon; the hero is saved right after a successful purchase."""
        result = self.shop.buy_weapon(self.hero.stats, weapon_id)
        if result.success:
            self.save_manager.save_hero(self.hero.stats)
        return result

    def close_shop(self) -> bool:
        """Close the shop and save the hero."""
        self.shop_open = False
        self.event_bus.publish(UIEvent.SHOP_CLOSED)
        return self.save_manager.save_hero(self.hero.stats)

    # --- Saves and scores ---

    def save_game(self) -> bool:
        grade = self.dungeons.current_grade
        unit = self.dungeons.current_unit
        return self.save_manager.save_game(
            self.hero.stats,
            grade.grade if grade else None,
            unit.name if unit else None,
        )

    def completion_percentage(self) -> float:
        """Share of all curriculum units completed (0-100)."""
        total = sum(len(g.units) for g in self.dungeons.grades)
        if total == 0:
            return 0
        completed = sum(
            len(self.progress.completed_units.get(g.grade, ())) for g in self.dungeons.grades
        )
        return completed / total * 100

    def record_score(self, score: int, player_name: Optional[str] = None) -> bool:
        """Add the hero's current standing to the leaderboard."""
        entry = {
            "score": score,
            "level": self.hero.stats.level,
            "completionPercentage": self.completion_percentage(),
        }
        if player_name:
            entry["playerName"] = player_name
        return self.save_manager.add_leaderboard_entry(entry)

    def get_leaderboard(self, sort_by: str = "score") -> list[dict[str, Any]]:
        return self.sorter.sort_leaderboard(self.save_manager.get_leaderboard(), sort_by)

    def quit(self) -> None:
        self.leave_battle()
        self.scheduler.cancel_all()
        self.event_bus.publish(EngineEvent.GAME_QUIT)
