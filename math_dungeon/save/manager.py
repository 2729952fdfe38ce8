"""
Save/Load system - hero, game and leaderboard persistence.

Provides:
- Hero stats snapshot (saved after victories and shop visits)
- Game snapshot with the current grade/unit
- Save integrity validation (checksum)
- Append-only leaderboard
- Progress tracker persistence

All blobs are JSON strings in a KeyValueStore. Storage failures are
logged and reported as return values; gameplay continues on in-memory
state.
"""

from __future__ import annotations

import base64
import hashlib
import json
import logging
import time
from enum import Enum, auto
from typing import Any, Callable, Optional

from pydantic import ConfigDict, Field, ValidationError

from dungeon_engine.core.component import Component
from dungeon_engine.core.events import EventBus
from dungeon_engine.storage import KeyValueStore, MemoryStore
from math_dungeon.components import CharacterStats
from math_dungeon.progression import ProgressTracker

logger = logging.getLogger(__name__)


class SaveEvent(Enum):
    """Save system events."""
    SAVE_COMPLETED = auto()
    SAVE_FAILED = auto()
    LOAD_COMPLETED = auto()
    LOAD_FAILED = auto()
    SAVE_DELETED = auto()


class LeaderboardEntry(Component):
    """
    One leaderboard row.

    Attributes:
        player_name: Optional display name
        score: Points scored
        level: Hero level at the time
        completion_percentage: Curriculum completion (0-100)
        timestamp: Milliseconds since the epoch, set when recorded
    """
    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
        extra='ignore',
    )

    player_name: Optional[str] = Field(default=None, alias="playerName")
    score: int = 0
    level: int = 1
    completion_percentage: float = Field(default=0, alias="completionPercentage")
    timestamp: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def _now_ms() -> int:
    return int(time.time() * 1000)


class SaveManager:
    """
    Manages saving and loading game state.

    Usage:
        save_mgr = SaveManager(JsonFileStore("saves"), event_bus=bus)
        save_mgr.save_hero(hero.stats)
        stats = save_mgr.load_hero()

        save_mgr.add_leaderboard_entry({"playerName": "Ada", "score": 1200, "level": 4})
    """

    HERO_KEY = "math_dungeon_save"
    GAME_KEY = "mathDungeonSave"
    LEADERBOARD_KEY = "mathDungeonLeaderboard"
    PROGRESS_KEY = "mathDungeonProgress"

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        event_bus: Optional[EventBus] = None,
        clock: Callable[[], int] = _now_ms,
    ):
        self.store = store or MemoryStore()
        self.event_bus = event_bus
        self._clock = clock

        self.progress = ProgressTracker(persist=self.save_progress)
        self.load_progress()

    # --- Hero snapshot ---

    def save_hero(self, stats: CharacterStats) -> bool:
        """Persist the hero's stats. Returns True on success."""
        ok = self._write(self.HERO_KEY, stats.to_snapshot())
        if ok:
            logger.info("Hero saved (level %s, %s gold)", stats.level, stats.gold)
        self._publish(SaveEvent.SAVE_COMPLETED if ok else SaveEvent.SAVE_FAILED, key=self.HERO_KEY)
        return ok

    def load_hero(self) -> Optional[CharacterStats]:
        """
        Restore the hero's stats.

        Returns:
            The stats, or None when nothing is saved or the blob is unreadable
        """
        data = self._read(self.HERO_KEY)
        if not isinstance(data, dict):
            return None

        try:
            stats = CharacterStats.from_snapshot(data)
        except (ValidationError, TypeError, ValueError) as e:
            logger.error("Hero save is invalid: %s", e)
            self._publish(SaveEvent.LOAD_FAILED, key=self.HERO_KEY)
            return None

        logger.info("Hero loaded (level %s)", stats.level)
        self._publish(SaveEvent.LOAD_COMPLETED, key=self.HERO_KEY)
        return stats

    # --- Game snapshot ---

    def save_game(
        self,
        hero: Optional[CharacterStats] = None,
        current_grade: Optional[int] = None,
        current_unit: Optional[str] = None,
    ) -> bool:
        """Persist the session position together with the hero and progress."""
        save_dict: dict[str, Any] = {
            "hero": hero.to_snapshot() if hero is not None else None,
            "currentGrade": current_grade or None,
            "currentUnit": current_unit or None,
            "timestamp": self._clock(),
        }
        save_dict["checksum"] = self._calculate_checksum(save_dict)

        ok = self._write(self.GAME_KEY, save_dict)
        if ok:
            self.progress.save()
            logger.info("Game saved (grade %s, unit %s)", current_grade, current_unit)
        self._publish(SaveEvent.SAVE_COMPLETED if ok else SaveEvent.SAVE_FAILED, key=self.GAME_KEY)
        return ok

    def load_game(self, validate: bool = True) -> Optional[dict[str, Any]]:
        """
        Load the game snapshot.

        Args:
            validate: Whether to verify the checksum

        Returns:
            The snapshot without its checksum, or None if missing or corrupted
        """
        data = self._read(self.GAME_KEY)
        if not isinstance(data, dict):
            return None

        checksum = data.pop("checksum", None)
        if validate and checksum and not self._verify_checksum(data, checksum):
            logger.warning("Save file corrupted: checksum mismatch")
            self._publish(SaveEvent.LOAD_FAILED, key=self.GAME_KEY)
            return None

        self._publish(SaveEvent.LOAD_COMPLETED, key=self.GAME_KEY)
        return data

    def has_save(self) -> bool:
        return self.store.exists(self.GAME_KEY)

    def delete_save(self) -> None:
        """Delete the game snapshot and reset all progress."""
        self.store.delete(self.GAME_KEY)
        self.progress.reset()
        logger.info("Save deleted")
        self._publish(SaveEvent.SAVE_DELETED, key=self.GAME_KEY)

    # --- Leaderboard ---

    def add_leaderboard_entry(self, entry: LeaderboardEntry | dict[str, Any]) -> bool:
        """Append an entry, stamped with the current time."""
        if not isinstance(entry, LeaderboardEntry):
            try:
                entry = LeaderboardEntry.model_validate(entry)
            except ValidationError as e:
                logger.error("Invalid leaderboard entry: %s", e)
                return False

        entries = self.get_leaderboard()
        stamped = entry.model_copy(update={"timestamp": self._clock()})
        entries.append(stamped.to_dict())
        return self._write(self.LEADERBOARD_KEY, entries)

    def get_leaderboard(self) -> list[dict[str, Any]]:
        """All entries in insertion order. Unreadable data reads as empty."""
        data = self._read(self.LEADERBOARD_KEY)
        if not isinstance(data, list):
            return []
        return [entry for entry in data if isinstance(entry, dict)]

    def clear_leaderboard(self) -> None:
        self.store.delete(self.LEADERBOARD_KEY)

    # --- Progress ---

    def save_progress(self, data: Optional[dict[str, Any]] = None) -> bool:
        """Persist progress. Used as the tracker's persist callback."""
        if data is None:
            data = self.progress.to_dict()
        return self._write(self.PROGRESS_KEY, data)

    def load_progress(self) -> ProgressTracker:
        data = self._read(self.PROGRESS_KEY)
        if isinstance(data, dict):
            try:
                self.progress.load_dict(data)
            except (TypeError, ValueError, AttributeError) as e:
                logger.error("Progress save is invalid: %s", e)
        return self.progress

    # --- Internals ---

    def _write(self, key: str, data: Any) -> bool:
        try:
            value = json.dumps(data)
        except (TypeError, ValueError) as e:
            logger.error("Cannot serialize %s: %s", key, e)
            return False
        return self.store.save(key, value)

    def _read(self, key: str) -> Any:
        raw = self.store.load(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Failed to parse %s: %s", key, e)
            return None

    def _calculate_checksum(self, data: dict) -> str:
        """Calculate checksum for save data."""
        json_str = json.dumps(data, sort_keys=True, separators=(',', ':'))
        hash_bytes = hashlib.sha256(json_str.encode('utf-8')).digest()
        return base64.b64encode(hash_bytes).decode('ascii')

    def _verify_checksum(self, data: dict, expected_checksum: str) -> bool:
        """Verify save data checksum."""
        data_copy = dict(data)
        data_copy.pop('checksum', None)
        return self._calculate_checksum(data_copy) == expected_checksum

    def _publish(self, event: SaveEvent, **data: Any) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event, **data)
