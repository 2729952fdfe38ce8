"""
Game configuration.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional


class GameConfig:
    """Configuration for a game session."""

    def __init__(
        self,
        enemy_turn_delay: float = 1.0,
        difficulty: str = "medium",
        save_path: str = "saves",
        curriculum_path: Optional[str] = None,
        hero_max_hp: int = 100,
        hero_attack: int = 15,
        hero_defense: int = 8,
    ):
        self.enemy_turn_delay = enemy_turn_delay
        self.difficulty = difficulty
        self.save_path = save_path
        self.curriculum_path = curriculum_path
        self.hero_max_hp = hero_max_hp
        self.hero_attack = hero_attack
        self.hero_defense = hero_defense

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameConfig:
        """
        Build a config from a plain dict.

        Raises:
            ValueError: If the dict contains keys GameConfig does not know
        """
        known = set(cls().to_dict())
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_file(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> dict[str, Any]:
        """Serialize config to a dict."""
        return {
            "enemy_turn_delay": self.enemy_turn_delay,
            "difficulty": self.difficulty,
            "save_path": self.save_path,
            "curriculum_path": self.curriculum_path,
            "hero_max_hp": self.hero_max_hp,
            "hero_attack": self.hero_attack,
            "hero_defense": self.hero_defense,
        }
