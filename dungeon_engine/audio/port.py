"""
Audio port.

The game core never synthesizes sound itself. It asks an AudioPort to
play named cues; the host decides what that means (Web Audio, pygame,
nothing at all in tests).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from dungeon_engine.core.events import EventBus, AudioEvent

logger = logging.getLogger(__name__)


class AudioPort(ABC):
    """Sound cues the game core can request."""

    @abstractmethod
    def play_sfx(self, name: str) -> None:
        """Play a named sound effect."""

    def play_attack_sound(self) -> None:
        self.play_sfx("attack")

    def play_victory_sound(self) -> None:
        self.play_sfx("victory")

    def play_defeat_sound(self) -> None:
        self.play_sfx("defeat")

    def play_level_up_sound(self) -> None:
        self.play_sfx("level_up")

    def play_click_sound(self) -> None:
        self.play_sfx("click")


class SilentAudio(AudioPort):
    """Audio port that plays nothing."""

    def play_sfx(self, name: str) -> None:
        logger.debug("Silent sfx: %s", name)


class EventAudio(AudioPort):
    """
    Audio port that announces cues on the event bus.

    Handles:
    - Master volume (0.0 to 1.0)
    - Global enable/disable
    - Publishing AudioEvent.SFX_PLAYED for a listener to render
    """

    def __init__(self, event_bus: EventBus, volume: float = 1.0, enabled: bool = True):
        self.event_bus = event_bus
        self._volume = max(0.0, min(1.0, volume))
        self._enabled = enabled

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_volume(self, volume: float) -> None:
        """Set master volume (0.0 to 1.0)."""
        self._volume = max(0.0, min(1.0, volume))
        self.event_bus.publish(AudioEvent.VOLUME_CHANGED, volume=self._volume)

    def set_sound_enabled(self, enabled: bool) -> None:
        """Enable or mute all cues."""
        self._enabled = enabled

    def get_settings(self) -> dict:
        """Get audio settings."""
        return {"volume": self._volume, "enabled": self._enabled}

    def apply_settings(self, settings: dict) -> None:
        """Apply audio settings."""
        self.set_volume(settings.get("volume", 1.0))
        self.set_sound_enabled(settings.get("enabled", True))

    def play_sfx(self, name: str) -> None:
        if not self._enabled or self._volume <= 0.0:
            return
        self.event_bus.publish(AudioEvent.SFX_PLAYED, name=name, volume=self._volume)
