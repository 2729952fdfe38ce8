"""
Audio module - sound cue port and implementations.
"""

from dungeon_engine.audio.port import AudioPort, SilentAudio, EventAudio

__all__ = [
    "AudioPort",
    "SilentAudio",
    "EventAudio",
]
