"""
Turn tracking for one-on-one battles.
"""

from __future__ import annotations

from enum import Enum


class TurnOwner(str, Enum):
    PLAYER = "player"
    ENEMY = "enemy"


class TurnSystem:
    """Tracks whose turn it is and how many turns have started."""

    def __init__(self):
        self.current_turn = TurnOwner.PLAYER
        self.turn_count = 0
        self.waiting_for_answer = False

    def start_turn(self, owner: TurnOwner) -> None:
        self.current_turn = owner
        self.turn_count += 1
        self.waiting_for_answer = False

    def is_player_turn(self) -> bool:
        return self.current_turn == TurnOwner.PLAYER

    def is_enemy_turn(self) -> bool:
        return self.current_turn == TurnOwner.ENEMY

    def set_waiting_for_answer(self, waiting: bool) -> None:
        self.waiting_for_answer = waiting

    def reset(self) -> None:
        self.current_turn = TurnOwner.PLAYER
        self.turn_count = 0
        self.waiting_for_answer = False
