"""Match outcome.

The outcome is recomputed after every turn. A player knock-out is checked
before an enemy knock-out, so a simultaneous knock-out is an enemy win.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enemy import Enemy
    from .player import Player


class WinResult(Enum):
    """Outcome kind"""

    UNDECIDED = "undecided"
    PLAYER_WINS = "player_wins"
    ENEMY_WINS = "enemy_wins"


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """Outcome of a match plus the turn it was decided on"""

    result: WinResult = WinResult.UNDECIDED
    turn: int | None = None

    @classmethod
    def undecided(cls) -> GameOutcome:
        return cls()

    @classmethod
    def player_wins(cls, turn: int) -> GameOutcome:
        return cls(WinResult.PLAYER_WINS, turn)

    @classmethod
    def enemy_wins(cls, turn: int) -> GameOutcome:
        return cls(WinResult.ENEMY_WINS, turn)

    @property
    def is_over(self) -> bool:
        return self.result is not WinResult.UNDECIDED

    @property
    def message(self) -> str:
        if self.result is WinResult.PLAYER_WINS:
            return f"The Player won on turn #{self.turn}"
        if self.result is WinResult.ENEMY_WINS:
            return f"The enemy won on turn #{self.turn}"
        return "No one has won yet"


def check_game_result(enemy: Enemy, player: Player, turn_number: int) -> GameOutcome:
    """Decide the outcome from both actors' hit points.

    Args:
        enemy: enemy after the fold
        player: player after the fold
        turn_number: current turn

    Returns:
        GameOutcome
    """
    if player.hit_points <= 0:
        return GameOutcome.enemy_wins(turn_number)
    if enemy.hit_points <= 0:
        return GameOutcome.player_wins(turn_number)
    return GameOutcome.undecided()
