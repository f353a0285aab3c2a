"""Core enumerations for the Patchwork domain."""

from __future__ import annotations

from enum import IntEnum


class GameVariant(IntEnum):
    """Which patch catalog a game is played with."""

    SIMPLIFIED = 1
    FULL = 2

    def __str__(self) -> str:
        return self.name.lower()


class TurnOrder(IntEnum):
    """Policy deciding which player acts next."""

    ALTERNATE = 0  # player 1 / player 2 unconditionally
    TIME_TRACK = 1  # whoever is behind on the time track

    def __str__(self) -> str:
        return self.name.lower().replace("_", "-")


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    PLAYER1_WINS = 1
    PLAYER2_WINS = 2
    TIE = 3
