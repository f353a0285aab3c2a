"""End-of-game scoring rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from patchwork.core.board import PersonalBoard

BONUS_SQUARE_SIDE = 7
BONUS_SQUARE_POINTS = 7
EMPTY_CELL_PENALTY = 2


class Scored(Protocol):
    """Anything with a button balance and a quilt."""

    @property
    def buttons(self) -> int: ...

    @property
    def board(self) -> PersonalBoard: ...


class ScoringRule(ABC):
    """Turns a finished player's holdings into a comparable score."""

    name: str = ""

    @abstractmethod
    def score(self, player: Scored) -> int: ...


class ButtonScoring(ScoringRule):
    """Buttons only; the default rule."""

    name = "buttons"

    def score(self, player: Scored) -> int:
        return player.buttons


class QuiltScoring(ScoringRule):
    """Tabletop scoring: buttons, minus two per empty cell, plus seven for a
    fully covered 7x7 square."""

    name = "quilt"

    def score(self, player: Scored) -> int:
        board = player.board
        total = player.buttons - EMPTY_CELL_PENALTY * board.empty_cells()
        if board.has_full_square(BONUS_SQUARE_SIDE):
            total += BONUS_SQUARE_POINTS
        return total


_RULES: dict[str, type[ScoringRule]] = {
    ButtonScoring.name: ButtonScoring,
    QuiltScoring.name: QuiltScoring,
}


def scoring_rule(name: str) -> ScoringRule:
    """Instantiate a scoring rule by name (``"buttons"`` or ``"quilt"``)."""
    try:
        return _RULES[name]()
    except KeyError:
        raise ValueError(f"Unknown scoring rule: {name!r}") from None


def scoring_names() -> list[str]:
    return list(_RULES)
