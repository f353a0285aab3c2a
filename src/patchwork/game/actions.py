"""Turn actions and the outcome of attempting them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from patchwork.game.state import GameState, TurnRecord


@dataclass(frozen=True, slots=True)
class BuyPatch:
    """Buy the market patch at absolute *index* and sew it, turned clockwise
    by *rotation* degrees, with its top-left corner on (*row*, *col*)."""

    index: int
    row: int
    col: int
    rotation: int = 0


@dataclass(frozen=True, slots=True)
class Advance:
    """Skip buying: move past the opponent on the time track for buttons."""


Action: TypeAlias = BuyPatch | Advance


class RuleViolation(IntEnum):
    """Why an action was refused. The same decision point is re-offered."""

    GAME_OVER = auto()
    NOT_OFFERED = auto()
    INVALID_ROTATION = auto()
    INSUFFICIENT_BUTTONS = auto()
    OUT_OF_BOUNDS = auto()
    ILLEGAL_PLACEMENT = auto()

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[RuleViolation, str] = {
    RuleViolation.GAME_OVER: "The game is already over.",
    RuleViolation.NOT_OFFERED: "That patch is not for sale right now.",
    RuleViolation.INVALID_ROTATION: "Rotation must be 0, 90, 180 or 270.",
    RuleViolation.INSUFFICIENT_BUTTONS: "You don't have enough buttons for that patch.",
    RuleViolation.OUT_OF_BOUNDS: "Those coordinates are off the board.",
    RuleViolation.ILLEGAL_PLACEMENT: "The patch cannot be placed there.",
}


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Either the state after a legal action or the violation it hit."""

    state: GameState | None = None
    record: TurnRecord | None = None
    violation: RuleViolation | None = None

    @property
    def ok(self) -> bool:
        return self.violation is None

    @classmethod
    def rejected(cls, violation: RuleViolation) -> ActionResult:
        return cls(violation=violation)
