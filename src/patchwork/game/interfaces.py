"""Abstract interfaces and configuration for the game layer.

The controller depends on these definitions rather than on the console or
any other front end.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import IntEnum, auto
from pathlib import Path
from typing import TYPE_CHECKING, Any

from patchwork.core.enums import GameVariant, TurnOrder
from patchwork.core.scoring import ScoringRule, scoring_names, scoring_rule

if TYPE_CHECKING:
    from patchwork.game.actions import Action, ActionResult


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a Patchwork game."""

    NOT_STARTED = auto()
    PLAYING = auto()
    FINISHED = auto()


# ── Configuration presets ────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable game setup.

    Args:
        variant: Which catalog the market is built from.
        time_board_size: Side of the square time board (track has size² cells).
        starting_buttons: Buttons each player starts with.
        preview_size: How many patches after the neutral token are for sale.
        turn_order: Who acts next, see :class:`TurnOrder`.
        scoring: Name of the end-of-game :class:`ScoringRule`.
        seed: Seed for the market shuffle; ``None`` is nondeterministic.
        shuffle: Whether to shuffle the market at all.
        catalog_path: Catalog file for the full variant (packaged one if None).
    """

    variant: GameVariant = GameVariant.SIMPLIFIED
    time_board_size: int = 5
    starting_buttons: int = 5
    preview_size: int = 1
    turn_order: TurnOrder = TurnOrder.ALTERNATE
    scoring: str = "buttons"
    seed: int | None = None
    shuffle: bool = True
    catalog_path: Path | None = None

    def __post_init__(self) -> None:
        if self.time_board_size <= 0:
            raise ValueError(
                f"Time board size must be positive, got {self.time_board_size}"
            )
        if self.starting_buttons < 0:
            raise ValueError("Starting buttons must be non-negative")
        if self.preview_size < 1:
            raise ValueError("Preview size must be at least 1")
        if self.scoring not in scoring_names():
            raise ValueError(f"Unknown scoring rule: {self.scoring!r}")

    # Presets
    @classmethod
    def simplified(cls, **overrides: Any) -> GameConfig:
        """Hardcoded 2x2 patches, one patch for sale at a time."""
        params: dict[str, Any] = {"variant": GameVariant.SIMPLIFIED, "preview_size": 1}
        params.update(overrides)
        return cls(**params)

    @classmethod
    def full(cls, catalog_path: Path | None = None, **overrides: Any) -> GameConfig:
        """Patches loaded from a catalog file, three for sale at a time."""
        params: dict[str, Any] = {
            "variant": GameVariant.FULL,
            "preview_size": 3,
            "catalog_path": catalog_path,
        }
        params.update(overrides)
        return cls(**params)

    def with_overrides(self, **overrides: Any) -> GameConfig:
        return replace(self, **overrides)

    def scoring_rule(self) -> ScoringRule:
        return scoring_rule(self.scoring)

    def __repr__(self) -> str:
        return (
            f"GameConfig({self.variant}, track={self.time_board_size ** 2}, "
            f"preview={self.preview_size}, {self.turn_order}, {self.scoring})"
        )


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, *args: Any, **kwargs: Any) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit(self, action: Action) -> ActionResult:
        """Submit an action for the player to act. Never blocks for input."""
