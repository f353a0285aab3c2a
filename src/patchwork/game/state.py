"""Game state: players, market, time board, phase and turn history."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from patchwork.core.catalog import load_catalog, simplified_patches
from patchwork.core.enums import GameResult, GameVariant
from patchwork.core.market import CircleOfPatches
from patchwork.core.patch import Patch
from patchwork.core.time_board import TimeBoard
from patchwork.game.actions import Action
from patchwork.game.interfaces import GameConfig, GamePhase
from patchwork.game.player import Player

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnRecord:
    """A single entry in the turn history."""

    turn: int
    player_index: int
    action: Action
    patch: Patch | None
    buttons_gained: int
    buttons_after: int
    position_after: int


@dataclass
class GameState:
    """Everything a turn can read or change.

    This is a pure data class; the rules in :mod:`patchwork.game.rules` work
    on copies of it and hand back new states.
    """

    config: GameConfig
    players: tuple[Player, Player]
    market: CircleOfPatches
    time_board: TimeBoard
    phase: GamePhase = GamePhase.PLAYING
    result: GameResult = GameResult.IN_PROGRESS
    active: int = 0
    turn: int = 0
    # Per-player stamp of the turn in which they reached their current cell.
    arrivals: list[int] = field(default_factory=lambda: [1, 0])
    history: list[TurnRecord] = field(default_factory=list)

    # ── Initialisation ───────────────────────────────────────────────────

    @classmethod
    def create(
        cls,
        config: GameConfig,
        players: Sequence[Player],
        patches: Sequence[Patch] | None = None,
    ) -> GameState:
        """Set up a fresh game; configuration errors raise ``ValueError``."""
        if players is None or len(players) != 2 or any(p is None for p in players):
            raise ValueError("A game needs exactly two players")
        if players[0] is players[1]:
            raise ValueError("Players must be distinct")

        if patches is None:
            if config.variant == GameVariant.FULL:
                patches = load_catalog(config.catalog_path)
            else:
                patches = simplified_patches()

        if config.shuffle:
            market = CircleOfPatches.shuffled(patches, random.Random(config.seed))
        else:
            market = CircleOfPatches(patches)

        _LOGGER.info(
            "New %s game: %s vs %s, %d patches",
            config.variant,
            players[0].name,
            players[1].name,
            len(market),
        )
        return cls(
            config=config,
            players=(players[0], players[1]),
            market=market,
            time_board=TimeBoard(config.time_board_size),
        )

    def copy(self) -> GameState:
        return GameState(
            config=self.config,
            players=(self.players[0].copy(), self.players[1].copy()),
            market=self.market.copy(),
            time_board=self.time_board,
            phase=self.phase,
            result=self.result,
            active=self.active,
            turn=self.turn,
            arrivals=list(self.arrivals),
            history=list(self.history),
        )

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def active_player(self) -> Player:
        return self.players[self.active]

    @property
    def opponent(self) -> Player:
        return self.players[1 - self.active]

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.FINISHED

    def offered_indices(self) -> list[int]:
        """Market indices the active player may buy from."""
        if self.market.is_empty:
            return []
        return self.market.offered_indices(self.config.preview_size)

    def offered_patches(self) -> list[tuple[int, Patch]]:
        return [(i, self.market[i]) for i in self.offered_indices()]

    @property
    def winner(self) -> Player | None:
        if self.result == GameResult.PLAYER1_WINS:
            return self.players[0]
        if self.result == GameResult.PLAYER2_WINS:
            return self.players[1]
        return None
