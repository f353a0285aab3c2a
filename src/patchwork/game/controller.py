"""GameController: the central orchestrator of a Patchwork game.

Coordinates: Players, market, time board and the turn rules.
Emits events via simple callbacks so the console / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from patchwork.core.enums import GameResult
from patchwork.core.patch import Patch
from patchwork.game.actions import Action, ActionResult, Advance, BuyPatch, RuleViolation
from patchwork.game.interfaces import GameConfig, GamePhase, IGameController
from patchwork.game.player import Player
from patchwork.game.rules import attempt_action
from patchwork.game.state import GameState, TurnRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

TurnCallback = Callable[[TurnRecord, GameState], None]
RejectedCallback = Callable[[Action, RuleViolation], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_turn: list[TurnCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs a full game: validates actions, swaps in the resulting state,
    notifies listeners.

    The controller never waits for input; a front end asks it what is on
    offer, submits an action and re-prompts itself when the action is refused.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state: GameState | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("No game in progress; call new_game() first")
        return self._state

    @property
    def phase(self) -> GamePhase:
        return GamePhase.NOT_STARTED if self._state is None else self._state.phase

    @property
    def is_finished(self) -> bool:
        return self.phase == GamePhase.FINISHED

    @property
    def current_player(self) -> Player:
        return self.state.active_player

    @property
    def opponent(self) -> Player:
        return self.state.opponent

    @property
    def result(self) -> GameResult:
        return self.state.result

    @property
    def winner(self) -> Player | None:
        return self.state.winner

    def offered_patches(self) -> list[tuple[int, Patch]]:
        return self.state.offered_patches()

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        player1: Player | str = "Player 1",
        player2: Player | str = "Player 2",
        config: GameConfig | None = None,
        patches: Sequence[Patch] | None = None,
    ) -> GameState:
        config = config or GameConfig.simplified()
        players = tuple(
            Player(p, buttons=config.starting_buttons) if isinstance(p, str) else p
            for p in (player1, player2)
        )
        self._state = GameState.create(config, players, patches)
        self._emit_phase(GamePhase.PLAYING)
        return self._state

    def submit(self, action: Action) -> ActionResult:
        result = attempt_action(self.state, action)
        if not result.ok:
            assert result.violation is not None
            for cb in self.events.on_rejected:
                cb(action, result.violation)
            return result

        assert result.state is not None and result.record is not None
        self._state = result.state
        for cb in self.events.on_turn:
            cb(result.record, self._state)

        if self._state.is_game_over:
            _LOGGER.info("Winner: %s", self.winner.name if self.winner else "tie")
            self._emit_game_over(self._state.result)
        return result

    def buy(self, index: int, row: int, col: int, rotation: int = 0) -> ActionResult:
        return self.submit(BuyPatch(index, row, col, rotation))

    def advance(self) -> ActionResult:
        return self.submit(Advance())

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.FINISHED)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
