"""Turn resolution: the pure decision function and end-of-game rules."""

from __future__ import annotations

import logging

from patchwork.core.board import BOARD_SIZE
from patchwork.core.enums import GameResult, TurnOrder
from patchwork.core.patch import ROTATIONS
from patchwork.game.actions import Action, ActionResult, Advance, BuyPatch, RuleViolation
from patchwork.game.interfaces import GamePhase
from patchwork.game.state import GameState, TurnRecord

_LOGGER = logging.getLogger(__name__)

_ALLOWED_ROTATIONS = (0, *ROTATIONS)


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    @staticmethod
    def track_exhausted(state: GameState) -> bool:
        """Both tokens sit on the last track cell; nobody can earn a move."""
        last = state.time_board.last_position
        return all(p.position >= last for p in state.players)

    @staticmethod
    def is_finished(state: GameState) -> bool:
        market_done = state.market.is_empty and all(p.is_done() for p in state.players)
        return market_done or Rules.track_exhausted(state)

    @staticmethod
    def next_to_act(state: GameState) -> int:
        """Index of the player whose turn follows the one just played."""
        if state.config.turn_order == TurnOrder.ALTERNATE:
            return 1 - state.active
        p1, p2 = state.players
        if p1.position != p2.position:
            return 0 if p1.position < p2.position else 1
        # Tie: the token that arrived last sits on top and moves first.
        return 0 if state.arrivals[0] >= state.arrivals[1] else 1

    @staticmethod
    def completes_round(state: GameState) -> bool:
        """Whether the action just taken closes a round."""
        if state.config.turn_order == TurnOrder.ALTERNATE:
            return state.active == 1
        return True

    @staticmethod
    def game_result(state: GameState) -> GameResult:
        """Compare scores under the configured rule; equal scores tie."""
        rule = state.config.scoring_rule()
        first, second = (rule.score(p) for p in state.players)
        if first > second:
            return GameResult.PLAYER1_WINS
        if second > first:
            return GameResult.PLAYER2_WINS
        return GameResult.TIE


def validate_action(state: GameState, action: Action) -> RuleViolation | None:
    """Cheap legality check without touching any state."""
    if state.is_game_over:
        return RuleViolation.GAME_OVER
    if isinstance(action, Advance):
        return None

    if action.index not in state.offered_indices():
        return RuleViolation.NOT_OFFERED
    if action.rotation not in _ALLOWED_ROTATIONS:
        return RuleViolation.INVALID_ROTATION
    player = state.active_player
    patch = state.market[action.index].rotated(action.rotation)
    if patch.cost > player.buttons:
        return RuleViolation.INSUFFICIENT_BUTTONS
    if not (0 <= action.row < BOARD_SIZE and 0 <= action.col < BOARD_SIZE):
        return RuleViolation.OUT_OF_BOUNDS
    if not player.board.can_accept(patch, action.row, action.col):
        return RuleViolation.ILLEGAL_PLACEMENT
    return None


def attempt_action(state: GameState, action: Action) -> ActionResult:
    """Resolve *action* for the active player.

    *state* is never modified: on success the result carries a new state, on
    failure only the violation.
    """
    violation = validate_action(state, action)
    if violation is not None:
        _LOGGER.debug("%s rejected: %s", action, violation.name)
        return ActionResult.rejected(violation)

    new = state.copy()
    new.turn += 1
    player = new.active_player
    start = player.position

    if isinstance(action, BuyPatch):
        patch = new.market[action.index].rotated(action.rotation)
        if not player.board.place(player, patch, action.row, action.col):
            return ActionResult.rejected(RuleViolation.ILLEGAL_PLACEMENT)
        new.market.take(action.index)
        gained = max(0, patch.income - patch.cost)
        player.receive_buttons(gained)
        player.add_time(patch.time_cost)
        player.move_to(min(start + patch.cost, new.time_board.last_position))
    else:
        patch = None
        gained = player.advance_and_receive_buttons(new.opponent, new.time_board)

    player.set_done(True)
    if player.position != start:
        new.arrivals[new.active] = new.turn

    record = TurnRecord(
        turn=new.turn,
        player_index=new.active,
        action=action,
        patch=patch,
        buttons_gained=gained,
        buttons_after=player.buttons,
        position_after=player.position,
    )
    new.history.append(record)
    _LOGGER.debug("Turn %d: %s -> %s", new.turn, player.name, record)

    _end_turn(new)
    return ActionResult(state=new, record=record)


def _end_turn(state: GameState) -> None:
    round_over = Rules.completes_round(state)
    if (round_over and Rules.is_finished(state)) or Rules.track_exhausted(state):
        state.phase = GamePhase.FINISHED
        state.result = Rules.game_result(state)
        _LOGGER.info("Game over after %d turns: %s", state.turn, state.result.name)
        return

    state.active = Rules.next_to_act(state)
    if round_over and state.config.turn_order == TurnOrder.ALTERNATE:
        for p in state.players:
            p.set_done(False)
