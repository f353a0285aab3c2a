"""Game management layer: controller, players, turn rules, state.

Quick start::

    from patchwork.game import GameConfig, GameController

    ctrl = GameController()
    ctrl.new_game("Alice", "Bob", config=GameConfig.full(seed=7))
    index, patch = ctrl.offered_patches()[0]
    result = ctrl.buy(index, row=0, col=0)
"""

from patchwork.game.actions import Action, ActionResult, Advance, BuyPatch, RuleViolation
from patchwork.game.controller import GameController, GameEvents
from patchwork.game.interfaces import GameConfig, GamePhase, IGameController
from patchwork.game.player import STARTING_BUTTONS, Player
from patchwork.game.rules import Rules, attempt_action, validate_action
from patchwork.game.state import GameState, TurnRecord

__all__ = [
    # Interfaces / config
    "GameConfig",
    "GamePhase",
    "IGameController",
    # Actions
    "Action",
    "ActionResult",
    "Advance",
    "BuyPatch",
    "RuleViolation",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "Player",
    "Rules",
    "STARTING_BUTTONS",
    "TurnRecord",
    "attempt_action",
    "validate_action",
]
