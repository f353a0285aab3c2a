"""Interactive console session: prompts, retry loops and the game loop.

The engine never waits for input; every re-prompt after a bad number or a
refused action happens here.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from patchwork.console.render import (
    render_board,
    render_market,
    render_player,
    render_result,
    render_track,
)
from patchwork.core.enums import GameVariant
from patchwork.game.actions import BuyPatch
from patchwork.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

ADVANCE = -1

MENU_TEXT = (
    "Choose your game level: (1) Phase 1 = base game / "
    "(2) Phase 2 = complete game / (0) Exit"
)


class ConsoleSession:
    """Line-oriented front end over a :class:`GameController`.

    Args:
        stdin: Stream to read answers from (``sys.stdin`` by default).
        stdout: Stream to write prompts to (``sys.stdout`` by default).
    """

    __slots__ = ("_in", "_out")

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    # ── Low-level I/O ────────────────────────────────────────────────────

    def say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _read_line(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("Input closed")
        return line.strip()

    def ask_int(self, prompt: str) -> int:
        """Prompt until the answer parses as an integer."""
        while True:
            answer = self._read_line(prompt)
            try:
                return int(answer)
            except ValueError:
                _LOGGER.debug("Non-numeric answer %r", answer)
                self.say("Invalid input. Please enter a number.")

    # ── Menus ────────────────────────────────────────────────────────────

    def choose_variant(self) -> GameVariant | None:
        """Variant menu; ``None`` means the user chose to exit."""
        self.say(MENU_TEXT)
        while True:
            choice = self.ask_int("> ")
            if choice == 0:
                return None
            if choice in (GameVariant.SIMPLIFIED, GameVariant.FULL):
                return GameVariant(choice)
            self.say(f"Unexpected value: {choice}")

    # ── Game loop ────────────────────────────────────────────────────────

    def play(self, controller: GameController) -> None:
        """Drive turns until the game is finished, then print the result."""
        while not controller.is_finished:
            self.play_turn(controller)
        self.say(render_result(controller.state))

    def play_turn(self, controller: GameController) -> None:
        state = controller.state
        player = controller.current_player
        self.say(render_track(state.players, state.time_board))
        self.say(render_player(player))
        self.say("Patchwork:")
        self.say(render_board(player.board))

        while True:
            index = self._choose_patch(controller)
            if index == ADVANCE:
                result = controller.advance()
                if result.ok:
                    return
                self.say(result.violation.message)
                continue
            if self._place_patch(controller, index):
                return

    def _choose_patch(self, controller: GameController) -> int:
        offered = controller.offered_patches()
        self.say(render_market(offered))
        indices = [i for i, _ in offered]
        while True:
            choice = self.ask_int("Choose a patch (number) or enter -1 to advance: ")
            if choice == ADVANCE:
                return choice
            if choice not in indices:
                self.say("Invalid choice. Please choose another patch or enter -1 to advance.")
                continue
            patch = controller.state.market[choice]
            if patch.cost > controller.current_player.buttons:
                self.say(
                    "You don't have enough buttons to purchase this patch. "
                    "Please choose another patch or enter -1 to advance."
                )
                continue
            return choice

    def _place_patch(self, controller: GameController, index: int) -> bool:
        """Ask for coordinates and rotation until the patch is sewn on.

        Returns False if the player backs out with -1.
        """
        while True:
            self.say("Choose the coordinates where you want to place the patch.")
            row = self.ask_int("Row (or -1 to choose again): ")
            if row == ADVANCE:
                return False
            col = self.ask_int("Column: ")
            rotation = self.ask_int("Rotation (0, 90, 180, 270): ")
            result = controller.submit(BuyPatch(index, row, col, rotation))
            if result.ok:
                return True
            self.say(result.violation.message)
            self.say(render_board(controller.current_player.board))
