"""Player - the economic agent: buttons, time-track position, quilt."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patchwork.core.board import PersonalBoard

if TYPE_CHECKING:
    from patchwork.core.time_board import TimeBoard

STARTING_BUTTONS = 5


class Player:
    """A participant with a button purse, a token on the time track and an
    exclusively owned :class:`PersonalBoard`.

    Args:
        name: Display name, also the player's identity.
        board: Quilt to sew onto (a fresh empty one by default).
        buttons: Starting purse.
    """

    __slots__ = ("_name", "_board", "_buttons", "_position", "_time_spent", "_done")

    def __init__(
        self,
        name: str,
        board: PersonalBoard | None = None,
        buttons: int = STARTING_BUTTONS,
    ) -> None:
        if name is None:
            raise ValueError("Player name must not be None")
        if buttons < 0:
            raise ValueError(f"Starting buttons must be non-negative, got {buttons}")
        self._name = name
        self._board = board if board is not None else PersonalBoard()
        self._buttons = buttons
        self._position = 0
        self._time_spent = 0
        self._done = False

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def board(self) -> PersonalBoard:
        return self._board

    @property
    def buttons(self) -> int:
        return self._buttons

    @property
    def position(self) -> int:
        """Cell index on the time track."""
        return self._position

    @property
    def time_spent(self) -> int:
        return self._time_spent

    def is_done(self) -> bool:
        return self._done

    def set_done(self, done: bool) -> None:
        self._done = done

    # ── Economy ──────────────────────────────────────────────────────────

    def pay_buttons(self, cost: int) -> None:
        if cost < 0:
            raise ValueError(f"Cannot pay a negative cost ({cost})")
        if cost > self._buttons:
            raise ValueError(f"Cost {cost} exceeds {self._buttons} buttons")
        self._buttons -= cost

    def receive_buttons(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Cannot receive a negative amount ({amount})")
        self._buttons += amount

    def add_time(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Time only moves forward, got {amount}")
        self._time_spent += amount

    # ── Time track ───────────────────────────────────────────────────────

    def move_to(self, position: int) -> None:
        if position < 0:
            raise ValueError(f"Position cannot be negative, got {position}")
        self._position = position

    def advance_and_receive_buttons(self, other: Player, time_board: TimeBoard) -> int:
        """Pass: jump to the cell just past *other* and bank one button per
        cell moved.

        The jump is capped at the last track cell; a move that runs into the
        end of the track forfeits one button.  A player already at or beyond
        the target stays put and pays nothing.
        Returns the number of buttons credited for movement.
        """
        if other is None or time_board is None:
            raise ValueError("Opponent and time board must not be None")

        target = other.position + 1
        destination = min(target, time_board.last_position)
        gained = max(0, destination - self._position)
        self._buttons += gained
        if gained > 0 and target >= time_board.track_length:
            self._buttons -= 1
        self._position = max(self._position, destination)
        return gained

    # ── Copying / display ────────────────────────────────────────────────

    def copy(self) -> Player:
        clone = Player(self._name, self._board.copy(), self._buttons)
        clone._position = self._position
        clone._time_spent = self._time_spent
        clone._done = self._done
        return clone

    def __repr__(self) -> str:
        return (
            f"Player({self._name!r}, buttons={self._buttons}, "
            f"position={self._position}, time={self._time_spent})"
        )
