"""Plain-text renderings of boards, market and results."""

from __future__ import annotations

import string
from collections.abc import Sequence

from patchwork.core.board import BOARD_SIZE, PersonalBoard
from patchwork.core.patch import Patch
from patchwork.core.time_board import TimeBoard
from patchwork.game.player import Player
from patchwork.game.state import GameState

_LABELS = string.ascii_uppercase + string.ascii_lowercase + string.digits


def render_board(board: PersonalBoard) -> str:
    """Grid diagram with row/column rulers; each placement gets its own letter."""
    labels = {
        id(patch): _LABELS[i % len(_LABELS)]
        for i, patch in enumerate(board.placed_patches())
    }
    last = BOARD_SIZE - 1
    lines = ["   " + "".join(f"{c:<4}" for c in range(BOARD_SIZE)).rstrip()]
    lines.append("  ╔" + "═══╦" * last + "═══╗")
    for r in range(BOARD_SIZE):
        cells = []
        for c in range(BOARD_SIZE):
            occupant = board[r, c]
            cells.append(f" {labels[id(occupant)]} " if occupant is not None else "   ")
        lines.append(f"{r:<2}║" + "║".join(cells) + f"║{r:>2}")
        if r < last:
            lines.append("  ╠" + "═══╬" * last + "═══╣")
    lines.append("  ╚" + "═══╩" * last + "═══╝")
    return "\n".join(lines)


def render_patch(index: int, patch: Patch) -> str:
    return f"{index} : {patch}"


def render_market(offered: Sequence[tuple[int, Patch]]) -> str:
    if not offered:
        return "The market is empty."
    lines = ["Here are the available patches:"]
    lines.extend(render_patch(i, p) for i, p in offered)
    return "\n".join(lines)


def render_player(player: Player) -> str:
    return "\n".join(
        (
            f"{player.name} starts their turn!",
            f"Buttons: {player.buttons}",
            f"Time spent: {player.time_spent}",
            f"Position on time board: {player.position}",
        )
    )


def render_track(players: Sequence[Player], time_board: TimeBoard) -> str:
    """One line per player with the token drawn at its track cell."""
    cells = range(time_board.track_length)
    lines = [" ".join(f"{c:>3}" for c in cells)]
    for p in players:
        lines.append(" " * (p.position * 4 + 2) + f"^ {p.name} ({p.buttons} buttons)")
    return "\n".join(lines)


def render_result(state: GameState) -> str:
    rule = state.config.scoring_rule()
    lines = ["The game has ended!"]
    for p in state.players:
        lines.append(f"{p.name}: {rule.score(p)} points ({p.buttons} buttons)")
    winner = state.winner
    if winner is None:
        lines.append("It's a tie!")
    else:
        lines.append(f"{winner.name} has won!")
    return "\n".join(lines)
