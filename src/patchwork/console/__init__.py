"""Console front end: text prompts and renderings around the game layer."""

from patchwork.console.render import (
    render_board,
    render_market,
    render_patch,
    render_player,
    render_result,
    render_track,
)
from patchwork.console.session import ADVANCE, ConsoleSession

__all__ = [
    "ADVANCE",
    "ConsoleSession",
    "render_board",
    "render_market",
    "render_patch",
    "render_player",
    "render_result",
    "render_track",
]
