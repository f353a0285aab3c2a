"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from patchwork.core.patch import Patch
from patchwork.game.interfaces import GameConfig
from patchwork.game.player import Player
from patchwork.game.state import GameState


@pytest.fixture
def square() -> Patch:
    """2x2 patch costing 2 buttons."""
    return Patch.from_rows(2, 1, 0, [[1, 1], [1, 1]])


@pytest.fixture
def ell() -> Patch:
    """3-tall L: a column of three with a foot to the right."""
    return Patch.from_rows(3, 2, 1, [[1, 0], [1, 0], [1, 1]])


@pytest.fixture
def rich_player() -> Player:
    return Player("Rich", buttons=100)


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Factory for unshuffled simplified-variant states over given patches."""

    def _make(
        patches: Sequence[Patch],
        buttons: int = 5,
        **overrides: object,
    ) -> GameState:
        config = GameConfig.simplified(shuffle=False, **overrides)
        players = [Player("A", buttons=buttons), Player("B", buttons=buttons)]
        return GameState.create(config, players, patches)

    return _make
