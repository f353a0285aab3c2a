"""Core domain layer: pure Patchwork logic with zero external dependencies.

Quick start::

    from patchwork.core import CircleOfPatches, PersonalBoard, simplified_patches

    market = CircleOfPatches(simplified_patches())
    for patch in market.patches_ahead_of_token(3):
        print(patch)
"""

from patchwork.core.board import BOARD_SIZE, PersonalBoard
from patchwork.core.catalog import (
    CatalogError,
    default_catalog_path,
    load_catalog,
    parse_catalog,
    simplified_patches,
)
from patchwork.core.enums import GameResult, GameVariant, TurnOrder
from patchwork.core.market import CircleOfPatches
from patchwork.core.patch import ROTATIONS, Patch
from patchwork.core.scoring import ButtonScoring, QuiltScoring, ScoringRule, scoring_rule
from patchwork.core.time_board import TimeBoard

__all__ = [
    # Enums
    "GameResult",
    "GameVariant",
    "TurnOrder",
    # Domain objects
    "BOARD_SIZE",
    "CircleOfPatches",
    "Patch",
    "PersonalBoard",
    "ROTATIONS",
    "TimeBoard",
    # Scoring
    "ButtonScoring",
    "QuiltScoring",
    "ScoringRule",
    "scoring_rule",
    # Catalog
    "CatalogError",
    "default_catalog_path",
    "load_catalog",
    "parse_catalog",
    "simplified_patches",
]
