"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from patchwork.core.catalog import CatalogError, load_catalog
from patchwork.core.enums import GameVariant, TurnOrder
from patchwork.core.scoring import scoring_names

_LOGGER = logging.getLogger(__name__)

_TURN_ORDERS = {str(order): order for order in TurnOrder}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patchwork", description="Two-player Patchwork in the terminal."
    )
    parser.add_argument(
        "--variant",
        choices=[str(v) for v in GameVariant],
        help="skip the menu and play this variant",
    )
    parser.add_argument("--catalog", type=Path, help="patch catalog for the full game")
    parser.add_argument(
        "--strict-catalog",
        action="store_true",
        help="abort on the first malformed catalog record instead of skipping it",
    )
    parser.add_argument("--seed", type=int, help="seed for the market shuffle")
    parser.add_argument(
        "--turn-order", choices=list(_TURN_ORDERS), default=str(TurnOrder.ALTERNATE)
    )
    parser.add_argument("--scoring", choices=scoring_names(), default="buttons")
    parser.add_argument("--player1", default="Player 1")
    parser.add_argument("--player2", default="Player 2")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Parse *argv*, play one game and return the process exit code."""
    from patchwork.console.session import ConsoleSession
    from patchwork.game.controller import GameController
    from patchwork.game.interfaces import GameConfig

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    session = ConsoleSession(stdin, stdout)
    try:
        if args.variant is not None:
            variant = GameVariant[args.variant.upper()]
        else:
            variant = session.choose_variant()
            if variant is None:
                return 0

        overrides = {
            "seed": args.seed,
            "turn_order": _TURN_ORDERS[args.turn_order],
            "scoring": args.scoring,
        }
        patches = None
        if variant == GameVariant.FULL:
            config = GameConfig.full(catalog_path=args.catalog, **overrides)
            try:
                patches = load_catalog(config.catalog_path, strict=args.strict_catalog)
            except (OSError, CatalogError) as exc:
                _LOGGER.error("Cannot load patch catalog: %s", exc)
                session.say(f"Cannot load patch catalog: {exc}")
                return 1
            if not patches:
                session.say("The patch catalog contains no patches.")
                return 1
        else:
            config = GameConfig.simplified(**overrides)

        controller = GameController()
        controller.new_game(args.player1, args.player2, config=config, patches=patches)
        session.play(controller)
    except (EOFError, KeyboardInterrupt):
        session.say()
        session.say("Game aborted.")
    return 0


def main() -> None:
    """Launch the Patchwork console game."""
    sys.exit(run())


if __name__ == "__main__":
    main()
