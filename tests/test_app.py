"""Tests for the command-line entry point."""

import io
from pathlib import Path

import pytest

from patchwork.app import build_parser, run
from patchwork.console.session import MENU_TEXT

ADVANCE_FOREVER = "-1\n" * 500


def _run(argv: list[str], answers: str = ADVANCE_FOREVER) -> tuple[int, str]:
    out = io.StringIO()
    code = run(argv, stdin=io.StringIO(answers), stdout=out)
    return code, out.getvalue()


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.variant is None
        assert args.turn_order == "alternate"
        assert args.scoring == "buttons"
        assert args.log_level == "WARNING"
        assert not args.strict_catalog

    def test_log_level_case_insensitive(self) -> None:
        assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_unknown_variant(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--variant", "huge"])


class TestRun:
    def test_menu_exit(self) -> None:
        code, text = _run([], "0\n")
        assert code == 0
        assert MENU_TEXT in text
        assert "starts their turn" not in text

    def test_menu_then_simplified_game(self) -> None:
        code, text = _run([], "1\n" + ADVANCE_FOREVER)
        assert code == 0
        assert "The game has ended!" in text

    def test_simplified_game(self) -> None:
        code, text = _run(["--variant", "simplified", "--seed", "1", "--player1", "Ann"])
        assert code == 0
        assert "Ann starts their turn!" in text
        assert "The game has ended!" in text

    def test_full_game(self) -> None:
        code, text = _run(
            ["--variant", "full", "--seed", "3", "--turn-order", "time-track"]
        )
        assert code == 0
        assert "The game has ended!" in text

    def test_quilt_scoring(self) -> None:
        code, text = _run(["--variant", "simplified", "--scoring", "quilt"])
        assert code == 0
        assert "points" in text

    def test_missing_catalog(self, tmp_path: Path) -> None:
        code, text = _run(["--variant", "full", "--catalog", str(tmp_path / "none")])
        assert code == 1
        assert "Cannot load patch catalog" in text

    def test_strict_catalog_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.data"
        path.write_text("1,1\n", encoding="utf-8")
        code, text = _run(
            ["--variant", "full", "--catalog", str(path), "--strict-catalog"]
        )
        assert code == 1
        assert "line 1" in text

    def test_lenient_catalog_without_patches(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.data"
        path.write_text("1,1\n", encoding="utf-8")
        code, text = _run(["--variant", "full", "--catalog", str(path)])
        assert code == 1
        assert "contains no patches" in text

    def test_input_closed_mid_game(self) -> None:
        code, text = _run(["--variant", "simplified"], "")
        assert code == 0
        assert "Game aborted." in text
