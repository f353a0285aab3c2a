"""Tests for catalog parsing and the built-in patch sets."""

import logging
from pathlib import Path

import pytest

from patchwork.core.catalog import (
    CatalogError,
    default_catalog_path,
    load_catalog,
    parse_catalog,
    simplified_patches,
)
from patchwork.core.patch import Patch

GOOD = """\
# two patches
2,1,0,2,1
1,1

3,2,1,2,2
1,0
1,1
"""


class TestParseCatalog:
    def test_parses_records(self) -> None:
        patches = parse_catalog(GOOD)
        assert patches == [
            Patch.from_rows(2, 1, 0, [[1, 1]]),
            Patch.from_rows(3, 2, 1, [[1, 0], [1, 1]]),
        ]

    def test_whitespace_around_values(self) -> None:
        assert parse_catalog(" 1 , 1 , 0 , 1 , 1 \n 1 \n") == [
            Patch.from_rows(1, 1, 0, [[1]])
        ]

    def test_placeholder_skipped(self) -> None:
        assert parse_catalog("0,0,0,1,1\n0\n2,1,0,1,1\n1\n") == [
            Patch.from_rows(2, 1, 0, [[1]])
        ]

    def test_empty_text(self) -> None:
        assert parse_catalog("") == []
        assert parse_catalog("# only a comment\n\n") == []

    def test_bad_header_skips_one_line(self, caplog: pytest.LogCaptureFixture) -> None:
        text = "x,1,0,1,1\n1\n2,1,0,2,1\n1,1\n"
        with caplog.at_level(logging.WARNING, logger="patchwork.core.catalog"):
            patches = parse_catalog(text)
        assert patches == [Patch.from_rows(2, 1, 0, [[1, 1]])]
        assert "Skipping catalog header" in caplog.text

    def test_bad_grid_skips_record(self, caplog: pytest.LogCaptureFixture) -> None:
        text = "2,1,0,2,1\n1,2\n3,1,0,1,1\n1\n"
        with caplog.at_level(logging.WARNING, logger="patchwork.core.catalog"):
            patches = parse_catalog(text)
        assert [p.cost for p in patches] == [3]
        assert "line 2" in caplog.text

    def test_short_record_keeps_following_record(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        text = "2,1,0,2,2\n1,1\n3,2,0,2,1\n1,1\n4,1,0,1,1\n1\n"
        with caplog.at_level(logging.WARNING, logger="patchwork.core.catalog"):
            patches = parse_catalog(text)
        assert [p.cost for p in patches] == [3, 4]
        assert "Skipping catalog header" not in caplog.text

    def test_blank_patch_skipped(self) -> None:
        assert parse_catalog("1,1,0,1,1\n0\n") == []


class TestStrictParsing:
    def test_bad_header_raises_with_line(self) -> None:
        with pytest.raises(CatalogError) as info:
            parse_catalog("# c\n1,2,3\n1\n", strict=True)
        assert info.value.line == 2
        assert str(info.value).startswith("line 2:")

    def test_missing_rows(self) -> None:
        with pytest.raises(CatalogError, match="expected 3 grid rows"):
            parse_catalog("1,1,0,1,3\n1\n", strict=True)

    def test_wrong_row_width(self) -> None:
        with pytest.raises(CatalogError, match="expected 2 values"):
            parse_catalog("1,1,0,2,1\n1\n", strict=True)

    def test_non_positive_size(self) -> None:
        with pytest.raises(CatalogError, match="invalid patch size"):
            parse_catalog("1,1,0,0,1\n", strict=True)

    def test_negative_economics(self) -> None:
        with pytest.raises(CatalogError, match="non-negative"):
            parse_catalog("-1,1,0,1,1\n1\n", strict=True)

    def test_blank_patch(self) -> None:
        with pytest.raises(CatalogError, match="covers no cells"):
            parse_catalog("1,1,0,1,1\n0\n", strict=True)

    def test_catalog_error_is_value_error(self) -> None:
        assert issubclass(CatalogError, ValueError)


class TestLoadCatalog:
    def test_default_catalog(self) -> None:
        assert default_catalog_path().is_file()
        patches = load_catalog()
        assert len(patches) == 33
        assert patches[0] == Patch.from_rows(2, 1, 0, [[1, 1]])
        assert all(not p.is_empty for p in patches)

    def test_default_catalog_is_strictly_valid(self) -> None:
        assert len(load_catalog(strict=True)) == 33

    def test_custom_path(self, tmp_path: Path) -> None:
        path = tmp_path / "mini.data"
        path.write_text(GOOD, encoding="utf-8")
        assert len(load_catalog(path)) == 2
        assert len(load_catalog(str(path))) == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_catalog(tmp_path / "nope.data")


class TestSimplifiedPatches:
    def test_contents(self) -> None:
        patches = simplified_patches()
        assert len(patches) == 22
        assert all(p.width == 2 and p.height == 2 and p.area == 4 for p in patches)
        assert sum(p.cost == 3 for p in patches) == 11
        assert sum(p.cost == 2 for p in patches) == 11
        assert patches[0] == Patch.from_rows(3, 4, 1, [[1, 1], [1, 1]])
        assert patches[1] == Patch.from_rows(2, 2, 0, [[1, 1], [1, 1]])

    def test_fresh_instances(self) -> None:
        a, b = simplified_patches(), simplified_patches()
        assert a == b
        assert a[0] is not b[0]
