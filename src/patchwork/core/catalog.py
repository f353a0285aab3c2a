"""Patch catalogs: the text record format and the built-in simplified set.

Record format (one patch per record)::

    cost,time,income,width,height
    c,c,...        <- `height` rows of `width` 0/1 cells

Blank lines and ``#`` comments are ignored.  A record whose cost, time and
income are all zero is a placeholder and produces no patch.
"""

from __future__ import annotations

import logging
from pathlib import Path

from patchwork.core.patch import Patch

_LOGGER = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parents[1] / "data"
_HEADER_FIELDS = 5


class CatalogError(ValueError):
    """A malformed catalog record."""

    def __init__(self, line: int, message: str) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line


def default_catalog_path() -> Path:
    """Location of the packaged full-game catalog."""
    return _DATA_DIR / "patches.data"


def _parse_ints(text: str, expected: int, line: int) -> list[int]:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != expected:
        raise CatalogError(line, f"expected {expected} values, got {len(parts)}")
    try:
        return [int(part) for part in parts]
    except ValueError:
        raise CatalogError(line, f"not an integer list: {text!r}") from None


def _parse_record(
    header: tuple[int, str], rows: list[tuple[int, str]]
) -> tuple[int, int, int, list[list[int]]]:
    line, text = header
    cost, time_cost, income, width, height = _parse_ints(text, _HEADER_FIELDS, line)
    if len(rows) < height:
        raise CatalogError(line, f"expected {height} grid rows, got {len(rows)}")
    grid: list[list[int]] = []
    for row_line, row_text in rows:
        cells = _parse_ints(row_text, width, row_line)
        if any(cell not in (0, 1) for cell in cells):
            raise CatalogError(row_line, f"grid cells must be 0 or 1: {row_text!r}")
        grid.append(cells)
    return cost, time_cost, income, grid


def _record_height(header: tuple[int, str]) -> int:
    line, text = header
    *_, width, height = _parse_ints(text, _HEADER_FIELDS, line)
    if width <= 0 or height <= 0:
        raise CatalogError(line, f"invalid patch size {width}x{height}")
    return height


def _header_index(
    entries: list[tuple[int, str]], lo: int, hi: int, line: int
) -> int | None:
    """Position of *line* within ``entries[lo:hi]`` if it reads as a header."""
    for j in range(lo, hi):
        if entries[j][0] == line:
            try:
                _record_height(entries[j])
            except CatalogError:
                return None
            return j
    return None


def parse_catalog(text: str, *, strict: bool = False) -> list[Patch]:
    """Parse catalog *text* into patches.

    Malformed records raise :class:`CatalogError` when *strict*; otherwise they
    are logged and skipped.  A bad header skips one line, a bad grid skips the
    whole record.  When a short record swallowed the next header, parsing
    resumes at that header.
    """
    entries = [
        (number, raw.strip())
        for number, raw in enumerate(text.splitlines(), start=1)
        if raw.strip() and not raw.lstrip().startswith("#")
    ]
    patches: list[Patch] = []
    i = 0
    while i < len(entries):
        header = entries[i]
        try:
            height = _record_height(header)
        except CatalogError as exc:
            if strict:
                raise
            _LOGGER.warning("Skipping catalog header: %s", exc)
            i += 1
            continue

        start = i
        rows = entries[i + 1 : i + 1 + height]
        i += 1 + height
        try:
            cost, time_cost, income, grid = _parse_record(header, rows)
            if cost == 0 and time_cost == 0 and income == 0:
                _LOGGER.debug("Placeholder record at line %d ignored", header[0])
                continue
            if not any(any(row) for row in grid):
                raise CatalogError(header[0], "patch covers no cells")
            try:
                patch = Patch.from_rows(cost, time_cost, income, grid)
            except ValueError as exc:
                raise CatalogError(header[0], str(exc)) from None
        except CatalogError as exc:
            if strict:
                raise
            _LOGGER.warning("Skipping catalog record: %s", exc)
            resume = _header_index(entries, start + 1, i, exc.line)
            if resume is not None:
                i = resume
            continue
        patches.append(patch)

    _LOGGER.debug("Parsed %d patches from catalog", len(patches))
    return patches


def load_catalog(path: Path | str | None = None, *, strict: bool = False) -> list[Patch]:
    """Read and parse a catalog file (the packaged one by default)."""
    file_path = Path(path) if path is not None else default_catalog_path()
    patches = parse_catalog(file_path.read_text(encoding="utf-8"), strict=strict)
    _LOGGER.info("Loaded %d patches from %s", len(patches), file_path)
    return patches


def simplified_patches() -> list[Patch]:
    """The small hardcoded 2x2 set used by the simplified game."""
    square = [[1, 1], [1, 1]]
    patches = [
        Patch.from_rows(3, 4, 1, square),
        Patch.from_rows(2, 2, 0, square),
    ]
    for i in range(20):
        if i % 2 == 0:
            patches.append(Patch.from_rows(3, 4, 1, square))
        else:
            patches.append(Patch.from_rows(2, 2, 0, square))
    return patches
