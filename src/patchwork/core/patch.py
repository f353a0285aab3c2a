"""Patch value object: a purchasable polyomino with its economics."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

Shape = tuple[tuple[bool, ...], ...]

ROTATIONS = (90, 180, 270)


def _freeze_shape(rows: Iterable[Iterable[object]]) -> Shape:
    shape = tuple(tuple(bool(cell) for cell in row) for row in rows)
    if not shape or not shape[0]:
        raise ValueError("Patch shape must be at least 1x1")
    width = len(shape[0])
    if any(len(row) != width for row in shape):
        raise ValueError("Patch shape rows must all have the same width")
    return shape


@dataclass(frozen=True, slots=True)
class Patch:
    """Immutable polyomino tile.

    ``shape[y][x]`` tells whether the cell in row *y*, column *x* of the
    patch's bounding box is covered by fabric.  Equality is structural; when a
    specific placed instance matters, compare with ``is``.
    """

    cost: int
    time_cost: int
    income: int
    shape: Shape

    def __post_init__(self) -> None:
        if self.cost < 0 or self.time_cost < 0 or self.income < 0:
            raise ValueError(
                f"Patch economics must be non-negative: "
                f"cost={self.cost}, time={self.time_cost}, income={self.income}"
            )
        object.__setattr__(self, "shape", _freeze_shape(self.shape))

    # ── Factory ──────────────────────────────────────────────────────────

    @classmethod
    def from_rows(
        cls, cost: int, time_cost: int, income: int, rows: Iterable[Iterable[int]]
    ) -> Patch:
        """Build a patch from 0/1 rows, e.g. ``[[1, 1], [1, 0]]``."""
        return cls(cost, time_cost, income, _freeze_shape(rows))

    # ── Geometry ─────────────────────────────────────────────────────────

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        """Bounding-box surface (width x height)."""
        return self.width * self.height

    @property
    def area(self) -> int:
        """Number of covered cells."""
        return sum(row.count(True) for row in self.shape)

    @property
    def is_empty(self) -> bool:
        return self.area == 0

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield ``(row, col)`` offsets of every covered cell."""
        for y, row in enumerate(self.shape):
            for x, covered in enumerate(row):
                if covered:
                    yield y, x

    def occupied_cell(self, x: int, y: int) -> bool:
        """Whether column *x* of row *y* is covered."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(
                f"Cell ({x}, {y}) outside {self.width}x{self.height} patch"
            )
        return self.shape[y][x]

    def overlaps(self, other: Patch) -> bool:
        """Whether both patches cover a cell at the same relative coordinate."""
        for y, x in self.cells():
            if y < other.height and x < other.width and other.shape[y][x]:
                return True
        return False

    # ── Rotation ─────────────────────────────────────────────────────────

    def rotate(self, degrees: int) -> Patch:
        """Return a copy turned clockwise by 90, 180 or 270 degrees."""
        if degrees not in ROTATIONS:
            raise ValueError(
                f"Invalid rotation {degrees!r}: must be one of 90, 180 or 270"
            )
        h, w = self.height, self.width
        src = self.shape
        if degrees == 90:
            grid = [[False] * h for _ in range(w)]
            for y in range(h):
                for x in range(w):
                    grid[x][h - 1 - y] = src[y][x]
        elif degrees == 180:
            grid = [[False] * w for _ in range(h)]
            for y in range(h):
                for x in range(w):
                    grid[h - 1 - y][w - 1 - x] = src[y][x]
        else:
            grid = [[False] * h for _ in range(w)]
            for y in range(h):
                for x in range(w):
                    grid[w - 1 - x][y] = src[y][x]
        return Patch(self.cost, self.time_cost, self.income, _freeze_shape(grid))

    def rotated(self, degrees: int) -> Patch:
        """Like :meth:`rotate`, but also accepts 0 and full turns."""
        if degrees % 90 != 0:
            raise ValueError(f"Invalid rotation {degrees!r}: not a multiple of 90")
        degrees %= 360
        return self if degrees == 0 else self.rotate(degrees)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def summary(self) -> str:
        return f"[{self.cost},{self.time_cost},{self.income}]"

    def __str__(self) -> str:
        lines = [self.summary]
        for row in self.shape:
            lines.append("|" + "".join("#" if c else " " for c in row) + "|")
        return "\n".join(lines)
