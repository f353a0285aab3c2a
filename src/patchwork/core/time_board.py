"""TimeBoard - the shared time track laid out as a square lookup table."""

from __future__ import annotations


class TimeBoard:
    """Square grid of track positions ``0 .. size**2 - 1`` in row-major order.

    Players walk the track in increasing value order; the engine uses the
    table to bound movement and to price the advance-and-collect action.
    """

    __slots__ = ("_cells",)

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Time board size must be positive, got {size}")
        self._cells: list[list[int]] = [
            [row * size + col for col in range(size)] for row in range(size)
        ]

    # -- Dimensions ---------------------------------------------------------

    @property
    def size(self) -> int:
        """Side length of the square grid."""
        return len(self._cells)

    @property
    def track_length(self) -> int:
        """Number of positions on the track."""
        return self.size * self.size

    @property
    def last_position(self) -> int:
        return self.track_length - 1

    # -- Element access -----------------------------------------------------

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise ValueError(
                f"Invalid time board coordinates ({x}, {y}) for size {self.size}"
            )

    def value(self, x: int, y: int) -> int:
        """Track value stored in row *x*, column *y*."""
        self._check(x, y)
        return self._cells[x][y]

    def set_value(self, x: int, y: int, value: int) -> None:
        self._check(x, y)
        self._cells[x][y] = value

    def position_of(self, value: int) -> tuple[int, int] | None:
        """Coordinates of the first cell holding *value*, if any."""
        for x, row in enumerate(self._cells):
            for y, cell in enumerate(row):
                if cell == value:
                    return x, y
        return None

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeBoard):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return "\n".join(str(row) for row in self._cells)
