"""PersonalBoard - a player's 9x9 quilt that patches are sewn onto."""

from __future__ import annotations

from typing import Protocol

from patchwork.core.patch import Patch

BOARD_SIZE = 9


class ButtonHolder(Protocol):
    """Whoever pays for a placement (normally a :class:`Player`)."""

    @property
    def buttons(self) -> int: ...

    def pay_buttons(self, cost: int) -> None: ...


class PersonalBoard:
    """Mutable 9x9 grid of patch references.

    Every covered cell of a placement points at the same :class:`Patch`
    object.  Completed row/column counts are rebuilt from the grid after each
    mutation so they can never drift from it.
    """

    __slots__ = ("_cells", "_full_rows", "_full_cols")

    def __init__(self) -> None:
        self._cells: list[Patch | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._full_rows = 0
        self._full_cols = 0

    @staticmethod
    def _index(row: int, col: int) -> int:
        return row * BOARD_SIZE + col

    @staticmethod
    def _on_board(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def _require_on_board(self, row: int, col: int) -> None:
        if not self._on_board(row, col):
            raise ValueError(f"Coordinates ({row}, {col}) are off the board")

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: tuple[int, int]) -> Patch | None:
        row, col = cell
        self._require_on_board(row, col)
        return self._cells[self._index(row, col)]

    def is_empty(self, row: int, col: int) -> bool:
        return self[row, col] is None

    @property
    def full_rows(self) -> int:
        return self._full_rows

    @property
    def full_cols(self) -> int:
        return self._full_cols

    def is_full(self) -> bool:
        """Every cell covered (all rows and all columns complete)."""
        return self._full_rows == BOARD_SIZE and self._full_cols == BOARD_SIZE

    # -- Placement ----------------------------------------------------------

    def can_accept(self, patch: Patch, row: int, col: int) -> bool:
        """Whether *patch* fits with its top-left corner on (*row*, *col*)."""
        if row < 0 or col < 0:
            return False
        if row + patch.height > BOARD_SIZE or col + patch.width > BOARD_SIZE:
            return False
        for dy, dx in patch.cells():
            if self._cells[self._index(row + dy, col + dx)] is not None:
                return False
        return True

    def place(self, player: ButtonHolder, patch: Patch, row: int, col: int) -> bool:
        """Sew *patch* onto the board and charge *player* its cost.

        Returns False, leaving board and player untouched, when the patch does
        not fit or is unaffordable.
        """
        if player is None or patch is None:
            raise ValueError("Player and patch must not be None")
        self._require_on_board(row, col)

        if not self.can_accept(patch, row, col):
            return False
        if patch.cost > player.buttons:
            return False

        player.pay_buttons(patch.cost)
        for dy, dx in patch.cells():
            self._cells[self._index(row + dy, col + dx)] = patch
        self._recount()
        return True

    def move(
        self, patch: Patch, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> None:
        """Relocate the single cell reference of *patch* at the source."""
        self._require_on_board(from_row, from_col)
        self._require_on_board(to_row, to_col)
        src = self._index(from_row, from_col)
        dst = self._index(to_row, to_col)
        if self._cells[src] is not patch:
            raise ValueError(
                f"Patch does not occupy source cell ({from_row}, {from_col})"
            )
        if self._cells[dst] is not None:
            raise ValueError(f"Destination cell ({to_row}, {to_col}) is occupied")
        self._cells[src] = None
        self._cells[dst] = patch
        self._recount()

    # -- Query helpers ------------------------------------------------------

    def placed_patches(self) -> list[Patch]:
        """Distinct placements in reading order of their first cell."""
        seen: list[Patch] = []
        for occupant in self._cells:
            if occupant is not None and not any(p is occupant for p in seen):
                seen.append(occupant)
        return seen

    def locate(self, patch: Patch) -> tuple[int, int] | None:
        """First ``(row, col)`` covered by this exact placement."""
        for idx, occupant in enumerate(self._cells):
            if occupant is patch:
                return divmod(idx, BOARD_SIZE)
        return None

    def empty_cells(self) -> int:
        return self._cells.count(None)

    def has_full_square(self, side: int) -> bool:
        """Whether some *side* x *side* region is completely covered."""
        if not (1 <= side <= BOARD_SIZE):
            raise ValueError(f"Square side must be within 1..{BOARD_SIZE}")
        span = BOARD_SIZE - side + 1
        for top in range(span):
            for left in range(span):
                if all(
                    self._cells[self._index(top + r, left + c)] is not None
                    for r in range(side)
                    for c in range(side)
                ):
                    return True
        return False

    # -- Internal -----------------------------------------------------------

    def _recount(self) -> None:
        cells = self._cells
        self._full_rows = sum(
            all(cells[self._index(r, c)] is not None for c in range(BOARD_SIZE))
            for r in range(BOARD_SIZE)
        )
        self._full_cols = sum(
            all(cells[self._index(r, c)] is not None for r in range(BOARD_SIZE))
            for c in range(BOARD_SIZE)
        )

    # -- Copying ------------------------------------------------------------

    def copy(self) -> PersonalBoard:
        b = PersonalBoard()
        b._cells = self._cells.copy()
        b._full_rows = self._full_rows
        b._full_cols = self._full_cols
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersonalBoard):
            return NotImplemented
        return len(self._cells) == len(other._cells) and all(
            a is b for a, b in zip(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        rows: list[str] = ["  " + " ".join(str(c) for c in range(BOARD_SIZE))]
        for r in range(BOARD_SIZE):
            row = [
                "#" if self._cells[self._index(r, c)] is not None else "."
                for c in range(BOARD_SIZE)
            ]
            rows.append(f"{r} {' '.join(row)}")
        return "\n".join(rows)
