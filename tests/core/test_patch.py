"""Tests for Patch geometry and economics."""

import pytest

from patchwork.core.patch import Patch


def _rows(patch: Patch) -> list[list[int]]:
    return [[int(c) for c in row] for row in patch.shape]


class TestPatchConstruction:
    def test_dimensions_follow_shape(self, ell: Patch) -> None:
        assert ell.width == 2
        assert ell.height == 3
        assert ell.size == 6
        assert ell.area == 4

    def test_shape_is_frozen_to_tuples(self) -> None:
        patch = Patch(1, 1, 0, [[1, 0]])  # type: ignore[arg-type]
        assert patch.shape == ((True, False),)
        hash(patch)

    def test_empty_shape_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 1x1"):
            Patch.from_rows(1, 1, 0, [])

    def test_ragged_shape_rejected(self) -> None:
        with pytest.raises(ValueError, match="same width"):
            Patch.from_rows(1, 1, 0, [[1, 1], [1]])

    def test_negative_cost_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Patch.from_rows(-1, 1, 0, [[1]])

    def test_structural_equality(self) -> None:
        a = Patch.from_rows(2, 1, 0, [[1, 1]])
        b = Patch.from_rows(2, 1, 0, [[1, 1]])
        assert a == b
        assert a is not b

    def test_cells(self, ell: Patch) -> None:
        assert list(ell.cells()) == [(0, 0), (1, 0), (2, 0), (2, 1)]

    def test_is_empty(self) -> None:
        assert Patch.from_rows(0, 0, 0, [[0, 0]]).is_empty
        assert not Patch.from_rows(0, 0, 0, [[0, 1]]).is_empty

    def test_str(self) -> None:
        patch = Patch.from_rows(2, 1, 0, [[1, 1], [1, 0]])
        assert str(patch) == "[2,1,0]\n|##|\n|# |"


class TestRotation:
    def test_rotate_90(self, ell: Patch) -> None:
        assert _rows(ell.rotate(90)) == [[1, 1, 1], [1, 0, 0]]

    def test_rotate_180(self, ell: Patch) -> None:
        assert _rows(ell.rotate(180)) == [[1, 1], [0, 1], [0, 1]]

    def test_rotate_270(self, ell: Patch) -> None:
        assert _rows(ell.rotate(270)) == [[0, 0, 1], [1, 1, 1]]

    def test_rotate_swaps_dimensions(self, ell: Patch) -> None:
        turned = ell.rotate(90)
        assert (turned.width, turned.height) == (ell.height, ell.width)

    def test_four_quarter_turns_restore_shape(self, ell: Patch) -> None:
        turned = ell
        for _ in range(4):
            turned = turned.rotate(90)
        assert turned == ell

    def test_270_undoes_90(self, ell: Patch) -> None:
        assert ell.rotate(90).rotate(270) == ell

    def test_economics_preserved(self, ell: Patch) -> None:
        turned = ell.rotate(180)
        assert (turned.cost, turned.time_cost, turned.income) == (3, 2, 1)

    def test_returns_new_patch(self, square: Patch) -> None:
        assert square.rotate(90) is not square
        assert square.rotate(90) == square

    @pytest.mark.parametrize("degrees", [0, 45, 360, -90])
    def test_invalid_degrees(self, ell: Patch, degrees: int) -> None:
        with pytest.raises(ValueError, match="Invalid rotation"):
            ell.rotate(degrees)

    def test_rotated_accepts_zero_and_full_turns(self, ell: Patch) -> None:
        assert ell.rotated(0) is ell
        assert ell.rotated(360) is ell
        assert ell.rotated(450) == ell.rotate(90)

    def test_rotated_rejects_odd_angle(self, ell: Patch) -> None:
        with pytest.raises(ValueError):
            ell.rotated(30)


class TestOccupancy:
    def test_occupied_cell(self, ell: Patch) -> None:
        assert ell.occupied_cell(1, 2) is True
        assert ell.occupied_cell(1, 0) is False

    @pytest.mark.parametrize("x, y", [(2, 0), (0, 3), (-1, 0)])
    def test_occupied_cell_out_of_range(self, ell: Patch, x: int, y: int) -> None:
        with pytest.raises(ValueError, match="outside"):
            ell.occupied_cell(x, y)

    def test_overlapping_shapes(self, ell: Patch, square: Patch) -> None:
        assert ell.overlaps(square)
        assert square.overlaps(ell)

    def test_disjoint_shapes(self) -> None:
        left = Patch.from_rows(1, 1, 0, [[1, 0]])
        right = Patch.from_rows(1, 1, 0, [[0, 1]])
        assert not left.overlaps(right)

    def test_cells_outside_other_bounds_do_not_overlap(self) -> None:
        bar = Patch.from_rows(1, 1, 0, [[0, 0, 1]])
        dot = Patch.from_rows(1, 1, 0, [[1]])
        assert not bar.overlaps(dot)
