"""Tests for grid mapping and the immutable grid builder."""

from __future__ import annotations

import pytest

from trigrameyes.config.settings import GridConfig
from trigrameyes.domain.models import Direction, PixelCoordinate, Trigram, TrigramGrid
from trigrameyes.grid.mapper import GridMapper, GridPosition, build_grid, place


def _at(x: int, y: int) -> PixelCoordinate:
    return PixelCoordinate(x=x, y=y)


class TestSlotForRatio:
    @pytest.mark.parametrize(
        ("ratio", "slot"),
        [
            (0.0, 0),
            (0.3699, 0),
            (0.37, 1),
            (0.45, 1),
            (0.51, 1),
            (0.5101, 2),
            (0.99, 2),
        ],
    )
    def test_thresholds_are_strict(self, ratio: float, slot: int) -> None:
        assert GridMapper().slot_for_ratio(ratio) == slot

    def test_custom_thresholds(self) -> None:
        mapper = GridMapper(GridConfig(slot0_upper=0.2, slot2_lower=0.8))
        assert mapper.slot_for_ratio(0.3) == 1
        assert mapper.slot_for_ratio(0.7) == 1


class TestLocate:
    def test_left_padding_start_is_slot_zero(self) -> None:
        assert GridMapper().locate(_at(3, 0)) == GridPosition(row=0, col=0, slot=0)

    def test_middle_of_third_column(self) -> None:
        # (48 - 3) / 18 = 2.5
        assert GridMapper().locate(_at(48, 5)) == GridPosition(row=0, col=2, slot=1)

    def test_right_eye(self) -> None:
        # (33 - 3) / 18 = 1.667
        assert GridMapper().locate(_at(33, 5)) == GridPosition(row=0, col=1, slot=2)

    @pytest.mark.parametrize(("y", "row"), [(0, 0), (13, 0), (14, 1), (27, 1), (28, 2)])
    def test_rows(self, y: int, row: int) -> None:
        assert GridMapper().locate(_at(3, y)).row == row

    def test_padding_maps_to_negative_column(self) -> None:
        assert GridMapper().locate(_at(1, 0)).col == -1


class TestPlace:
    def test_backfills_columns(self) -> None:
        grid = place(TrigramGrid(), GridPosition(row=0, col=2, slot=1), Direction.UP)
        assert grid.to_strings() == [["ccc", "ccc", "cuc"]]

    def test_backfills_empty_rows(self) -> None:
        grid = place(TrigramGrid(), GridPosition(row=2, col=0, slot=0), Direction.LEFT)
        assert grid.height == 3
        assert grid.rows[0] == ()
        assert grid.rows[1] == ()
        assert grid.to_strings()[2] == ["lcc"]

    def test_existing_cells_keep_their_index(self) -> None:
        grid = place(TrigramGrid(), GridPosition(row=0, col=0, slot=0), Direction.LEFT)
        grid = place(grid, GridPosition(row=0, col=3, slot=2), Direction.RIGHT)
        grid = place(grid, GridPosition(row=0, col=1, slot=1), Direction.DOWN)
        assert grid.to_strings() == [["lcc", "cdc", "ccc", "ccr"]]

    def test_input_grid_is_unchanged(self) -> None:
        before = place(TrigramGrid(), GridPosition(row=0, col=0, slot=0), Direction.LEFT)
        after = place(before, GridPosition(row=0, col=0, slot=1), Direction.UP)
        assert before.to_strings() == [["lcc"]]
        assert after.to_strings() == [["luc"]]

    def test_negative_position_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            place(TrigramGrid(), GridPosition(row=0, col=-1, slot=0), Direction.UP)


class TestBuildGrid:
    def test_single_eye(self) -> None:
        grid = build_grid([(_at(3, 10), Direction.DOWN)])
        assert grid.height == 1
        assert grid.width == 1
        assert grid.cell(0, 0) == Trigram.from_string("dcc")

    def test_uneven_rows(self) -> None:
        grid = build_grid(
            [
                (_at(6, 4), Direction.LEFT),
                (_at(12, 11), Direction.UP),
                (_at(18, 4), Direction.RIGHT),
                (_at(42, 4), Direction.CENTER),
                (_at(6, 18), Direction.DOWN),
            ]
        )
        assert grid.to_strings() == [["lur", "ccc", "ccc"], ["dcc"]]

    def test_outside_message_is_skipped(self) -> None:
        grid = build_grid([(_at(1, 4), Direction.UP), (_at(6, -3), Direction.UP)])
        assert grid == TrigramGrid()

    def test_duplicate_slot_keeps_later(self) -> None:
        grid = build_grid([(_at(6, 4), Direction.LEFT), (_at(7, 4), Direction.RIGHT)])
        assert grid.to_strings() == [["rcc"]]

    def test_empty_input(self) -> None:
        assert build_grid([]) == TrigramGrid()


class TestTrigramGrid:
    def test_missing_cells_read_as_center(self) -> None:
        grid = TrigramGrid()
        assert grid.cell(5, 7) == Trigram()
        assert str(grid.cell(5, 7)) == "ccc"
        assert grid.width == 0
