"""Mapping eye positions onto the trigram grid.

Trigrams tile the message in fixed-size cells. The leftmost few pixels of
a message belong to no column, so x is shifted by the padding before
tiling. Which of the three eyes a position belongs to comes from how far
across its cell it sits.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from trigrameyes.config.settings import GridConfig
from trigrameyes.domain.models import Direction, PixelCoordinate, Trigram, TrigramGrid

logger = logging.getLogger(__name__)


class GridPosition(BaseModel):
    """A trigram cell and the eye slot within it."""

    model_config = ConfigDict(frozen=True)

    row: int
    col: int
    slot: int = Field(ge=0, le=2)


class GridMapper:
    """Converts message-local eye centers into grid positions."""

    def __init__(self, config: GridConfig | None = None) -> None:
        self._config = config or GridConfig()

    @property
    def config(self) -> GridConfig:
        return self._config

    def slot_for_ratio(self, ratio: float) -> int:
        """Slot index for a position ``ratio`` of the way across a cell.

        Both boundaries are exclusive, so a ratio equal to either
        threshold is the middle eye.
        """
        if ratio < self._config.slot0_upper:
            return 0
        if ratio > self._config.slot2_lower:
            return 2
        return 1

    def locate(self, local: PixelCoordinate) -> GridPosition:
        cfg = self._config
        col_f = (local.x - cfg.left_padding) / cfg.tile_width
        row = math.floor(local.y / cfg.tile_height)
        col = math.floor(col_f)
        ratio = col_f % 1
        slot = self.slot_for_ratio(ratio)
        logger.debug(
            "eye (%d, %d) -> row %d col %d ratio %.3f slot %d",
            local.x, local.y, row, col, ratio, slot,
        )
        return GridPosition(row=row, col=col, slot=slot)


def place(grid: TrigramGrid, position: GridPosition, direction: Direction) -> TrigramGrid:
    """Return a new grid with one eye written in.

    Missing rows are appended empty, and a short row is padded with
    all-center trigrams up to the target column. Existing cells keep
    their indices.
    """
    if position.row < 0 or position.col < 0:
        raise ValueError(f"Grid position must be non-negative, got {position}")

    rows = list(grid.rows)
    while len(rows) <= position.row:
        rows.append(())

    row = list(rows[position.row])
    if len(row) <= position.col:
        row.extend(Trigram() for _ in range(position.col + 1 - len(row)))

    row[position.col] = row[position.col].with_slot(position.slot, direction)
    rows[position.row] = tuple(row)
    return TrigramGrid(rows=tuple(rows))


def build_grid(
    placements: Iterable[tuple[PixelCoordinate, Direction]],
    mapper: GridMapper | None = None,
) -> TrigramGrid:
    """Fold (message-local center, direction) pairs into a TrigramGrid.

    Eyes that map to a negative row or column lie outside the message
    area and are skipped. Writing the same slot twice keeps the later
    direction.
    """
    mapper = mapper or GridMapper()
    grid = TrigramGrid()
    seen: set[tuple[int, int, int]] = set()

    for local, direction in placements:
        position = mapper.locate(local)
        if position.row < 0 or position.col < 0:
            logger.warning(
                "Eye at (%d, %d) lies outside the message area, skipping",
                local.x, local.y,
            )
            continue

        key = (position.row, position.col, position.slot)
        if key in seen:
            logger.warning(
                "Slot %d of trigram (%d, %d) written more than once",
                position.slot, position.row, position.col,
            )
        seen.add(key)
        grid = place(grid, position, direction)

    return grid
