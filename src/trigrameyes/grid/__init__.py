"""Trigram grid assembly for trigrameyes.

Public API:
    GridMapper -- Pixel position to (row, col, slot)
    GridPosition -- A mapped cell and slot
    place -- Pure single-eye grid update
    build_grid -- Fold a sequence of eyes into a TrigramGrid
"""

from trigrameyes.grid.mapper import GridMapper, GridPosition, build_grid, place

__all__ = ["GridMapper", "GridPosition", "build_grid", "place"]
