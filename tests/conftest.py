"""Shared test fixtures for the trigrameyes test suite.

Provides synthetic RGBA images with hand-placed anchors and eyes so the
scanner, classifier and grid mapper can be tested without real
screenshots.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from trigrameyes.domain.models import Direction
from trigrameyes.scanner.scanner import ANCHOR_TEMPLATE, IRIS_TEMPLATE

BRIGHT = 255
DARK = 0

# Probe pixel darkened to make an eye look a given way
_DIRECTION_PIXEL: dict[Direction, tuple[int, int]] = {
    Direction.DOWN: (0, 2),
    Direction.UP: (0, -2),
    Direction.RIGHT: (1, -2),
    Direction.LEFT: (-1, -2),
}


class SyntheticImage:
    """An all-bright RGBA image that anchors and eyes can be drawn on."""

    def __init__(self, width: int, height: int) -> None:
        self.image = np.full((height, width, 4), BRIGHT, dtype=np.uint8)

    def stamp(self, template: np.ndarray, x: int, y: int) -> SyntheticImage:
        """Write a boolean template into channel 0 with its top-left at (x, y)."""
        th, tw = template.shape
        self.image[y : y + th, x : x + tw, 0] = np.where(template, BRIGHT, DARK)
        return self

    def anchor(self, x: int, y: int) -> SyntheticImage:
        return self.stamp(ANCHOR_TEMPLATE, x, y)

    def eye(
        self, cx: int, cy: int, direction: Direction = Direction.CENTER
    ) -> SyntheticImage:
        """Draw an iris centered at (cx, cy) looking ``direction``."""
        self.stamp(IRIS_TEMPLATE, cx - 1, cy - 1)
        if direction in _DIRECTION_PIXEL:
            dx, dy = _DIRECTION_PIXEL[direction]
            self.image[cy + dy, cx + dx, 0] = DARK
        return self

    def dark(self, x: int, y: int) -> SyntheticImage:
        self.image[y, x, 0] = DARK
        return self


@pytest.fixture
def canvas() -> Callable[[int, int], SyntheticImage]:
    """Factory for blank synthetic images of a given size."""
    return SyntheticImage


@pytest.fixture
def single_eye_image() -> np.ndarray:
    """One anchor at (2, 2) and one downward eye in slot 0 of trigram (0, 0).

    The eye center is (5, 12), i.e. message-local (3, 10).
    """
    return SyntheticImage(40, 30).anchor(2, 2).eye(5, 12, Direction.DOWN).image
