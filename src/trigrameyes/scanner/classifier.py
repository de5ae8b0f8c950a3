"""Gaze direction classification for a single eye.

The pupil shifts inside the eye outline, so a few pixels around the iris
center reveal the direction. Probes are checked in a fixed priority
order and the first dark one wins; this also settles malformed icons
where more than one probe is dark.
"""

from __future__ import annotations

import numpy as np

from trigrameyes.domain.models import Direction, PixelCoordinate
from trigrameyes.utils.imaging import brightness_mask

# (dx, dy) offsets from the iris center, highest priority first
PROBES: tuple[tuple[int, int, Direction], ...] = (
    (0, 2, Direction.DOWN),
    (0, -2, Direction.UP),
    (1, -2, Direction.RIGHT),
    (-1, -2, Direction.LEFT),
)


def _is_dark(mask: np.ndarray, x: int, y: int) -> bool:
    """Pixels outside the image count as bright."""
    h, w = mask.shape
    if not (0 <= x < w and 0 <= y < h):
        return False
    return not mask[y, x]


def classify_direction(image: np.ndarray, center: PixelCoordinate) -> Direction:
    """Return the gaze direction of the eye whose iris is at ``center``.

    Args:
        image: RGBA image array or a precomputed boolean brightness mask.
        center: Iris center in image (not message-local) coordinates.
    """
    mask = image if image.dtype == bool else brightness_mask(image)
    for dx, dy, direction in PROBES:
        if _is_dark(mask, center.x + dx, center.y + dy):
            return direction
    return Direction.CENTER
