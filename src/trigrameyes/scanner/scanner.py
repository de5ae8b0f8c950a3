"""Raster template matching for anchors and irises.

Both templates are boolean: True cells must be bright (channel 0 > 0) and
False cells must be dark. A position matches only if every cell agrees.
Templates are indexed [row][col], i.e. [y][x].

Matches are always reported in raster order: top-to-bottom, then
left-to-right within a row. The first anchor in that order is the message
origin, so changing the order changes the result.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from trigrameyes.domain.models import EyeLocation, PixelCoordinate, ScanResult
from trigrameyes.utils.imaging import brightness_mask

logger = logging.getLogger(__name__)

# Left corner of the first eye in a message, 3 wide by 7 tall
ANCHOR_TEMPLATE: np.ndarray = np.array(
    [
        [True, True, True],
        [True, True, False],
        [True, False, True],
        [False, True, True],
        [True, False, True],
        [True, True, False],
        [True, True, True],
    ],
    dtype=bool,
)

# Plus-shaped dark pupil
IRIS_TEMPLATE: np.ndarray = np.array(
    [
        [True, False, True],
        [False, False, False],
        [True, False, True],
    ],
    dtype=bool,
)


def match_template(mask: np.ndarray, template: np.ndarray) -> list[PixelCoordinate]:
    """Top-left corners of every exact template match, in raster order.

    Positions where the template would run past the right or bottom edge
    are never candidates.
    """
    th, tw = template.shape
    h, w = mask.shape
    if h < th or w < tw:
        return []

    windows = sliding_window_view(mask, (th, tw))
    hits = np.all(windows == template, axis=(2, 3))
    # argwhere walks in C order, which is row-major raster order
    return [PixelCoordinate(x=int(x), y=int(y)) for y, x in np.argwhere(hits)]


class Scanner:
    """Locates the message anchor and all eye centers in an image.

    Example usage::

        result = Scanner().scan(load_rgba("message.png"))
        for eye in result.eyes:
            print(eye.local)
    """

    def __init__(
        self,
        anchor_template: np.ndarray = ANCHOR_TEMPLATE,
        iris_template: np.ndarray = IRIS_TEMPLATE,
    ) -> None:
        self._anchor_template = anchor_template
        self._iris_template = iris_template

    def find_anchor(self, mask: np.ndarray) -> PixelCoordinate | None:
        """The first anchor match in raster order, if any."""
        th, tw = self._anchor_template.shape
        h, w = mask.shape
        if h < th or w < tw:
            return None
        for y in range(h - th + 1):
            # Row-by-row so the search stops at the first hit
            band = sliding_window_view(mask[y : y + th], (th, tw))[0]
            hits = np.flatnonzero(np.all(band == self._anchor_template, axis=(1, 2)))
            if hits.size:
                return PixelCoordinate(x=int(hits[0]), y=y)
        return None

    def scan(self, image: np.ndarray) -> ScanResult:
        """Find the anchor and every iris in an image.

        Accepts an RGBA array or a precomputed boolean brightness mask.
        Eye centers are the iris match position plus (1, 1). Local
        coordinates subtract the anchor; with no anchor they equal the
        pixel coordinates.
        """
        mask = image if image.dtype == bool else brightness_mask(image)
        anchor = self.find_anchor(mask)
        if anchor is None:
            logger.warning("No message anchor found; eye coordinates are uncorrected")
            origin = PixelCoordinate(x=0, y=0)
        else:
            logger.info("Message anchor at (%d, %d)", anchor.x, anchor.y)
            origin = anchor

        cy, cx = (s // 2 for s in self._iris_template.shape)
        eyes = []
        for corner in match_template(mask, self._iris_template):
            pixel = PixelCoordinate(x=corner.x + cx, y=corner.y + cy)
            local = PixelCoordinate(x=pixel.x - origin.x, y=pixel.y - origin.y)
            eyes.append(EyeLocation(pixel=pixel, local=local))

        logger.info("Found %d eyes", len(eyes))
        return ScanResult(anchor=anchor, eyes=tuple(eyes))
