"""End-to-end decoding of one image.

Drives the scanner, classifier and grid mapper to assemble a
TrigramGrid, then runs every cell through the encoder and a decode
method to produce the canonical-index grid.
"""

from __future__ import annotations

import json
import logging

import numpy as np

from trigrameyes.decode.base import DecodeMethod
from trigrameyes.decode.encoder import encode
from trigrameyes.domain.models import DecodedMessage, Direction, ScanResult, TrigramGrid
from trigrameyes.grid.mapper import GridMapper, build_grid
from trigrameyes.scanner.classifier import classify_direction
from trigrameyes.scanner.scanner import Scanner
from trigrameyes.utils.imaging import brightness_mask

logger = logging.getLogger(__name__)


class Decoder:
    """Image to trigram grid to canonical indices.

    Example usage::

        decoder = Decoder(method=get_method("unique_triangles"))
        message = decoder.decode(load_rgba("message.png"))
        print(message.indices)
    """

    def __init__(
        self,
        method: DecodeMethod | None = None,
        scanner: Scanner | None = None,
        mapper: GridMapper | None = None,
    ) -> None:
        self._method = method
        self._scanner = scanner or Scanner()
        self._mapper = mapper or GridMapper()

    def read_eyes(self, image: np.ndarray) -> tuple[ScanResult, list[Direction]]:
        """Scan an image and classify every eye found."""
        mask = brightness_mask(image)
        scan = self._scanner.scan(mask)
        directions = [classify_direction(mask, eye.pixel) for eye in scan.eyes]
        return scan, directions

    def read_grid(self, image: np.ndarray) -> TrigramGrid:
        scan, directions = self.read_eyes(image)
        return self.assemble(scan, directions)

    def assemble(self, scan: ScanResult, directions: list[Direction]) -> TrigramGrid:
        grid = build_grid(
            ((eye.local, direction) for eye, direction in zip(scan.eyes, directions)),
            self._mapper,
        )
        logger.info("Assembled %d rows of trigrams (widest %d)", grid.height, grid.width)
        return grid

    def decode_grid(self, grid: TrigramGrid) -> DecodedMessage:
        """Encode and decode every cell of an assembled grid.

        Without a decode method only the grid is returned.

        Raises:
            DecodeError: If a cell cannot be encoded or decoded.
        """
        if self._method is None:
            return DecodedMessage(grid=grid)

        codes = tuple(tuple(encode(trigram) for trigram in row) for row in grid.rows)
        indices = tuple(tuple(self._method.decode(code) for code in row) for row in codes)
        return DecodedMessage(
            grid=grid, method=self._method.name, codes=codes, indices=indices
        )

    def decode(self, image: np.ndarray) -> DecodedMessage:
        return self.decode_grid(self.read_grid(image))


def grid_to_json(grid: TrigramGrid, indent: int | None = None) -> str:
    """Serialize a grid as nested arrays of three-letter strings."""
    return json.dumps(grid.to_strings(), indent=indent)
