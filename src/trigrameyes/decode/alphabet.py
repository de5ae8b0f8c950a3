"""Externally supplied glyph tables for canonical indices.

No alphabet is built in. A table is a YAML mapping from canonical class
index to glyph, for example::

    0: a
    1: b
    17: " "
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

UNMAPPED_GLYPH = "?"


class AlphabetLoadError(Exception):
    """Raised when a glyph table file is missing, unreadable or malformed."""


class AlphabetTable:
    """Lookup from canonical index to glyph."""

    def __init__(self, glyphs: Mapping[int, str], unmapped: str = UNMAPPED_GLYPH) -> None:
        self._glyphs = {int(index): str(glyph) for index, glyph in glyphs.items()}
        self._unmapped = unmapped

    @classmethod
    def from_yaml(cls, path: Path | str) -> AlphabetTable:
        """Load a table from a YAML mapping of index to glyph.

        Raises:
            AlphabetLoadError: If the file cannot be read, is not valid
                YAML, or does not map integer indices to glyphs.
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise AlphabetLoadError(f"Cannot load alphabet {path}: {e}") from e
        if not isinstance(data, dict):
            raise AlphabetLoadError(f"Alphabet file {path} must contain a mapping")
        try:
            table = cls(data)
        except (TypeError, ValueError) as e:
            raise AlphabetLoadError(f"Alphabet file {path} has a non-integer index: {e}") from e
        logger.info("Loaded %d glyphs from %s", len(table), path)
        return table

    def __len__(self) -> int:
        return len(self._glyphs)

    def glyph(self, index: int) -> str:
        return self._glyphs.get(index, self._unmapped)

    def render(self, indices: Iterable[Iterable[int]]) -> list[str]:
        """One string per row."""
        return ["".join(self.glyph(i) for i in row) for row in indices]
