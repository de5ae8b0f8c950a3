"""Core domain models for the trigrameyes system.

These models represent the data flowing through the pipeline: eye
positions found by the scanner, the trigram grid assembled from them,
and the decoded canonical-index grid produced at the end.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Direction(str, enum.Enum):
    """Gaze direction of a single eye.

    Member order matters: it is the digit order used by the encoder and
    the enumeration order used by the triangle catalog.
    """

    CENTER = "c"
    LEFT = "l"
    RIGHT = "r"
    UP = "u"
    DOWN = "d"


# ---------------------------------------------------------------------------
# Scanner Models
# ---------------------------------------------------------------------------


class PixelCoordinate(BaseModel):
    """An integer (x, y) position, origin at the top-left."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class EyeLocation(BaseModel):
    """One detected eye.

    ``pixel`` is the iris center in image coordinates and is what the
    direction classifier probes around. ``local`` is the same center
    relative to the message anchor and is what the grid mapper tiles.
    """

    model_config = ConfigDict(frozen=True)

    pixel: PixelCoordinate
    local: PixelCoordinate


class ScanResult(BaseModel):
    """Output of one pass of the scanner over an image."""

    model_config = ConfigDict(frozen=True)

    anchor: PixelCoordinate | None = Field(
        default=None, description="Message origin, or None if no anchor matched"
    )
    eyes: tuple[EyeLocation, ...] = Field(
        default=(), description="Eye centers in raster order"
    )

    @property
    def origin(self) -> PixelCoordinate:
        """The anchor, or (0, 0) when no anchor was found."""
        return self.anchor if self.anchor is not None else PixelCoordinate(x=0, y=0)


# ---------------------------------------------------------------------------
# Trigram Models
# ---------------------------------------------------------------------------


class Trigram(BaseModel):
    """Three eye directions, slot 0 to slot 2 left-to-right."""

    model_config = ConfigDict(frozen=True)

    slots: tuple[Direction, Direction, Direction] = Field(
        default=(Direction.CENTER, Direction.CENTER, Direction.CENTER)
    )

    @classmethod
    def from_string(cls, text: str) -> Trigram:
        """Build a trigram from its three-letter form, e.g. ``"clr"``."""
        if len(text) != 3:
            raise ValueError(f"Trigram string must have 3 characters, got {text!r}")
        return cls(slots=tuple(Direction(symbol) for symbol in text))

    def with_slot(self, slot: int, direction: Direction) -> Trigram:
        """Return a copy with one slot replaced."""
        slots = list(self.slots)
        slots[slot] = direction
        return Trigram(slots=tuple(slots))

    def __str__(self) -> str:
        return "".join(direction.value for direction in self.slots)


class TrigramGrid(BaseModel):
    """Rows of trigrams, indexed by (row, col).

    Rows may have different lengths since columns are only created when an
    eye lands in them. Any cell outside the stored rows reads as an
    all-center trigram.
    """

    model_config = ConfigDict(frozen=True)

    rows: tuple[tuple[Trigram, ...], ...] = Field(default=())

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self.rows), default=0)

    def cell(self, row: int, col: int) -> Trigram:
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return Trigram()

    def to_strings(self) -> list[list[str]]:
        """Nested lists of three-letter trigram strings."""
        return [[str(trigram) for trigram in row] for row in self.rows]


# ---------------------------------------------------------------------------
# Decode Models
# ---------------------------------------------------------------------------


class DecodedMessage(BaseModel):
    """Final output for one image."""

    model_config = ConfigDict(frozen=True)

    grid: TrigramGrid
    method: str | None = Field(
        default=None, description="Decode method applied, or None if decoding was skipped"
    )
    codes: tuple[tuple[int, ...], ...] = Field(
        default=(), description="Base-5 code (0-124) per cell"
    )
    indices: tuple[tuple[int, ...], ...] = Field(
        default=(), description="Canonical congruence-class index per cell"
    )
