"""Congruence classes of trigram triangles.

The three pupils of a trigram sit near fixed positions inside the icon,
each nudged one pixel by its gaze direction. Joining the three pupils
gives a triangle, and trigrams whose triangles are congruent (same three
side lengths) are treated as the same symbol.

A triangle's signature is its squared side lengths sorted ascending. The
signature ignores vertex order and does not distinguish a triangle from
its mirror image, so reflected pairs share a class.
"""

from __future__ import annotations

import itertools
import logging
from functools import lru_cache

from trigrameyes.decode.base import (
    DecodeMethod,
    InvalidTrigramCode,
    UnmatchedTriangleSignature,
    register_method,
)
from trigrameyes.decode.encoder import encode
from trigrameyes.domain.models import Direction, Trigram

logger = logging.getLogger(__name__)

Point = tuple[int, int]
TriangleSignature = tuple[int, int, int]

# Nominal centered-pupil positions within one icon, slot 0 at the origin
BASE_VERTICES: tuple[Point, Point, Point] = ((0, 0), (6, 7), (12, 0))

OFFSETS: dict[Direction, Point] = {
    Direction.CENTER: (0, 0),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


def _squared_distance(a: Point, b: Point) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def triangle_points(trigram: Trigram) -> tuple[Point, Point, Point]:
    """Pupil positions of a trigram."""
    p0, p1, p2 = (
        (vx + OFFSETS[d][0], vy + OFFSETS[d][1])
        for (vx, vy), d in zip(BASE_VERTICES, trigram.slots)
    )
    return p0, p1, p2


def signature(points: tuple[Point, Point, Point]) -> TriangleSignature:
    p0, p1, p2 = points
    a, b, c = sorted(
        (
            _squared_distance(p1, p0),
            _squared_distance(p2, p1),
            _squared_distance(p0, p2),
        )
    )
    return a, b, c


class TriangleCatalog:
    """Signatures of all 125 trigrams and their deduplicated classes.

    Built purely from BASE_VERTICES and OFFSETS, so every build is
    identical. Trigrams are enumerated in lexicographic direction order,
    which makes the enumeration position equal to the encoder's code.
    """

    def __init__(self) -> None:
        signatures: list[TriangleSignature] = []
        for slots in itertools.product(Direction, repeat=3):
            trigram = Trigram(slots=slots)
            code = encode(trigram)
            if code != len(signatures):
                raise UnmatchedTriangleSignature(
                    f"Enumeration out of step with encoder at {trigram} (code {code})"
                )
            signatures.append(signature(triangle_points(trigram)))

        unique: list[TriangleSignature] = []
        index_of: dict[TriangleSignature, int] = {}
        for sig in signatures:
            if sig not in index_of:
                index_of[sig] = len(unique)
                unique.append(sig)

        self._signatures: tuple[TriangleSignature, ...] = tuple(signatures)
        self._unique: tuple[TriangleSignature, ...] = tuple(unique)
        self._index_of = index_of
        logger.debug(
            "Triangle catalog: %d codes, %d unique classes",
            len(self._signatures), len(self._unique),
        )

    @property
    def signatures(self) -> tuple[TriangleSignature, ...]:
        """Signature per code, indexed by code."""
        return self._signatures

    @property
    def unique_signatures(self) -> tuple[TriangleSignature, ...]:
        """Distinct signatures in first-occurrence order."""
        return self._unique

    def signature(self, code: int) -> TriangleSignature:
        """Signature of ``code``.

        Raises:
            InvalidTrigramCode: If ``code`` is outside 0..124.
        """
        if not 0 <= code < len(self._signatures):
            raise InvalidTrigramCode(f"Trigram code out of range: {code}")
        return self._signatures[code]

    def decode(self, code: int) -> int:
        """Canonical class index of ``code``.

        Raises:
            InvalidTrigramCode: If ``code`` is outside 0..124.
            UnmatchedTriangleSignature: If the code's signature is not in
                the unique list.
        """
        sig = self.signature(code)
        try:
            return self._index_of[sig]
        except KeyError:
            raise UnmatchedTriangleSignature(
                f"Signature {sig} of code {code} has no canonical class"
            ) from None

    def members(self, index: int) -> list[int]:
        """All codes belonging to canonical class ``index``."""
        sig = self._unique[index]
        return [code for code, s in enumerate(self._signatures) if s == sig]


@lru_cache(maxsize=1)
def default_catalog() -> TriangleCatalog:
    """Shared catalog; construction is pure so one instance serves all images."""
    return TriangleCatalog()


@register_method
class UniqueTrianglesMethod(DecodeMethod):
    """Decode by triangle congruence class."""

    name = "unique_triangles"

    def __init__(self, catalog: TriangleCatalog | None = None) -> None:
        self._catalog = catalog or default_catalog()

    def decode(self, code: int) -> int:
        return self._catalog.decode(code)
