"""Domain models for trigrameyes.

This package contains the core data structures and value objects used
throughout the pipeline. All models use Pydantic v2 and are immutable.
"""

from trigrameyes.domain.models import (
    DecodedMessage,
    Direction,
    EyeLocation,
    PixelCoordinate,
    ScanResult,
    Trigram,
    TrigramGrid,
)

__all__ = [
    "DecodedMessage",
    "Direction",
    "EyeLocation",
    "PixelCoordinate",
    "ScanResult",
    "Trigram",
    "TrigramGrid",
]
