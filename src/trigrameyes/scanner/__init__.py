"""Eye scanning module for trigrameyes.

Finds the message anchor and every iris in an image by exact boolean
template matching, and reads the gaze direction of each eye.

Public API:
    Scanner -- Template matcher producing a ScanResult
    classify_direction -- Gaze direction of one eye
"""

from trigrameyes.scanner.classifier import classify_direction
from trigrameyes.scanner.scanner import (
    ANCHOR_TEMPLATE,
    IRIS_TEMPLATE,
    Scanner,
    match_template,
)

__all__ = [
    "ANCHOR_TEMPLATE",
    "IRIS_TEMPLATE",
    "Scanner",
    "classify_direction",
    "match_template",
]
