"""Image loading and debug rendering for trigrameyes.

The pipeline works on RGBA numpy arrays of shape (height, width, 4) and
only ever reads channel 0. Loading goes through Pillow so channel 0 is
red regardless of the file format; the debug overlay is drawn with
OpenCV.
"""

from __future__ import annotations

import logging
from pathlib import Path

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from trigrameyes.domain.models import Direction, EyeLocation

logger = logging.getLogger(__name__)

_OVERLAY_COLORS: dict[Direction, tuple[int, int, int]] = {
    Direction.CENTER: (128, 128, 128),
    Direction.LEFT: (255, 0, 0),
    Direction.RIGHT: (0, 0, 255),
    Direction.UP: (0, 200, 0),
    Direction.DOWN: (0, 200, 200),
}


class ImageLoadError(Exception):
    """Raised when an image file cannot be opened or decoded."""


class OverlayWriteError(Exception):
    """Raised when a debug overlay cannot be written to disk."""


def load_rgba(path: Path | str) -> np.ndarray:
    """Load an image file as an RGBA uint8 array.

    Raises:
        ImageLoadError: If the path is missing, unreadable, or not an
            image format Pillow understands.
    """
    path = Path(path)
    try:
        with Image.open(path) as image:
            rgba = np.array(image.convert("RGBA"))
    except (OSError, UnidentifiedImageError) as e:
        raise ImageLoadError(f"Problem opening {path}: {e}") from e

    logger.debug("Loaded %s (%dx%d)", path, rgba.shape[1], rgba.shape[0])
    return rgba


def brightness_mask(image: np.ndarray) -> np.ndarray:
    """Boolean (height, width) mask of pixels whose channel 0 is > 0."""
    channel = image[..., 0] if image.ndim == 3 else image
    return channel > 0


def draw_eye_overlay(
    image: np.ndarray,
    eyes: list[tuple[EyeLocation, Direction]],
    scale: int = 4,
) -> np.ndarray:
    """Render detected eyes on an upscaled BGR copy of the image.

    Each eye gets a circle around its iris and its direction letter,
    colored per direction. Returns a new array; the input is untouched.
    """
    rgb = image[..., :3] if image.ndim == 3 else np.dstack([image] * 3)
    bgr = cv2.cvtColor(np.ascontiguousarray(rgb, dtype=np.uint8), cv2.COLOR_RGB2BGR)
    h, w = bgr.shape[:2]
    canvas = cv2.resize(bgr, (w * scale, h * scale), interpolation=cv2.INTER_NEAREST)

    for eye, direction in eyes:
        rgb_color = _OVERLAY_COLORS[direction]
        color = (rgb_color[2], rgb_color[1], rgb_color[0])
        center = (eye.pixel.x * scale + scale // 2, eye.pixel.y * scale + scale // 2)
        cv2.circle(canvas, center, 2 * scale, color, 1)
        cv2.putText(
            canvas,
            direction.value,
            (center[0] + 2 * scale, center[1] - 2 * scale),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.1 * scale,
            color,
            1,
        )
    return canvas


def save_overlay(canvas: np.ndarray, path: Path | str) -> None:
    """Write a rendered overlay to disk.

    Raises:
        OverlayWriteError: If the directory cannot be created or OpenCV
            fails to encode or write the file.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        written = cv2.imwrite(str(path), canvas)
    except (OSError, cv2.error) as e:
        raise OverlayWriteError(f"Failed to write overlay image to {path}: {e}") from e
    if not written:
        raise OverlayWriteError(f"Failed to write overlay image to {path}")
    logger.info("Saved eye overlay to %s", path)
