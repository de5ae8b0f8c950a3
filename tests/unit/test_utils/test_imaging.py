"""Tests for image loading and overlay rendering."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from trigrameyes.domain.models import Direction, EyeLocation, PixelCoordinate
from trigrameyes.utils.imaging import (
    ImageLoadError,
    OverlayWriteError,
    brightness_mask,
    draw_eye_overlay,
    load_rgba,
    save_overlay,
)


class TestLoadRgba:
    def test_rgb_png_gains_alpha(self, tmp_path: Path) -> None:
        rgb = np.zeros((6, 8, 3), dtype=np.uint8)
        rgb[2, 3] = (200, 10, 20)
        path = tmp_path / "rgb.png"
        Image.fromarray(rgb).save(path)

        loaded = load_rgba(path)
        assert loaded.shape == (6, 8, 4)
        assert loaded.dtype == np.uint8
        assert tuple(loaded[2, 3]) == (200, 10, 20, 255)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ImageLoadError, match="missing.png"):
            load_rgba(tmp_path / "missing.png")

    def test_not_an_image(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.png"
        path.write_text("not really a png")
        with pytest.raises(ImageLoadError):
            load_rgba(path)


class TestBrightnessMask:
    def test_uses_channel_zero_only(self) -> None:
        image = np.zeros((1, 2, 4), dtype=np.uint8)
        image[0, 0] = (0, 255, 255, 255)
        image[0, 1] = (1, 0, 0, 0)
        assert brightness_mask(image).tolist() == [[False, True]]


class TestOverlay:
    def test_draw_and_save(self, single_eye_image: np.ndarray, tmp_path: Path) -> None:
        eye = EyeLocation(pixel=PixelCoordinate(x=5, y=12), local=PixelCoordinate(x=3, y=10))
        canvas = draw_eye_overlay(single_eye_image, [(eye, Direction.DOWN)], scale=4)
        assert canvas.shape == (120, 160, 3)
        assert single_eye_image.shape == (30, 40, 4)

        out = tmp_path / "debug" / "eyes.png"
        save_overlay(canvas, out)
        assert out.exists()

    def test_save_into_file_path_fails(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(OverlayWriteError, match="blocker"):
            save_overlay(np.zeros((4, 4, 3), dtype=np.uint8), blocker / "eyes.png")

    def test_unknown_extension_fails(self, tmp_path: Path) -> None:
        with pytest.raises(OverlayWriteError):
            save_overlay(np.zeros((4, 4, 3), dtype=np.uint8), tmp_path / "eyes.notaformat")
