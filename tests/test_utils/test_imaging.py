"""Tests for image file I/O helpers."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from holefill.engine.config import HOLE_VALUE
from holefill.engine.entities import PixelGrid
from holefill.utils.imaging import (
    decode_image_b64,
    encode_png_b64,
    filled_output_path,
    grid_to_array,
    load_samples,
    make_rect_mask,
    save_grid,
)


def test_filled_output_path():
    assert filled_output_path("dir/photo.png") == Path("dir/photo_FILLED.png")
    assert filled_output_path("photo.jpg", "_out") == Path("photo_out.jpg")


def test_filled_output_path_requires_extension():
    with pytest.raises(ValueError):
        filled_output_path("photo")


def test_make_rect_mask():
    mask = make_rect_mask((5, 6), 1, 2, 3, 4)
    assert mask.shape == (5, 6, 3)
    assert (mask[1:4, 2:5] == 0).all()
    assert mask[0, 0].tolist() == [255, 255, 255]
    assert int((mask[:, :, 0] == 0).sum()) == 9


def test_grid_to_array_scales_and_blackens_holes():
    grid = PixelGrid.from_array(np.array([[0.0, 1.0], [0.5, HOLE_VALUE]]))
    arr = grid_to_array(grid)
    assert arr.dtype == np.uint8
    assert arr.tolist() == [[0, 255], [128, 0]]


def test_load_samples_converts_to_rgb(tmp_path):
    path = tmp_path / "gray.png"
    Image.fromarray(np.full((3, 4), 200, dtype=np.uint8)).save(path)
    samples = load_samples(path)
    assert samples.shape == (3, 4, 3)
    assert (samples == 200).all()


def test_load_samples_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_samples(tmp_path / "missing.png")


def test_save_grid(tmp_path):
    grid = PixelGrid.from_array(np.array([[0.0, 1.0]]))
    out = save_grid(grid, tmp_path / "out.png")
    with Image.open(out) as img:
        assert img.size == (2, 1)
        assert np.array(img).tolist() == [[0, 255]]


def test_b64_decode_accepts_data_url():
    img = Image.fromarray(np.zeros((2, 2), dtype=np.uint8))
    encoded = encode_png_b64(img)
    samples = decode_image_b64(f"data:image/png;base64,{encoded}")
    assert samples.shape == (2, 2, 3)


def test_b64_decode_rejects_garbage():
    with pytest.raises(ValueError):
        decode_image_b64("not an image!")


def test_grid_to_array_only_blackens_sentinel():
    grid = PixelGrid.from_array(np.array([[HOLE_VALUE, 0.25]]))
    grid[0, 0].intensity = 0.75
    assert grid_to_array(grid).tolist() == [[191, 64]]
