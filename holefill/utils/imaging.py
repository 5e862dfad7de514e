"""Image file I/O — decoding to sample arrays and encoding filled grids."""

from __future__ import annotations

import base64
import binascii
import io
import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from holefill.engine.config import HOLE_VALUE
from holefill.engine.entities import PixelGrid

logger = logging.getLogger(__name__)


def load_samples(path: str | Path) -> NDArray[np.uint8]:
    """Read an image file as an (H, W, 3) RGB uint8 array."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Image not found: {path}")
    with Image.open(path) as img:
        return np.array(img.convert("RGB"))


def grid_to_array(grid: PixelGrid) -> NDArray[np.uint8]:
    """Scale a filled grid to an (H, W) 8-bit grayscale array.

    Pixels still holding the hole sentinel are written as black.
    """
    values = grid.to_array()
    unfilled = values == HOLE_VALUE
    if np.any(unfilled):
        logger.warning("Encoding %d unfilled hole pixels as black", int(unfilled.sum()))
    values = np.clip(values, 0.0, 1.0)
    return np.round(values * 255.0).astype(np.uint8)


def grid_to_image(grid: PixelGrid) -> Image.Image:
    return Image.fromarray(grid_to_array(grid))


def save_grid(grid: PixelGrid, path: str | Path) -> Path:
    path = Path(path)
    grid_to_image(grid).save(path)
    logger.info("Image saved: %s", path.resolve())
    return path


def filled_output_path(image_path: str | Path, suffix: str = "_FILLED") -> Path:
    """``photo.png`` → ``photo_FILLED.png`` next to the input."""
    path = Path(image_path)
    if not path.suffix:
        raise ValueError(f"Invalid image format: {image_path}")
    return path.with_name(f"{path.stem}{suffix}{path.suffix}")


def make_rect_mask(
    shape: tuple[int, int],
    top: int,
    left: int,
    bottom: int,
    right: int,
) -> NDArray[np.uint8]:
    """White (H, W, 3) mask with a black hole over rows top..bottom, cols left..right (inclusive)."""
    height, width = shape
    mask = np.full((height, width, 3), 255, dtype=np.uint8)
    mask[max(top, 0) : bottom + 1, max(left, 0) : right + 1] = 0
    return mask


def encode_png_b64(img: Image.Image) -> str:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")


def decode_image_b64(data: str) -> NDArray[np.uint8]:
    """Decode a base64 image (optionally a ``data:`` URL) to an RGB array."""
    if data.startswith("data:"):
        _, _, data = data.partition(",")
    try:
        raw = base64.b64decode(data, validate=True)
        with Image.open(io.BytesIO(raw)) as img:
            return np.array(img.convert("RGB"))
    except (binascii.Error, UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Could not decode image: {e}") from e
