"""Tests for the command-line front end."""

import numpy as np
import pytest
from PIL import Image

from holefill.cli import main
from holefill.utils.imaging import make_rect_mask


@pytest.fixture
def image_and_mask(tmp_path):
    image = np.tile(np.linspace(0, 255, 16, dtype=np.uint8), (16, 1))
    image_path = tmp_path / "scene.png"
    mask_path = tmp_path / "mask.png"
    Image.fromarray(image).save(image_path)
    Image.fromarray(make_rect_mask((16, 16), 5, 5, 9, 9)).save(mask_path)
    return image_path, mask_path


def test_fills_and_writes_default_output(image_and_mask):
    image_path, mask_path = image_and_mask
    assert main([str(image_path), str(mask_path), "8", "3", "0.01"]) == 0

    out = image_path.with_name("scene_FILLED.png")
    assert out.exists()
    with Image.open(out) as img:
        filled = np.array(img)
    assert filled.shape == (16, 16)
    # Outside the hole the image is unchanged
    with Image.open(image_path) as img:
        original = np.array(img)
    assert (filled[0] == original[0]).all()


def test_approximate_with_explicit_output(image_and_mask, tmp_path):
    image_path, mask_path = image_and_mask
    out = tmp_path / "approx.png"
    args = [str(image_path), str(mask_path), "4", "2", "0.01", "-s", "Approximate", "-k", "6", "-o", str(out)]
    assert main(args) == 0
    assert out.exists()


@pytest.mark.parametrize(
    "args",
    [
        ["5", "3", "0.01"],   # bad connectivity
        ["8", "3", "0"],      # non-positive epsilon
    ],
)
def test_invalid_parameters_exit_1(image_and_mask, args):
    image_path, mask_path = image_and_mask
    assert main([str(image_path), str(mask_path), *args]) == 1
    assert not image_path.with_name("scene_FILLED.png").exists()


def test_zero_clusters_exit_1(image_and_mask):
    image_path, mask_path = image_and_mask
    assert main([str(image_path), str(mask_path), "8", "3", "0.01", "-s", "Approximate", "-k", "0"]) == 1


def test_missing_file_exit_1(image_and_mask, tmp_path):
    image_path, _ = image_and_mask
    assert main([str(image_path), str(tmp_path / "nope.png"), "8", "3", "0.01"]) == 1


def test_dimension_mismatch_exit_1(image_and_mask, tmp_path):
    image_path, _ = image_and_mask
    small_mask = tmp_path / "small.png"
    Image.fromarray(make_rect_mask((8, 8), 2, 2, 4, 4)).save(small_mask)
    assert main([str(image_path), str(small_mask), "8", "3", "0.01"]) == 1


def test_usage_error_exits_2():
    with pytest.raises(SystemExit) as info:
        main(["only-one-arg"])
    assert info.value.code == 2


def test_non_numeric_argument_exits_2(image_and_mask):
    image_path, mask_path = image_and_mask
    with pytest.raises(SystemExit) as info:
        main([str(image_path), str(mask_path), "eight", "3", "0.01"])
    assert info.value.code == 2


@pytest.mark.parametrize("z", ["nan", "inf"])
def test_non_finite_z_exit_1(image_and_mask, z):
    image_path, mask_path = image_and_mask
    assert main([str(image_path), str(mask_path), "8", z, "0.01"]) == 1
    assert not image_path.with_name("scene_FILLED.png").exists()
