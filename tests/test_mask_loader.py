import cv2
import numpy as np
import pytest

from navgrid.common.exceptions import InvalidGeometryError
from navgrid.core.mask_loader import load_obstruction_mask, mask_to_obstruction
from navgrid.path_planner.nav_surface import build_surface_from_mask


def make_mask():
    # black = free, white = blocked; top image row is the far end of the plane
    mask = np.zeros((4, 4), dtype=np.uint8)
    mask[0, :] = 255
    mask[2, 1] = 200
    return mask


def test_mask_to_obstruction_flips_rows():
    blocked = mask_to_obstruction(make_mask())
    assert blocked.dtype == bool
    assert blocked[3].all()
    assert blocked[1, 1]
    assert blocked.sum() == 5


def test_non_square_mask_rejected():
    with pytest.raises(InvalidGeometryError):
        mask_to_obstruction(np.zeros((3, 4), dtype=np.uint8))


def test_load_obstruction_mask_from_file(tmp_path):
    path = tmp_path / "mask.png"
    cv2.imwrite(str(path), make_mask())
    blocked = load_obstruction_mask(path)
    np.testing.assert_array_equal(blocked, mask_to_obstruction(make_mask()))


def test_missing_mask_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obstruction_mask(tmp_path / "missing.png")


def test_surface_from_mask(tmp_path):
    path = tmp_path / "mask.png"
    cv2.imwrite(str(path), make_mask())
    surface = build_surface_from_mask(path, 8.0)

    assert surface.geometry.side_cell_count == 4
    assert surface.geometry.cell_size == 2.0
    assert surface.obstruction.is_blocked((0, 3))
    assert not surface.obstruction.is_blocked((0, 0))


def test_colored_and_dark_pixels_are_blocked(tmp_path):
    mask = np.zeros((4, 4, 3), dtype=np.uint8)
    mask[3, 0] = (255, 0, 0)   # blue, bottom-left corner
    mask[0, 3] = (0, 0, 255)   # red, top-right corner
    mask[1, 1] = (30, 30, 30)  # dark gray
    path = tmp_path / "colored.png"
    cv2.imwrite(str(path), mask)

    blocked = load_obstruction_mask(path)

    assert blocked[0, 0]
    assert blocked[3, 3]
    assert blocked[2, 1]
    assert blocked.sum() == 3


def test_only_pure_black_is_free():
    mask = np.full((3, 3), 1, dtype=np.uint8)
    mask[1, 1] = 0
    blocked = mask_to_obstruction(mask)
    assert not blocked[1, 1]
    assert blocked.sum() == 8
