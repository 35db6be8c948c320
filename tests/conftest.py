import numpy as np
import pytest

from navgrid.path_planner.nav_surface import build_surface


@pytest.fixture
def open_surface():
    """4x4 全可通行平面，栅格边长 1"""
    return build_surface(4, 4.0, np.zeros((4, 4), dtype=bool))


@pytest.fixture
def walled_surface():
    """10x10 平面，第 5 列整列为墙"""
    grid = np.zeros((10, 10), dtype=bool)
    grid[:, 5] = True
    return build_surface(10, 10.0, grid)
