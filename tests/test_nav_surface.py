import numpy as np
import pytest

from navgrid.common.exceptions import InvalidGeometryError, OutOfBoundsError
from navgrid.config.models import PathPlanningConfig
from navgrid.path_planner.nav_surface import build_surface, find_path


def test_open_grid_diagonal_scenario(open_surface):
    geometry = open_surface.geometry
    start = geometry.center_from_cell((0, 0))
    goal = geometry.center_from_cell((3, 3))

    path = open_surface.find_path(start, goal)

    assert len(path) == 2 + 3 * 2
    assert path[0] == start
    assert path[-1] == goal


def test_open_grid_unsmoothed_uses_cell_centers():
    surface = build_surface(
        4, 4.0, np.zeros((4, 4), dtype=bool),
        planning=PathPlanningConfig(enable_smoothing=False),
    )
    geometry = surface.geometry
    start = (1.2, 0.0, 1.8)
    goal = (-1.4, 0.0, -1.6)

    path = surface.find_path(start, goal)

    assert path == [
        start,
        geometry.center_from_cell((1, 1)),
        geometry.center_from_cell((2, 2)),
        goal,
    ]


def test_same_cell_returns_direct_line():
    surface = build_surface(
        4, 4.0, np.zeros((4, 4), dtype=bool),
        planning=PathPlanningConfig(min_smooth_count=2),
    )
    start = (1.9, 0.25, 1.1)
    goal = (1.05, 0.0, 1.95)
    assert surface.find_path(start, goal) == [start, goal]


def test_goal_cell_blocked_returns_empty():
    surface = build_surface(4, 4.0, lambda cell: cell == (3, 3))
    start = surface.geometry.center_from_cell((0, 0))
    goal = surface.geometry.center_from_cell((3, 3))
    assert surface.find_path(start, goal) == []


def test_wall_separating_start_and_goal_returns_empty(walled_surface):
    start = walled_surface.geometry.center_from_cell((1, 1))
    goal = walled_surface.geometry.center_from_cell((8, 8))
    assert walled_surface.find_path(start, goal) == []


def test_ends_are_exact_raw_positions():
    grid = np.zeros((10, 10), dtype=bool)
    grid[:, 5] = True
    grid[5, 5] = False
    surface = build_surface(10, 10.0, grid)
    start = (3.4567, 1.25, 2.0001)
    goal = (-4.3333, 0.5, -3.9876)

    path = surface.find_path(start, goal)

    assert len(path) > 2
    assert path[0] == start
    assert path[-1] == goal
    for point in path[1:-1]:
        assert surface.geometry.contains(point)


def test_find_path_is_deterministic():
    grid = np.zeros((10, 10), dtype=bool)
    grid[2:, 4] = True
    surface = build_surface(10, 10.0, grid)
    start = surface.geometry.center_from_cell((1, 8))
    goal = surface.geometry.center_from_cell((8, 8))
    first = find_path(surface, start, goal)
    assert first
    assert first == surface.find_path(start, goal)


def test_out_of_bounds_rejected_by_default(open_surface):
    with pytest.raises(OutOfBoundsError):
        open_surface.find_path((5.0, 0.0, 0.0), (0.0, 0.0, 0.0))
    with pytest.raises(OutOfBoundsError):
        open_surface.find_path((0.0, 0.0, 0.0), (0.0, 0.0, -2.5))


def test_out_of_bounds_clamped_when_configured():
    surface = build_surface(
        4, 4.0, np.zeros((4, 4), dtype=bool),
        planning=PathPlanningConfig(out_of_bounds="clamp"),
    )
    start = (9.0, 0.0, 9.0)
    goal = (-9.0, 0.0, -9.0)
    path = surface.find_path(start, goal)
    assert path[0] == start
    assert path[-1] == goal
    assert len(path) == 8


def test_far_edge_maps_to_last_cell(open_surface):
    assert open_surface.cell_for((-2.0, 0.0, -2.0)) == (3, 3)
    assert open_surface.cell_for((2.0, 0.0, 2.0)) == (0, 0)


@pytest.mark.parametrize("side, size", [(0, 4.0), (-1, 4.0), (4, 0.0), (4, -2.0)])
def test_invalid_geometry(side, size):
    with pytest.raises(InvalidGeometryError):
        build_surface(side, size, lambda cell: False)


def test_mismatched_grid_size():
    with pytest.raises(InvalidGeometryError):
        build_surface(5, 5.0, np.zeros((4, 4), dtype=bool))


def test_interior_waypoints_use_plane_height():
    surface = build_surface(
        6, 6.0, np.zeros((6, 6), dtype=bool),
        center=(10.0, 2.0, -4.0),
        planning=PathPlanningConfig(enable_smoothing=False),
    )
    start = surface.geometry.center_from_cell((0, 0))
    goal = surface.geometry.center_from_cell((5, 2))
    path = surface.find_path(start, goal)
    assert len(path) == 6
    assert all(point[1] == 2.0 for point in path)


def test_numpy_side_from_array_shape():
    grid = np.zeros((4, 4), dtype=bool)
    surface = build_surface(np.int64(grid.shape[0]), 4.0, grid)
    assert surface.geometry.side_cell_count == 4
    assert surface.find_path((1.5, 0.0, 1.5), (-1.5, 0.0, -1.5))
