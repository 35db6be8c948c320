import math

import numpy as np

from navgrid.core.grid_geometry import GridGeometry
from navgrid.core.obstruction_map import ObstructionMap
from navgrid.path_planner.cost_model import edge_cost, heuristic, manhattan


def test_edge_cost_orthogonal_and_diagonal():
    geometry = GridGeometry(side_cell_count=4, side_plane_size=8.0)
    assert edge_cost(geometry, (0, 0), (1, 0)) == 2.0
    assert edge_cost(geometry, (1, 1), (1, 2)) == 2.0
    assert math.isclose(edge_cost(geometry, (0, 0), (1, 1)), 2.0 * math.sqrt(2.0))


def test_manhattan():
    assert manhattan((0, 0), (3, 4)) == 7
    assert manhattan((5, 1), (2, 3)) == 5


def test_heuristic_without_obstructions_is_manhattan():
    obstruction = ObstructionMap.from_array(np.zeros((6, 6), dtype=bool))
    assert heuristic(obstruction, 2.0, (5, 5), (1, 2)) == 7


def test_heuristic_penalises_nearby_obstructions():
    grid = np.zeros((5, 5), dtype=bool)
    grid[0, 0] = True
    obstruction = ObstructionMap.from_array(grid)

    # (2, 2) sees the blocked corner in its 5x5 window, (3, 3) does not
    assert heuristic(obstruction, 2.0, (4, 4), (2, 2)) == 4 + 1000.0 * 2.0
    assert heuristic(obstruction, 2.0, (4, 4), (3, 3)) == 2
    assert heuristic(obstruction, 2.0, (4, 4), (2, 2), adj_weight_factor=1.0) == 4 + 2.0


def test_heuristic_counts_every_blocked_cell():
    grid = np.zeros((5, 5), dtype=bool)
    grid[0, :] = True
    obstruction = ObstructionMap.from_array(grid)
    assert heuristic(obstruction, 1.0, (2, 4), (2, 2)) == 2 + 5 * 1000.0
