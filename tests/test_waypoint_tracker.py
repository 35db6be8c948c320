import pytest

from navgrid.config import load_config
from navgrid.config.models import FollowerConfig
from navgrid.nav_runtime.waypoint_tracker import WaypointTracker


def test_advances_in_order_without_skipping():
    tracker = WaypointTracker(arrival_radius=0.4)
    tracker.set_path([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (2.0, 0.0, 0.0)])

    # one waypoint per update, even when the next one is also close
    assert tracker.update((0.1, 0.0, 0.1)) == (1.0, 0.0, 0.0)
    assert tracker.index == 1
    assert tracker.update((0.5, 0.0, 0.0)) == (1.0, 0.0, 0.0)
    assert tracker.update((1.3, 5.0, -0.3)) == (2.0, 0.0, 0.0)
    assert tracker.update((2.0, 0.0, 0.0)) is None
    assert tracker.finished


def test_arrival_checks_both_horizontal_axes():
    tracker = WaypointTracker(arrival_radius=0.4)
    tracker.set_path([(0.0, 0.0, 0.0)])
    assert tracker.update((0.3, 0.0, 0.5)) == (0.0, 0.0, 0.0)
    assert tracker.update((0.4, 0.0, 0.4)) is None


def test_empty_path_is_finished():
    tracker = WaypointTracker()
    tracker.set_path([])
    assert tracker.finished
    assert tracker.current_target is None
    assert tracker.update((0.0, 0.0, 0.0)) is None


def test_set_path_restarts():
    tracker = WaypointTracker()
    tracker.set_path([(0.0, 0.0, 0.0)])
    tracker.update((0.0, 0.0, 0.0))
    tracker.set_path([(5.0, 0.0, 5.0), (6.0, 0.0, 6.0)])
    assert tracker.index == 0
    assert tracker.current_target == (5.0, 0.0, 5.0)


def test_invalid_radius():
    with pytest.raises(ValueError):
        WaypointTracker(arrival_radius=0.0)


def test_from_config_uses_configured_radius():
    tracker = WaypointTracker.from_config(FollowerConfig(arrival_radius=0.1))
    assert tracker.arrival_radius == 0.1
    tracker.set_path([(0.0, 0.0, 0.0)])
    assert tracker.update((0.2, 0.0, 0.0)) == (0.0, 0.0, 0.0)
    assert tracker.update((0.05, 0.0, 0.0)) is None


def test_from_loaded_config(tmp_path):
    path = tmp_path / "navgrid.yaml"
    path.write_text(
        "surface:\n  side_cell_count: 4\n  side_plane_size: 4.0\nfollower:\n  arrival_radius: 1.5\n",
        encoding="utf-8",
    )
    tracker = WaypointTracker.from_config(load_config(path).follower)
    assert tracker.arrival_radius == 1.5


def test_default_config_radius():
    assert WaypointTracker.from_config(FollowerConfig()).arrival_radius == 0.4
