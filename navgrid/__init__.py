#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航栅格模块

在正方形障碍栅格上规划平滑的可行走路径。
"""

from .common.exceptions import NavigationError, InvalidGeometryError, OutOfBoundsError
from .core.grid_geometry import GridGeometry
from .core.obstruction_map import ObstructionMap
from .path_planner.nav_surface import (
    NavSurface,
    build_surface,
    build_surface_from_config,
    build_surface_from_mask,
    find_path,
)
from .nav_runtime.waypoint_tracker import WaypointTracker

__all__ = [
    'NavigationError',
    'InvalidGeometryError',
    'OutOfBoundsError',
    'GridGeometry',
    'ObstructionMap',
    'NavSurface',
    'build_surface',
    'build_surface_from_config',
    'build_surface_from_mask',
    'find_path',
    'WaypointTracker',
]
