#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NavSurface

对外的寻路入口：
- 持有栅格几何参数 + 障碍栅格（构建后只读）
- 做 world -> grid 坐标转换，处理越界策略
- 调用 AStarPlanner 进行栅格路径规划
- 输出：首尾为原始起点/终点的世界坐标路径点列表
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from loguru import logger

from navgrid.common.constants import OUT_OF_BOUNDS_REJECT
from navgrid.common.exceptions import OutOfBoundsError
from navgrid.config.models import NavGridConfig, PathPlanningConfig
from navgrid.core.grid_geometry import Cell, GridGeometry, Position3
from navgrid.core.mask_loader import load_obstruction_mask
from navgrid.core.obstruction_map import ObstructionMap, ObstructionSource
from navgrid.path_planner.astar_planner import AStarPlanner
from navgrid.path_planner.path_smoothing import build_waypoints, smooth_corners


def _as_position(position: Sequence[float]) -> Position3:
    if len(position) != 3:
        raise ValueError(f"位置必须是 (x, y, z) 三元组: {position}")
    return (float(position[0]), float(position[1]), float(position[2]))


class NavSurface:
    """
    可寻路的导航平面

    生命周期：

    1. 构建：surface = build_surface(side_cell_count, side_plane_size, source)
    2. 查询：path = surface.find_path(start, goal)，可多线程并发调用
    3. 障碍变化时重新构建整个 NavSurface，不做增量修改
    """

    def __init__(
        self,
        geometry: GridGeometry,
        obstruction: ObstructionMap,
        planning: Optional[PathPlanningConfig] = None,
    ) -> None:
        self.geometry = geometry
        self.obstruction = obstruction
        self.planning = planning if planning is not None else PathPlanningConfig()
        self._planner = AStarPlanner(
            geometry,
            obstruction,
            adj_weight_factor=self.planning.adj_weight_factor,
        )

    def cell_for(self, position: Sequence[float]) -> Cell:
        """
        把查询位置转换为合法栅格

        Raises:
            OutOfBoundsError: reject 策略下位置在平面之外
        """
        pos = _as_position(position)
        if self.planning.out_of_bounds == OUT_OF_BOUNDS_REJECT and not self.geometry.contains(pos):
            raise OutOfBoundsError(
                f"位置超出导航平面: pos={pos}, "
                f"min={self.geometry.min_corner}, max={self.geometry.max_corner}"
            )
        # 落在远端边界上的位置会截断到 side，统一夹回最后一格
        return self.geometry.clamp_cell(self.geometry.cell_from_position(pos))

    def find_path(self, start: Sequence[float], goal: Sequence[float]) -> List[Position3]:
        """
        规划从 start 到 goal 的路径

        Args:
            start: 起点世界坐标 (x, y, z)
            goal: 终点世界坐标 (x, y, z)

        Returns:
            路径点列表；[] 表示不可达

        Raises:
            OutOfBoundsError: reject 策略下起点或终点在平面之外
        """
        start_pos = _as_position(start)
        goal_pos = _as_position(goal)
        start_cell = self.cell_for(start_pos)
        goal_cell = self.cell_for(goal_pos)

        cells = self._planner.plan_cells(start_cell, goal_cell)
        if not cells:
            return []

        if len(cells) == 1:
            # 同一栅格内直接连线，不搜索也不平滑
            return [start_pos, goal_pos]

        waypoints = build_waypoints(cells, start_pos, goal_pos, self.geometry)
        if self.planning.enable_smoothing:
            waypoints = smooth_corners(waypoints, self.planning.min_smooth_count)

        logger.debug(f"[NavSurface] 路径生成完成: cells={len(cells)}, waypoints={len(waypoints)}")
        return waypoints


def build_surface(
    side_cell_count: int,
    side_plane_size: float,
    obstruction_source: ObstructionSource,
    center: Sequence[float] = (0.0, 0.0, 0.0),
    planning: Optional[PathPlanningConfig] = None,
    plane_height: Optional[float] = None,
) -> NavSurface:
    """
    构建导航平面

    Args:
        side_cell_count: 每边栅格数（>0）
        side_plane_size: 平面边长（>0）
        obstruction_source: source((col, row)) -> 是否障碍，或 [row, col] 布尔数组
        center: 平面中心
        planning: 路径规划配置，默认使用 PathPlanningConfig()
        plane_height: 路径点高度，默认取 center 的 y

    Returns:
        NavSurface

    Raises:
        InvalidGeometryError: 参数无效或障碍栅格尺寸不匹配
    """
    center_pos = _as_position(center)
    geometry = GridGeometry(
        side_cell_count=side_cell_count,
        side_plane_size=side_plane_size,
        center=center_pos,
        plane_height=center_pos[1] if plane_height is None else float(plane_height),
    )
    obstruction = ObstructionMap.build(side_cell_count, obstruction_source)
    logger.info(
        f"[NavSurface] 导航平面构建完成: side_cell_count={side_cell_count}, "
        f"cell_size={geometry.cell_size:.4f}, 障碍数={int(obstruction.grid.sum())}"
    )
    return NavSurface(geometry, obstruction, planning)


def build_surface_from_mask(
    mask_path: Union[str, Path],
    side_plane_size: float,
    center: Sequence[float] = (0.0, 0.0, 0.0),
    planning: Optional[PathPlanningConfig] = None,
    plane_height: Optional[float] = None,
) -> NavSurface:
    """从掩码图片构建导航平面，每边栅格数取图片边长"""
    blocked = load_obstruction_mask(mask_path)
    return build_surface(
        blocked.shape[0],
        side_plane_size,
        blocked,
        center=center,
        planning=planning,
        plane_height=plane_height,
    )


def build_surface_from_config(
    config: NavGridConfig,
    obstruction_source: Optional[ObstructionSource] = None,
) -> NavSurface:
    """
    根据配置构建导航平面

    Args:
        config: NavGridConfig
        obstruction_source: 障碍数据源；为 None 时从 surface.mask_path 加载，
            两者都没有则使用全可通行栅格

    Returns:
        NavSurface
    """
    surface_cfg = config.surface
    if obstruction_source is None and surface_cfg.mask_path:
        surface = build_surface_from_mask(
            surface_cfg.mask_path,
            surface_cfg.side_plane_size,
            center=surface_cfg.center,
            planning=config.path_planning,
            plane_height=surface_cfg.plane_height,
        )
        if surface.geometry.side_cell_count != surface_cfg.side_cell_count:
            logger.warning(
                f"[NavSurface] 掩码尺寸与配置格数不一致，以掩码为准: "
                f"mask={surface.geometry.side_cell_count}, config={surface_cfg.side_cell_count}"
            )
        return surface

    if obstruction_source is None:
        logger.warning("[NavSurface] 未提供掩码，使用全可通行栅格")
        obstruction_source = lambda cell: False

    return build_surface(
        surface_cfg.side_cell_count,
        surface_cfg.side_plane_size,
        obstruction_source,
        center=surface_cfg.center,
        planning=config.path_planning,
        plane_height=surface_cfg.plane_height,
    )


def find_path(surface: NavSurface, start: Sequence[float], goal: Sequence[float]) -> List[Position3]:
    """函数式入口，等价于 surface.find_path(start, goal)"""
    return surface.find_path(start, goal)
