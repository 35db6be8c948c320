#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格几何模块

提供世界坐标和栅格坐标之间的转换功能。

约定：
- 栅格位于世界坐标的 x-z 平面，y 为高度
- 栅格原点是平面的 (max_x, max_z) 角点
- 列号 col 随世界 x 减小而增大，行号 row 随世界 z 减小而增大
"""

import numbers
from dataclasses import dataclass
from typing import Tuple

from navgrid.common.constants import DEFAULT_PLANE_HEIGHT
from navgrid.common.exceptions import InvalidGeometryError

Cell = Tuple[int, int]                    # (col, row)
Position3 = Tuple[float, float, float]    # (x, y, z)


@dataclass(frozen=True)
class GridGeometry:
    """正方形、轴对齐的栅格几何参数"""
    side_cell_count: int
    side_plane_size: float
    center: Position3 = (0.0, 0.0, 0.0)
    plane_height: float = DEFAULT_PLANE_HEIGHT

    def __post_init__(self) -> None:
        count = self.side_cell_count
        if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count <= 0:
            raise InvalidGeometryError(f"side_cell_count必须是正整数: {count}")
        # numpy 整数统一转成 int
        object.__setattr__(self, "side_cell_count", int(count))
        if not self.side_plane_size > 0:
            raise InvalidGeometryError(f"side_plane_size必须大于0: {self.side_plane_size}")
        if len(self.center) != 3:
            raise InvalidGeometryError(f"center必须是 (x, y, z) 三元组: {self.center}")

    @property
    def cell_size(self) -> float:
        """单个栅格的边长（世界单位）"""
        return self.side_plane_size / self.side_cell_count

    @property
    def half_extent(self) -> float:
        return self.side_plane_size / 2.0

    @property
    def max_corner(self) -> Tuple[float, float]:
        """(max_x, max_z)，即栅格 (0, 0) 所在角点"""
        return (self.center[0] + self.half_extent, self.center[2] + self.half_extent)

    @property
    def min_corner(self) -> Tuple[float, float]:
        """(min_x, min_z)"""
        return (self.center[0] - self.half_extent, self.center[2] - self.half_extent)

    def cell_from_position(self, position: Position3) -> Cell:
        """
        将世界坐标转换为栅格坐标（向零截断，不做边界检查）

        Args:
            position: 世界坐标 (x, y, z)

        Returns:
            栅格坐标 (col, row)
        """
        corner_x, corner_z = self.max_corner
        size = self.cell_size
        col = int((corner_x - position[0]) / size)
        row = int((corner_z - position[2]) / size)
        return (col, row)

    def center_from_cell(self, cell: Cell) -> Position3:
        """
        计算栅格中心的世界坐标

        Args:
            cell: 栅格坐标 (col, row)

        Returns:
            世界坐标 (x, plane_height, z)
        """
        corner_x, corner_z = self.max_corner
        size = self.cell_size
        x = corner_x - (cell[0] + 0.5) * size
        z = corner_z - (cell[1] + 0.5) * size
        return (x, self.plane_height, z)

    def in_bounds(self, cell: Cell) -> bool:
        n = self.side_cell_count
        return 0 <= cell[0] < n and 0 <= cell[1] < n

    def contains(self, position: Position3) -> bool:
        """位置是否落在平面的闭区间范围内（只看 x 和 z）"""
        min_x, min_z = self.min_corner
        max_x, max_z = self.max_corner
        return min_x <= position[0] <= max_x and min_z <= position[2] <= max_z

    def clamp_cell(self, cell: Cell) -> Cell:
        last = self.side_cell_count - 1
        return (max(0, min(cell[0], last)), max(0, min(cell[1], last)))
