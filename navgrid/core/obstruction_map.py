#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
障碍栅格模块

不可变的正方形布尔栅格：grid[row, col] 为 True 表示障碍。
构建后只读，可在多个查询之间共享。
"""

from typing import Callable, List, Union

import numpy as np
from loguru import logger

from navgrid.common.constants import NEIGHBOR_DELTAS, NEAR_OBSTRUCTION_RADIUS
from navgrid.common.exceptions import InvalidGeometryError, OutOfBoundsError
from navgrid.core.grid_geometry import Cell

ObstructionSource = Union[Callable[[Cell], bool], np.ndarray]


def _count_nearby_blocked(blocked: np.ndarray, radius: int) -> np.ndarray:
    """
    统计每个栅格周围 (2r+1)x(2r+1) 窗口内的障碍数量（不含中心，越界部分不计）

    Args:
        blocked: HxW 布尔障碍图
        radius: 窗口半径

    Returns:
        HxW int32 计数图
    """
    h, w = blocked.shape
    padded = np.pad(blocked.astype(np.int32), radius, mode="constant", constant_values=0)
    counts = np.zeros((h, w), dtype=np.int32)
    k = 2 * radius + 1
    for dy in range(k):
        for dx in range(k):
            counts += padded[dy:dy + h, dx:dx + w]
    # 去掉中心自身
    counts -= blocked.astype(np.int32)
    return counts


class ObstructionMap:
    """
    障碍栅格

    示例:
        ```python
        grid = np.zeros((4, 4), dtype=bool)
        grid[:, 2] = True
        obstruction = ObstructionMap.from_array(grid)
        obstruction.is_blocked((2, 0))  # True
        ```
    """

    def __init__(self, blocked: np.ndarray):
        """
        Args:
            blocked: 正方形二维数组，按 [row, col] 索引，非零/True 表示障碍

        Raises:
            InvalidGeometryError: 数组不是非空的正方形二维数组
        """
        grid = np.array(blocked, dtype=bool)
        if grid.ndim != 2 or grid.size == 0 or grid.shape[0] != grid.shape[1]:
            raise InvalidGeometryError(f"障碍栅格必须是非空正方形二维数组: shape={grid.shape}")

        grid.flags.writeable = False
        self._grid = grid
        self._side = grid.shape[0]

        nearby = _count_nearby_blocked(grid, NEAR_OBSTRUCTION_RADIUS)
        nearby.flags.writeable = False
        self._nearby = nearby

        logger.debug(f"障碍栅格构建完成: side={self._side}, 障碍数={int(grid.sum())}")

    @classmethod
    def from_array(cls, blocked: np.ndarray) -> "ObstructionMap":
        return cls(blocked)

    @classmethod
    def from_source(cls, side_cell_count: int, source: Callable[[Cell], bool]) -> "ObstructionMap":
        """
        逐格调用外部数据源构建障碍栅格

        Args:
            side_cell_count: 每边栅格数
            source: source((col, row)) -> 是否障碍

        Returns:
            ObstructionMap
        """
        if side_cell_count <= 0:
            raise InvalidGeometryError(f"side_cell_count必须大于0: {side_cell_count}")
        grid = np.zeros((side_cell_count, side_cell_count), dtype=bool)
        for row in range(side_cell_count):
            for col in range(side_cell_count):
                grid[row, col] = bool(source((col, row)))
        return cls(grid)

    @classmethod
    def build(cls, side_cell_count: int, source: ObstructionSource) -> "ObstructionMap":
        """接受可调用对象或预构建数组，并校验尺寸与声明的格数一致"""
        if callable(source):
            return cls.from_source(side_cell_count, source)
        obstruction = cls.from_array(source)
        if obstruction.side != side_cell_count:
            raise InvalidGeometryError(
                f"障碍栅格尺寸与格数不一致: grid_side={obstruction.side}, side_cell_count={side_cell_count}"
            )
        return obstruction

    @property
    def side(self) -> int:
        return self._side

    @property
    def grid(self) -> np.ndarray:
        """只读的 [row, col] 布尔数组"""
        return self._grid

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell[0] < self._side and 0 <= cell[1] < self._side

    def is_blocked(self, cell: Cell) -> bool:
        """
        Raises:
            OutOfBoundsError: 栅格超出范围（调用方应先做边界检查）
        """
        if not self.in_bounds(cell):
            raise OutOfBoundsError(f"栅格超出范围: cell={cell}, side={self._side}")
        col, row = cell
        return bool(self._grid[row, col])

    def neighbors(self, cell: Cell) -> List[Cell]:
        """
        返回 8 邻域内可通行的栅格（不含自身、越界和障碍）

        枚举顺序固定：先 dx 后 dy，均按 -1, 0, 1。
        """
        col, row = cell
        result: List[Cell] = []
        for dx in NEIGHBOR_DELTAS:
            x = col + dx
            if x < 0 or x >= self._side:
                continue
            for dy in NEIGHBOR_DELTAS:
                y = row + dy
                if y < 0 or y >= self._side:
                    continue
                if dx == 0 and dy == 0:
                    continue
                if self._grid[y, x]:
                    continue
                result.append((x, y))
        return result

    def nearby_blocked_count(self, cell: Cell) -> int:
        """5x5 窗口内（不含中心）的障碍数量"""
        if not self.in_bounds(cell):
            raise OutOfBoundsError(f"栅格超出范围: cell={cell}, side={self._side}")
        col, row = cell
        return int(self._nearby[row, col])
