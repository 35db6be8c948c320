#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
代价与启发函数

- 边代价：相邻栅格中心的欧氏距离（直行 cell_size，斜行 √2·cell_size）
- 启发函数：曼哈顿距离（栅格单位）+ 邻近障碍惩罚

启发函数不满足可采纳性，会高估剩余代价：靠墙的栅格被大幅推后，
路径换来的是与障碍保持距离、更倾向直线前进，而不是严格最短。
"""

import math

from navgrid.common.constants import DEFAULT_ADJ_WEIGHT_FACTOR
from navgrid.core.grid_geometry import Cell, GridGeometry
from navgrid.core.obstruction_map import ObstructionMap


def edge_cost(geometry: GridGeometry, a: Cell, b: Cell) -> float:
    """相邻栅格中心之间的欧氏距离"""
    ax, _, az = geometry.center_from_cell(a)
    bx, _, bz = geometry.center_from_cell(b)
    return math.hypot(ax - bx, az - bz)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def heuristic(
    obstruction: ObstructionMap,
    cell_size: float,
    goal: Cell,
    nxt: Cell,
    adj_weight_factor: float = DEFAULT_ADJ_WEIGHT_FACTOR,
) -> float:
    """
    启发函数

    Args:
        obstruction: 障碍栅格
        cell_size: 栅格边长
        goal: 终点栅格
        nxt: 候选栅格
        adj_weight_factor: 每个邻近障碍的惩罚权重

    Returns:
        曼哈顿距离 + 5x5 窗口内障碍数 * adj_weight_factor * cell_size
    """
    penalty = obstruction.nearby_blocked_count(nxt) * adj_weight_factor * cell_size
    return manhattan(goal, nxt) + penalty
