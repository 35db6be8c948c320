#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径构建与平滑模块

功能：
- 栅格路径 -> 世界坐标路径点，首尾保留调用方给出的原始起点/终点
- 切角平滑：把折线拐角磨圆，供路径跟随使用

平滑后的路径不再是严格最短路径，只追求运动上的顺滑。
"""

from typing import List, Sequence

from loguru import logger

from navgrid.common.constants import DEFAULT_MIN_SMOOTH_COUNT
from navgrid.core.grid_geometry import Cell, GridGeometry, Position3


def _blend(a: Position3, b: Position3, wa: float, wb: float) -> Position3:
    return (a[0] * wa + b[0] * wb, a[1] * wa + b[1] * wb, a[2] * wa + b[2] * wb)


def build_waypoints(
    cells: Sequence[Cell],
    start: Position3,
    goal: Position3,
    geometry: GridGeometry,
) -> List[Position3]:
    """
    由栅格路径生成路径点：原始起点 + 中间栅格中心 + 原始终点

    Args:
        cells: 从起点栅格到终点栅格的完整栅格路径
        start: 原始起点（世界坐标）
        goal: 原始终点（世界坐标）
        geometry: 栅格几何参数

    Returns:
        路径点列表；cells 为空时返回 []
    """
    if not cells:
        return []

    waypoints: List[Position3] = [start]
    # 去掉首尾栅格，保证首尾是原始坐标
    for cell in cells[1:-1]:
        waypoints.append(geometry.center_from_cell(cell))
    waypoints.append(goal)
    return waypoints


def smooth_corners(
    waypoints: Sequence[Position3],
    min_count: int = DEFAULT_MIN_SMOOTH_COUNT,
) -> List[Position3]:
    """
    切角平滑

    对每个中间点 cur（前一点 prev，后一点 next）：
        mid = 0.25*prev + 0.5*cur + 0.25*next
    依次输出 (prev+mid)/2、mid、(mid+next)/2。首尾点原样保留，
    输出长度为 2 + 3 * 中间点数。

    Args:
        waypoints: 原始路径点
        min_count: 触发平滑的最少点数，不足时原样返回

    Returns:
        平滑后的路径点（新列表）
    """
    if len(waypoints) < min_count or len(waypoints) < 3:
        return list(waypoints)

    smoothed: List[Position3] = [waypoints[0]]
    for i in range(1, len(waypoints) - 1):
        prev = waypoints[i - 1]
        cur = waypoints[i]
        nxt = waypoints[i + 1]

        mid = (
            prev[0] * 0.25 + cur[0] * 0.5 + nxt[0] * 0.25,
            prev[1] * 0.25 + cur[1] * 0.5 + nxt[1] * 0.25,
            prev[2] * 0.25 + cur[2] * 0.5 + nxt[2] * 0.25,
        )
        smoothed.append(_blend(mid, prev, 0.5, 0.5))
        smoothed.append(mid)
        smoothed.append(_blend(mid, nxt, 0.5, 0.5))
    smoothed.append(waypoints[-1])

    logger.debug(f"切角平滑: 原始长度={len(waypoints)}, 平滑后={len(smoothed)}")
    return smoothed
