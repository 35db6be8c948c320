#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
常量定义：集中管理导航栅格的默认参数
"""

from typing import Tuple

# =============================
# 栅格相关常量
# =============================

# 表示"无前驱"的哨兵栅格，不会与任何合法栅格重合
NO_CELL: Tuple[int, int] = (-1, -1)

# 平面默认高度（路径点的 y 值）
DEFAULT_PLANE_HEIGHT: float = 0.0

# 8 邻域偏移（固定枚举顺序，保证搜索结果可复现）
NEIGHBOR_DELTAS: Tuple[int, ...] = (-1, 0, 1)

# 障碍惩罚扫描半径（5x5 窗口）
NEAR_OBSTRUCTION_RADIUS: int = 2

# =============================
# 路径规划相关常量
# =============================

# 邻近障碍惩罚权重（刻意取大值，让靠墙的栅格排到后面）
DEFAULT_ADJ_WEIGHT_FACTOR: float = 1000.0

# 触发平滑的最少路径点数
DEFAULT_MIN_SMOOTH_COUNT: int = 3

# 越界策略
OUT_OF_BOUNDS_REJECT: str = "reject"

# =============================
# 路径跟随相关常量
# =============================

# 到达路径点的判定半径（世界单位）
DEFAULT_ARRIVAL_RADIUS: float = 0.4
