#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径点跟踪模块

封装路径消费方的到达判定：按顺序推进路径点，不跳点也不回退。
转向和速度控制由调用方负责。
"""

from typing import List, Optional, Sequence

from loguru import logger

from navgrid.common.constants import DEFAULT_ARRIVAL_RADIUS
from navgrid.config.models import FollowerConfig
from navgrid.core.grid_geometry import Position3


class WaypointTracker:
    """路径点跟踪器"""

    def __init__(self, arrival_radius: float = DEFAULT_ARRIVAL_RADIUS):
        if arrival_radius <= 0:
            raise ValueError(f"arrival_radius必须大于0: {arrival_radius}")
        self.arrival_radius_ = arrival_radius
        self.path_: List[Position3] = []
        self.index_ = 0

    @classmethod
    def from_config(cls, config: FollowerConfig) -> "WaypointTracker":
        """根据路径跟随配置创建跟踪器"""
        return cls(arrival_radius=config.arrival_radius)

    @property
    def arrival_radius(self) -> float:
        return self.arrival_radius_

    def set_path(self, path: Sequence[Position3]) -> None:
        """设置新路径并从第一个点开始；空路径表示不可达，跟踪器直接结束"""
        self.path_ = list(path)
        self.index_ = 0
        logger.debug(f"设置新路径: 路径点数={len(self.path_)}")

    @property
    def index(self) -> int:
        return self.index_

    @property
    def finished(self) -> bool:
        return self.index_ >= len(self.path_)

    @property
    def current_target(self) -> Optional[Position3]:
        if self.finished:
            return None
        return self.path_[self.index_]

    def is_arrived(self, position: Sequence[float], waypoint: Position3) -> bool:
        """x、z 两个水平轴上的偏差都在到达半径内"""
        return (abs(position[0] - waypoint[0]) <= self.arrival_radius_ and
                abs(position[2] - waypoint[2]) <= self.arrival_radius_)

    def update(self, position: Sequence[float]) -> Optional[Position3]:
        """
        根据当前位置推进路径点

        每次调用最多推进一个点，保证每个路径点都会被依次经过。

        Args:
            position: 当前世界坐标 (x, y, z)

        Returns:
            推进后的目标路径点，路径结束时返回 None
        """
        target = self.current_target
        if target is None:
            return None
        if self.is_arrived(position, target):
            self.index_ += 1
            if self.finished:
                logger.info("已到达路径终点")
            return self.current_target
        return target
