#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航栅格路径规划演示脚本
支持从配置文件/掩码图片加载障碍，或使用内置的带门墙体示例
"""

import argparse
import math
import sys

import numpy as np
from loguru import logger

from navgrid.config import load_config
from navgrid.config.models import FollowerConfig, PathPlanningConfig
from navgrid.nav_runtime.waypoint_tracker import WaypointTracker
from navgrid.path_planner.nav_surface import (
    NavSurface,
    build_surface,
    build_surface_from_config,
    build_surface_from_mask,
)


def ParseArgs():
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description="导航栅格路径规划演示",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例用法：
  # 内置示例：10x10 栅格，中间一列是墙，中间开一个门
  python demo.py --start 3.5 3.5 --goal -3.5 -3.5

  # 使用配置文件
  python demo.py --config config/navgrid.yaml --start 3.5 3.5 --goal -3.5 -3.5

  # 使用掩码图片（黑色=可通行）
  python demo.py --mask maps/level.png --size 20 --start 8 8 --goal -8 -8
        """
    )

    parser.add_argument("--config", type=str, default=None,
                        help="YAML配置文件路径")
    parser.add_argument("--mask", type=str, default=None,
                        help="障碍掩码图片路径")
    parser.add_argument("--size", type=float, default=10.0,
                        help="平面边长（世界单位，默认: 10）")
    parser.add_argument("--start", type=float, nargs=2, required=True,
                        metavar=("X", "Z"), help="起点世界坐标")
    parser.add_argument("--goal", type=float, nargs=2, required=True,
                        metavar=("X", "Z"), help="终点世界坐标")
    parser.add_argument("--no_smoothing", action="store_true",
                        help="关闭切角平滑")
    return parser.parse_args()


def BuildDemoSurface(args):
    """根据命令行参数构建导航平面，返回 (NavSurface, FollowerConfig)"""
    planning = PathPlanningConfig(enable_smoothing=not args.no_smoothing)

    if args.config:
        config = load_config(args.config)
        config.path_planning.enable_smoothing = planning.enable_smoothing
        return build_surface_from_config(config), config.follower

    if args.mask:
        return build_surface_from_mask(args.mask, args.size, planning=planning), FollowerConfig()

    grid = np.zeros((10, 10), dtype=bool)
    grid[:, 5] = True
    grid[5, 5] = False
    return build_surface(10, args.size, grid, planning=planning), FollowerConfig()


def RenderAscii(surface: NavSurface, path) -> str:
    """
    ASCII 可视化：
      '#' = 障碍, '.' = 空地, '*' = 路径经过的栅格, 'S' = 起点, 'G' = 终点
    """
    geometry = surface.geometry
    vis = np.where(surface.obstruction.grid, '#', '.').astype('<U1')

    for point in path[1:-1]:
        col, row = geometry.clamp_cell(geometry.cell_from_position(point))
        vis[row, col] = '*'
    if path:
        sc, sr = geometry.clamp_cell(geometry.cell_from_position(path[0]))
        gc, gr = geometry.clamp_cell(geometry.cell_from_position(path[-1]))
        vis[sr, sc] = 'S'
        vis[gr, gc] = 'G'

    return "\n".join("".join(row) for row in vis)


def FollowPath(tracker: WaypointTracker, path, start, max_steps: int = 10000) -> int:
    """
    简单的匀速跟随模拟：每步朝当前路径点移动不超过到达半径的距离

    Returns:
        走完路径所用的步数
    """
    tracker.set_path(path)
    position = start
    step = tracker.arrival_radius
    steps = 0
    while not tracker.finished and steps < max_steps:
        target = tracker.current_target
        dx = target[0] - position[0]
        dz = target[2] - position[2]
        dist = math.hypot(dx, dz)
        if dist > step:
            position = (position[0] + dx / dist * step, position[1], position[2] + dz / dist * step)
        else:
            position = (target[0], position[1], target[2])
        tracker.update(position)
        steps += 1
    return steps


def main() -> int:
    args = ParseArgs()
    surface, follower_cfg = BuildDemoSurface(args)

    plane_y = surface.geometry.plane_height
    start = (args.start[0], plane_y, args.start[1])
    goal = (args.goal[0], plane_y, args.goal[1])

    path = surface.find_path(start, goal)
    if not path:
        logger.warning(f"无法到达终点: start={start}, goal={goal}")
        return 1

    logger.info(f"路径点数: {len(path)}")
    for i, point in enumerate(path):
        print(f"{i:3d}: ({point[0]:.3f}, {point[1]:.3f}, {point[2]:.3f})")
    print("\nASCII 地图：")
    print(RenderAscii(surface, path))

    tracker = WaypointTracker.from_config(follower_cfg)
    steps = FollowPath(tracker, path, start)
    logger.info(f"模拟跟随完成: 到达半径={tracker.arrival_radius}, 步数={steps}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
