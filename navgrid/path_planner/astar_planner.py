#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：实现 A* 算法进行栅格路径规划
"""

# 标准库导入
from typing import Dict, List, Tuple
import heapq
import itertools

# 第三方库导入
from loguru import logger

from navgrid.common.constants import DEFAULT_ADJ_WEIGHT_FACTOR, NO_CELL
from navgrid.common.exceptions import InvalidGeometryError
from navgrid.core.grid_geometry import Cell, GridGeometry
from navgrid.core.obstruction_map import ObstructionMap
from navgrid.path_planner.cost_model import edge_cost, heuristic
from navgrid.path_planner.map_model import PlanRequest, PlanResult


class AStarPlanner():
    """
    A* 算法路径规划器

    在障碍栅格上做 8 邻接最优先搜索，优先级 = 已走代价 + 启发函数。
    启发函数带邻近障碍惩罚，路径会主动远离墙体。

    每次规划的 frontier / cost_so_far / came_from 都是局部变量，
    同一个规划器可以被多个线程并发调用。

    示例:
        ```python
        planner = AStarPlanner(geometry, obstruction)
        cells = planner.plan_cells((0, 0), (3, 3))
        ```
    """

    def __init__(
        self,
        geometry: GridGeometry,
        obstruction: ObstructionMap,
        adj_weight_factor: float = DEFAULT_ADJ_WEIGHT_FACTOR,
    ):
        """
        初始化 A* 规划器

        Args:
            geometry: 栅格几何参数
            obstruction: 障碍栅格
            adj_weight_factor: 邻近障碍惩罚权重

        Raises:
            InvalidGeometryError: 几何格数与障碍栅格尺寸不一致
            ValueError: adj_weight_factor 为负数
        """
        if geometry.side_cell_count != obstruction.side:
            raise InvalidGeometryError(
                f"几何格数与障碍栅格尺寸不一致: {geometry.side_cell_count} != {obstruction.side}"
            )
        if adj_weight_factor < 0:
            raise ValueError(f"adj_weight_factor不能为负数: {adj_weight_factor}")

        self.geometry_ = geometry
        self.obstruction_ = obstruction
        self.adj_weight_factor_ = adj_weight_factor

    def plan(self, request: PlanRequest) -> PlanResult:
        """
        规划路径并返回带诊断信息的结果

        Args:
            request: 起点/终点栅格

        Returns:
            PlanResult，失败时 ok=False 且 path 为空
        """
        path, nodes_explored, reason = self._search(request.start, request.goal)
        return PlanResult(ok=bool(path), path=path, reason=reason, nodes_explored=nodes_explored)

    def plan_cells(self, start: Cell, goal: Cell) -> List[Cell]:
        """
        规划栅格路径

        Args:
            start: 起点栅格（须在范围内）
            goal: 终点栅格（须在范围内）

        Returns:
            从 start 到 goal 的栅格列表；不可达时为 []
        """
        path, _, _ = self._search(start, goal)
        return path

    def _search(self, start: Cell, goal: Cell) -> Tuple[List[Cell], int, str]:
        obstruction = self.obstruction_
        geometry = self.geometry_
        cell_size = geometry.cell_size

        if obstruction.is_blocked(goal):
            logger.warning(f"[A*] 终点位于障碍上，无法到达: goal={goal}")
            return [], 0, "goal blocked"

        if start == goal:
            logger.debug("[A*] 起点和终点在同一栅格，返回单点路径")
            return [start], 0, "ok"

        logger.debug(f"[A*] 开始搜索: start={start}, goal={goal}, side={obstruction.side}")

        # 优先队列：(priority, seq, cost, cell)，seq 保证同优先级先进先出
        counter = itertools.count()
        frontier: List[Tuple[float, int, float, Cell]] = [(0.0, next(counter), 0.0, start)]
        cost_so_far: Dict[Cell, float] = {start: 0.0}
        came_from: Dict[Cell, Cell] = {start: NO_CELL}
        nodes_explored = 0
        reached = False

        while frontier:
            _, _, queued_cost, current = heapq.heappop(frontier)

            # 同一栅格可能多次入队，只处理最近一次松弛对应的条目
            if queued_cost > cost_so_far[current]:
                continue
            nodes_explored += 1

            if current == goal:
                reached = True
                break

            for nxt in obstruction.neighbors(current):
                new_cost = cost_so_far[current] + edge_cost(geometry, current, nxt)
                if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                    cost_so_far[nxt] = new_cost
                    priority = new_cost + heuristic(
                        obstruction, cell_size, goal, nxt, self.adj_weight_factor_
                    )
                    heapq.heappush(frontier, (priority, next(counter), new_cost, nxt))
                    came_from[nxt] = current

        if not reached:
            logger.warning(
                f"[A*] 无法找到从起点到终点的路径: start={start}, goal={goal}, 探索节点数={nodes_explored}"
            )
            return [], nodes_explored, "frontier exhausted"

        path = self._reconstruct(came_from, start, goal)
        if not path:
            return [], nodes_explored, "broken back-link"

        logger.info(f"[A*] 路径规划成功: 路径长度={len(path)}, 探索节点数={nodes_explored}")
        return path, nodes_explored, "ok"

    @staticmethod
    def _reconstruct(came_from: Dict[Cell, Cell], start: Cell, goal: Cell) -> List[Cell]:
        """沿 came_from 回溯；链路断开时返回 []，绝不返回半截路径"""
        path: List[Cell] = []
        current = goal
        while current != start:
            path.append(current)
            prev = came_from.get(current)
            if prev is None or prev == NO_CELL:
                logger.error(f"[A*] 回溯路径时链路断开: cell={current}, start={start}, goal={goal}")
                return []
            current = prev
        path.append(start)
        path.reverse()
        return path
