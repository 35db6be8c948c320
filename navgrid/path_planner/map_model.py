from dataclasses import dataclass
from typing import List

from navgrid.core.grid_geometry import Cell


@dataclass
class PlanRequest:
    start: Cell
    goal: Cell

@dataclass
class PlanResult:
    ok: bool
    path: List[Cell]
    reason: str = ""
    nodes_explored: int = 0
