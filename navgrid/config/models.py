#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航栅格配置模型

使用Pydantic定义类型安全的配置模型。
"""

from typing import Literal, Optional, Tuple
from pydantic import BaseModel, Field, field_validator

from navgrid.common.constants import (
    DEFAULT_ADJ_WEIGHT_FACTOR,
    DEFAULT_ARRIVAL_RADIUS,
    DEFAULT_MIN_SMOOTH_COUNT,
    DEFAULT_PLANE_HEIGHT,
    OUT_OF_BOUNDS_REJECT,
)


class SurfaceConfig(BaseModel):
    """导航平面配置"""
    side_cell_count: int = Field(..., description="每边栅格数")
    side_plane_size: float = Field(..., description="平面边长（世界单位）")
    center: Tuple[float, float, float] = Field((0.0, 0.0, 0.0), description="平面中心 (x, y, z)")
    plane_height: float = Field(DEFAULT_PLANE_HEIGHT, description="路径点高度")
    mask_path: Optional[str] = Field(None, description="障碍掩码图片路径（可选）")

    @field_validator('side_cell_count')
    @classmethod
    def validate_side_cell_count(cls, v: int) -> int:
        """验证栅格数"""
        if v <= 0:
            raise ValueError(f"每边栅格数必须大于0: {v}")
        return v

    @field_validator('side_plane_size')
    @classmethod
    def validate_side_plane_size(cls, v: float) -> float:
        """验证平面边长"""
        if v <= 0:
            raise ValueError(f"平面边长必须大于0: {v}")
        return v


class PathPlanningConfig(BaseModel):
    """路径规划配置"""
    adj_weight_factor: float = Field(DEFAULT_ADJ_WEIGHT_FACTOR, description="邻近障碍惩罚权重")
    enable_smoothing: bool = Field(True, description="是否启用切角平滑")
    min_smooth_count: int = Field(DEFAULT_MIN_SMOOTH_COUNT, description="触发平滑的最少路径点数")
    out_of_bounds: Literal["reject", "clamp"] = Field(
        OUT_OF_BOUNDS_REJECT,
        description="起点/终点越界策略：reject=抛出异常，clamp=夹到边界栅格"
    )

    @field_validator('adj_weight_factor')
    @classmethod
    def validate_adj_weight_factor(cls, v: float) -> float:
        """验证惩罚权重"""
        if v < 0:
            raise ValueError(f"惩罚权重不能为负数: {v}")
        return v

    @field_validator('min_smooth_count')
    @classmethod
    def validate_min_smooth_count(cls, v: int) -> int:
        """验证平滑阈值"""
        if v < 2:
            raise ValueError(f"平滑阈值不能小于2: {v}")
        return v


class FollowerConfig(BaseModel):
    """路径跟随配置"""
    arrival_radius: float = Field(DEFAULT_ARRIVAL_RADIUS, description="到达路径点的判定半径")

    @field_validator('arrival_radius')
    @classmethod
    def validate_arrival_radius(cls, v: float) -> float:
        """验证到达半径"""
        if v <= 0:
            raise ValueError(f"到达半径必须大于0: {v}")
        return v


class NavGridConfig(BaseModel):
    """导航栅格主配置"""
    surface: SurfaceConfig = Field(..., description="导航平面配置")
    path_planning: PathPlanningConfig = Field(default_factory=PathPlanningConfig, description="路径规划配置")
    follower: FollowerConfig = Field(default_factory=FollowerConfig, description="路径跟随配置")
