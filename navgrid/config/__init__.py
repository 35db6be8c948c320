#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航栅格配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    NavGridConfig,
    SurfaceConfig,
    PathPlanningConfig,
    FollowerConfig,
)
from .loader import load_config

__all__ = [
    'NavGridConfig',
    'SurfaceConfig',
    'PathPlanningConfig',
    'FollowerConfig',
    'load_config'
]
