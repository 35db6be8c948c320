#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义导航栅格模块的专用异常

注意：目标不可达不是异常，规划失败统一返回空路径 []。
"""


class NavigationError(Exception):
    """导航模块基础异常类"""
    pass


class InvalidGeometryError(NavigationError, ValueError):
    """栅格几何参数无效（边长/格数不合法、障碍栅格尺寸不匹配等），重试无意义"""
    pass


class OutOfBoundsError(NavigationError, IndexError):
    """查询位置或栅格坐标超出导航平面范围"""
    pass
