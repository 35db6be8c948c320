#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
掩码加载模块

把障碍掩码图片转换为布尔障碍栅格（适配器，不属于寻路核心）。

掩码约定：
- 黑色像素为可通行区域，其余像素为障碍
- 图片左下角对应栅格 (0, 0)，因此读取后需要上下翻转
- 图片必须是正方形，边长即每边栅格数
"""

from pathlib import Path
from typing import Union

import cv2
import numpy as np
from loguru import logger

from navgrid.common.exceptions import InvalidGeometryError


def mask_to_obstruction(mask: np.ndarray) -> np.ndarray:
    """
    将掩码转换为障碍栅格

    只有纯黑像素可通行，任何通道非零的像素都视为障碍。

    Args:
        mask: HxW 灰度图或 HxWxC 彩色图（uint8），图片坐标系（第 0 行在顶部）

    Returns:
        [row, col] 布尔数组，True=障碍，第 0 行对应图片底部
    """
    if mask.ndim == 3:
        blocked = np.any(mask != 0, axis=-1)
    elif mask.ndim == 2:
        blocked = mask != 0
    else:
        raise InvalidGeometryError(f"掩码必须是二维灰度图或三维彩色图: shape={mask.shape}")

    h, w = blocked.shape
    if h != w or h == 0:
        raise InvalidGeometryError(f"掩码必须是非空正方形: size=({w}, {h})")

    return np.flipud(blocked).copy()


def load_obstruction_mask(mask_path: Union[str, Path]) -> np.ndarray:
    """
    从文件加载障碍掩码

    Args:
        mask_path: 掩码图片路径

    Returns:
        [row, col] 布尔障碍数组

    Raises:
        FileNotFoundError: 文件不存在
        ValueError: 文件无法解码
        InvalidGeometryError: 图片不是正方形
    """
    path = Path(mask_path)
    if not path.exists():
        error_msg = f"掩码文件不存在: {path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    mask = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if mask is None:
        raise ValueError(f"无法读取掩码文件: {path}")

    blocked = mask_to_obstruction(mask)
    logger.info(f"加载掩码: {path}, 尺寸={blocked.shape[0]}x{blocked.shape[1]}, 障碍数={int(blocked.sum())}")
    return blocked
