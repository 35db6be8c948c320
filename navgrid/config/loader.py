#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载器

从YAML文件加载配置并使用Pydantic验证。
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union
from loguru import logger
from pydantic import ValidationError

from navgrid.config.models import NavGridConfig


def load_config(config_path: Union[str, Path], base_dir: Optional[Path] = None) -> NavGridConfig:
    """
    从YAML文件加载配置

    Args:
        config_path: 配置文件路径
        base_dir: 用于解析相对路径的目录，默认为配置文件所在目录

    Returns:
        验证后的NavGridConfig对象

    Raises:
        FileNotFoundError: 配置文件不存在
        yaml.YAMLError: YAML格式错误
        ValueError: 配置文件为空
        ValidationError: 配置验证失败
    """
    config_path = Path(config_path)
    base_dir = Path(base_dir).resolve() if base_dir is not None else config_path.resolve().parent

    if not config_path.exists():
        error_msg = f"配置文件不存在: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"YAML格式错误: {e}")
        raise

    if raw_config is None:
        error_msg = "配置文件为空"
        logger.error(error_msg)
        raise ValueError(error_msg)

    if isinstance(raw_config, dict):
        _apply_relative_paths(raw_config, base_dir)

    try:
        config = NavGridConfig(**raw_config)
    except ValidationError as e:
        logger.error(f"配置验证失败: {config_path}")
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        raise

    logger.info(f"配置加载成功: {config_path}")
    return config


def _resolve_path(value: Optional[str], base_dir: Path) -> Optional[str]:
    """解析相对路径为绝对路径"""
    if value is None:
        return None
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return str(path.resolve())


def _apply_relative_paths(raw_config: Dict[str, Any], base_dir: Path) -> None:
    """将配置中的相对路径字段转换为绝对路径"""
    surface_cfg = raw_config.get('surface')
    if isinstance(surface_cfg, dict) and surface_cfg.get('mask_path'):
        surface_cfg['mask_path'] = _resolve_path(surface_cfg['mask_path'], base_dir)
