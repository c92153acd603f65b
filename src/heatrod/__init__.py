'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:05:31
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 15:41:02
FilePath: /heatrod/src/heatrod/__init__.py
Description:  

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# src/heatrod/__init__.py

__version__ = "0.1.0"

from .errors import ConfigurationError
from .grid import Rod1D
from .field import TemperatureField
from .boundary import BoundaryKind, BoundaryPolicy
from .stencil import LinearStencil1D, diffusion_stencil

# 配置 / 后端
from .config import RodConfig, TimeScheme
from .backend.base import BackendKind

# 模拟器 + 输出
from .simulator import HeatFlow
from .render import format_table


__all__ = [
    "ConfigurationError",
    "Rod1D",
    "TemperatureField",
    "BoundaryKind",
    "BoundaryPolicy",
    "LinearStencil1D",
    "diffusion_stencil",

    "RodConfig",
    "TimeScheme",
    "BackendKind",

    "HeatFlow",
    "format_table",
]
