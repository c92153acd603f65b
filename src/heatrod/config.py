'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 13:40:12
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 15:18:26
FilePath: /heatrod/src/heatrod/config.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from .backend.base import BackendKind
from .boundary import BoundaryPolicy


class TimeScheme(Enum):
    EXPLICIT_EULER = "explicit_euler"


# 显式 Euler + [1, -2, 1] 的稳定区间
STABLE_K_MAX = 0.5


@dataclass
class RodConfig:
    initial_temp: float = 10.0
    sections: int = 6
    k: float = 0.1
    sources: Dict[int, float] = field(default_factory=lambda: {0: 100.0})
    boundaries: BoundaryPolicy = field(default_factory=BoundaryPolicy)
    backend: BackendKind = BackendKind.NUMPY
    time_scheme: TimeScheme = TimeScheme.EXPLICIT_EULER
    strict_stability: bool = False
