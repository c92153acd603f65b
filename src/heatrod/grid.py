'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:12:41
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 15:02:17
FilePath: /heatrod/src/heatrod/grid.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from dataclasses import dataclass

import numpy as np

from .errors import ConfigurationError


@dataclass(frozen=True)
class Rod1D:
    """
    一维杆的均匀离散：每个 index 对应一段。
    sections: 段数 N（含两端）
    空间步长固定为 1，扩散系数 K 直接吸收 dt/dx^2。
    """
    sections: int

    def __post_init__(self) -> None:
        if isinstance(self.sections, bool) or not isinstance(self.sections, (int, np.integer)):
            raise ConfigurationError(f"sections must be an integer, got {self.sections!r}")
        if self.sections <= 0:
            raise ConfigurationError(f"Rod1D requires sections >= 1, got {self.sections}")

    @property
    def n(self) -> int:
        return int(self.sections)

    @property
    def last(self) -> int:
        """最右端的 index（N-1）."""
        return self.n - 1

    def contains(self, index: int) -> bool:
        return 0 <= index < self.n
