'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:18:55
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 14:47:30
FilePath: /heatrod/src/heatrod/field.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from typing import Mapping, Optional

import numpy as np
from loguru import logger

from .grid import Rod1D


class TemperatureField:
    """
    Rod1D 上的温度场。内部就是一个 1D float64 numpy array。
    长度在整个生命周期内不变。
    """

    def __init__(self, rod: Rod1D, initial_temp: float = 0.0) -> None:
        self.rod = rod
        self.data = np.full(rod.n, float(initial_temp), dtype=np.float64)

    @property
    def values(self) -> np.ndarray:
        return self.data

    @values.setter
    def values(self, arr: np.ndarray) -> None:
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != self.data.shape:
            raise ValueError(f"shape mismatch: {arr.shape} != {self.data.shape}")
        self.data[...] = arr

    def __len__(self) -> int:
        return self.data.shape[0]

    def apply_sources(self, sources: Optional[Mapping[int, float]]) -> None:
        """热源/热汇：只在构造时写一次，越界的 index 直接跳过。"""
        if not sources:
            return
        for pos, temp in sources.items():
            if not self.rod.contains(pos):
                logger.debug("ignoring source at index {} outside [0, {}]", pos, self.rod.last)
                continue
            self.data[pos] = float(temp)

    def __repr__(self) -> str:
        return f"TemperatureField(sections={self.rod.n})"
