'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 11:41:06
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 14:55:13
FilePath: /heatrod/src/heatrod/backend/python_backend.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# heatrod/backend/python_backend.py
from dataclasses import dataclass

import numpy as np

from ..boundary import BoundaryPolicy
from ..stencil import LinearStencil1D
from .base import StepFn


@dataclass
class PythonStencilKernel:
    """逐格循环的参考实现，和 NumpyStencilKernel 结果逐位一致。"""
    stencil: LinearStencil1D
    boundaries: BoundaryPolicy

    def make_step_fn(self) -> StepFn:
        r = self.stencil.radius
        coeffs = [float(c) for c in self.stencil.coeffs]
        scale = self.stencil.scale
        ghost = float(self.boundaries.ghost_value)

        def step(old: np.ndarray) -> np.ndarray:
            n = old.shape[0]
            new = old.copy()
            frozen = self.boundaries.frozen_indices(n)
            for i in range(n):
                if i in frozen:
                    continue
                acc = 0.0
                for k in range(-r, r + 1):
                    j = i + k
                    # 越界的邻居读 ghost 值
                    neighbour = old[j] if 0 <= j < n else ghost
                    acc += coeffs[k + r] * neighbour
                new[i] = old[i] + scale * acc
            return new

        return step
