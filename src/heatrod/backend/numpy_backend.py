'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 14:12:29
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 14:55:40
FilePath: /heatrod/src/heatrod/backend/numpy_backend.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# heatrod/backend/numpy_backend.py
from dataclasses import dataclass

import numpy as np

from ..boundary import BoundaryPolicy
from ..stencil import LinearStencil1D
from .base import StepFn


@dataclass
class NumpyStencilKernel:
    stencil: LinearStencil1D
    boundaries: BoundaryPolicy

    def make_step_fn(self) -> StepFn:
        r = self.stencil.radius
        coeffs = np.asarray(self.stencil.coeffs, dtype=np.float64)
        scale = self.stencil.scale
        ghost = float(self.boundaries.ghost_value)

        def step(old: np.ndarray) -> np.ndarray:
            n = old.shape[0]
            if n == 0:
                return old.copy()

            # 两端各补 r 个 ghost 格子，整段一起算
            padded = np.pad(old, r, mode="constant", constant_values=ghost)
            acc = np.zeros(n, dtype=np.float64)
            for k in range(2 * r + 1):
                acc += coeffs[k] * padded[k:k + n]
            new = old + scale * acc

            for i in self.boundaries.frozen_indices(n):
                new[i] = old[i]
            return new

        return step
