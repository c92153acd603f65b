'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 11:20:37
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-20 16:31:09
FilePath: /heatrod/src/heatrod/stencil.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class LinearStencil1D:
    """
    线性 stencil。对某个 i，有：
        L(u)_i = scale * sum_k coeffs[k] * u[i + (k-radius)]
    扩散项就是 radius=1, coeffs=[1, -2, 1], scale=K。
    """
    radius: int
    coeffs: np.ndarray = field(compare=False)  # 长度 = 2*radius+1
    scale: float

    def __post_init__(self) -> None:
        if self.coeffs.shape != (2 * self.radius + 1,):
            raise ValueError(
                f"stencil of radius {self.radius} needs {2 * self.radius + 1} coeffs, "
                f"got shape {self.coeffs.shape}"
            )


def diffusion_stencil(k: float) -> LinearStencil1D:
    """二阶中心差分，单位空间步长。"""
    return LinearStencil1D(radius=1, coeffs=np.array([1.0, -2.0, 1.0]), scale=float(k))
