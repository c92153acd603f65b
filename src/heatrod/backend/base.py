'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 11:35:50
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-20 16:02:44
FilePath: /heatrod/src/heatrod/backend/base.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# heatrod/backend/base.py
from enum import Enum
from typing import Callable, Protocol, TypeAlias

import numpy as np

from ..boundary import BoundaryPolicy
from ..stencil import LinearStencil1D

# 输入旧值，返回新值；不能原地改旧值
StepFn: TypeAlias = Callable[[np.ndarray], np.ndarray]


class BackendKind(Enum):
    PYTHON = "python"
    NUMPY = "numpy"


class BackendKernel(Protocol):
    """
    后端产出的 kernel 统一接口。
    """
    stencil: LinearStencil1D
    boundaries: BoundaryPolicy

    def make_step_fn(self) -> StepFn:
        ...
