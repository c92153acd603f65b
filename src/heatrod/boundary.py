'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 11:02:14
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 15:10:48
FilePath: /heatrod/src/heatrod/boundary.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from dataclasses import dataclass
from enum import Enum


class BoundaryKind(Enum):
    FIXED = "fixed"   # Dirichlet: 端点格子永远不参与更新
    OPEN = "open"     # 缺失的邻居视为固定的 ghost 值，热量可以流出


@dataclass(frozen=True)
class BoundaryPolicy:
    """
    两端各自的边界类型。
    默认左端 FIXED、右端 OPEN（ghost = 0.0），即左侧恒温源、右侧吸热。
    """
    left: BoundaryKind = BoundaryKind.FIXED
    right: BoundaryKind = BoundaryKind.OPEN
    ghost_value: float = 0.0

    def __post_init__(self) -> None:
        for side in (self.left, self.right):
            if not isinstance(side, BoundaryKind):
                raise ValueError(f"boundary kind must be a BoundaryKind, got {side!r}")

    def frozen_indices(self, n: int) -> list[int]:
        """被 FIXED 边界钉住、step 时不更新的 index。"""
        if n <= 0:
            return []
        frozen = []
        if self.left is BoundaryKind.FIXED:
            frozen.append(0)
        if self.right is BoundaryKind.FIXED and (n - 1) not in frozen:
            frozen.append(n - 1)
        return frozen
