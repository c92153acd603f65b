'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 15:30:19
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 15:24:07
FilePath: /heatrod/src/heatrod/simulator.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# heatrod/simulator.py
import math
import sys
from typing import Callable, Mapping, Optional, TextIO

import numpy as np
from loguru import logger

from .backend.base import BackendKind, StepFn
from .backend.numpy_backend import NumpyStencilKernel
from .backend.python_backend import PythonStencilKernel
from .boundary import BoundaryPolicy
from .config import STABLE_K_MAX, RodConfig, TimeScheme
from .errors import ConfigurationError
from .field import TemperatureField
from .grid import Rod1D
from .render import format_table
from .stencil import LinearStencil1D, diffusion_stencil


class HeatFlow:
    """
    一维杆上的显式热扩散模拟器。

    构造时用 initial_temp 填满 sections 个格子，再按 sources 覆盖个别格子；
    之后每次 tick() 用上一步的值整体算出下一步（不会读到半更新的数据）。
    边界由 BoundaryPolicy 决定，默认左端固定、右端开放（ghost = 0）。
    """

    def __init__(
        self,
        initial_temp: float,
        sections: int,
        k: float,
        sources: Optional[Mapping[int, float]] = None,
        boundaries: Optional[BoundaryPolicy] = None,
        backend: BackendKind = BackendKind.NUMPY,
        strict_stability: bool = False,
    ) -> None:
        if not math.isfinite(initial_temp):
            raise ConfigurationError(f"initial_temp must be finite, got {initial_temp!r}")
        if not math.isfinite(k):
            raise ConfigurationError(f"k must be finite, got {k!r}")
        if not 0.0 <= k <= STABLE_K_MAX:
            if strict_stability:
                raise ConfigurationError(
                    f"k={k} is outside the stable range [0, {STABLE_K_MAX}] of the explicit scheme"
                )
            logger.warning("k={} is outside [0, {}]; the explicit update may diverge", k, STABLE_K_MAX)

        self._rod = Rod1D(sections)
        self._k = float(k)
        self._boundaries = boundaries or BoundaryPolicy()
        self._backend = backend
        self._stencil: LinearStencil1D = diffusion_stencil(self._k)
        self._step_fn: StepFn = self._build_step_fn()
        self._steps = 0

        self._field = TemperatureField(self._rod, initial_temp)
        self._field.apply_sources(sources)
        logger.debug(
            "HeatFlow built: sections={}, k={}, boundaries={}, backend={}",
            self._rod.n, self._k, self._boundaries, self._backend.value,
        )

    @classmethod
    def from_config(cls, config: RodConfig) -> "HeatFlow":
        if config.time_scheme is not TimeScheme.EXPLICIT_EULER:
            raise ConfigurationError(f"Unsupported time scheme: {config.time_scheme}")
        return cls(
            config.initial_temp,
            config.sections,
            config.k,
            config.sources,
            boundaries=config.boundaries,
            backend=config.backend,
            strict_stability=config.strict_stability,
        )

    def _build_step_fn(self) -> StepFn:
        if self._backend is BackendKind.PYTHON:
            kernel = PythonStencilKernel(self._stencil, self._boundaries)
        elif self._backend is BackendKind.NUMPY:
            kernel = NumpyStencilKernel(self._stencil, self._boundaries)
        else:
            raise ValueError(f"Unsupported backend: {self._backend}")
        return kernel.make_step_fn()

    # ---- 只读属性 ----

    @property
    def sections(self) -> int:
        return self._rod.n

    @property
    def k(self) -> float:
        return self._k

    @property
    def boundaries(self) -> BoundaryPolicy:
        return self._boundaries

    @property
    def backend(self) -> BackendKind:
        return self._backend

    @property
    def step_count(self) -> int:
        return self._steps

    @property
    def temperatures(self) -> np.ndarray:
        """当前温度的拷贝，外部改它不影响模拟器."""
        return self._field.values.copy()

    # ---- 时间推进 ----

    def tick(self) -> None:
        new = self._step_fn(self._field.values)
        self._field.values = new
        self._steps += 1
        logger.debug("step {}: {}", self._steps, new)

    step = tick

    def run(self, steps: int, callback: Optional[Callable[["HeatFlow"], None]] = None) -> "HeatFlow":
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        for _ in range(steps):
            self.tick()
            if callback is not None:
                callback(self)
        return self

    # ---- 输出 ----

    def render(self) -> str:
        return format_table(self._field.values)

    def pretty_print(self, stream: Optional[TextIO] = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(self.render())

    def __repr__(self) -> str:
        return (
            f"HeatFlow(sections={self.sections}, k={self._k}, "
            f"backend={self._backend.value}, steps={self._steps})"
        )
