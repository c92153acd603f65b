'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 11:34:02
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-20 14:13:10
FilePath: /heatrod/src/heatrod/backend/__init__.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# src/heatrod/backend/__init__.py

from .base import BackendKind, BackendKernel
from .python_backend import PythonStencilKernel
from .numpy_backend import NumpyStencilKernel

__all__ = [
    "BackendKind",
    "BackendKernel",
    "PythonStencilKernel",
    "NumpyStencilKernel",
]
