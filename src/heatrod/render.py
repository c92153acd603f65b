'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 15:04:48
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 11:26:33
FilePath: /heatrod/src/heatrod/render.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from typing import Iterable

# 每个格子的数值宽度和小数位
CELL_WIDTH = 6
PRECISION = 1


def border_line(n: int) -> str:
    return "+" + ("-" * CELL_WIDTH + "-+") * n + "\n"


def value_line(values: Iterable[float]) -> str:
    cells = "".join(f"{float(v):>{CELL_WIDTH}.{PRECISION}f} |" for v in values)
    return "|" + cells + "\n"


def format_table(values: Iterable[float]) -> str:
    """
    三行表格：上边框、数值行、下边框，每行以换行结尾。
    数值右对齐、宽度 6、一位小数；超宽的数值会把格子撑开。
    """
    values = list(values)
    border = border_line(len(values))
    return border + value_line(values) + border
