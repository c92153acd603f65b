'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:09:03
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-20 10:09:03
FilePath: /heatrod/src/heatrod/errors.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''


class ConfigurationError(ValueError):
    """构造参数非法（段数 <= 0、非有限值、strict 模式下不稳定的 K）。"""
