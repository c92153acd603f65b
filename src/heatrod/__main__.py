'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 09:52:10
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 09:52:10
FilePath: /heatrod/src/heatrod/__main__.py
Description: python -m heatrod

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from .cli import main

main(prog_name="heatrod")
