"""
数据模型层 - 定义排版核心数据结构

所有模块通过这些模型交互，实现解耦：
- Rect/Size: 矩形与尺寸（图面单位或页面单位）
- AxisTile: 单轴上一个分块的范围
- Page: 一张输出页面
"""

from .geometry import Rect, Size
from .page import AxisTile, Page

__all__ = [
    "Rect",
    "Size",
    "AxisTile",
    "Page",
]
