"""
排版模块 - 分块/裁剪/方向选择/总编排

子模块：
- units: 图面单位与页面单位换算
- dimension_tiler: 单轴分块
- area_cropper: 裁剪到单页
- orientation: 纵向/横向选择
- engine: 多任务排版编排
- providers: 基于任务定义的打印区域提供方
"""

from .area_cropper import AreaCropper
from .dimension_tiler import DimensionTiler
from .engine import PageLayoutEngine, summarize_pages
from .orientation import OrientationSelector
from .providers import StaticPrintAreaProvider

__all__ = [
    "AreaCropper",
    "DimensionTiler",
    "OrientationSelector",
    "PageLayoutEngine",
    "StaticPrintAreaProvider",
    "summarize_pages",
]
