"""
页面模型 - 单轴分块与输出页面

单位约定：
- *_map / map_rect: 图面单位（mm）
- *_page / page_rect: 页面单位（1/100英寸）
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .geometry import Rect


class AxisTile(BaseModel):
    """单轴分块（竖直或水平方向上的一页范围）"""
    start_map: float = Field(..., description="图面起点")
    length_map: float = Field(..., description="图面长度")
    start_page: float = Field(..., description="页面起点")
    length_page: float = Field(..., description="页面长度（不超过可打印长度）")

    model_config = {"frozen": True}

    @property
    def end_map(self) -> float:
        return self.start_map + self.length_map


class Page(BaseModel):
    """一张输出页面"""
    job: Any = Field(..., description="所属打印任务标识")
    map_rect: Rect = Field(..., description="需要绘制的图面区域")
    page_rect: Rect = Field(..., description="页面上的放置区域（位于可打印区域内）")
    landscape: bool = False

    model_config = {"frozen": True}
