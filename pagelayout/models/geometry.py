"""
几何模型 - 轴对齐矩形与尺寸

坐标约定：left/top 为最小坐标，width/height 向右/向下延伸。
同一矩形内的数值单位一致（图面单位mm 或 页面单位1/100英寸）。
"""

from __future__ import annotations

from pydantic import BaseModel


class Size(BaseModel):
    """尺寸"""
    width: float
    height: float

    model_config = {"frozen": True}


class Rect(BaseModel):
    """轴对齐矩形 (left, top, width, height)"""
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    model_config = {"frozen": True}

    @classmethod
    def from_ltrb(cls, left: float, top: float, right: float, bottom: float) -> Rect:
        """由四条边构造"""
        return cls(left=left, top=top, width=right - left, height=bottom - top)

    @classmethod
    def from_list(cls, values: list[float]) -> Rect:
        """由 [left, top, width, height] 构造（YAML配置使用）"""
        if len(values) != 4:
            raise ValueError(f"矩形需要4个数值，实际为{len(values)}个: {values}")
        left, top, width, height = (float(v) for v in values)
        return cls(left=left, top=top, width=width, height=height)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersect(self, other: Rect) -> Rect:
        """
        求交集

        不相交时返回空矩形 Rect(0, 0, 0, 0)；仅边相接时返回零宽/零高矩形。
        """
        left = max(self.left, other.left)
        right = min(self.right, other.right)
        top = max(self.top, other.top)
        bottom = min(self.bottom, other.bottom)
        if right >= left and bottom >= top:
            return Rect.from_ltrb(left, top, right, bottom)
        return Rect()

    def contains(self, other: Rect, tolerance: float = 0.0) -> bool:
        """判断 other 是否完全位于本矩形内"""
        return (
            other.left >= self.left - tolerance
            and other.top >= self.top - tolerance
            and other.right <= self.right + tolerance
            and other.bottom <= self.bottom + tolerance
        )
