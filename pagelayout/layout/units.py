"""
单位换算 - 图面单位(mm)与页面单位(1/100英寸)

1/100英寸 = 0.254mm，再乘以比例系数即得每个页面单位对应的图面长度。
"""

from __future__ import annotations

from ..interfaces import LayoutPreconditionError
from ..models import Rect, Size

# 每个页面单位(1/100英寸)对应的毫米数
MM_PER_PAGE_UNIT = 0.254

# 一英寸（页面单位）
ONE_INCH = 100.0

# 裁剪时可打印尺寸的缩减量（图面单位），避免浮点边界误判
CROP_SAFETY_MARGIN = 0.1


def map_units_per_page_unit(scale_ratio: float) -> float:
    """每个页面单位对应的图面单位数"""
    if scale_ratio <= 0:
        raise LayoutPreconditionError(f"比例系数必须为正数: {scale_ratio}")
    return MM_PER_PAGE_UNIT * scale_ratio


def scaled_printable_size(printable_area: Rect, scale_ratio: float) -> Size:
    """可打印区域换算到图面单位后的尺寸（每个方向缩减0.1）"""
    units_per_page = map_units_per_page_unit(scale_ratio)
    return Size(
        width=printable_area.width * units_per_page - CROP_SAFETY_MARGIN,
        height=printable_area.height * units_per_page - CROP_SAFETY_MARGIN,
    )
