"""
方向选择器 - 纵向/横向的两阶段判定

阶段一（裁剪，仅在开启裁剪时）：
1. 关注区域 = 内容外接矩形 ∩ 打印区域
2. 分别按纵向/横向可打印尺寸裁剪，比较覆盖面积
3. 覆盖面积大者胜；相等时原始打印区域宽大于高才取横向，否则纵向

阶段二（页数）：
1. 以阶段一得到的打印区域分别按纵向/横向排版
2. 页数少者胜；相等时横向首页的页面矩形宽大于高才取横向，否则纵向

两个阶段的平局依据不同，不可合并为一次比较。
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence

from ..interfaces import IPrintAreaProvider
from ..models import Page, Rect
from .area_cropper import AreaCropper
from .units import scaled_printable_size

logger = logging.getLogger(__name__)


class OrientationSelector:
    """方向选择器"""

    def __init__(
        self,
        provider: IPrintAreaProvider,
        portrait_printable: Rect,
        landscape_printable: Rect,
        crop_large_print_area: bool = False,
        cropper: AreaCropper | None = None,
    ):
        self.provider = provider
        self.portrait_printable = portrait_printable
        self.landscape_printable = landscape_printable
        self.crop_large_print_area = crop_large_print_area
        self.cropper = cropper or AreaCropper()

    def resolve_print_area(self, job: Hashable) -> tuple[Rect, float]:
        """获取任务的打印区域（必要时裁剪到单页）与比例系数"""
        print_area = self.provider.get_print_area(job)
        scale_ratio, content_bounds = self.provider.get_scale_and_bounds(job)

        if not self.crop_large_print_area:
            return print_area, scale_ratio

        if content_bounds is None:
            interest = print_area
        else:
            interest = content_bounds.intersect(print_area)
            if interest.is_empty():
                logger.warning(f"[{job}] 内容范围与打印区域无交集，覆盖面积按0计")

        portrait_crop, portrait_covered = self.cropper.crop(
            print_area, interest, scaled_printable_size(self.portrait_printable, scale_ratio)
        )
        landscape_crop, landscape_covered = self.cropper.crop(
            print_area, interest, scaled_printable_size(self.landscape_printable, scale_ratio)
        )

        if self.prefer_landscape_crop(print_area, portrait_covered, landscape_covered):
            logger.debug(f"[{job}] 裁剪采用横向: 覆盖{landscape_covered:.1f}")
            return landscape_crop, scale_ratio

        logger.debug(f"[{job}] 裁剪采用纵向: 覆盖{portrait_covered:.1f}")
        return portrait_crop, scale_ratio

    @staticmethod
    def prefer_landscape_crop(
        print_area: Rect, portrait_covered: float, landscape_covered: float
    ) -> bool:
        """阶段一：按覆盖面积选择裁剪结果"""
        if portrait_covered > landscape_covered:
            return False
        if landscape_covered > portrait_covered:
            return True
        return print_area.width > print_area.height

    @staticmethod
    def prefer_landscape(portrait_pages: Sequence[Page], landscape_pages: Sequence[Page]) -> bool:
        """阶段二：按页数选择排版结果"""
        if len(portrait_pages) < len(landscape_pages):
            return False
        if len(portrait_pages) > len(landscape_pages):
            return True
        if landscape_pages:
            first = landscape_pages[0].page_rect
            return first.width > first.height
        return False
