"""
单轴分块器 - 将图面一个方向的范围拆分到一页或多页

分块策略：
1. 计算该方向所需页面长度 needed = map_length / (0.254 * scale_ratio)
2. 能放下：单页居中
3. 放不下：最小重叠取 min(1英寸, 可打印长度/6)，求页数 n，
   再反算均匀重叠量，使所有相邻页重叠一致

测试要点：
- test_single_tile_centered: 单页居中
- test_multi_tile_count: 多页页数
- test_tiles_cover_axis: 分块无缝覆盖
- test_tile_page_length_bound: 页面长度不超过可打印长度
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from ..interfaces import LayoutInvariantError, LayoutPreconditionError
from ..models import AxisTile
from .units import ONE_INCH, map_units_per_page_unit

logger = logging.getLogger(__name__)


class DimensionTiler:
    """单轴分块器"""

    def tile(
        self,
        map_start: float,
        map_length: float,
        printable_start: float,
        printable_length: float,
        scale_ratio: float,
    ) -> Iterator[AxisTile]:
        """
        拆分一个方向

        Args:
            map_start: 图面起点（图面单位）
            map_length: 图面长度（图面单位）
            printable_start: 可打印区域起点（页面单位）
            printable_length: 可打印区域长度（页面单位）
            scale_ratio: 比例系数

        Yields:
            按图面坐标递增顺序的分块
        """
        units_per_page = map_units_per_page_unit(scale_ratio)
        needed = map_length / units_per_page

        if needed <= printable_length:
            border = (printable_length - needed) / 2
            yield AxisTile(
                start_map=map_start,
                length_map=map_length,
                start_page=printable_start + border,
                length_page=needed,
            )
            return

        count = self.page_count(needed, printable_length)
        overlap = (count * printable_length - needed) / (count - 1)
        map_advance = (printable_length - overlap) * units_per_page
        logger.debug(
            f"分块: 需要{needed:.2f} > 可打印{printable_length:.2f}, "
            f"{count}页, 重叠{overlap:.2f}"
        )

        for i in range(count):
            yield AxisTile(
                start_map=map_start + i * map_advance,
                length_map=printable_length * units_per_page,
                start_page=printable_start,
                length_page=printable_length,
            )

    @staticmethod
    def min_overlap(printable_length: float) -> float:
        """最小重叠量：1英寸或可打印长度的1/6，取较小者"""
        return min(ONE_INCH, printable_length / 6)

    def page_count(self, needed: float, printable_length: float) -> int:
        """多页情况下的页数（至少2页）"""
        if printable_length <= 0:
            raise LayoutPreconditionError(f"可打印长度必须为正数: {printable_length}")

        min_overlap = self.min_overlap(printable_length)
        count = math.ceil((needed - min_overlap) / (printable_length - min_overlap))
        if count < 2:
            raise LayoutInvariantError(
                f"多页分块页数异常: {count} (需要{needed}, 可打印{printable_length})"
            )
        return count
