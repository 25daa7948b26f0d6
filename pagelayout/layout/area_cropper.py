"""
区域裁剪器 - 将过大的打印区域裁剪为单页大小

裁剪策略（两个方向独立处理）：
1. 可打印尺寸不小于打印区域：保留整个范围
2. 否则以关注区域中心为窗口中心，超出打印区域时整体平移贴边
3. 覆盖面积 = 裁剪结果与关注区域的交集面积（用于方向比较）
"""

from __future__ import annotations

from ..models import Rect, Size


class AreaCropper:
    """区域裁剪器"""

    def crop(self, print_area: Rect, interest: Rect, printable_size: Size) -> tuple[Rect, float]:
        """
        在打印区域内求一个不超过可打印尺寸、尽量覆盖关注区域的裁剪

        Args:
            print_area: 完整打印区域（图面单位）
            interest: 关注区域（通常为实际内容外接矩形）
            printable_size: 目标可打印尺寸（图面单位）

        Returns:
            (裁剪后的矩形, 覆盖的关注区域面积)
        """
        left, right = self._crop_axis(
            print_area.left, print_area.right, interest.center_x, printable_size.width
        )
        top, bottom = self._crop_axis(
            print_area.top, print_area.bottom, interest.center_y, printable_size.height
        )

        result = Rect.from_ltrb(left, top, right, bottom)
        covered = result.intersect(interest).area
        return result, covered

    @staticmethod
    def _crop_axis(low: float, high: float, center: float, length: float) -> tuple[float, float]:
        """单方向裁剪，返回 (起点, 终点)"""
        if length >= high - low:
            return low, high

        start = center - length / 2
        end = center + length / 2
        if start < low:
            end += low - start
            start = low
        elif end > high:
            start -= end - high
            end = high
        return start, end
