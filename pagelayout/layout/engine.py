"""
排版引擎 - 编排所有打印任务的分页

职责：
1. 按输入顺序逐个处理任务
2. 每个任务分别按纵向/横向排版，交由方向选择器决定采用哪个
3. 竖直分块为外层、水平分块为内层，组合成页面
4. 汇总所有任务的页面（任务之间不交错）

测试要点：
- test_layout_single_page: 单页任务
- test_layout_row_major_order: 先行后列顺序
- test_layout_job_order: 任务顺序
- test_layout_orientation_choice: 方向选择
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING

from ..models import Page, Rect
from .dimension_tiler import DimensionTiler
from .orientation import OrientationSelector

if TYPE_CHECKING:
    from ..config import LayoutConfig
    from ..interfaces import IPrintAreaProvider

logger = logging.getLogger(__name__)


class PageLayoutEngine:
    """排版引擎"""

    def __init__(
        self,
        provider: IPrintAreaProvider,
        portrait_printable: Rect,
        landscape_printable: Rect,
        crop_large_print_area: bool = False,
        tiler: DimensionTiler | None = None,
    ):
        self.portrait_printable = portrait_printable
        self.landscape_printable = landscape_printable
        self.tiler = tiler or DimensionTiler()
        self.selector = OrientationSelector(
            provider,
            portrait_printable,
            landscape_printable,
            crop_large_print_area=crop_large_print_area,
        )

    @classmethod
    def from_config(cls, provider: IPrintAreaProvider, config: LayoutConfig) -> PageLayoutEngine:
        """由运行期配置创建"""
        return cls(
            provider,
            config.printable.portrait.to_rect(),
            config.printable.landscape.to_rect(),
            crop_large_print_area=config.crop_large_print_area,
        )

    def layout_all(self, jobs: Iterable[Hashable]) -> list[Page]:
        """排版所有任务，返回按任务、行、列排序的页面列表"""
        pages: list[Page] = []
        for job in jobs:
            pages.extend(self.layout_job(job))
        return pages

    def layout_job(self, job: Hashable) -> list[Page]:
        """排版单个任务，在纵向与横向中取较优者"""
        print_area, scale_ratio = self.selector.resolve_print_area(job)

        portrait_pages = self.layout_pages(job, print_area, scale_ratio, landscape=False)
        landscape_pages = self.layout_pages(job, print_area, scale_ratio, landscape=True)

        if self.selector.prefer_landscape(portrait_pages, landscape_pages):
            logger.info(f"[{job}] 横向排版: {len(landscape_pages)}页")
            return landscape_pages

        logger.info(f"[{job}] 纵向排版: {len(portrait_pages)}页")
        return portrait_pages

    def layout_pages(
        self, job: Hashable, print_area: Rect, scale_ratio: float, landscape: bool
    ) -> list[Page]:
        """按指定方向将打印区域排到一页或多页"""
        printable = self.landscape_printable if landscape else self.portrait_printable

        vertical = list(self.tiler.tile(
            print_area.top, print_area.height, printable.top, printable.height, scale_ratio
        ))
        horizontal = list(self.tiler.tile(
            print_area.left, print_area.width, printable.left, printable.width, scale_ratio
        ))

        pages = []
        for v in vertical:
            for h in horizontal:
                pages.append(
                    Page(
                        job=job,
                        map_rect=Rect(
                            left=h.start_map, top=v.start_map,
                            width=h.length_map, height=v.length_map,
                        ),
                        page_rect=Rect(
                            left=h.start_page, top=v.start_page,
                            width=h.length_page, height=v.length_page,
                        ),
                        landscape=landscape,
                    )
                )
        return pages


def summarize_pages(pages: Iterable[Page]) -> dict[Hashable, int]:
    """统计每个任务的页数（保持任务出现顺序）"""
    counts: dict[Hashable, int] = {}
    for page in pages:
        counts[page.job] = counts.get(page.job, 0) + 1
    return counts
