"""
排版引擎单元测试

每个模块完成后必须运行：pytest tests/unit/test_engine.py -v
"""

import pytest

from pagelayout.config import JobDefinition
from pagelayout.interfaces import JobDefinitionError
from pagelayout.layout import PageLayoutEngine, StaticPrintAreaProvider, summarize_pages
from pagelayout.models import Rect


class TestLayoutJob:
    """单任务排版测试"""

    def test_layout_single_page(self, engine: PageLayoutEngine):
        """测试单页任务: 两个方向都是1页，首页高大于宽取纵向"""
        pages = engine.layout_all(["small"])
        assert len(pages) == 1

        page = pages[0]
        assert page.job == "small"
        assert page.landscape is False
        assert page.map_rect == Rect(left=0, top=0, width=100, height=150)
        assert page.page_rect.width == pytest.approx(100 / 0.254)
        assert page.page_rect.left == pytest.approx(50 + (750 - 100 / 0.254) / 2)
        assert page.page_rect.top == pytest.approx(50 + (1000 - 150 / 0.254) / 2)

    def test_layout_orientation_choice(self, engine: PageLayoutEngine):
        """测试横向页数更少时取横向"""
        portrait = engine.layout_pages("wide", Rect(left=0, top=0, width=250, height=100), 1.0, False)
        assert len(portrait) == 2

        pages = engine.layout_job("wide")
        assert len(pages) == 1
        assert pages[0].landscape is True

    def test_layout_row_major_order(self, engine: PageLayoutEngine):
        """测试先行后列顺序"""
        pages = engine.layout_job("large")

        # 两个方向都是6页，横向首页宽大于高
        assert len(pages) == 6
        assert all(p.landscape for p in pages)

        rows = [pages[i:i + 2] for i in range(0, 6, 2)]
        for row in rows:
            assert row[0].map_rect.top == row[1].map_rect.top
            assert row[0].map_rect.left < row[1].map_rect.left
        tops = [row[0].map_rect.top for row in rows]
        assert tops == sorted(tops)
        assert len(set(tops)) == 3

    def test_pages_within_printable(
        self, engine: PageLayoutEngine, portrait_printable: Rect, landscape_printable: Rect
    ):
        """测试页面矩形位于对应方向的可打印区域内"""
        pages = engine.layout_all(["small", "wide", "large", "cropped"])
        for page in pages:
            printable = landscape_printable if page.landscape else portrait_printable
            assert printable.contains(page.page_rect, tolerance=1e-6)

    def test_multi_page_covers_print_area(self, engine: PageLayoutEngine):
        """测试多页拼合覆盖整个打印区域"""
        pages = engine.layout_job("large")
        assert min(p.map_rect.left for p in pages) == pytest.approx(0)
        assert min(p.map_rect.top for p in pages) == pytest.approx(0)
        assert max(p.map_rect.right for p in pages) == pytest.approx(400)
        assert max(p.map_rect.bottom for p in pages) == pytest.approx(400)

    def test_layout_with_crop(self, cropping_engine: PageLayoutEngine):
        """测试开启裁剪后大区域缩为单页（正方形打印区域平局取纵向裁剪）"""
        pages = cropping_engine.layout_job("cropped")
        assert len(pages) == 1

        page = pages[0]
        assert page.landscape is False
        assert page.map_rect.width == pytest.approx(190.4)
        assert page.map_rect.height == pytest.approx(253.9)
        assert page.map_rect.center_x == pytest.approx(450)
        assert page.map_rect.center_y == pytest.approx(450)

    def test_layout_with_crop_tall_print_area(
        self, portrait_printable: Rect, landscape_printable: Rect
    ):
        """测试裁剪覆盖相同且打印区域高大于宽时排为纵向单页"""
        provider = StaticPrintAreaProvider(
            {
                "tall": JobDefinition(
                    id="tall",
                    print_area=Rect(left=0, top=0, width=1000, height=2000),
                    content_bounds=Rect(left=400, top=400, width=10, height=10),
                )
            }
        )
        engine = PageLayoutEngine(
            provider, portrait_printable, landscape_printable, crop_large_print_area=True
        )
        pages = engine.layout_job("tall")

        assert len(pages) == 1
        assert pages[0].landscape is False
        assert pages[0].map_rect.width < pages[0].map_rect.height

    def test_layout_without_crop_is_multi_page(self, engine: PageLayoutEngine):
        """测试未开启裁剪时大区域为多页"""
        assert len(engine.layout_job("cropped")) > 1

    def test_unknown_job(self, engine: PageLayoutEngine):
        """测试未知任务"""
        with pytest.raises(JobDefinitionError):
            engine.layout_all(["missing"])


class TestLayoutAll:
    """多任务排版测试"""

    def test_layout_job_order(self, engine: PageLayoutEngine):
        """测试任务顺序与分组"""
        pages = engine.layout_all(["large", "small", "wide"])
        jobs = [p.job for p in pages]
        assert jobs == ["large"] * 6 + ["small"] + ["wide"]

    def test_layout_empty(self, engine: PageLayoutEngine):
        """测试无任务"""
        assert engine.layout_all([]) == []

    def test_summarize_pages(self, engine: PageLayoutEngine):
        """测试页数统计"""
        pages = engine.layout_all(["wide", "large"])
        summary = summarize_pages(pages)
        assert summary == {"wide": 1, "large": 6}
        assert list(summary) == ["wide", "large"]

    def test_from_config(self, provider: StaticPrintAreaProvider, layout_config):
        """测试由配置创建引擎"""
        layout_config.crop_large_print_area = True
        engine = PageLayoutEngine.from_config(provider, layout_config)

        assert engine.selector.crop_large_print_area is True
        assert engine.portrait_printable == Rect(left=50, top=50, width=750, height=1000)
        assert engine.landscape_printable == Rect(left=50, top=50, width=1000, height=750)
