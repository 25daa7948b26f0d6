"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(engine, portrait_printable):
        pages = engine.layout_all(["A"])
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from pagelayout.config import JobDefinition, LayoutConfig
from pagelayout.layout import (
    AreaCropper,
    DimensionTiler,
    PageLayoutEngine,
    StaticPrintAreaProvider,
)
from pagelayout.models import Rect


# ============================================================================
# 可打印区域 Fixtures（页面单位，1/100英寸）
# ============================================================================

@pytest.fixture
def portrait_printable() -> Rect:
    """纵向可打印区域（Letter纸，半英寸页边距）"""
    return Rect(left=50, top=50, width=750, height=1000)


@pytest.fixture
def landscape_printable() -> Rect:
    """横向可打印区域"""
    return Rect(left=50, top=50, width=1000, height=750)


@pytest.fixture
def layout_config() -> LayoutConfig:
    """运行期配置"""
    return LayoutConfig()


# ============================================================================
# 算法 Fixtures
# ============================================================================

@pytest.fixture
def tiler() -> DimensionTiler:
    return DimensionTiler()


@pytest.fixture
def cropper() -> AreaCropper:
    return AreaCropper()


# ============================================================================
# 任务 Fixtures（图面单位，mm）
# ============================================================================

@pytest.fixture
def job_definitions() -> dict[str, JobDefinition]:
    """示例任务定义"""
    return {
        "small": JobDefinition(
            id="small", print_area=Rect(left=0, top=0, width=100, height=150)
        ),
        "wide": JobDefinition(
            id="wide", print_area=Rect(left=0, top=0, width=250, height=100)
        ),
        "large": JobDefinition(
            id="large", print_area=Rect(left=0, top=0, width=400, height=400)
        ),
        "cropped": JobDefinition(
            id="cropped",
            print_area=Rect(left=0, top=0, width=1000, height=1000),
            content_bounds=Rect(left=400, top=400, width=100, height=100),
        ),
    }


@pytest.fixture
def provider(job_definitions: dict[str, JobDefinition]) -> StaticPrintAreaProvider:
    return StaticPrintAreaProvider(job_definitions)


@pytest.fixture
def engine(
    provider: StaticPrintAreaProvider, portrait_printable: Rect, landscape_printable: Rect
) -> PageLayoutEngine:
    """未开启裁剪的排版引擎"""
    return PageLayoutEngine(provider, portrait_printable, landscape_printable)


@pytest.fixture
def cropping_engine(
    provider: StaticPrintAreaProvider, portrait_printable: Rect, landscape_printable: Rect
) -> PageLayoutEngine:
    """开启裁剪的排版引擎"""
    return PageLayoutEngine(
        provider, portrait_printable, landscape_printable, crop_large_print_area=True
    )


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_jobs_path(temp_dir: Path) -> Path:
    """示例任务定义YAML"""
    jobs_path = temp_dir / "jobs.yaml"
    jobs_path.write_text(
        """jobs:
  - id: "Course 1"
    print_area: [0, 0, 250, 100]
    scale_ratio: 1.0
  - id: 2
    print_area: [0, 0, 1000, 1000]
    scale_ratio: 1.0
    content_bounds: [400, 400, 100, 100]
""",
        encoding="utf-8",
    )
    return jobs_path
