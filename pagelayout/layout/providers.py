"""
打印区域提供方 - 基于任务定义表的静态实现

排版核心只依赖 IPrintAreaProvider；命令行与测试使用本实现，
真实应用可替换为从路线数据计算的实现。
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping

from ..config.job_loader import JobBook, JobDefinition
from ..interfaces import IPrintAreaProvider, JobDefinitionError
from ..models import Rect


class StaticPrintAreaProvider(IPrintAreaProvider):
    """静态打印区域提供方"""

    def __init__(self, definitions: Mapping[Hashable, JobDefinition]):
        self._definitions = dict(definitions)

    @classmethod
    def from_job_book(cls, book: JobBook) -> StaticPrintAreaProvider:
        return cls({d.id: d for d in book.jobs})

    def get_print_area(self, job: Hashable) -> Rect:
        return self._get(job).print_area

    def get_scale_and_bounds(self, job: Hashable) -> tuple[float, Rect | None]:
        definition = self._get(job)
        return definition.scale_ratio, definition.content_bounds

    def _get(self, job: Hashable) -> JobDefinition:
        try:
            return self._definitions[job]
        except KeyError:
            raise JobDefinitionError(f"未知打印任务: {job}") from None
