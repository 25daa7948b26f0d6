"""
任务定义加载器 - 读取打印任务YAML

职责：
- 解析YAML并提供类型安全访问
- 校验打印区域/比例/内容范围

文件格式：
    jobs:
      - id: "路线1"
        print_area: [left, top, width, height]
        scale_ratio: 1.0
        content_bounds: [left, top, width, height]   # 可选

使用方式：
    book = JobLoader.load("jobs.yaml")
    provider = StaticPrintAreaProvider.from_job_book(book)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..interfaces import JobDefinitionError
from ..models import Rect


class JobDefinition(BaseModel):
    """单个打印任务定义"""
    id: str
    print_area: Rect = Field(..., description="打印区域（图面单位）")
    scale_ratio: float = Field(1.0, gt=0, description="比例系数")
    content_bounds: Rect | None = Field(None, description="实际内容外接矩形")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @field_validator("print_area", "content_bounds", mode="before")
    @classmethod
    def _parse_rect(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return Rect.from_list(list(value))
        return value


class JobBook(BaseModel):
    """打印任务集合"""
    jobs: list[JobDefinition] = Field(default_factory=list)

    def job_ids(self) -> list[str]:
        """按文件顺序返回任务标识"""
        return [job.id for job in self.jobs]


class JobLoader:
    """任务定义加载器"""

    @staticmethod
    def load(jobs_path: str | Path) -> JobBook:
        """加载任务定义"""
        path = Path(jobs_path)
        if not path.exists():
            raise FileNotFoundError(f"任务定义文件不存在: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return JobLoader.parse(data)

    @staticmethod
    def parse(data: dict[str, Any]) -> JobBook:
        """解析已读取的任务定义"""
        try:
            book = JobBook(**data)
        except (TypeError, ValidationError) as e:
            raise JobDefinitionError(f"任务定义格式错误: {e}") from e

        ids = book.job_ids()
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise JobDefinitionError(f"任务标识重复: {', '.join(duplicates)}")
        return book


# 便捷函数
def load_jobs(jobs_path: str | Path) -> JobBook:
    """加载任务定义"""
    return JobLoader.load(jobs_path)
