"""
模块接口契约 - 定义外部协作方的抽象接口与异常

设计原则：
1. 排版核心只依赖接口，不依赖渲染/界面等具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from pagelayout.interfaces import IPrintAreaProvider

    class CoursePrintAreas(IPrintAreaProvider):
        def get_print_area(self, job: Hashable) -> Rect:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Rect


# ============================================================================
# 外部协作方接口
# ============================================================================

class IPrintAreaProvider(ABC):
    """打印区域提供方接口 - 将打印任务映射为打印区域与比例"""

    @abstractmethod
    def get_print_area(self, job: Hashable) -> Rect:
        """
        获取任务需要打印的图面区域

        Args:
            job: 打印任务标识（如某条路线）

        Returns:
            打印区域（图面单位）

        Raises:
            JobDefinitionError: 未知任务
        """
        ...

    @abstractmethod
    def get_scale_and_bounds(self, job: Hashable) -> tuple[float, Rect | None]:
        """
        获取任务的比例与内容边界

        Args:
            job: 打印任务标识

        Returns:
            (比例系数, 实际内容的外接矩形；无内容信息时为None)
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class PageLayoutError(Exception):
    """基础异常"""
    pass


class LayoutPreconditionError(PageLayoutError, ValueError):
    """前置条件不满足（调用方传入非法数据）"""
    pass


class LayoutInvariantError(PageLayoutError, AssertionError):
    """内部不变量被破坏（程序逻辑错误）"""
    pass


class JobDefinitionError(PageLayoutError):
    """任务定义错误"""
    pass
