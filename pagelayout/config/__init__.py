"""
配置层 - 加载运行期配置与打印任务定义

职责：
- 加载 config/page_layout.yaml（可打印区域/裁剪开关/日志）
- 加载打印任务YAML（打印区域/比例/内容范围）
- 提供类型安全的配置访问接口
"""

from .job_loader import JobBook, JobDefinition, JobLoader, load_jobs
from .runtime_config import (
    LayoutConfig,
    LoggingConfig,
    PrintableConfig,
    RectConfig,
    configure_logging,
    get_config,
    reload_config,
)

__all__ = [
    "JobLoader",
    "JobBook",
    "JobDefinition",
    "load_jobs",
    "LayoutConfig",
    "LoggingConfig",
    "PrintableConfig",
    "RectConfig",
    "configure_logging",
    "get_config",
    "reload_config",
]
