"""
运行期配置 - 读取 config/page_layout.yaml

职责：
- 加载可打印区域/裁剪开关/日志等运行参数
- 提供环境变量覆盖机制（前缀 PAGELAYOUT_）
- 类型安全的配置访问
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from ..models import Rect

DEFAULT_CONFIG_PATH = Path("config/page_layout.yaml")


class RectConfig(BaseModel):
    """矩形配置（页面单位，1/100英寸）"""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def to_rect(self) -> Rect:
        return Rect(left=self.left, top=self.top, width=self.width, height=self.height)


class PrintableConfig(BaseModel):
    """可打印区域配置（默认Letter纸，半英寸页边距）"""

    portrait: RectConfig = Field(
        default_factory=lambda: RectConfig(left=50, top=50, width=750, height=1000)
    )
    landscape: RectConfig = Field(
        default_factory=lambda: RectConfig(left=50, top=50, width=1000, height=750)
    )


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class LayoutConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    crop_large_print_area: bool = False
    printable: PrintableConfig = Field(default_factory=PrintableConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "PAGELAYOUT_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> LayoutConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        opts = data.get("page_layout", {})

        # 仅传入YAML中出现的键，缺省部分保留默认值并允许环境变量覆盖
        values: dict[str, Any] = {}
        if "crop_large_print_area" in opts:
            values["crop_large_print_area"] = cls._unwrap(opts["crop_large_print_area"])
        printable = opts.get("printable", {})
        defaults = PrintableConfig()
        sides = {
            k: {**getattr(defaults, k).model_dump(), **cls._extract(printable, k)}
            for k in ("portrait", "landscape")
            if k in printable
        }
        if sides:
            values["printable"] = sides
        if "logging" in opts:
            values["logging"] = cls._extract(opts, "logging")

        return cls(**values)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """环境变量优先于YAML"""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @staticmethod
    def _unwrap(value: Any) -> Any:
        if isinstance(value, dict) and "default" in value:
            return value["default"]
        return value

    @classmethod
    def _extract(cls, data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key, {})
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result


def configure_logging(config: LoggingConfig) -> None:
    """按配置初始化根日志"""
    logging.basicConfig(level=config.log_level.upper(), format=config.log_format)


# 全局配置实例
_config: LayoutConfig | None = None


def get_config() -> LayoutConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = LayoutConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> LayoutConfig:
    """重新加载配置"""
    global _config
    _config = LayoutConfig.from_yaml(yaml_path or DEFAULT_CONFIG_PATH)
    return _config
