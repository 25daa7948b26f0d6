"""
命令行入口 - 对任务定义文件排版并输出页面列表(JSON)

使用方式：
    python -m pagelayout --jobs jobs.yaml [--config config/page_layout.yaml] [--crop] [--job ID ...]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import LayoutConfig, configure_logging, load_jobs
from .config.runtime_config import DEFAULT_CONFIG_PATH
from .interfaces import PageLayoutError
from .layout import PageLayoutEngine, StaticPrintAreaProvider, summarize_pages

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagelayout",
        description="将地图打印区域排版到纵向/横向页面",
    )
    parser.add_argument("--jobs", required=True, help="打印任务定义YAML")
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"运行期配置YAML（默认：{DEFAULT_CONFIG_PATH}）",
    )
    parser.add_argument(
        "--crop",
        action="store_true",
        help="将超过单页的打印区域裁剪到单页（覆盖配置）",
    )
    parser.add_argument(
        "--job",
        action="append",
        default=[],
        help="仅排版指定任务，可重复；默认全部任务",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = LayoutConfig.from_yaml(args.config)
    if args.crop:
        config.crop_large_print_area = True
    configure_logging(config.logging)

    try:
        book = load_jobs(Path(args.jobs))
        provider = StaticPrintAreaProvider.from_job_book(book)
        engine = PageLayoutEngine.from_config(provider, config)
        pages = engine.layout_all(args.job or book.job_ids())
    except (FileNotFoundError, PageLayoutError) as e:
        logger.error(f"排版失败: {e}")
        return 2

    result = {
        "summary": summarize_pages(pages),
        "pages": [page.model_dump() for page in pages],
    }
    json.dump(result, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0
