"""
地图分页排版 - 核心模块

模块结构：
- config/     配置加载与任务定义解析
- models/     数据模型定义（矩形/分块/页面）
- layout/     排版算法（单轴分块/裁剪/方向选择/总编排）
- cli.py      命令行入口
"""

__version__ = "0.1.0"
