"""
Lightweight logging helpers with table-friendly defaults.
"""
# 说明：轻量级日志工具，提供适合表格数据的默认配置与统一的 logger 获取入口。
# 职责：
# - RowSummaryFilter：根据运行时配置将日志记录中附带的整行/整表数据替换为简短摘要
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 及其 handler 挂载摘要过滤器
# - 库内 get_field_value 在强制转换失败时附带 extra={"row": ...}，load_csv 附带 extra={"table": ...}；
#   调用方也可在自己的日志中使用这两个字段
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 是否摘要化 row / table 字段由 RuntimeConfig.summarize_rows 控制
# - 日志级别优先级：显式参数 level > 环境变量 TABSTAT_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config


class RowSummaryFilter(logging.Filter):
    """Filter that replaces attached rows and tables with short summaries if configured."""
    # 日志摘要过滤器：启用配置时，将约定字段（row / table）替换为长度摘要，避免整表内容写入日志

    def filter(self, record: logging.LogRecord) -> bool:
        config = get_config()
        if not config.summarize_rows or getattr(record, "_rows_summarized", False):
            return True
        if hasattr(record, "row"):
            record.row = f"<row: {_safe_len(record.row)} cells>"
        if hasattr(record, "table"):
            record.table = f"<table: {_safe_len(record.table)} rows>"
        # 根 logger 与 handler 上的过滤器可能先后作用于同一条记录
        record._rows_summarized = True
        return True


def _safe_len(value: object) -> str:
    # 对不支持 len() 的对象返回问号，过滤器本身不应抛错
    try:
        return str(len(value))  # type: ignore[arg-type]
    except TypeError:
        return "?"


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别、设置格式，并挂载 RowSummaryFilter
    log_level = level or os.environ.get("TABSTAT_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    # logger 级过滤器不作用于子 logger 传播上来的记录，因此同时挂到根 handler 上
    for target in [root, *root.handlers]:
        if not any(isinstance(flt, RowSummaryFilter) for flt in target.filters):
            target.addFilter(RowSummaryFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    return logger
