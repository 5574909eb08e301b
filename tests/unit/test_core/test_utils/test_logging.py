"""
Unit tests for logging utilities.
"""
# 说明：日志配置与行摘要过滤相关的单元测试。
# 覆盖：
# - configure_logging(...)：根据给定日志级别初始化 logging 系统并只挂载一次过滤器
# - get_logger(...)：获取 logger 实例
# - RowSummaryFilter：row / table 附加字段在启用摘要时被替换为长度摘要，关闭时保持原样，重复过滤不变
# - get_field_value / load_csv：日志记录携带 row / table 附加字段

import logging

import pytest

from tabstat.core.data import CoercionError, at, load_csv
from tabstat.core.utils import RowSummaryFilter, configure, configure_logging, get_logger


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("tabstat.test", logging.INFO, __file__, 1, "message", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_configure_logging_installs_single_filter() -> None:
    configure_logging(level="INFO")
    configure_logging(level="INFO")
    filters = [flt for flt in logging.getLogger().filters if isinstance(flt, RowSummaryFilter)]
    assert len(filters) == 1


def test_get_logger_emits_messages(caplog) -> None:
    logger = get_logger("tabstat.test")
    with caplog.at_level(logging.INFO):
        logger.info("partitioned %d rows", 4)
    assert "partitioned 4 rows" in caplog.text


def test_row_summary_filter_replaces_rows_and_tables(restore_config) -> None:
    configure(summarize_rows=True)
    record = _record(row=[1, 2, 3], table=[[1], [2]])
    assert RowSummaryFilter().filter(record) is True
    assert record.row == "<row: 3 cells>"
    assert record.table == "<table: 2 rows>"


def test_row_summary_filter_disabled_keeps_payload(restore_config) -> None:
    configure(summarize_rows=False)
    record = _record(row=[1, 2, 3])
    RowSummaryFilter().filter(record)
    assert record.row == [1, 2, 3]


def test_row_summary_filter_is_idempotent(restore_config) -> None:
    configure(summarize_rows=True)
    record = _record(row=[1, 2, 3])
    flt = RowSummaryFilter()
    flt.filter(record)
    flt.filter(record)
    assert record.row == "<row: 3 cells>"


def test_configure_logging_filters_root_handlers() -> None:
    configure_logging(level="INFO")
    for handler in logging.getLogger().handlers:
        installed = [flt for flt in handler.filters if isinstance(flt, RowSummaryFilter)]
        assert len(installed) == 1


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def test_coercion_failure_attaches_row(restore_config) -> None:
    # 强制转换失败时以 extra={"row": ...} 记录整行，经过滤器后变为摘要
    logger = logging.getLogger("tabstat.core.data.accessors")
    handler = _ListHandler()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    # 不向根 logger 传播，避免根 handler 上的过滤器改写记录
    logger.propagate = False
    row = ["1", "abc", "3"]
    try:
        with pytest.raises(CoercionError):
            at(2)(row)
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
        logger.propagate = True
    [record] = handler.records
    assert record.row is row
    configure(summarize_rows=True)
    RowSummaryFilter().filter(record)
    assert record.row == "<row: 3 cells>"


def test_load_csv_attaches_table(write_csv, restore_config) -> None:
    logger = logging.getLogger("tabstat.core.data.table")
    handler = _ListHandler()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    # 不向根 logger 传播，避免根 handler 上的过滤器改写记录
    logger.propagate = False
    try:
        rows = load_csv(write_csv("1,2\n3,4\n"))
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
        logger.propagate = True
    assert handler.records[-1].table == rows
