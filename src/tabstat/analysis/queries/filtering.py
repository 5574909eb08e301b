"""
Row filtering (subsampling) and common predicate builders.

Responsibilities
  - Keep rows whose field value satisfies a predicate, preserving row order.
  - Combine several (accessor, predicate) conditions with logical AND.
  - Provide one-argument predicate factories for the usual comparisons.

Usage Context
  - Typical pipeline: drop nulls with ``get_subsample_not_null`` before
    aggregating, then narrow further with ``get_subsample_conds``.

Limitations
  - Comparison predicates treat a null value as not matching.
"""
# 说明：行过滤（子样本）与常用谓词构造器。
# 职责：
# - get_subsample：单条件过滤
# - get_subsample_conds：多条件逻辑与过滤（短路求值仅为优化，不影响结果）
# - get_subsample_not_null：保留所有给定字段均非空的行
# - greater_than_zero / equal_to_zero / not_null / less_or_equal / greater_or_equal / not_equal：单参数谓词工厂

from __future__ import annotations

from typing import Any, Callable, List, Sequence, Tuple

from tabstat.core.data.accessors import FieldAccessor, get_field_value
from tabstat.core.data.table import Row, Table
from tabstat.core.utils.logging import get_logger

Predicate = Callable[[Any], bool]
Condition = Tuple[FieldAccessor, Predicate]

logger = get_logger(__name__)


def get_subsample(table: Table, field: FieldAccessor, predicate: Predicate) -> List[Row]:
    """Rows whose ``field`` value satisfies ``predicate``, in source order."""
    read = get_field_value(field)
    return [row for row in table if predicate(read(row))]


def get_subsample_conds(table: Table, conditions: Sequence[Condition]) -> List[Row]:
    """Rows satisfying every ``(accessor, predicate)`` pair of ``conditions``."""
    checks = [(get_field_value(field), predicate) for field, predicate in conditions]
    kept = [row for row in table if all(predicate(read(row)) for read, predicate in checks)]
    logger.debug("kept %d of %d rows under %d conditions", len(kept), len(table), len(checks))
    return kept


def get_subsample_not_null(table: Table, fields: Sequence[FieldAccessor]) -> List[Row]:
    """Rows where none of ``fields`` reads as the null sentinel."""
    return get_subsample_conds(table, [(field, not_null()) for field in fields])


# ------------------------------------------------------------------ predicates
def not_null() -> Predicate:
    return lambda value: value is not None


def greater_than_zero() -> Predicate:
    return lambda value: value is not None and value > 0


def equal_to_zero() -> Predicate:
    return lambda value: value is not None and value == 0


def less_or_equal(n: Any) -> Predicate:
    return lambda value: value is not None and value <= n


def greater_or_equal(n: Any) -> Predicate:
    return lambda value: value is not None and value >= n


def not_equal(target: Any) -> Predicate:
    # 空值与非空 target 比较时视为“不相等”
    return lambda value: value != target
