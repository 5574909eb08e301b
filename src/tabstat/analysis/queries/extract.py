"""
Field extraction and aggregation over tables.

Responsibilities
  - Read a single field across every row of a table, in row order.
  - Aggregate extracted values (min/max/mean/variance/std/sum/quantiles).
  - Count distinct values and build point lists for plotting or regression.

Usage Context
  - Every aggregate takes a table and a FieldAccessor; compose accessors
    (``shift``, ``scale_transform``) instead of pre-processing the table.

Limitations
  - Values are extracted eagerly; the whole column is materialized.
  - Aggregates raise EmptySampleError on empty tables and do not skip nulls.
"""
# 说明：表格字段提取与聚合查询。
# 职责：
# - get_field_values：按行顺序读取单个字段（经 coerce_cell 与 transform）
# - get_*_field_value(s)：最值、均值、样本方差、样本标准差、顺序求和与分位数
# - count_field_values：统计各取值出现次数（取值顺序不作保证）
# - get_points / get_field_histogram：为绘图与回归准备数据

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Sequence, Tuple, Union

from tabstat.core.data import statistics
from tabstat.core.data.accessors import FieldAccessor, get_field_value
from tabstat.core.data.table import Table
from tabstat.core.utils.param_validation import unit_interval, validate_arguments

Point = Tuple[Any, Any]


def get_field_values(table: Table, field: FieldAccessor) -> List[Any]:
    """Return the value of ``field`` for every row, in row order."""
    read = get_field_value(field)
    return [read(row) for row in table]


def get_min_field_value(table: Table, field: FieldAccessor) -> Any:
    """Smallest value of ``field``; raises EmptySampleError on an empty table."""
    return statistics.minimum(get_field_values(table, field))


def get_max_field_value(table: Table, field: FieldAccessor) -> Any:
    """Largest value of ``field``; raises EmptySampleError on an empty table."""
    return statistics.maximum(get_field_values(table, field))


def get_sum_field_values(table: Table, field: FieldAccessor) -> Any:
    return statistics.summation(get_field_values(table, field))


def get_mean_field_value(table: Table, field: FieldAccessor) -> float:
    return statistics.mean(get_field_values(table, field))


def get_var_field_value(table: Table, field: FieldAccessor) -> float:
    """Sample variance (divisor n - 1)."""
    return statistics.variance(get_field_values(table, field), ddof=1)


def get_std_field_value(table: Table, field: FieldAccessor) -> float:
    """Sample standard deviation, the square root of the sample variance."""
    return statistics.std(get_field_values(table, field), ddof=1)


@validate_arguments({"threshold": unit_interval})
def get_field_values_quantiles(
    table: Table,
    field: FieldAccessor,
    threshold: Union[float, Sequence[float]],
) -> Union[float, List[float]]:
    """
    Quantile(s) of ``field`` at ``threshold``.

    A scalar threshold returns a float, a sequence returns a list in the
    same order. Thresholds must lie in [0, 1].
    """
    return statistics.quantile(get_field_values(table, field), threshold)


def count_field_values(table: Table, field: FieldAccessor) -> Dict[Any, int]:
    """Map every distinct value of ``field`` to its number of occurrences."""
    # 取值顺序不作保证，调用方只应依赖键集合与计数
    return dict(Counter(get_field_values(table, field)))


def get_points(table: Table, x_field: FieldAccessor, y_field: FieldAccessor) -> List[Point]:
    """Return ``(x, y)`` pairs, one per row."""
    read_x = get_field_value(x_field)
    read_y = get_field_value(y_field)
    return [(read_x(row), read_y(row)) for row in table]


def get_field_histogram(table: Table, field: FieldAccessor, bins: Sequence[float]) -> List[int]:
    counts, _ = statistics.histogram(get_field_values(table, field), bins=bins)
    return counts
