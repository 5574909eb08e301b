"""
Pearson correlation, correlation matrices, and Fisher-z significance.

Responsibilities
  - Compute the sample Pearson correlation of two equally long samples.
  - Build correlation matrices over a list of field accessors.
  - Blank out correlations that fail a Fisher z-transform significance test.

Usage Context
  - ``get_fields_filtered_corr_matrix(0.95, table, fields)`` keeps only
    correlations significant at the 95% level.

Limitations
  - The diagonal is computed like every other cell, not forced to 1.
  - A constant sample has no defined correlation; the result is NaN.
"""
# 说明：相关系数与显著性检验。
# 职责：
# - get_corr：样本 Pearson 相关系数，分母使用 n-1 样本标准差
# - get_fields_corr_matrix：对字段两两（含 i=j）计算相关系数
# - corr_test_sig：Fisher z 变换显著性 erf((atanh(r) - atanh(p)) / (s * sqrt(2)))，s = 1/sqrt(n-3)
# - get_fields_filtered_corr_matrix：非对角线上显著性低于阈值的单元替换为 NOT_SIGNIFICANT 哨兵

from __future__ import annotations

import math
from typing import Any, List, Optional, Sequence, Union

from tabstat.core.data import statistics
from tabstat.core.data.accessors import FieldAccessor
from tabstat.core.data.statistics import InsufficientSampleError
from tabstat.core.data.table import Table
from tabstat.core.utils.config import get_config
from tabstat.core.utils.logging import get_logger
from tabstat.core.utils.math_utils import fisher_z, kahan_sum
from tabstat.core.utils.param_validation import ensure, optional, unit_interval, validate_arguments

from tabstat.analysis.queries.extract import get_field_values

logger = get_logger(__name__)


class _NotSignificant:
    """Marker for a correlation that failed the significance test."""

    _instance: Optional["_NotSignificant"] = None

    def __new__(cls) -> "_NotSignificant":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_SIGNIFICANT"

    def __bool__(self) -> bool:
        return False


NOT_SIGNIFICANT = _NotSignificant()

MatrixEntry = Union[float, _NotSignificant]


def get_corr(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Sample Pearson correlation of ``xs`` and ``ys``."""
    ensure(len(xs) == len(ys), f"samples differ in length: {len(xs)} != {len(ys)}")
    n = len(xs)
    if n < 2:
        raise InsufficientSampleError(f"correlation requires at least 2 values, got {n}")
    mean_x = statistics.mean(xs)
    mean_y = statistics.mean(ys)
    covariance = kahan_sum((x - mean_x) * (y - mean_y) for x, y in zip(xs, ys)) / (n - 1)
    denominator = statistics.std(xs) * statistics.std(ys)
    if denominator == 0:
        logger.warning("correlation undefined for a constant sample of %d values", n)
        return math.nan
    return covariance / denominator


def get_fields_corr_matrix(table: Table, fields: Sequence[FieldAccessor]) -> List[List[float]]:
    """n x n matrix whose (i, j) entry is ``get_corr`` of fields i and j."""
    columns = [get_field_values(table, field) for field in fields]
    return [[get_corr(xs, ys) for ys in columns] for xs in columns]


def corr_test_sig(p: float, r: float, n: int) -> float:
    """
    Fisher z-transform test of an observed correlation ``r`` against ``p``.

    Returns ``erf((atanh(r) - atanh(p)) / (s * sqrt(2)))`` with
    ``s = 1 / sqrt(n - 3)``; ``n`` must exceed 3.
    """
    if n <= 3:
        raise InsufficientSampleError(f"significance test requires more than 3 samples, got {n}")
    z = fisher_z(r)
    u = fisher_z(p)
    s = 1.0 / math.sqrt(n - 3)
    return math.erf((z - u) / (s * math.sqrt(2)))


@validate_arguments({"threshold": optional(unit_interval)})
def get_fields_filtered_corr_matrix(
    threshold: Optional[float],
    table: Table,
    fields: Sequence[FieldAccessor],
) -> List[List[MatrixEntry]]:
    """
    Correlation matrix with insignificant off-diagonal entries replaced.

    An entry is kept when ``abs(corr_test_sig(0, r, n)) >= threshold``;
    ``threshold=None`` uses the configured ``significance_threshold``.
    """
    level = get_config().significance_threshold if threshold is None else threshold
    n = len(table)
    matrix: List[List[Any]] = get_fields_corr_matrix(table, fields)
    dropped = 0
    for i, row in enumerate(matrix):
        for j, r in enumerate(row):
            if i == j:
                continue
            if math.isnan(r) or abs(corr_test_sig(0.0, r, n)) < level:
                row[j] = NOT_SIGNIFICANT
                dropped += 1
    logger.debug("filtered %d of %d correlations below %.3f", dropped, len(fields) * (len(fields) - 1), level)
    return matrix
