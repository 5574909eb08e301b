"""
Numerical utilities for basic sample statistics.

Responsibilities:
    * Implemented with numerical stability in mind
    * Fail loudly on empty or undersized samples instead of returning NaN
"""
# 说明：用于基础样本统计的数值工具，查询层的聚合函数都落在这里。
# 职责：
# - 提供计数、顺序求和、最值、均值、方差、标准差、分位数与直方图
# - 空样本统一抛出 EmptySampleError，样本量不足抛出 InsufficientSampleError
# - 方差内部使用 Kahan 补偿求和
# - 空值（None）不在本层过滤，调用方需先用 get_subsample_not_null 之类的方法剔除

from __future__ import annotations

import math
from typing import Any, Iterable, List, Sequence, Tuple, Union

import numpy as np

from tabstat.core.utils.math_utils import kahan_sum


Number = float


class StatisticsError(ValueError):
    """Base class for sample-statistics failures."""


class EmptySampleError(StatisticsError):
    """Raised when an aggregate is computed over an empty sample."""


class InsufficientSampleError(StatisticsError):
    """Raised when a sample is smaller than a statistic requires."""


def _materialize(values: Iterable[Any], label: str) -> List[Any]:
    # 物化为列表以便多次遍历，并在空输入时报错
    extracted = list(values)
    if not extracted:
        raise EmptySampleError(f"{label} of empty sample")
    return extracted


def count(values: Iterable[Any]) -> int:
    """Return the number of items."""
    return sum(1 for _ in values)


def summation(values: Iterable[Any]) -> Any:
    """Return the left-to-right sum of values; integer inputs stay exact."""
    return sum(_materialize(values, "sum"))


def minimum(values: Iterable[Any]) -> Any:
    return min(_materialize(values, "min"))


def maximum(values: Iterable[Any]) -> Any:
    return max(_materialize(values, "max"))


def mean(values: Iterable[Any]) -> float:
    # 均值：顺序求和 / 样本量，与 summation 保持一致
    extracted = _materialize(values, "mean")
    return sum(extracted) / len(extracted)


def variance(values: Iterable[Any], *, ddof: int = 1) -> float:
    # 方差：默认无偏估计（ddof=1 样本方差）。当样本数 ≤ ddof 时抛错。
    extracted = _materialize(values, "variance")
    n = len(extracted)
    if n <= ddof:
        raise InsufficientSampleError(f"variance with ddof={ddof} requires more than {ddof} values, got {n}")
    mu = kahan_sum(extracted) / n
    accum = kahan_sum((float(x) - mu) ** 2 for x in extracted)
    return accum / (n - ddof)


def std(values: Iterable[Any], *, ddof: int = 1) -> float:
    return math.sqrt(variance(values, ddof=ddof))


def quantile(values: Iterable[Any], q: Union[float, Sequence[float]]) -> Union[float, List[float]]:
    """Return the ``q``-quantile(s) using linear interpolation."""
    arr = np.asarray(_materialize(values, "quantile"), dtype=np.float64)
    if isinstance(q, (list, tuple)):
        return [float(v) for v in np.quantile(arr, list(q))]
    return float(np.quantile(arr, q))


def histogram(values: Iterable[Any], *, bins: Sequence[float]) -> Tuple[List[int], Sequence[float]]:
    """Return histogram counts for numeric values and provided bin edges."""
    # 直方图计数：bins 为递增边界，返回各区间计数（左闭右开，最后一个区间右端点包含）
    if len(bins) < 2:
        raise ValueError("histogram requires at least two bin edges")
    counts = [0 for _ in range(len(bins) - 1)]
    for value in values:
        numeric = float(value)
        if numeric < bins[0] or numeric > bins[-1]:
            continue
        for idx in range(len(bins) - 1):
            left, right = bins[idx], bins[idx + 1]
            if left <= numeric < right or (idx == len(bins) - 2 and numeric == right):
                counts[idx] += 1
                break
    return counts, bins
