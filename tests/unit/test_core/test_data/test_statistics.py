"""
Unit tests for basic statistical utilities.
"""
# 说明：基础样本统计工具的单元测试。
# 覆盖：
# - count / summation：样本数量与顺序求和（整数精确、inf 透传）
# - minimum / maximum / mean / variance / std：标量结果（含 ddof 自由度参数）
# - quantile：标量与序列分位数
# - histogram：给定分箱边界时的每箱计数与边界数组返回
# - 空样本与样本量不足时的异常类型

import math

import pytest

from tabstat.core.data import (
    EmptySampleError,
    InsufficientSampleError,
    StatisticsError,
    count,
    histogram,
    maximum,
    mean,
    minimum,
    quantile,
    std,
    summation,
    variance,
)


def test_count_and_summation() -> None:
    values = [1, 2, 3]
    assert count(values) == 3
    assert summation(values) == 6.0


def test_summation_is_sequential_and_keeps_ints_exact() -> None:
    # 顺序求和：大整数保持精确，浮点结果与内置 sum 逐位一致
    assert summation([10**17, 1]) == 100000000000000001
    assert summation([0.1] * 10) == sum([0.1] * 10)
    assert mean([10**17, 10**17 + 2]) == (2 * 10**17 + 2) / 2


def test_summation_and_mean_propagate_infinity() -> None:
    assert summation([math.inf, 1.0]) == math.inf
    assert mean([1.0, math.inf, 2.0]) == math.inf
    assert summation([-math.inf, 5]) == -math.inf


def test_mean_variance_std_match_expected() -> None:
    values = [1.0, 2.0, 3.0, 4.0]
    assert minimum(values) == 1.0
    assert maximum(values) == 4.0
    assert mean(values) == pytest.approx(2.5)
    assert variance(values) == pytest.approx(1.6666666667)
    assert variance(values, ddof=0) == pytest.approx(1.25)
    assert std(values) == pytest.approx(math.sqrt(5.0 / 3.0))


def test_quantile_scalar_and_sequence() -> None:
    values = [1.0, 2.0, 3.0, 4.0, 5.0]
    assert quantile(values, 0.5) == pytest.approx(3.0)
    assert quantile(values, [0.0, 0.25, 1.0]) == pytest.approx([1.0, 2.0, 5.0])


def test_histogram_counts_per_bin() -> None:
    counts, bins = histogram([1.0, 1.5, 2.4, 4.9], bins=[1.0, 2.0, 3.0, 5.0])
    assert counts == [2, 1, 1]
    assert bins[-1] == 5.0


@pytest.mark.parametrize("func", [summation, minimum, maximum, mean, variance, std])
def test_aggregates_reject_empty_sample(func) -> None:
    # 空样本统一抛出 EmptySampleError，不做 0 / NaN 替换
    with pytest.raises(EmptySampleError):
        func([])
    with pytest.raises(StatisticsError):
        func([])


def test_variance_requires_more_values_than_ddof() -> None:
    with pytest.raises(InsufficientSampleError):
        variance([1.0])
