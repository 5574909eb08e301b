"""
Unit tests for numerical utilities.
"""
# 说明：数值工具函数的单元测试。
# 覆盖：
# - kahan_sum：补偿求和与 math.fsum 精确结果一致；非有限项退回普通累加
# - fisher_z：与 math.atanh 一致，|r| = 1 时返回 ±inf
# - floor_bucket：正负数定宽分桶及零宽度报错

import math

import pytest

from tabstat.core.utils import fisher_z, floor_bucket, kahan_sum


def test_kahan_sum_matches_fsum() -> None:
    values = [0.1] * 10 + [1e6, -1e6]
    assert kahan_sum(values) == pytest.approx(math.fsum(values))
    assert kahan_sum([]) == 0.0


def test_kahan_sum_falls_back_on_non_finite_terms() -> None:
    # 遇到 inf 时补偿项会变成 nan，结果应与普通累加一致
    assert kahan_sum([math.inf, 1.0, 2.0]) == math.inf
    assert kahan_sum([1.0, -math.inf]) == -math.inf
    assert kahan_sum([1e308, 1e308]) == math.inf
    assert math.isnan(kahan_sum([math.inf, -math.inf]))


def test_fisher_z_matches_atanh_and_handles_extremes() -> None:
    assert fisher_z(0.5) == pytest.approx(math.atanh(0.5))
    assert fisher_z(0.0) == 0.0
    assert fisher_z(1.0) == math.inf
    assert fisher_z(-1.0) == -math.inf


def test_floor_bucket() -> None:
    assert floor_bucket(17, 5) == 15
    assert floor_bucket(-0.5, 1) == -1
    assert floor_bucket(2.5, 0.5) == pytest.approx(2.5)
    with pytest.raises(ZeroDivisionError):
        floor_bucket(1.0, 0)
