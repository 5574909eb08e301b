"""
Unit tests for simple linear regression helpers.
"""
# 说明：一元线性回归的单元测试。
# 覆盖：
# - get_linear_reg_points / get_linear_reg：精确直线与带噪数据的拟合结果
# - 自定义求解器协作者被调用并决定拟合参数
# - get_linear_reg_errs：逐点平方残差
# - LinearFit.predict / residuals 与样本不足报错

from __future__ import annotations

import numpy as np
import pytest

from tabstat.analysis.stats import (
    LinearFit,
    get_linear_reg,
    get_linear_reg_errs,
    get_linear_reg_points,
    lstsq_solver,
)
from tabstat.core.data import InsufficientSampleError, at


def test_fit_exact_line() -> None:
    fit = get_linear_reg_points([(0, 1), (1, 3), (2, 5), (3, 7)])
    assert fit.slope == pytest.approx(2.0)
    assert fit.intercept == pytest.approx(1.0)
    assert fit.predict(10) == pytest.approx(21.0)
    assert fit(0.5) == pytest.approx(2.0)


def test_fit_from_table_matches_polyfit() -> None:
    table = [["1", "2.1"], ["2", "3.9"], ["3", "6.2"], ["4", "7.8"], ["5", "10.1"]]
    fit = get_linear_reg(table, at(1), at(2))
    slope, intercept = np.polyfit([1, 2, 3, 4, 5], [2.1, 3.9, 6.2, 7.8, 10.1], 1)
    assert fit.slope == pytest.approx(slope)
    assert fit.intercept == pytest.approx(intercept)


def test_custom_solver_is_used() -> None:
    calls = []

    def solver(design, targets):
        calls.append(design.shape)
        return lstsq_solver(design, targets) * 0 + np.array([0.5, -1.0])

    fit = get_linear_reg_points([(0, 0), (1, 1), (2, 2)], solver=solver)
    assert calls == [(3, 2)]
    assert fit == LinearFit(slope=0.5, intercept=-1.0)


def test_linear_reg_errs_are_squared_residuals() -> None:
    points = [(0, 1), (1, 2), (2, 7)]
    fit = LinearFit(slope=2.0, intercept=1.0)
    assert fit.residuals(points) == pytest.approx([0.0, -1.0, 2.0])
    assert get_linear_reg_errs(points, fit) == pytest.approx([0.0, 1.0, 4.0])


def test_linear_reg_errs_fit_points_when_no_fit_given() -> None:
    points = [(0, 1), (1, 3), (2, 5)]
    assert get_linear_reg_errs(points) == pytest.approx([0.0, 0.0, 0.0], abs=1e-18)


def test_regression_requires_two_points() -> None:
    with pytest.raises(InsufficientSampleError):
        get_linear_reg_points([(1, 1)])
