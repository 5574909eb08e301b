"""
Simple linear regression ``y = slope * x + intercept``.

Responsibilities
  - Fit a line to a point list through a pluggable least-squares solver.
  - Return the fit as data (slope, intercept) with prediction helpers.
  - Report the squared residual of every point.

Usage Context
  - ``get_linear_reg(table, at(2), at(5))`` fits column 5 against column 2.
  - Pass ``solver=`` to swap the default ``numpy.linalg.lstsq`` backend.

Limitations
  - Requires at least two points; points with null coordinates must be
    filtered out beforehand.
"""
# 说明：一元线性回归。最小化过程委托给外部最小二乘求解器（默认 numpy.linalg.lstsq）。
# 职责：
# - LinearFit：拟合结果（斜率、截距），提供 predict / residuals
# - lstsq_solver：求解器协作者，输入设计矩阵与目标向量，输出参数向量
# - get_linear_reg_points / get_linear_reg：基于点列表或表字段拟合
# - get_linear_reg_errs：逐点平方残差

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from tabstat.core.data.accessors import FieldAccessor
from tabstat.core.data.statistics import InsufficientSampleError
from tabstat.core.data.table import Table
from tabstat.core.utils.logging import get_logger

from tabstat.analysis.queries.extract import Point, get_points

Solver = Callable[[np.ndarray, np.ndarray], np.ndarray]

logger = get_logger(__name__)


@dataclass(frozen=True)
class LinearFit:
    """Fitted line ``y = slope * x + intercept``."""

    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept

    def __call__(self, x: float) -> float:
        return self.predict(x)

    def residuals(self, points: Sequence[Point]) -> List[float]:
        """Observed minus predicted y for every point."""
        return [float(y) - self.predict(float(x)) for x, y in points]


def lstsq_solver(design: np.ndarray, targets: np.ndarray) -> np.ndarray:
    """Least-squares parameters minimizing ``||design @ params - targets||``."""
    params, _, rank, _ = np.linalg.lstsq(design, targets, rcond=None)
    if rank < design.shape[1]:
        logger.warning("design matrix is rank deficient (rank %d < %d)", rank, design.shape[1])
    return params


def _design_matrix(points: Sequence[Point]) -> np.ndarray:
    xs = np.asarray([float(x) for x, _ in points], dtype=np.float64)
    return np.column_stack([xs, np.ones_like(xs)])


def get_linear_reg_points(points: Sequence[Point], solver: Optional[Solver] = None) -> LinearFit:
    """Fit ``y = m * x + b`` to ``points``."""
    if len(points) < 2:
        raise InsufficientSampleError(f"linear regression requires at least 2 points, got {len(points)}")
    design = _design_matrix(points)
    targets = np.asarray([float(y) for _, y in points], dtype=np.float64)
    slope, intercept = (solver or lstsq_solver)(design, targets)
    return LinearFit(slope=float(slope), intercept=float(intercept))


def get_linear_reg(
    table: Table,
    x_field: FieldAccessor,
    y_field: FieldAccessor,
    solver: Optional[Solver] = None,
) -> LinearFit:
    return get_linear_reg_points(get_points(table, x_field, y_field), solver=solver)


def get_linear_reg_errs(points: Sequence[Point], fit: Optional[LinearFit] = None) -> List[float]:
    """Squared residual of every point against ``fit`` (fitted from ``points`` when omitted)."""
    line = fit or get_linear_reg_points(points)
    return [residual ** 2 for residual in line.residuals(points)]
