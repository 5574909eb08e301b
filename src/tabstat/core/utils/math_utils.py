"""
Numerical utilities shared across the library.

Responsibilities
  - Provide compensated summation for long float sequences.
  - Expose the Fisher z-transform used by correlation significance tests.
  - Offer fixed-width floor bucketing used by accessor transforms.

Usage Context
  - Use in aggregate kernels and statistics where numerical stability matters.
  - Intended for small utility helpers reused across modules.

Limitations
  - Assumes numeric inputs convertible to float.
  - ``kahan_sum`` returns the plain sum once it overflows or meets an infinity.
"""
# 说明：库内共享的数值工具函数集合，集中实现数值稳定的累加与常用变换。
# 职责：
# - kahan_sum：带 Kahan 补偿的求和，降低浮点累加误差
# - fisher_z：相关系数的 Fisher z 变换，|r| = 1 时返回 ±inf 而非抛出定义域错误
# - floor_bucket：定宽分桶 n * floor(x / n)
# - ArrayLike：统一处理 Python 序列与 numpy 数组的类型别名

from __future__ import annotations

import math
from typing import Iterable, Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]


def kahan_sum(values: Iterable[float]) -> float:
    """Return the sum of values with Kahan compensation."""
    total = 0.0
    compensation = 0.0
    plain = 0.0
    for value in values:
        x = float(value)
        plain += x
        y = x - compensation
        t = total + y
        compensation = (t - total) - y
        total = t
    # 出现 inf 时补偿项变为 nan，退回普通累加结果
    if not math.isfinite(plain):
        return plain
    return total


def fisher_z(r: float) -> float:
    """Fisher z-transform ``atanh(r)``; maps |r| = 1 to ±inf."""
    # numpy 的 arctanh 在 ±1 处返回 inf，这里屏蔽除零告警
    with np.errstate(divide="ignore"):
        return float(np.arctanh(np.float64(r)))


def floor_bucket(value: float, width: float) -> float:
    """Return ``width * floor(value / width)``."""
    if width == 0:
        raise ZeroDivisionError("bucket width must be non-zero")
    return width * math.floor(value / width)
