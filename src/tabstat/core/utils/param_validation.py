"""
Reusable validation helpers and decorators.
"""
# 说明：参数校验工具，查询层与统计层在入口处统一使用。
# 职责：
# - ParamValidationError：参数校验失败的异常类型（ValueError 子类）
# - ensure / ensure_type：布尔断言与类型断言
# - unit_interval / optional：可组合的校验器，返回（可能转换后的）取值
# - validate_arguments：按参数名套用校验器的装饰器，支持位置、关键字与仅关键字参数

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Mapping, Tuple, Type

Validator = Callable[[Any], Any]


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise ParamValidationError(f"{label} must be instance of {names}, got {type(value).__name__}")


def unit_interval(value: Any) -> Any:
    """Validator accepting a number or a sequence of numbers inside [0, 1]."""
    # 序列转为 tuple，调用方之后的修改不会影响已校验的值
    if isinstance(value, (list, tuple)):
        for item in value:
            unit_interval(item)
        return tuple(value)
    ensure_type(value, (int, float), label="threshold")
    ensure(0.0 <= float(value) <= 1.0, f"threshold {value} must lie in [0, 1]")
    return value


def optional(validator: Validator) -> Validator:
    """Wrap ``validator`` so that ``None`` passes through unchecked."""

    def _check(value: Any) -> Any:
        return None if value is None else validator(value)

    return _check


def validate_arguments(schema: Mapping[str, Validator]) -> Callable:
    """
    Decorator validating arguments according to callables.

    Each validator receives the argument and returns the (possibly
    transformed) value or raises ParamValidationError. Arguments left to
    their defaults are not validated.
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)
        unknown = set(schema) - set(signature.parameters)
        ensure(not unknown, f"{func.__name__} has no parameters named {sorted(unknown)}")

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                bound = signature.bind(*args, **kwargs)
            except TypeError as exc:
                raise ParamValidationError(str(exc)) from exc
            for name, validator in schema.items():
                if name in bound.arguments:
                    bound.arguments[name] = validator(bound.arguments[name])
            return func(*bound.args, **bound.kwargs)

        return wrapper

    return decorator
