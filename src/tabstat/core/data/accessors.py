"""
Field accessors and the combinators that build them.

Responsibilities
  - Describe a logical field as a 1-based column index plus a value transform.
  - Build new accessors by shifting the index or composing the transform.
  - Read a field from a row through the single cell-coercion rule.

Usage Context
  - Define one accessor per logical field and reuse it across queries.
  - Use ``shift`` to retarget accessors onto rows produced by ``join_tables``.

Limitations
  - Column indices are 1-based; ``at(1)`` reads ``row[0]``.
  - Out-of-range indices fail with IndexError at access time.
"""
# 说明：字段访问器（列号 + 变换函数）及其组合子。
# 职责：
# - FieldAccessor：不可变数据类，index 为 1 起始列号，transform 为标量 -> 标量的纯函数
# - at / shift / scale_transform / with_transform：始终构造新访问器，从不原地修改
# - get_field_value：读取单元格 -> coerce_cell 强制转换 -> 应用 transform
# - select_fields：按给定顺序读取多个字段
# 约定：
# - 空值单元格（None）直接返回 None，不调用 transform

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence

from tabstat.core.utils.logging import get_logger
from tabstat.core.utils.math_utils import floor_bucket
from tabstat.core.utils.param_validation import ensure, ensure_type

from .table import CoercionError, Row, coerce_cell

Transform = Callable[[Any], Any]
RowFunction = Callable[[Row], Any]

logger = get_logger(__name__)


def identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class FieldAccessor:
    """
    Immutable pairing of a column index with a value transform.

    - Configuration
      - index: 1-based column offset into a row.
      - transform: Pure function applied to the coerced cell value.

    - Behavior
      - Instances are frozen; combinators return new accessors.

    - Usage Notes
      - Prefer ``at(i)`` over calling the constructor directly.
    """

    index: int
    transform: Transform = identity

    def __post_init__(self) -> None:
        # bool 是 int 的子类，需单独排除
        ensure(isinstance(self.index, int) and not isinstance(self.index, bool), "index must be an integer")
        ensure(self.index >= 1, f"index must be >= 1, got {self.index}")
        ensure(callable(self.transform), "transform must be callable")

    def __call__(self, row: Row) -> Any:
        return get_field_value(self)(row)


def at(offset: int) -> FieldAccessor:
    """Accessor for column ``offset`` with the identity transform."""
    return FieldAccessor(offset, identity)


def shift(offset: int) -> Callable[[FieldAccessor], FieldAccessor]:
    """Return a combinator moving an accessor ``offset`` columns to the right."""
    ensure_type(offset, (int,), label="offset")

    def _shift(field: FieldAccessor) -> FieldAccessor:
        return dataclasses.replace(field, index=field.index + offset)

    return _shift


def with_transform(field: FieldAccessor, fn: Transform) -> FieldAccessor:
    """Return a copy of ``field`` whose transform is ``fn`` applied after the old one."""
    previous = field.transform

    def _composed(value: Any) -> Any:
        return fn(previous(value))

    return dataclasses.replace(field, transform=_composed)


def scale_transform(n: float, field: FieldAccessor) -> FieldAccessor:
    """Bucket ``field`` into fixed-width bins: ``g(x) = n * floor(old(x) / n)``."""
    ensure(n != 0, "bucket width must be non-zero")
    return with_transform(field, lambda value: floor_bucket(value, n))


def get_field_value(field: FieldAccessor) -> RowFunction:
    """Return a function reading ``field`` from a row."""

    def _read(row: Row) -> Any:
        try:
            value = coerce_cell(row[field.index - 1])
        except CoercionError:
            # 整行作为 extra 附带，由 RowSummaryFilter 决定是否摘要化
            logger.debug("column %d is not numeric", field.index, extra={"row": row})
            raise
        if value is None:
            return None
        return field.transform(value)

    return _read


def select_fields(fields: Sequence[FieldAccessor]) -> Callable[[Row], List[Any]]:
    """Return a function reading every accessor of ``fields`` from a row, in order."""
    readers = [get_field_value(field) for field in fields]

    def _select(row: Row) -> List[Any]:
        return [read(row) for read in readers]

    return _select
