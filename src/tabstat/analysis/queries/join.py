"""
Nested-loop inner equi-join of two tables.

Responsibilities
  - Emit ``t ++ u`` for every pair of rows with equal keys.
  - Keep the left table's row order, then the right table's row order.

Usage Context
  - After joining, retarget accessors defined on the right table with
    ``shift(width_of_left_rows)``.

Limitations
  - O(|T| * |U|) comparisons; intended for small and medium tables.
  - Key uniqueness is not enforced; duplicates produce the cross-product.
"""
# 说明：嵌套循环内连接。未匹配的行不产生输出（非外连接）。
# 约定：
# - 默认以两表第 1 列的原始单元格为键（不做数值强制转换，字符串标识符也可直接连接）
# - 显式传入 left_key / right_key 访问器时，键经 get_field_value 读取
# - 空表输入返回空列表，不抛错

from __future__ import annotations

from typing import Callable, List, Optional

from tabstat.core.data.accessors import FieldAccessor, get_field_value
from tabstat.core.data.table import Cell, Row, Table, concat_rows
from tabstat.core.utils.logging import get_logger

logger = get_logger(__name__)


def _first_cell(row: Row) -> Cell:
    return row[0]


def _key_reader(field: Optional[FieldAccessor]) -> Callable[[Row], object]:
    return _first_cell if field is None else get_field_value(field)


def join_tables(
    left: Table,
    right: Table,
    *,
    left_key: Optional[FieldAccessor] = None,
    right_key: Optional[FieldAccessor] = None,
) -> List[List[Cell]]:
    """
    Inner-join ``left`` and ``right`` on their first columns.

    Args:
        left: Table ``T``; output follows its row order.
        right: Table ``U``; matches for one left row follow its row order.
        left_key: Optional key accessor for ``left`` instead of the raw first cell.
        right_key: Optional key accessor for ``right`` instead of the raw first cell.
    """
    read_left = _key_reader(left_key)
    read_right = _key_reader(right_key)
    right_keys = [read_right(row) for row in right]
    joined: List[List[Cell]] = []
    for t in left:
        key = read_left(t)
        for u, u_key in zip(right, right_keys):
            if u_key == key:
                joined.append(concat_rows(t, u))
    logger.debug("joined %d x %d rows into %d rows", len(left), len(right), len(joined))
    return joined
