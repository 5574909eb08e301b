"""
Partitioning engine: group rows by a computed key and fold over groups.

Responsibilities
  - Split a table into buckets keyed by ``key_fn(row)``.
  - Apply a reducer to every ``(key, bucket)`` pair.
  - Build a key-overwrite lookup where the last row wins.

Usage Context
  - ``partition_sample_by_field(table, scale_transform(10, at(3)))`` groups
    rows into width-10 bins of column 3.

Limitations
  - Keys must be hashable.
  - Key iteration order is not part of the contract.
"""
# 说明：分组引擎。每次调用新建局部 dict，不保留任何模块级可变状态。
# 职责：
# - partition_sample：按键分桶；桶在首行命中时惰性创建，后续行追加，不覆盖已有行
# - map_partition：对每个 (key, 子表) 调用 reducer，结果顺序不作保证
# - *_by_field：以 get_field_value(field) 作为键函数的特化版本
# - build_lookup：单值查找表，重复键时保留最后一次出现的值（与分桶语义不同）
# 不变式：
# - 所有桶的并集（多重集）等于源表，且两两不相交

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, List

from tabstat.core.data.accessors import FieldAccessor, get_field_value
from tabstat.core.data.table import Row, Table
from tabstat.core.utils.logging import get_logger

KeyFunction = Callable[[Row], Hashable]
Reducer = Callable[[Hashable, List[Row]], Any]
Partition = Dict[Hashable, List[Row]]

logger = get_logger(__name__)


def partition_sample(table: Table, key_fn: KeyFunction) -> Partition:
    """Group rows of ``table`` into buckets keyed by ``key_fn(row)``."""
    buckets: Partition = {}
    for row in table:
        key = key_fn(row)
        bucket = buckets.get(key)
        if bucket is None:
            buckets[key] = [row]
        else:
            bucket.append(row)
    logger.debug("partitioned %d rows into %d buckets", len(table), len(buckets))
    return buckets


def map_partition(table: Table, key_fn: KeyFunction, reducer: Reducer) -> List[Any]:
    """Return ``reducer(key, bucket)`` for every bucket of ``partition_sample``."""
    return [reducer(key, bucket) for key, bucket in partition_sample(table, key_fn).items()]


def partition_sample_by_field(table: Table, field: FieldAccessor) -> Partition:
    return partition_sample(table, get_field_value(field))


def map_partition_by_field(table: Table, field: FieldAccessor, reducer: Reducer) -> List[Any]:
    return map_partition(table, get_field_value(field), reducer)


def build_lookup(table: Table, key_field: FieldAccessor, value_field: FieldAccessor) -> Dict[Hashable, Any]:
    """
    Map each key to a single value; a later duplicate key overwrites the earlier value.

    Use ``partition_sample_by_field`` when every row of a key must be kept.
    """
    read_key = get_field_value(key_field)
    read_value = get_field_value(value_field)
    lookup: Dict[Hashable, Any] = {}
    for row in table:
        lookup[read_key(row)] = read_value(row)
    return lookup
