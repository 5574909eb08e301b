"""
Property-based tests for queries, partitioning, and joins.
"""
# 说明：查询层、分组引擎与连接算子的属性测试。
# 覆盖：
# - 分组完备性：所有桶的并集（多重集）等于源表，桶两两不相交且非空
# - 桶内行保持源表顺序；map_partition 每个键恰好一个结果
# - 聚合往返：get_sum == sum(get_field_values)，get_mean == get_sum / 行数
# - count_field_values 计数之和等于行数
# - 过滤：get_subsample_conds 等价于对各条件逐个过滤
# - 连接正确性：输出行数等于键相等的 (t, u) 对数，且每行都是某个匹配对的拼接

from collections import Counter

from hypothesis import given, strategies as st

from tabstat.analysis.queries import (
    count_field_values,
    get_field_values,
    get_mean_field_value,
    get_subsample,
    get_subsample_conds,
    get_sum_field_values,
    greater_or_equal,
    join_tables,
    less_or_equal,
    map_partition,
    partition_sample,
    partition_sample_by_field,
)
from tabstat.core.data import at, scale_transform
from tests.property_based.conftest import keyed_tables, numeric_cells, tables


def _as_key(row):
    return tuple(row)


@given(tables(), st.integers(1, 7))
def test_partition_completeness(table, width):
    buckets = partition_sample_by_field(table, scale_transform(width, at(1)))
    merged = [row for bucket in buckets.values() for row in bucket]
    assert Counter(map(_as_key, merged)) == Counter(map(_as_key, table))
    assert all(bucket for bucket in buckets.values())
    # 同一行对象只出现在一个桶中
    assert len({id(row) for row in merged}) == len(table)


@given(tables())
def test_partition_buckets_keep_source_order(table):
    buckets = partition_sample(table, lambda row: len(str(row[0])))
    for bucket in buckets.values():
        positions = [next(i for i, r in enumerate(table) if r is row) for row in bucket]
        assert positions == sorted(positions)


@given(tables())
def test_map_partition_one_result_per_key(table):
    results = map_partition(table, lambda row: str(row[0]), lambda key, rows: key)
    assert Counter(results) == Counter(set(str(row[0]) for row in table))


@given(tables(min_rows=1, cell_strategy=numeric_cells()))
def test_aggregate_round_trip(table):
    values = get_field_values(table, at(1))
    total = get_sum_field_values(table, at(1))
    assert total == sum(values)
    assert get_mean_field_value(table, at(1)) == total / len(table)


@given(tables())
def test_count_field_values_sums_to_row_count(table):
    counts = count_field_values(table, at(1))
    assert sum(counts.values()) == len(table)
    assert set(counts) == set(get_field_values(table, at(1)))


@given(tables(), st.integers(-1000, 1000), st.integers(-1000, 1000))
def test_subsample_conds_is_conjunction(table, low, high):
    combined = get_subsample_conds(table, [(at(1), greater_or_equal(low)), (at(1), less_or_equal(high))])
    sequential = get_subsample(get_subsample(table, at(1), greater_or_equal(low)), at(1), less_or_equal(high))
    assert combined == sequential


@given(keyed_tables(), keyed_tables())
def test_join_correctness(left, right):
    joined = join_tables(left, right)
    pairs = [(t, u) for t in left for u in right if t[0] == u[0]]
    assert len(joined) == len(pairs)
    assert joined == [t + u for t, u in pairs]
