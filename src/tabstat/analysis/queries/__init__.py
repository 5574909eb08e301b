"""Table queries: extraction, aggregation, filtering, partitioning and joins."""

from .extract import (
    Point,
    get_field_values,
    get_min_field_value,
    get_max_field_value,
    get_sum_field_values,
    get_mean_field_value,
    get_var_field_value,
    get_std_field_value,
    get_field_values_quantiles,
    count_field_values,
    get_points,
    get_field_histogram,
)
from .filtering import (
    Condition,
    Predicate,
    get_subsample,
    get_subsample_conds,
    get_subsample_not_null,
    not_null,
    greater_than_zero,
    equal_to_zero,
    less_or_equal,
    greater_or_equal,
    not_equal,
)
from .partition import (
    Partition,
    partition_sample,
    map_partition,
    partition_sample_by_field,
    map_partition_by_field,
    build_lookup,
)
from .join import join_tables
from .query_engine import FieldQueryEngine

__all__ = [
    "Point",
    "get_field_values",
    "get_min_field_value",
    "get_max_field_value",
    "get_sum_field_values",
    "get_mean_field_value",
    "get_var_field_value",
    "get_std_field_value",
    "get_field_values_quantiles",
    "count_field_values",
    "get_points",
    "get_field_histogram",
    "Condition",
    "Predicate",
    "get_subsample",
    "get_subsample_conds",
    "get_subsample_not_null",
    "not_null",
    "greater_than_zero",
    "equal_to_zero",
    "less_or_equal",
    "greater_or_equal",
    "not_equal",
    "Partition",
    "partition_sample",
    "map_partition",
    "partition_sample_by_field",
    "map_partition_by_field",
    "build_lookup",
    "join_tables",
    "FieldQueryEngine",
]
