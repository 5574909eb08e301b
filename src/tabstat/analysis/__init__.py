"""Analysis layer: table queries, partitioning, joins, and statistics."""

from .queries import (
    FieldQueryEngine,
    build_lookup,
    count_field_values,
    get_field_values,
    get_subsample,
    get_subsample_conds,
    get_subsample_not_null,
    join_tables,
    map_partition,
    partition_sample,
)
from .stats import (
    NOT_SIGNIFICANT,
    LinearFit,
    corr_test_sig,
    get_corr,
    get_fields_corr_matrix,
    get_fields_filtered_corr_matrix,
    get_linear_reg,
)

__all__ = [
    "FieldQueryEngine",
    "build_lookup",
    "count_field_values",
    "get_field_values",
    "get_subsample",
    "get_subsample_conds",
    "get_subsample_not_null",
    "join_tables",
    "map_partition",
    "partition_sample",
    "NOT_SIGNIFICANT",
    "LinearFit",
    "corr_test_sig",
    "get_corr",
    "get_fields_corr_matrix",
    "get_fields_filtered_corr_matrix",
    "get_linear_reg",
]
