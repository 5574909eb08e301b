"""Core data abstractions shared across the library."""

from .table import (
    Cell,
    Row,
    Table,
    TableError,
    CoercionError,
    coerce_cell,
    concat_rows,
    load_csv,
    load_csv_with_header,
)
from .accessors import (
    FieldAccessor,
    identity,
    at,
    shift,
    scale_transform,
    with_transform,
    get_field_value,
    select_fields,
)
from .statistics import (
    StatisticsError,
    EmptySampleError,
    InsufficientSampleError,
    count,
    summation,
    minimum,
    maximum,
    mean,
    variance,
    std,
    quantile,
    histogram,
)

__all__ = [
    "Cell",
    "Row",
    "Table",
    "TableError",
    "CoercionError",
    "coerce_cell",
    "concat_rows",
    "load_csv",
    "load_csv_with_header",
    "FieldAccessor",
    "identity",
    "at",
    "shift",
    "scale_transform",
    "with_transform",
    "get_field_value",
    "select_fields",
    "StatisticsError",
    "EmptySampleError",
    "InsufficientSampleError",
    "count",
    "summation",
    "minimum",
    "maximum",
    "mean",
    "variance",
    "std",
    "quantile",
    "histogram",
]
