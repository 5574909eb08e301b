"""Entry point for the core library components."""

from __future__ import annotations

from .data import (
    CoercionError,
    EmptySampleError,
    FieldAccessor,
    InsufficientSampleError,
    StatisticsError,
    TableError,
    at,
    get_field_value,
    load_csv,
    scale_transform,
    select_fields,
    shift,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)

__all__ = [
    "CoercionError",
    "EmptySampleError",
    "FieldAccessor",
    "InsufficientSampleError",
    "StatisticsError",
    "TableError",
    "at",
    "get_field_value",
    "load_csv",
    "scale_transform",
    "select_fields",
    "shift",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
