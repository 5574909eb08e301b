"""Shared utility helpers used across the core library."""

from .math_utils import (
    kahan_sum,
    fisher_z,
    floor_bucket,
)
from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    get_logger,
    configure_logging,
    RowSummaryFilter,
)
from .param_validation import (
    ensure,
    ensure_type,
    optional,
    unit_interval,
    validate_arguments,
    ParamValidationError,
)

__all__ = [
    "kahan_sum",
    "fisher_z",
    "floor_bucket",
    "RuntimeConfig",
    "get_config",
    "configure",
    "get_logger",
    "configure_logging",
    "RowSummaryFilter",
    "ensure",
    "ensure_type",
    "optional",
    "unit_interval",
    "validate_arguments",
    "ParamValidationError",
]
