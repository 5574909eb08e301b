"""
Query engine dispatching named field aggregates over a table.

Responsibilities
  - Provide a unified execution entry for built-in aggregates.
  - Support simple multi-step query lists against one table.
  - Summarize a field with every descriptive statistic at once.

Usage Context
  - Use when aggregates are selected by name (reports, example scripts).
  - Supports built-in handlers and custom registrations.

Limitations
  - Every handler receives the whole table and one accessor.
  - Does not cache extracted columns between steps.
"""
# 说明：按名称调度字段聚合查询的轻量引擎。
# 职责：
# - 通过名称注册表调度 count/min/max/sum/mean/var/std/quantile/distinct 等内置聚合
# - register(...) 支持外部注册或覆盖处理器
# - pipeline(...) 顺序执行多个查询步骤；describe(...) 一次性输出描述统计摘要

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Sequence

from tabstat.core.data.accessors import FieldAccessor
from tabstat.core.data.table import Table
from tabstat.core.utils.logging import get_logger
from tabstat.core.utils.param_validation import ParamValidationError, ensure

from . import extract

Handler = Callable[[Table, FieldAccessor, Dict[str, Any]], Any]

logger = get_logger(__name__)

_DESCRIBE_ORDER = ("count", "min", "max", "sum", "mean", "var", "std")


class FieldQueryEngine:
    """
    Lightweight dispatcher for named field aggregates.

    - Configuration
      - No configuration; the registry starts with the built-in aggregates.

    - Behavior
      - Dispatches named queries to handlers taking ``(table, field, params)``.
      - Query names are case-insensitive.

    - Usage Notes
      - Register custom handlers to extend built-in query support.
    """

    def __init__(self) -> None:
        self._registry: Dict[str, Handler] = {
            "count": lambda table, field, params: len(extract.get_field_values(table, field)),
            "min": lambda table, field, params: extract.get_min_field_value(table, field),
            "max": lambda table, field, params: extract.get_max_field_value(table, field),
            "sum": lambda table, field, params: extract.get_sum_field_values(table, field),
            "mean": lambda table, field, params: extract.get_mean_field_value(table, field),
            "var": lambda table, field, params: extract.get_var_field_value(table, field),
            "std": lambda table, field, params: extract.get_std_field_value(table, field),
            "quantile": self._run_quantile,
            "distinct": lambda table, field, params: extract.count_field_values(table, field),
        }

    @property
    def names(self) -> List[str]:
        return sorted(self._registry)

    def register(self, name: str, handler: Handler) -> None:
        """Register a custom query handler."""
        ensure(bool(name), "query name must be non-empty")
        ensure(callable(handler), "handler must be callable")
        self._registry[name.lower()] = handler

    def execute(self, name: str, table: Table, field: FieldAccessor, **params: Any) -> Any:
        """Run the aggregate registered as ``name``; extra keyword arguments go to the handler."""
        handler = self._registry.get(name.lower())
        if handler is None:
            raise ParamValidationError(f"unknown query '{name}'")
        logger.debug("executing %s on column %d", name, field.index)
        return handler(table, field, params)

    def pipeline(self, table: Table, steps: Sequence[Mapping[str, Any]]) -> List[Any]:
        """
        Execute a sequence of queries against ``table``.

        Args:
            table: Table every step reads from.
            steps: Iterable of {"query": str, "field": FieldAccessor, **params}.
        """
        results: List[Any] = []
        for step in steps:
            query_name = step.get("query")
            field = step.get("field")
            if not query_name:
                raise ParamValidationError("each pipeline step requires 'query'")
            if not isinstance(field, FieldAccessor):
                raise ParamValidationError("each pipeline step requires a FieldAccessor 'field'")
            params = {k: v for k, v in step.items() if k not in ("query", "field")}
            results.append(self.execute(query_name, table, field, **params))
        return results

    def describe(self, table: Table, field: FieldAccessor) -> Dict[str, Any]:
        """Return count, min, max, sum, mean, var and std of ``field``."""
        return {name: self.execute(name, table, field) for name in _DESCRIBE_ORDER}

    # ------------------------------------------------------------------ handlers
    @staticmethod
    def _run_quantile(table: Table, field: FieldAccessor, params: Dict[str, Any]) -> Any:
        if "threshold" not in params:
            raise ParamValidationError("missing required parameter 'threshold'")
        return extract.get_field_values_quantiles(table, field, params["threshold"])
