"""
Table abstractions shared by accessors, queries, and statistics.

Responsibilities:
    * define the flat row/table representation and the null sentinel
    * own the single cell-coercion rule (numeric strings become numbers)
    * load CSV files into tables in file order
"""
# 说明：表格数据的基础表示与 CSV 加载工具，供字段访问器、查询层与统计层共享。
# 职责：
# - Cell / Row / Table：扁平的行列表示；None 作为空值哨兵
# - coerce_cell(...)：唯一的单元格强制转换规则（数字透传、数字字符串解析、非法字符串报错）
# - load_csv / load_csv_with_header：按文件顺序读取 CSV，空值标记转为 None，其余单元格保持字符串
# - concat_rows(...)：行拼接，用于连接（join）后的宽表
# 约定：
# - 表结构不做校验，畸形行在访问时才会失败
# - 解析失败统一抛出 CoercionError，不做任何默认值替换

from __future__ import annotations

import csv
import numbers
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from tabstat.core.utils.config import get_config
from tabstat.core.utils.logging import get_logger

Cell = Union[int, float, str, None]
# 单元格：数值、字符串或 None（空值哨兵）

Row = Sequence[Cell]
Table = Sequence[Row]
# 表即行序列；行长度一致性由调用方保证

PathLike = Union[str, Path]

logger = get_logger(__name__)


class TableError(RuntimeError):
    """Raised when a table cannot be loaded."""


class CoercionError(ValueError):
    """Raised when a cell cannot be coerced to a number."""


def coerce_cell(cell: object) -> Union[int, float, None]:
    """
    Coerce a raw cell to a numeric value.

    Numbers pass through, ``None`` stays ``None``, strings are parsed as
    ``int`` first and ``float`` second; underscores and non-ASCII digits are
    rejected. Anything else raises CoercionError.
    """
    # bool 也是 numbers.Number 的子类，这里按数值透传
    if cell is None:
        return None
    if isinstance(cell, numbers.Number):
        return cell  # type: ignore[return-value]
    if isinstance(cell, str):
        text = cell.strip()
        # int() / float() 也接受下划线分组与非 ASCII 数字，CSV 文本中一律视为非法
        if "_" in text or not text.isascii():
            raise CoercionError(f"cannot coerce cell {cell!r} to a number")
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            raise CoercionError(f"cannot coerce cell {cell!r} to a number") from None
    raise CoercionError(f"unsupported cell type {type(cell).__name__}")


def concat_rows(left: Row, right: Row) -> List[Cell]:
    """Return ``left ++ right`` as a new list."""
    return list(left) + list(right)


def _read_rows(
    path: PathLike,
    *,
    delimiter: Optional[str],
    null_markers: Optional[Iterable[str]],
) -> List[List[Cell]]:
    # 逐行读取 CSV；空行跳过，命中空值标记的单元格替换为 None
    config = get_config()
    sep = delimiter or config.csv_delimiter
    markers = set(config.null_markers if null_markers is None else null_markers)
    file_path = Path(path)
    if not file_path.exists():
        raise TableError(f"no such file: {file_path}")
    rows: List[List[Cell]] = []
    with open(file_path, newline="", encoding="utf-8") as handle:
        for raw in csv.reader(handle, delimiter=sep):
            if not raw:
                continue
            rows.append([None if value in markers else value for value in raw])
    return rows


def load_csv_with_header(
    path: PathLike,
    *,
    delimiter: Optional[str] = None,
    null_markers: Optional[Iterable[str]] = None,
) -> Tuple[List[str], List[List[Cell]]]:
    """Load a CSV file whose first line is a header; return ``(header, rows)``."""
    rows = _read_rows(path, delimiter=delimiter, null_markers=null_markers)
    if not rows:
        return [], []
    header = ["" if name is None else str(name) for name in rows[0]]
    logger.debug("loaded %d rows from %s", len(rows) - 1, path, extra={"table": rows[1:]})
    return header, rows[1:]


def load_csv(
    path: PathLike,
    *,
    delimiter: Optional[str] = None,
    has_header: bool = False,
    null_markers: Optional[Iterable[str]] = None,
) -> List[List[Cell]]:
    """
    Load a CSV file into a table.

    Args:
        path: File to read.
        delimiter: Field separator (defaults to the configured ``csv_delimiter``).
        has_header: Drop the first line when True.
        null_markers: Cell texts mapped to ``None`` (defaults to configuration).
    """
    if has_header:
        return load_csv_with_header(path, delimiter=delimiter, null_markers=null_markers)[1]
    rows = _read_rows(path, delimiter=delimiter, null_markers=null_markers)
    logger.debug("loaded %d rows from %s", len(rows), path, extra={"table": rows})
    return rows
