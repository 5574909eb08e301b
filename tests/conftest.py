"""Shared pytest configuration and path setup for test modules."""

import sys
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)


@pytest.fixture
def restore_config():
    # 测试结束后恢复全局配置，避免影响其他用例
    from tabstat.core.utils import get_config

    cfg = get_config()
    snapshot = dict(vars(cfg))
    yield cfg
    for key, value in snapshot.items():
        setattr(cfg, key, value)


@pytest.fixture
def write_csv(tmp_path):
    """Write ``text`` to a temporary CSV file and return its path."""

    def _write(text: str, name: str = "table.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
