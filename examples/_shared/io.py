"""
Input/Output helpers for examples.
"""
import json
import math
from pathlib import Path
from typing import Any, Dict, List, Union

from tabstat.analysis.stats import NOT_SIGNIFICANT
from tabstat.core.data import load_csv

from . import toy_data

def ensure_outdir(path: Union[str, Path]) -> Path:
    """Ensure the output directory exists."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p

def _jsonable(value: Any) -> Any:
    # NaN and the significance marker are not valid JSON numbers
    if value is NOT_SIGNIFICANT:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value

def write_json(data: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write data to a JSON file."""
    p = Path(path)
    ensure_outdir(p.parent)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(_jsonable(data), f, indent=2, default=str)
    return p

def load_table(args) -> List[List[Any]]:
    """Load the table named by --csv, or build a toy table from --seed."""
    if args.csv:
        return load_csv(args.csv, has_header=args.header)
    return toy_data.build_people_table(40 if args.quick else 400, seed=args.seed)

def print_summary(result: Dict[str, Any]) -> None:
    """
    Print a summary of the example result to stdout.

    Expects result dict to have keys: 'name', 'config', 'metrics', 'artifacts'.
    """
    print("=" * 60)
    print(f"EXAMPLE: {result.get('name', 'Unknown')}")
    print("-" * 60)

    if "config" in result:
        print("Config:")
        for k, v in result["config"].items():
            print(f"  {k}: {v}")

    if "metrics" in result and result["metrics"]:
        print("-" * 60)
        print("Metrics:")
        for k, v in result["metrics"].items():
            print(f"  {k}: {v}")

    if "artifacts" in result and result["artifacts"]:
        print("-" * 60)
        print("Artifacts:")
        for k, v in result["artifacts"].items():
            print(f"  {k}: {v}")

    print("=" * 60)
