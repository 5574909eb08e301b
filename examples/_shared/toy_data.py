"""
Toy table generation helpers for examples.
"""
from typing import Any, List, Optional, Tuple
import numpy as np

def build_people_table(
    n_rows: int,
    seed: Optional[int] = None,
) -> List[List[Any]]:
    """
    Generate rows of ``[id, age, height, income, group]``.

    Cells are strings, as a CSV loader would return them; about 5% of
    incomes are missing (None).

    Args:
        n_rows: Number of rows.
        seed: Seed for the numpy Generator.

    Returns:
        List of rows.
    """
    rng = np.random.default_rng(seed)
    ages = rng.integers(18, 80, size=n_rows)
    heights = rng.normal(170.0, 9.0, size=n_rows)
    incomes = 900.0 * ages + rng.normal(0.0, 8000.0, size=n_rows)
    groups = rng.choice(["north", "south", "east", "west"], size=n_rows)
    missing = rng.random(size=n_rows) < 0.05

    rows = []
    for idx in range(n_rows):
        income = None if missing[idx] else f"{incomes[idx]:.2f}"
        rows.append([str(idx + 1), str(ages[idx]), f"{heights[idx]:.1f}", income, str(groups[idx])])
    return rows

def build_visits_table(
    ids: List[int],
    max_visits: int = 3,
    seed: Optional[int] = None,
) -> List[Tuple[Any, ...]]:
    """Generate ``(id, visit_cost)`` rows with zero to ``max_visits`` rows per id."""
    rng = np.random.default_rng(seed)
    rows = []
    for ident in ids:
        for _ in range(int(rng.integers(0, max_visits + 1))):
            rows.append((str(ident), f"{rng.gamma(2.0, 40.0):.2f}"))
    return rows
