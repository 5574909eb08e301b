"""
Example 01: Describe the Columns of a Table.

Goal:
    Load a CSV (or a toy table), drop rows with missing values and
    describe every numeric column through the query engine.

Extras:
    [core]

Usage:
    python examples/basic/01_describe_table.py --seed 123 --quick
    python examples/basic/01_describe_table.py --csv people.csv --header
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io
from tabstat.analysis.queries import FieldQueryEngine, get_subsample_not_null
from tabstat.core.data import at
from tabstat.core.utils import configure_logging

def main(argv=None):
    args = cli.parse_args("Describe Table", argv)
    configure_logging()

    # 1. Load rows (columns: id, age, height, income, group)
    table = io.load_table(args)
    numeric = {"age": at(2), "height": at(3), "income": at(4)}

    # 2. Keep complete rows only
    complete = get_subsample_not_null(table, list(numeric.values()))

    # 3. Describe each column, then add quartiles via a pipeline
    engine = FieldQueryEngine()
    described = {name: engine.describe(complete, field) for name, field in numeric.items()}
    quartiles = engine.pipeline(
        complete,
        [{"query": "quantile", "field": field, "threshold": [0.25, 0.5, 0.75]} for field in numeric.values()],
    )
    for name, q in zip(numeric, quartiles):
        described[name]["quartiles"] = q

    result = {
        "name": "basic/01_describe_table",
        "config": {
            "csv": args.csv,
            "seed": args.seed,
            "quick": args.quick,
        },
        "outputs": {
            "describe": described,
        },
        "metrics": {
            "rows": len(table),
            "complete_rows": len(complete),
        },
        "artifacts": {}
    }

    out_path = io.write_json(result, Path(args.outdir) / "01_describe.json")
    result["artifacts"]["json"] = str(out_path)

    return result

if __name__ == "__main__":
    res = main()
    io.print_summary(res)
