"""
Master runner for all examples.
"""
import argparse
import json
import sys
import subprocess
from pathlib import Path

# Add project root to sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from examples.registry import EXAMPLES

def main():
    parser = argparse.ArgumentParser(description="Run tabstat examples.")
    parser.add_argument("--quick", action="store_true", help="Run examples in quick mode")
    parser.add_argument("--csv", type=str, default=None, help="CSV file passed to every example instead of a toy table")
    parser.add_argument("--header", action="store_true", help="The --csv file starts with a header line")
    parser.add_argument("--seed", type=int, default=0, help="Seed for generated toy tables")
    parser.add_argument("--outdir", type=str, default="./_outputs", help="Output directory base")
    parser.add_argument("--include-tags", type=str, help="Comma-separated tags to include (e.g., 'p0,stats')")
    parser.add_argument("--require-extras", type=str, help="Comma-separated extras required (e.g., 'plot')")
    parser.add_argument("--exclude-experimental", action="store_true", default=True, help="Skip experimental examples")
    parser.add_argument("--include-experimental", action="store_false", dest="exclude_experimental", help="Include experimental examples")
    parser.add_argument("--fail-fast", action="store_true", help="Stop on first failure")

    args = parser.parse_args()

    include_tags = set(args.include_tags.split(",")) if args.include_tags else set()
    require_extras = set(args.require_extras.split(",")) if args.require_extras else set()

    passed = []
    failed = []
    skipped = []

    source = args.csv or f"toy table (seed={args.seed})"
    print(f"Running examples on {source}, quick={args.quick}")
    print("-" * 60)

    for entry in EXAMPLES:
        path_str = entry["path"]
        full_path = Path(__file__).parent / path_str

        # Filters
        if args.exclude_experimental and entry["experimental"]:
            skipped.append((path_str, "Experimental"))
            continue

        if include_tags and not include_tags.intersection(entry["tags"]):
            skipped.append((path_str, "Tag mismatch"))
            continue

        # --require-extras keeps only scripts that declare one of the extras
        if require_extras and not require_extras.intersection(entry["extras"]):
            skipped.append((path_str, "Extra mismatch"))
            continue

        if not full_path.exists():
            failed.append((path_str, "File not found"))
            print(f"[FAIL] {path_str} (File not found)")
            if args.fail_fast: break
            continue

        cmd = [sys.executable, str(full_path), "--seed", str(args.seed), "--outdir", args.outdir]
        if args.quick:
            cmd.append("--quick")
        if args.csv:
            cmd += ["--csv", args.csv]
            if args.header:
                cmd.append("--header")

        print(f"[RUN ] {path_str} ...", end="", flush=True)
        try:
            # Run in subprocess to isolate
            result = subprocess.run(cmd, capture_output=True, text=True)

            if result.returncode == 0:
                print(" [PASS]")
                passed.append(path_str)
            else:
                print(" [FAIL]")
                print(f"  Exit Code: {result.returncode}")
                print("  Stderr:")
                print(result.stderr)
                failed.append((path_str, "Runtime Error"))
                if args.fail_fast: break
        except OSError as e:
            print(" [ERR ]")
            print(f"  Exception: {e}")
            failed.append((path_str, str(e)))
            if args.fail_fast: break

    print("-" * 60)
    print(f"Summary: {len(passed)} Passed, {len(failed)} Failed, {len(skipped)} Skipped")
    summary_path = Path(args.outdir) / "run_all_summary.json"
    summary_path.parent.mkdir(parents=True, exist_ok=True)
    summary_path.write_text(
        json.dumps(
            {
                "csv": args.csv,
                "seed": args.seed,
                "passed": passed,
                "failed": [{"path": p, "reason": r} for p, r in failed],
                "skipped": [{"path": p, "reason": r} for p, r in skipped],
            },
            indent=2,
        ),
        encoding="utf-8",
    )
    print(f"Summary written to {summary_path}")
    if failed:
        sys.exit(1)

if __name__ == "__main__":
    main()
