"""Command-line script runner for radixdict."""

from __future__ import annotations

import argparse
import logging
import sys

from radixdict.constants import SCRIPT_SUFFIX
from radixdict.evaluator import ScriptResult, run_path, table_rule
from radixdict.script import ScriptError

log = logging.getLogger("radixdict")


def print_results(results: list[ScriptResult], quiet: bool = False) -> None:
    if not quiet:
        for r in results:
            print(table_rule())
            print(r.row())
        if results:
            print(table_rule())
    passed = sum(1 for r in results if r.passed)
    print(f"{passed}/{len(results)} scripts passed.")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Replay dictionary operation scripts and report PASS/FAIL",
    )
    parser.add_argument("paths", nargs="+",
                        help="Script files, or directories of scripts")
    parser.add_argument("--pattern", default=f"*{SCRIPT_SUFFIX}",
                        help="Glob for scripts inside directories (default: %(default)s)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only print the summary line (no listings or table)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    results: list[ScriptResult] = []
    for path in args.paths:
        print(f"Processing file: {path}")
        try:
            results.extend(run_path(path, pattern=args.pattern, verbose=not args.quiet))
        except (OSError, ScriptError) as exc:
            log.error("Cannot run %s: %s", path, exc)
            return 2

    print_results(results, quiet=args.quiet)
    return 0 if all(r.passed for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
