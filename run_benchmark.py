#!/usr/bin/env python3
"""
Context Benchmark Script - compares a long-lived session against a session per lookup.

Seeds the contacts table, then times the same read-then-write loop twice:
once through a single shared session (caching) and once through a brand-new
session for every lookup (no caching).
"""

import argparse
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from contextbench.benchmarks import (
    CONTACT_COUNT,
    TEST_CONTACT_LIMIT,
    run_test,
    setup_database,
    time_test,
)
from contextbench.db import create_db_engine, get_database_url
from contextbench.providers import DynamicContextProvider, StaticContextProvider


def save_results(results: List[Dict[str, Any]], args: argparse.Namespace) -> Path:
    """Save timing results with metadata under a timestamped directory."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = Path(args.output_dir) / f"context_bench_{timestamp}"
    out_dir.mkdir(parents=True, exist_ok=True)

    results_data = {
        "metadata": {
            "database_url": args.database_url,
            "contacts": args.contacts,
            "iterations": args.iterations,
            "timestamp": datetime.now().isoformat(),
        },
        "results": results,
    }

    results_path = out_dir / "results.json"
    with open(results_path, "w") as f:
        json.dump(results_data, f, indent=2)
    return results_path


def non_negative_int(value: str) -> int:
    """argparse type for counts: a whole number, zero or more."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {number}")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Static vs dynamic session benchmark")
    parser.add_argument("--database-url", default=get_database_url(),
                        help="Connection string (default: $CONTEXTBENCH_DATABASE_URL or a local SQLite file)")
    parser.add_argument("--contacts", type=non_negative_int, default=CONTACT_COUNT,
                        help=f"Contacts to seed (default: {CONTACT_COUNT})")
    parser.add_argument("--iterations", type=non_negative_int, default=TEST_CONTACT_LIMIT,
                        help=f"Contacts processed per test (default: {TEST_CONTACT_LIMIT})")
    parser.add_argument("--echo", action="store_true", help="Log every SQL statement")
    parser.add_argument("--save", action="store_true", help="Save results as JSON")
    parser.add_argument("--output-dir", default=".tmp", help="Results directory (default: .tmp)")
    parser.add_argument("--pause", action="store_true", help="Wait for Enter before exiting")
    return parser.parse_args(argv)


def run_benchmarks(args: argparse.Namespace) -> List[Dict[str, Any]]:
    """Seed the store and time both providers."""
    engine = create_db_engine(args.database_url, echo=args.echo)
    static_provider = StaticContextProvider(engine)
    dynamic_provider = DynamicContextProvider(engine)

    try:
        setup_database(dynamic_provider, args.contacts)

        results = [
            time_test("Test A - use caching", lambda: run_test(static_provider, args.iterations)),
            time_test("Test B - no caching", lambda: run_test(dynamic_provider, args.iterations)),
        ]

        print("Done")
    finally:
        static_provider.close()
        engine.dispose()

    return results


def main(argv=None) -> None:
    """Main benchmark function."""
    args = parse_args(argv)
    results = run_benchmarks(args)

    if args.save:
        results_path = save_results(results, args)
        print(f"\n💾 Results saved: {results_path}")
        print("📊 Print the report: `python plot_results.py`")

    if args.pause:
        input()


if __name__ == "__main__":
    main()
