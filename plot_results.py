#!/usr/bin/env python3
"""Print saved context benchmark results as tables and ASCII charts."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from contextbench.benchmarks import format_elapsed

CACHING_TEST = "Test A - use caching"
NO_CACHING_TEST = "Test B - no caching"


def find_latest_benchmark_dir(base_dir: Path = Path(".tmp")) -> Path:
    """Find the latest benchmark directory."""
    if not base_dir.exists():
        raise FileNotFoundError(f"No {base_dir} directory found")

    benchmark_dirs = list(base_dir.glob("context_bench_*"))
    if not benchmark_dirs:
        raise FileNotFoundError("No benchmark directories found")

    # Directory names carry a sortable timestamp
    return max(benchmark_dirs, key=lambda p: p.name)


def load_benchmark_data(results_dir: Path) -> Dict[str, Any]:
    """Load benchmark data from the results file."""
    results_file = results_dir / "results.json"

    if not results_file.exists():
        raise FileNotFoundError(f"No results.json found in {results_dir}")

    with open(results_file) as f:
        return json.load(f)


def print_ascii_chart(data: List[Dict], title: str, value_key: str, max_width: int = 60):
    """Print ASCII chart."""
    if not data:
        return

    print(f"\n📊 {title}")
    print("=" * 80)

    max_value = max(item[value_key] for item in data)

    for item in data:
        value = item[value_key]
        bar_length = int((value / max_value) * max_width) if max_value > 0 else 0
        bar = '█' * bar_length + '░' * (max_width - bar_length)
        print(f"{item['name']:<25} {bar} {value:,}")


def timing_rows(results: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Format each timed test as display cells."""
    rows = []
    for item in results:
        processed = item.get('result') or 0
        per_contact = item['elapsed_ms'] / processed if processed else None
        rss_growth = item.get('rss_after_mb', 0.0) - item.get('rss_before_mb', 0.0)
        rows.append({
            'name': item['name'],
            'elapsed': format_elapsed(item['elapsed_ms']),
            'processed': f"{processed:,}",
            'per_contact': f"{per_contact:.3f}ms" if per_contact is not None else "-",
            'rss_growth': f"{rss_growth:+.1f}MB",
        })
    return rows


def print_timing_table(results: List[Dict[str, Any]]):
    """Print one row per timed test."""
    columns = [
        ('Test', 'name', 25),
        ('Elapsed', 'elapsed', 12),
        ('Processed', 'processed', 10),
        ('Per contact', 'per_contact', 12),
        ('RSS growth', 'rss_growth', 10),
    ]

    print("\n📋 Timing Results")
    print("=" * 80)

    header = " | ".join(f"{name:<{width}}" for name, _, width in columns)
    print(header)
    print("-" * len(header))

    for row in timing_rows(results):
        print(" | ".join(f"{row[key]:<{width}}" for _, key, width in columns))


def speedup(results: List[Dict[str, Any]]):
    """How many times faster the caching test ran, or None when it can't be told."""
    by_name = {item['name']: item['elapsed_ms'] for item in results}
    cached = by_name.get(CACHING_TEST)
    uncached = by_name.get(NO_CACHING_TEST)
    if not cached or uncached is None:
        return None
    return uncached / cached


def main(argv=None) -> int:
    """Main report function."""
    parser = argparse.ArgumentParser(description="Report context benchmark results")
    parser.add_argument("--dir", help="Specific benchmark directory to use")
    parser.add_argument("--base-dir", default=".tmp", help="Where saved runs live (default: .tmp)")

    args = parser.parse_args(argv)

    try:
        if args.dir:
            results_dir = Path(args.dir)
        else:
            results_dir = find_latest_benchmark_dir(Path(args.base_dir))
        full_data = load_benchmark_data(results_dir)
    except FileNotFoundError as e:
        print(f"❌ {e}")
        return 1

    print(f"📁 Using data from: {results_dir}")

    metadata = full_data.get('metadata', {})
    results = full_data.get('results', [])

    print(f"🎯 {metadata.get('contacts', '?')} contacts, {metadata.get('iterations', '?')} per test")

    print_timing_table(results)
    print_ascii_chart(results, "Elapsed (ms)", 'elapsed_ms')

    ratio = speedup(results)
    if ratio is not None:
        print(f"\n🏆 Caching was {ratio:.1f}x the speed of no caching")

    return 0


if __name__ == "__main__":
    sys.exit(main())
