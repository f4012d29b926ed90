import json

import pytest

import plot_results


def _write_run(base_dir, name, elapsed):
    run_dir = base_dir / name
    run_dir.mkdir(parents=True)
    (run_dir / "results.json").write_text(json.dumps({
        "metadata": {"contacts": 4000, "iterations": 2000},
        "results": [
            {"name": plot_results.CACHING_TEST, "elapsed_ms": elapsed[0], "result": 2000,
             "rss_before_mb": 40.0, "rss_after_mb": 42.5},
            {"name": plot_results.NO_CACHING_TEST, "elapsed_ms": elapsed[1], "result": 2000,
             "rss_before_mb": 42.5, "rss_after_mb": 43.0},
        ],
    }))
    return run_dir


def test_find_latest_benchmark_dir(tmp_path):
    _write_run(tmp_path, "context_bench_20260101_120000", (1, 2))
    latest = _write_run(tmp_path, "context_bench_20260102_080000", (1, 2))

    assert plot_results.find_latest_benchmark_dir(tmp_path) == latest


def test_find_latest_benchmark_dir_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        plot_results.find_latest_benchmark_dir(tmp_path / "nowhere")
    with pytest.raises(FileNotFoundError):
        plot_results.find_latest_benchmark_dir(tmp_path)


def test_speedup():
    results = [
        {"name": plot_results.CACHING_TEST, "elapsed_ms": 500},
        {"name": plot_results.NO_CACHING_TEST, "elapsed_ms": 2000},
    ]
    assert plot_results.speedup(results) == 4.0
    assert plot_results.speedup(results[:1]) is None
    assert plot_results.speedup([{**results[0], "elapsed_ms": 0}, results[1]]) is None


def test_report(tmp_path, capsys):
    run_dir = _write_run(tmp_path, "context_bench_20260101_120000", (1000, 3500))

    assert plot_results.main(["--dir", str(run_dir)]) == 0

    out = capsys.readouterr().out
    assert "3,500" in out
    assert "3.5x" in out


def test_report_without_results(tmp_path, capsys):
    assert plot_results.main(["--base-dir", str(tmp_path)]) == 1
    assert "No benchmark directories found" in capsys.readouterr().out


def test_timing_rows():
    rows = plot_results.timing_rows([
        {"name": plot_results.CACHING_TEST, "elapsed_ms": 1500, "result": 2000,
         "rss_before_mb": 40.0, "rss_after_mb": 42.5},
        {"name": plot_results.NO_CACHING_TEST, "elapsed_ms": 12, "result": 0},
    ])

    assert rows[0] == {
        "name": plot_results.CACHING_TEST,
        "elapsed": "1,500ms",
        "processed": "2,000",
        "per_contact": "0.750ms",
        "rss_growth": "+2.5MB",
    }
    assert rows[1]["per_contact"] == "-"
    assert rows[1]["rss_growth"] == "+0.0MB"
