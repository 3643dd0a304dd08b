"""Run the cleaner performance report from CSV/JSON record exports."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from cleaner_performance.adapters.records import parse_iso
from cleaner_performance.config import AnalyticsConfig
from cleaner_performance.loader import FileLoader
from cleaner_performance.pipeline import run_window
from cleaner_performance.schema import Window
from cleaner_performance.summary import summarize


def build_report(loader: FileLoader, window: Window, config: AnalyticsConfig) -> dict:
    workers = run_window(loader, window, config)
    return {
        "window": {"start": window.start.isoformat(), "end": window.end.isoformat()},
        "summary": summarize(workers, config),
        "workers": [worker.as_dict() for worker in workers],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute per-cleaner performance for a date window")
    parser.add_argument("--tasks", required=True, help="Path to CSV/JSON task records")
    parser.add_argument("--assignments", required=True, help="Path to CSV/JSON task assignments")
    parser.add_argument("--baselines", help="Path to CSV/JSON property baselines")
    parser.add_argument("--start", required=True, type=parse_iso, help="Window start (ISO 8601)")
    parser.add_argument("--end", required=True, type=parse_iso, help="Window end (ISO 8601)")
    parser.add_argument("--min-cleans", type=int, default=3)
    parser.add_argument("--batch-size", type=int, default=500, help="Task ids per assignment fetch")
    parser.add_argument("--workers", type=int, default=1, help="Parallel assignment fetches")
    parser.add_argument("--output", help="Optional path to save the JSON report")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = AnalyticsConfig(
        min_cleans=args.min_cleans,
        assignment_batch_size=args.batch_size,
        max_fetch_workers=args.workers,
    )
    loader = FileLoader(args.tasks, args.assignments, args.baselines)
    report = build_report(loader, Window(start=args.start, end=args.end), config)

    print(json.dumps(report, indent=2))

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"Saved report to {out_path}")


if __name__ == "__main__":
    main()
