"""Demo script for cleaner-performance."""

import json
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from cleaner_performance.loader import FileLoader
from cleaner_performance.pipeline import run_window
from cleaner_performance.schema import Window
from cleaner_performance.summary import summarize


def main() -> None:
    loader = FileLoader(
        "examples/sample_tasks.csv",
        "examples/sample_assignments.csv",
        "examples/sample_baselines.csv",
    )
    window = Window(
        start=datetime.fromisoformat("2025-03-01T00:00:00+00:00"),
        end=datetime.fromisoformat("2025-03-31T23:59:59+00:00"),
    )
    workers = run_window(loader, window)
    print("Summary:", summarize(workers))
    for worker in workers:
        print(json.dumps(worker.as_dict(), indent=2))


if __name__ == "__main__":
    main()
