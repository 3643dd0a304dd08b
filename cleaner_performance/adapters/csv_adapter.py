"""CSV adapter for task, assignment and baseline files."""

from __future__ import annotations

import csv

from cleaner_performance.adapters.records import assignment_from_row, baseline_from_row, task_from_row
from cleaner_performance.schema import AssignmentRecord, TaskRecord


def _rows(file_path: str):
    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return
        for row_number, row in enumerate(reader, start=2):
            yield row, f"Row {row_number}"


def parse_tasks(file_path: str) -> list[TaskRecord]:
    """Parse a CSV file of task rows."""

    return [task_from_row(row, where) for row, where in _rows(file_path)]


def parse_assignments(file_path: str) -> list[AssignmentRecord]:
    """Parse a CSV file of ``task_id,worker_name`` rows."""

    return [assignment_from_row(row, where) for row, where in _rows(file_path)]


def parse_baselines(file_path: str) -> dict[int, float]:
    """Parse a CSV file of ``property_id,baseline_avg_minutes`` rows."""

    baselines: dict[int, float] = {}
    for row, where in _rows(file_path):
        parsed = baseline_from_row(row, where)
        if parsed is not None:
            baselines[parsed[0]] = parsed[1]
    return baselines
