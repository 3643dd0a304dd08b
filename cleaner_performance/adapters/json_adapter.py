"""JSON adapter for task, assignment and baseline files."""

from __future__ import annotations

import json

from cleaner_performance.adapters.records import assignment_from_row, baseline_from_row, task_from_row
from cleaner_performance.schema import AssignmentRecord, TaskRecord


def _items(file_path: str) -> list[tuple[dict, str]]:
    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    items = []
    for index, item in enumerate(payload, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"Item {index}: expected an object")
        items.append((item, f"Item {index}"))
    return items


def parse_tasks(file_path: str) -> list[TaskRecord]:
    return [task_from_row(item, where) for item, where in _items(file_path)]


def parse_assignments(file_path: str) -> list[AssignmentRecord]:
    return [assignment_from_row(item, where) for item, where in _items(file_path)]


def parse_baselines(file_path: str) -> dict[int, float]:
    """Parse a list of ``{"property_id", "baseline_avg_minutes"}`` objects."""

    baselines: dict[int, float] = {}
    for item, where in _items(file_path):
        parsed = baseline_from_row(item, where)
        if parsed is not None:
            baselines[parsed[0]] = parsed[1]
    return baselines
