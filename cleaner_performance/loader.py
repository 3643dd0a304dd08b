"""Record loading boundary: collaborator contract, batching and a file-backed loader."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Optional, Protocol, Sequence

from cleaner_performance.adapters import csv_adapter, json_adapter
from cleaner_performance.schema import AssignmentRecord, TaskRecord, Window

logger = logging.getLogger(__name__)

HOUSEKEEPING = "housekeeping"
FINISHED = "finished"


class RecordLoader(Protocol):
    """What the pipeline needs from a record store."""

    def fetch_finished_tasks(self, window: Window) -> list[TaskRecord]: ...

    def fetch_assignments(self, task_ids: Sequence[str]) -> list[AssignmentRecord]: ...

    def fetch_property_baselines(self) -> dict[int, float]: ...


def batched(items: Sequence, size: int) -> list[list]:
    if size < 1:
        raise ValueError("batch size must be at least 1")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def fetch_assignments_batched(
    fetch: Callable[[Sequence[str]], list[AssignmentRecord]],
    task_ids: Sequence[str],
    batch_size: int = 500,
    max_workers: int = 1,
) -> list[AssignmentRecord]:
    """Fetch assignments for ``task_ids`` in bounded batches.

    Batches run in a thread pool when ``max_workers`` is above one. Rows come
    back in batch order once every batch has finished; the first fetch error
    is re-raised.
    """

    batches = batched(list(task_ids), batch_size)
    if not batches:
        return []

    logger.debug("Fetching assignments for %d tasks in %d batches", len(task_ids), len(batches))
    if max_workers > 1 and len(batches) > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(batches))) as pool:
            results = list(pool.map(fetch, batches))
    else:
        results = [fetch(batch) for batch in batches]

    rows: list[AssignmentRecord] = []
    for result in results:
        rows.extend(result)
    return rows


def _adapter_for(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter
    if suffix == ".json":
        return json_adapter
    raise ValueError(f"Unsupported input format for {path.name}, expected .csv or .json")


class FileLoader:
    """Record loader backed by CSV or JSON exports of the record store."""

    def __init__(self, tasks_path: str, assignments_path: str, baselines_path: Optional[str] = None):
        self.tasks_path = Path(tasks_path)
        self.assignments_path = Path(assignments_path)
        self.baselines_path = Path(baselines_path) if baselines_path else None
        self._assignments: Optional[list[AssignmentRecord]] = None
        self._lock = threading.Lock()

    def fetch_finished_tasks(self, window: Window) -> list[TaskRecord]:
        tasks = _adapter_for(self.tasks_path).parse_tasks(str(self.tasks_path))
        selected = [
            task
            for task in tasks
            if task.department in (None, HOUSEKEEPING)
            and task.status == FINISHED
            and task.duration_minutes is not None
            and task.completed_at is not None
            and window.contains(task.completed_at)
        ]
        logger.info("Loaded %d finished housekeeping tasks of %d rows", len(selected), len(tasks))
        return selected

    def fetch_assignments(self, task_ids: Sequence[str]) -> list[AssignmentRecord]:
        with self._lock:
            if self._assignments is None:
                self._assignments = _adapter_for(self.assignments_path).parse_assignments(str(self.assignments_path))
        wanted = set(task_ids)
        return [row for row in self._assignments if row.task_id in wanted]

    def fetch_property_baselines(self) -> dict[int, float]:
        if self.baselines_path is None:
            return {}
        return _adapter_for(self.baselines_path).parse_baselines(str(self.baselines_path))
