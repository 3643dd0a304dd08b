"""End-to-end worker performance computation."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from cleaner_performance.config import DEFAULT_CONFIG, AnalyticsConfig
from cleaner_performance.joiner import join_assignments
from cleaner_performance.loader import RecordLoader, fetch_assignments_batched
from cleaner_performance.metrics import aggregate_worker, global_average, group_by_worker
from cleaner_performance.ranking import filter_and_sort
from cleaner_performance.schema import AssignmentRecord, TaskRecord, Window, WorkerPerformance

logger = logging.getLogger(__name__)


def compute_performance(
    tasks: Iterable[TaskRecord],
    assignments: Iterable[AssignmentRecord],
    baselines: Mapping[int, float],
    config: Optional[AnalyticsConfig] = None,
) -> list[WorkerPerformance]:
    """Join, aggregate, classify and rank workers for one query window."""

    config = config or DEFAULT_CONFIG
    events = join_assignments(tasks, assignments)
    global_avg = global_average(events)
    by_worker = group_by_worker(events)

    performances = [
        aggregate_worker(worker, worker_events, baselines, global_avg, config)
        for worker, worker_events in by_worker.items()
    ]
    ranked = filter_and_sort(performances, config)
    logger.info(
        "Computed %d clean events for %d workers, %d kept after filtering",
        len(events),
        len(performances),
        len(ranked),
    )
    return ranked


def run_window(loader: RecordLoader, window: Window, config: Optional[AnalyticsConfig] = None) -> list[WorkerPerformance]:
    """Load records for ``window`` through ``loader`` and compute the leaderboard."""

    config = config or DEFAULT_CONFIG
    tasks = loader.fetch_finished_tasks(window)
    if not tasks:
        logger.info("No finished tasks between %s and %s", window.start, window.end)
        return []

    baselines = loader.fetch_property_baselines()
    assignments = fetch_assignments_batched(
        loader.fetch_assignments,
        [task.task_id for task in tasks],
        batch_size=config.assignment_batch_size,
        max_workers=config.max_fetch_workers,
    )
    return compute_performance(tasks, assignments, baselines, config)
