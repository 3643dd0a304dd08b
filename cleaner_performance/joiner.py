"""Join assignment rows onto finished tasks to build clean events."""

from __future__ import annotations

import logging
import math
from typing import Iterable

from cleaner_performance.schema import AssignmentRecord, CleanEvent, TaskRecord

logger = logging.getLogger(__name__)

_FINISHED = "finished"
_UNKNOWN_PROPERTY = "Unknown"


def is_eligible(task: TaskRecord) -> bool:
    """A task counts only when finished with a positive duration and a completion time."""

    return (
        task.status == _FINISHED
        and task.duration_minutes is not None
        and math.isfinite(task.duration_minutes)
        and task.duration_minutes > 0
        and task.completed_at is not None
    )


def eligible_tasks(tasks: Iterable[TaskRecord]) -> dict[str, TaskRecord]:
    """Index eligible tasks by task id."""

    return {task.task_id: task for task in tasks if is_eligible(task)}


def join_assignments(tasks: Iterable[TaskRecord], assignments: Iterable[AssignmentRecord]) -> list[CleanEvent]:
    """Produce one clean event per valid (task, worker) pair.

    Assignments pointing at unknown or ineligible tasks, or carrying a blank
    worker name, are dropped. A task assigned to N workers yields N events with
    the full task duration each.
    """

    task_map = eligible_tasks(tasks)
    events: list[CleanEvent] = []
    dropped = 0
    for assignment in assignments:
        task = task_map.get(assignment.task_id)
        worker = (assignment.worker_name or "").strip()
        if task is None or not worker:
            dropped += 1
            continue
        events.append(
            CleanEvent(
                worker_id=worker,
                duration_minutes=task.duration_minutes,
                property_id=task.property_id or 0,
                property_name=task.property_name or _UNKNOWN_PROPERTY,
                completed_at=task.completed_at,
            )
        )

    if dropped:
        logger.debug("Dropped %d assignment rows without an eligible task or worker", dropped)
    return events
