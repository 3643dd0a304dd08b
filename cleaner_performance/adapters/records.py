"""Field coercion shared by the file adapters.

Empty values become ``None`` so the joiner can exclude incomplete rows. Values
that are present but unreadable raise ``ValueError`` naming the row.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Optional

from cleaner_performance.schema import AssignmentRecord, TaskRecord


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _text(value: Any) -> Optional[str]:
    if _blank(value):
        return None
    return str(value).strip()


def _number(value: Any, name: str, where: str) -> Optional[float]:
    if _blank(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{where}: invalid {name}") from exc
    if not math.isfinite(number):
        raise ValueError(f"{where}: invalid {name}")
    return number


def _integer(value: Any, name: str, where: str) -> Optional[int]:
    number = _number(value, name, where)
    if number is None:
        return None
    if number != int(number):
        raise ValueError(f"{where}: invalid {name}")
    return int(number)


def parse_iso(text: str) -> datetime:
    """ISO 8601 parsing that also accepts a trailing ``Z``."""

    return datetime.fromisoformat(text.strip().replace("Z", "+00:00"))


def _timestamp(value: Any, name: str, where: str) -> Optional[datetime]:
    if _blank(value):
        return None
    try:
        return parse_iso(str(value))
    except ValueError as exc:
        raise ValueError(f"{where}: malformed {name}") from exc


def _task_id(row: dict, where: str) -> str:
    task_id = _text(row.get("task_id"))
    if task_id is None:
        raise ValueError(f"{where}: missing required field 'task_id'")
    return task_id


def task_from_row(row: dict, where: str) -> TaskRecord:
    return TaskRecord(
        task_id=_task_id(row, where),
        duration_minutes=_number(row.get("duration_minutes"), "duration_minutes", where),
        property_id=_integer(row.get("property_id"), "property_id", where),
        property_name=_text(row.get("property_name")),
        completed_at=_timestamp(row.get("completed_at"), "completed_at", where),
        department=_text(row.get("department")),
        status=_text(row.get("status")),
    )


def assignment_from_row(row: dict, where: str) -> AssignmentRecord:
    return AssignmentRecord(task_id=_task_id(row, where), worker_name=_text(row.get("worker_name")))


def baseline_from_row(row: dict, where: str) -> Optional[tuple[int, float]]:
    """Return ``(property_id, baseline)`` or ``None`` for an incomplete row."""

    property_id = _integer(row.get("property_id"), "property_id", where)
    baseline = _number(row.get("baseline_avg_minutes"), "baseline_avg_minutes", where)
    if property_id is None or baseline is None:
        return None
    return property_id, baseline
