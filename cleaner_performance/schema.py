"""Core data schema for cleaning task analytics."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timezone
from typing import Literal, Optional

TrendDirection = Literal["improving", "stable", "worsening"]

IMPROVING: TrendDirection = "improving"
STABLE: TrendDirection = "stable"
WORSENING: TrendDirection = "worsening"


@dataclass
class TaskRecord:
    """Task row as supplied by the record store; any field but the id may be missing."""

    task_id: str
    duration_minutes: Optional[float] = None
    property_id: Optional[int] = None
    property_name: Optional[str] = None
    completed_at: Optional[datetime] = None
    department: Optional[str] = "housekeeping"
    status: Optional[str] = "finished"


@dataclass
class AssignmentRecord:
    """Task to worker assignment row."""

    task_id: str
    worker_name: Optional[str]


@dataclass(frozen=True)
class CleanEvent:
    """One worker's completion of one housekeeping task."""

    worker_id: str
    duration_minutes: float
    property_id: int
    property_name: str
    completed_at: datetime


@dataclass(frozen=True)
class Window:
    """Inclusive completion-time window of a query."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return as_utc(self.start) <= as_utc(moment) <= as_utc(self.end)


def as_utc(moment: datetime) -> datetime:
    """Timezone-aware UTC view of ``moment``; naive values are taken as UTC."""

    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


@dataclass
class WeeklyAverage:
    week_start: date
    avg_minutes: int


@dataclass
class PropertyBreakdown:
    property_id: int
    property_name: str
    count: int
    avg_minutes: int


@dataclass
class WorkerPerformance:
    """Metric set computed for one worker over one query window."""

    worker_name: str
    avg_minutes: int
    adjusted_avg_minutes: int
    median_minutes: int
    fastest_minutes: float
    slowest_minutes: float
    std_dev_minutes: int
    total_cleans: int
    distinct_properties: int
    weekly_trend: list[WeeklyAverage] = field(default_factory=list)
    trend_direction: TrendDirection = STABLE
    schedule_efficiency_pct: int = 0
    by_property: list[PropertyBreakdown] = field(default_factory=list)

    def as_dict(self) -> dict:
        payload = asdict(self)
        for week in payload["weekly_trend"]:
            week["week_start"] = week["week_start"].isoformat()
        return payload
