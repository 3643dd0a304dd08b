"""Per-worker clean time metrics."""

from __future__ import annotations

import math
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Iterable, Mapping

import numpy as np

from cleaner_performance.config import DEFAULT_CONFIG, AnalyticsConfig
from cleaner_performance.schema import CleanEvent, PropertyBreakdown, WeeklyAverage, WorkerPerformance, as_utc
from cleaner_performance.trend import classify_trend


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, like a dashboard would."""

    return int(math.floor(value + 0.5))


def _mean(values) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def week_start(moment: datetime) -> date:
    """Monday on or before the UTC date of ``moment``."""

    day = as_utc(moment).date()
    return day - timedelta(days=day.weekday())


def global_average(events: Iterable[CleanEvent]) -> float:
    """Mean duration across every event of the window."""

    return _mean([event.duration_minutes for event in events])


def group_by_worker(events: Iterable[CleanEvent]) -> dict[str, list[CleanEvent]]:
    by_worker: dict[str, list[CleanEvent]] = defaultdict(list)
    for event in events:
        by_worker[event.worker_id].append(event)
    return dict(by_worker)


def adjusted_average(events: list[CleanEvent], baselines: Mapping[int, float], global_avg: float) -> float:
    """Average duration after rescaling each clean onto a common difficulty footing.

    A clean at a property with a positive baseline contributes
    ``duration / baseline * global_avg``; any other clean contributes its raw
    duration.
    """

    contributions = []
    for event in events:
        baseline = baselines.get(event.property_id)
        if baseline and baseline > 0:
            contributions.append((event.duration_minutes / baseline) * global_avg)
        else:
            contributions.append(event.duration_minutes)
    return _mean(contributions)


def weekly_trend(events: list[CleanEvent]) -> list[WeeklyAverage]:
    by_week: dict[date, list[float]] = defaultdict(list)
    for event in events:
        by_week[week_start(event.completed_at)].append(event.duration_minutes)
    return [
        WeeklyAverage(week_start=week, avg_minutes=round_half_up(_mean(times)))
        for week, times in sorted(by_week.items())
    ]


def property_breakdown(events: list[CleanEvent]) -> list[PropertyBreakdown]:
    """Clean count and average per property, busiest first."""

    names: dict[int, str] = {}
    times: dict[int, list[float]] = defaultdict(list)
    for event in events:
        names.setdefault(event.property_id, event.property_name)
        times[event.property_id].append(event.duration_minutes)

    rows = [
        PropertyBreakdown(
            property_id=property_id,
            property_name=names[property_id],
            count=len(values),
            avg_minutes=round_half_up(_mean(values)),
        )
        for property_id, values in times.items()
    ]
    return sorted(rows, key=lambda row: (-row.count, row.property_id))


def schedule_efficiency(events: list[CleanEvent], back_to_back_min: int = 2) -> int:
    """Percentage of cleans that fell on days with several cleans."""

    if not events:
        return 0
    per_day: dict[date, int] = defaultdict(int)
    for event in events:
        per_day[as_utc(event.completed_at).date()] += 1
    back_to_back = sum(count for count in per_day.values() if count >= back_to_back_min)
    return round_half_up(100.0 * back_to_back / len(events))


def aggregate_worker(
    worker: str,
    events: list[CleanEvent],
    baselines: Mapping[int, float],
    global_avg: float,
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> WorkerPerformance:
    """Compute the full metric set for one worker's cleans."""

    ordered = sorted(events, key=lambda e: (as_utc(e.completed_at), e.property_id, e.duration_minutes))
    sorted_times = sorted(event.duration_minutes for event in ordered)
    n = len(sorted_times)

    avg = _mean(sorted_times)
    # Element at n // 2: for even n this is not the averaged median.
    median = sorted_times[n // 2] if n else 0.0
    std_dev = float(np.std(sorted_times)) if n else 0.0
    adjusted = adjusted_average(ordered, baselines, global_avg) if n else avg

    trend = weekly_trend(ordered)
    return WorkerPerformance(
        worker_name=worker,
        avg_minutes=round_half_up(avg),
        adjusted_avg_minutes=round_half_up(adjusted),
        median_minutes=round_half_up(median),
        fastest_minutes=sorted_times[0] if n else 0.0,
        slowest_minutes=sorted_times[-1] if n else 0.0,
        std_dev_minutes=round_half_up(std_dev),
        total_cleans=n,
        distinct_properties=len({event.property_id for event in ordered}),
        weekly_trend=trend,
        trend_direction=classify_trend(trend, config),
        schedule_efficiency_pct=schedule_efficiency(ordered, config.back_to_back_min),
        by_property=property_breakdown(ordered),
    )
