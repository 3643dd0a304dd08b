"""Reliability filter and presentation order."""

from __future__ import annotations

from typing import Iterable

from cleaner_performance.config import DEFAULT_CONFIG, AnalyticsConfig
from cleaner_performance.schema import WorkerPerformance


def is_reliable(performance: WorkerPerformance, config: AnalyticsConfig = DEFAULT_CONFIG) -> bool:
    return performance.total_cleans >= config.min_cleans and performance.avg_minutes >= config.min_avg_minutes


def filter_and_sort(
    performances: Iterable[WorkerPerformance], config: AnalyticsConfig = DEFAULT_CONFIG
) -> list[WorkerPerformance]:
    """Drop small or implausible samples, fastest average first."""

    kept = [p for p in performances if is_reliable(p, config)]
    return sorted(kept, key=lambda p: (p.avg_minutes, p.worker_name))
