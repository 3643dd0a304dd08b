"""Team-level headline figures for a ranked leaderboard."""

from __future__ import annotations

from cleaner_performance.config import DEFAULT_CONFIG, AnalyticsConfig
from cleaner_performance.metrics import round_half_up
from cleaner_performance.schema import WorkerPerformance


def flagged_workers(
    performances: list[WorkerPerformance], config: AnalyticsConfig = DEFAULT_CONFIG
) -> list[WorkerPerformance]:
    """Workers whose median clean runs past the flag threshold."""

    return [p for p in performances if p.median_minutes > config.flag_median_minutes]


def summarize(performances: list[WorkerPerformance], config: AnalyticsConfig = DEFAULT_CONFIG) -> dict:
    """Summarize an already sorted leaderboard."""

    if not performances:
        return {
            "total_workers": 0,
            "overall_avg_minutes": 0,
            "flagged_count": 0,
            "avg_schedule_efficiency_pct": 0,
            "fastest": [],
        }

    total = len(performances)
    return {
        "total_workers": total,
        "overall_avg_minutes": round_half_up(sum(p.avg_minutes for p in performances) / total),
        "flagged_count": len(flagged_workers(performances, config)),
        "avg_schedule_efficiency_pct": round_half_up(sum(p.schedule_efficiency_pct for p in performances) / total),
        "fastest": [p.worker_name for p in performances[: config.top_n]],
    }


def property_extremes(
    performance: WorkerPerformance,
    config: AnalyticsConfig = DEFAULT_CONFIG,
    min_count: int = 2,
    limit: int = 3,
) -> dict:
    """Fastest and slowest repeat properties for one worker's drill-down."""

    repeat = [p for p in performance.by_property if p.count >= min_count]
    return {
        "best": sorted(repeat, key=lambda p: p.avg_minutes)[:limit],
        "worst": sorted(repeat, key=lambda p: -p.avg_minutes)[:limit],
        "flagged": performance.median_minutes > config.flag_median_minutes,
    }
