"""Heuristic week-over-week trend direction."""

from __future__ import annotations

from typing import Sequence

from cleaner_performance.config import DEFAULT_CONFIG, AnalyticsConfig
from cleaner_performance.schema import IMPROVING, STABLE, WORSENING, TrendDirection, WeeklyAverage


def classify_trend(weekly: Sequence[WeeklyAverage], config: AnalyticsConfig = DEFAULT_CONFIG) -> TrendDirection:
    """Compare the last two weekly averages against the two before them.

    Falling clean times mean the worker is improving. Changes within the
    threshold band are reported as stable.
    """

    if len(weekly) < config.trend_min_weeks:
        return STABLE

    recent = weekly[-2:]
    earlier = weekly[-4:-2]
    recent_avg = sum(w.avg_minutes for w in recent) / len(recent)
    earlier_avg = sum(w.avg_minutes for w in earlier) / len(earlier)
    if earlier_avg == 0:
        return STABLE

    change = (recent_avg - earlier_avg) / earlier_avg
    if change < -config.trend_threshold:
        return IMPROVING
    if change > config.trend_threshold:
        return WORSENING
    return STABLE
