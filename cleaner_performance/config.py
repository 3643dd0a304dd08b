"""Thresholds and knobs for the performance pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyticsConfig:
    """Tunable thresholds; defaults reproduce the leaderboard's heuristics."""

    min_cleans: int = 3
    min_avg_minutes: float = 5
    trend_min_weeks: int = 4
    trend_threshold: float = 0.10
    back_to_back_min: int = 2
    assignment_batch_size: int = 500
    max_fetch_workers: int = 1
    flag_median_minutes: float = 180
    top_n: int = 3

    def __post_init__(self) -> None:
        if self.assignment_batch_size < 1:
            raise ValueError("assignment_batch_size must be at least 1")
        if self.max_fetch_workers < 1:
            raise ValueError("max_fetch_workers must be at least 1")
        if self.trend_min_weeks < 4:
            raise ValueError("trend_min_weeks must be at least 4")


DEFAULT_CONFIG = AnalyticsConfig()
