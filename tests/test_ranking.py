from cleaner_performance.config import AnalyticsConfig
from cleaner_performance.ranking import filter_and_sort
from cleaner_performance.schema import PropertyBreakdown, WorkerPerformance
from cleaner_performance.summary import flagged_workers, property_extremes, summarize


def perf(name, avg, cleans=5, median=None, efficiency=50):
    return WorkerPerformance(
        worker_name=name,
        avg_minutes=avg,
        adjusted_avg_minutes=avg,
        median_minutes=median if median is not None else avg,
        fastest_minutes=avg,
        slowest_minutes=avg,
        std_dev_minutes=0,
        total_cleans=cleans,
        distinct_properties=1,
        schedule_efficiency_pct=efficiency,
    )


def test_filter_drops_small_and_implausible_samples():
    result = filter_and_sort([perf("a", 90), perf("b", 80, cleans=2), perf("c", 4), perf("d", 5, cleans=3)])
    assert [p.worker_name for p in result] == ["d", "a"]
    assert all(p.total_cleans >= 3 and p.avg_minutes >= 5 for p in result)


def test_sort_fastest_first_with_name_tiebreak():
    result = filter_and_sort([perf("zoe", 70), perf("amy", 70), perf("bob", 60)])
    assert [p.worker_name for p in result] == ["bob", "amy", "zoe"]


def test_thresholds_follow_config():
    result = filter_and_sort([perf("a", 90, cleans=3)], AnalyticsConfig(min_cleans=4))
    assert result == []


def test_summary_figures():
    ranked = [perf("a", 60, efficiency=100), perf("b", 95, median=200, efficiency=0), perf("c", 120), perf("d", 190, median=181)]
    summary = summarize(ranked)
    assert summary["total_workers"] == 4
    assert summary["overall_avg_minutes"] == 116
    assert summary["flagged_count"] == 2
    assert summary["avg_schedule_efficiency_pct"] == 50
    assert summary["fastest"] == ["a", "b", "c"]
    assert [p.worker_name for p in flagged_workers(ranked)] == ["b", "d"]


def test_summary_of_empty_leaderboard():
    assert summarize([]) == {
        "total_workers": 0,
        "overall_avg_minutes": 0,
        "flagged_count": 0,
        "avg_schedule_efficiency_pct": 0,
        "fastest": [],
    }


def test_property_extremes_uses_repeat_properties():
    worker = perf("a", 100, median=185)
    worker.by_property = [
        PropertyBreakdown(1, "Villa", 5, 90),
        PropertyBreakdown(2, "Loft", 4, 140),
        PropertyBreakdown(3, "Court", 3, 70),
        PropertyBreakdown(4, "Cabin", 2, 110),
        PropertyBreakdown(5, "Studio", 1, 20),
    ]
    extremes = property_extremes(worker)
    assert [p.property_id for p in extremes["best"]] == [3, 1, 4]
    assert [p.property_id for p in extremes["worst"]] == [2, 4, 1]
    assert extremes["flagged"] is True


def test_property_extremes_without_repeats():
    extremes = property_extremes(perf("a", 100))
    assert extremes == {"best": [], "worst": [], "flagged": False}
