import json

import pytest

from cleaner_performance.adapters import csv_adapter, json_adapter
from cleaner_performance.adapters.records import parse_iso


def test_csv_tasks_keep_missing_fields_as_none(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "task_id,duration_minutes,property_id,property_name,completed_at,department,status\n"
        "11,85.5,3,Harbor Loft,2025-03-03T10:00:00+00:00,housekeeping,finished\n"
        "12,,,,,housekeeping,finished\n",
        encoding="utf-8",
    )
    tasks = csv_adapter.parse_tasks(str(path))
    assert len(tasks) == 2
    assert tasks[0].duration_minutes == 85.5
    assert tasks[0].property_id == 3
    assert tasks[0].completed_at.year == 2025
    assert tasks[1].duration_minutes is None
    assert tasks[1].completed_at is None


def test_csv_malformed_timestamp(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("task_id,duration_minutes,completed_at\n1,50,bad\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 2"):
        csv_adapter.parse_tasks(str(path))


def test_csv_assignments_and_baselines(tmp_path):
    assignments = tmp_path / "assignments.csv"
    assignments.write_text("task_id,worker_name\n1,Alice\n2,\n", encoding="utf-8")
    rows = csv_adapter.parse_assignments(str(assignments))
    assert [(r.task_id, r.worker_name) for r in rows] == [("1", "Alice"), ("2", None)]

    baselines = tmp_path / "baselines.csv"
    baselines.write_text("property_id,baseline_avg_minutes\n1,100\n2,\n", encoding="utf-8")
    assert csv_adapter.parse_baselines(str(baselines)) == {1: 100.0}


def test_json_parse_success(tmp_path):
    path = tmp_path / "tasks.json"
    payload = [
        {"task_id": 7, "duration_minutes": 90, "property_id": 2, "completed_at": "2025-03-03T10:00:00Z"},
        {"task_id": 8, "duration_minutes": None},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    tasks = json_adapter.parse_tasks(str(path))
    assert [t.task_id for t in tasks] == ["7", "8"]
    assert tasks[0].completed_at.utcoffset().total_seconds() == 0


def test_json_payload_must_be_list(tmp_path):
    path = tmp_path / "assignments.json"
    path.write_text(json.dumps({"task_id": "1"}), encoding="utf-8")
    with pytest.raises(ValueError):
        json_adapter.parse_assignments(str(path))


def test_json_missing_task_id(tmp_path):
    path = tmp_path / "assignments.json"
    path.write_text(json.dumps([{"worker_name": "Alice"}]), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1"):
        json_adapter.parse_assignments(str(path))


def test_csv_non_finite_duration_rejected(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "task_id,duration_minutes,completed_at\n1,50,2025-03-03T10:00:00\n2,inf,2025-03-03T11:00:00\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="Row 3: invalid duration_minutes"):
        csv_adapter.parse_tasks(str(path))


def test_json_overflowing_duration_rejected(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text('[{"task_id": "1", "duration_minutes": 1e400}]', encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1: invalid duration_minutes"):
        json_adapter.parse_tasks(str(path))


def test_fractional_property_id_rejected(tmp_path):
    path = tmp_path / "baselines.csv"
    path.write_text("property_id,baseline_avg_minutes\n3.0,90\n3.7,100\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 3: invalid property_id"):
        csv_adapter.parse_baselines(str(path))


def test_parse_iso_accepts_trailing_z():
    parsed = parse_iso("2025-03-03T10:00:00Z")
    assert parsed.utcoffset().total_seconds() == 0
    assert parsed.hour == 10
