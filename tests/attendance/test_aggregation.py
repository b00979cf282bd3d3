from __future__ import annotations

from datetime import date, timedelta

from src.hr_console.hr_console.attendance.aggregation import (
    NEUTRAL_STYLE,
    build_dashboard,
    department_distribution,
    employee_history,
    sort_history,
    status_distribution,
    status_style,
    today_snapshot,
    weekly_trend,
)
from src.hr_console.hr_console.attendance.model import AttendanceRecord
from src.hr_console.hr_console.employees.model import Employee


def rec(emp_id, day, status):
    return AttendanceRecord(employee_id=emp_id, date=day, status=status)


def test_single_present_record_today(today):
    roster = [Employee(id=1, full_name="Ann", email="ann@corp.test", department="HR")]
    records = [rec(1, today, "Present")]

    snapshot = build_dashboard(roster, records, today)

    assert (snapshot.today.present, snapshot.today.absent) == (1, 0)
    assert snapshot.today.rate_label == "100%"
    assert len(snapshot.trend) == 7
    assert snapshot.trend[-1].date == today
    assert snapshot.trend[-1].present == 1
    assert all((d.present, d.absent, d.late) == (0, 0, 0) for d in snapshot.trend[:-1])


def test_today_rate_no_data_without_records_today(today):
    snap = today_snapshot([rec(1, today - timedelta(days=1), "Present")], today)

    assert snap.total == 0
    assert snap.rate is None
    assert snap.rate_label == "—"


def test_today_rate_percent_and_rounding(today):
    records = [rec(1, today, "Present"), rec(2, today, "Absent"), rec(3, today, "Late"),
               rec(4, today, "Present"), rec(5, today, "Present"), rec(6, today, "Absent"),
               rec(7, today, "Absent"), rec(8, today, "Present")]

    snap = today_snapshot(records, today)

    assert snap.rate == 0.5
    assert snap.rate_percent == 50
    assert 0 <= snap.rate <= 1
    assert today_snapshot([rec(1, today, "Present"), rec(2, today, "Absent"), rec(3, today, "Late")], today).rate_label == "33%"


def test_weekly_trend_is_dense_oldest_first(today):
    trend = weekly_trend([], today)

    assert len(trend) == 7
    assert [d.date for d in trend] == [today - timedelta(days=6 - i) for i in range(7)]
    assert trend[-1].label == "Oct 19"
    assert trend[-1].day_name == "Monday"
    assert sum(d.present + d.absent + d.late for d in trend) == 0


def test_weekly_trend_ignores_records_outside_window(today):
    records = [
        rec(1, today - timedelta(days=7), "Present"),
        rec(1, today - timedelta(days=6), "Late"),
        rec(2, today - timedelta(days=6), "Absent"),
        rec(1, today + timedelta(days=1), "Present"),
    ]

    trend = weekly_trend(records, today)

    assert (trend[0].present, trend[0].absent, trend[0].late) == (0, 1, 1)
    assert sum(d.present for d in trend) == 0


def test_status_distribution_is_sparse_and_keeps_unknown(today):
    records = [rec(1, today, "Present"), rec(2, today, "Unknown"), rec(3, today, "Present")]

    dist = status_distribution(records)

    assert [(s.status, s.count) for s in dist] == [("Present", 2), ("Unknown", 1)]
    assert dist[1].style == NEUTRAL_STYLE


def test_department_distribution_first_seen_order_sums_to_roster():
    roster = [
        Employee(id=1, full_name="A", email="a@x", department="Sales"),
        Employee(id=2, full_name="B", email="b@x", department="HR"),
        Employee(id=3, full_name="C", email="c@x", department="Sales"),
    ]

    dist = department_distribution(roster)

    assert [(d.department, d.count) for d in dist] == [("Sales", 2), ("HR", 1)]
    assert sum(d.count for d in dist) == len(roster)
    assert department_distribution([]) == ()


def test_employee_history_sorted_desc_with_totals(today):
    records = [
        rec(1, today - timedelta(days=2), "Late"),
        rec(1, today, "Present"),
        rec(1, today - timedelta(days=1), "Absent"),
        rec(1, today - timedelta(days=3), "Present"),
    ]

    history = employee_history(records, "Ann")

    assert [r.date for r in history.records] == [today - timedelta(days=i) for i in range(4)]
    assert (history.present, history.absent, history.late) == (2, 1, 1)
    assert sort_history(history.records) == history.records


def test_empty_history_has_zero_totals():
    history = employee_history([])

    assert history.is_empty
    assert (history.present, history.absent, history.late) == (0, 0, 0)
    assert history.to_dict()["records"] == []


def test_unknown_status_gets_neutral_style(today):
    history = employee_history([rec(1, today, "On leave")], "Ann")

    row = history.to_dict()["records"][0]
    assert row["status"] == "On leave"
    assert row["style"]["color"] == NEUTRAL_STYLE.color
    assert row["label"] == "Oct 19, 2026"
    assert status_style("Present").color == "#16A34A"


def test_dashboard_to_dict_shape(today):
    roster = [Employee(id=i, full_name=f"E{i}", email=f"e{i}@x", department="Ops") for i in range(1, 9)]

    data = build_dashboard(roster, [], today).to_dict()

    assert data["total_employees"] == 8
    assert data["department_count"] == 1
    assert len(data["recent_employees"]) == 6
    assert data["today"]["rate"] is None
    assert data["statuses"] == []
