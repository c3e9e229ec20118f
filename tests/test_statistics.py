from complaint_desk.domain.models import Complaint, Employee
from complaint_desk.domain.normalize import normalize_all
from complaint_desk.services.statistics import (
    AnalyticsView,
    build_dashboard,
    category_distribution,
    priority_breakdown,
    resolution_rate,
    status_distribution,
    technician_workload,
)


def make_complaint(cid: str, **fields) -> Complaint:
    fields.setdefault("status", "pending")
    return Complaint(complaint_id=cid, title=f"Complaint {cid}", **fields)


def test_category_distribution_scenario():
    complaints = [
        make_complaint("1", category="Billing"),
        make_complaint("2", category="Billing"),
        make_complaint("3", status="resolved", category="Technical"),
    ]
    rows = category_distribution(normalize_all(complaints))
    assert [(row.name, row.count) for row in rows] == [("Billing", 2), ("Technical", 1)]


def test_category_ties_keep_first_seen_order_and_default_label():
    complaints = [
        make_complaint("1", category="Facility"),
        make_complaint("2", category=None),
        make_complaint("3", category="Billing"),
        make_complaint("4", category=""),
        make_complaint("5", category="Billing"),
        make_complaint("6", category="Facility"),
    ]
    rows = category_distribution(normalize_all(complaints))
    assert [(row.name, row.count) for row in rows] == [
        ("Facility", 2),
        ("Uncategorized", 2),
        ("Billing", 2),
    ]


def test_status_distribution_omits_zero_slices():
    complaints = [make_complaint("1"), make_complaint("2", status="resolved"), make_complaint("3", status="bogus")]
    rows = status_distribution(normalize_all(complaints))
    assert [(row.status, row.name, row.value) for row in rows] == [
        ("pending", "Pending", 1),
        ("resolved", "Resolved", 1),
    ]
    assert status_distribution([]) == []


def test_technician_workload_scenario():
    employees = [Employee(employee_id="E1", full_name="Ana Ortiz")]
    complaints = [make_complaint("1", technician="E1")]
    rows = technician_workload(normalize_all(complaints), employees)
    assert [(row.name, row.active) for row in rows] == [("Ana", 1)]


def test_technician_workload_skips_resolved_and_unassigned_and_falls_back_to_id():
    employees = [Employee(employee_id="E1", full_name="Ana Ortiz"), Employee(employee_id="E2", full_name="Bo Li")]
    complaints = [
        make_complaint("1", technician="E9"),
        make_complaint("2", technician="E2", status="resolved"),
        make_complaint("3", technician=None),
        make_complaint("4", technician="E1", status="in-progress"),
        make_complaint("5", technician="E1", status="unknown"),
    ]
    rows = technician_workload(normalize_all(complaints), employees)
    assert [(row.name, row.active) for row in rows] == [("E9", 1), ("Ana", 2)]


def test_technician_workload_keeps_first_ten_seen_groups():
    complaints = [make_complaint(str(i), technician=f"T{i:02d}") for i in range(12)]
    complaints.append(make_complaint("x", technician="T11"))
    complaints.append(make_complaint("y", technician="T00"))
    rows = technician_workload(normalize_all(complaints), [])
    assert len(rows) == 10
    assert [row.name for row in rows] == [f"T{i:02d}" for i in range(10)]
    assert rows[0].active == 2


def test_priority_breakdown_always_three_rows():
    assert [(row.name, row.value) for row in priority_breakdown([])] == [("High", 0), ("Medium", 0), ("Low", 0)]
    complaints = [
        make_complaint("1", priority="HIGH"),
        make_complaint("2", priority="medium"),
        make_complaint("3", priority=None),
        make_complaint("4", priority="urgent"),
    ]
    rows = priority_breakdown(normalize_all(complaints))
    assert [(row.priority, row.value) for row in rows] == [("high", 1), ("medium", 1), ("low", 2)]


def test_resolution_rate_rounds_half_up():
    assert resolution_rate(0, 0) == 0
    assert resolution_rate(1, 8) == 13
    assert resolution_rate(1, 3) == 33
    assert resolution_rate(2, 3) == 67


def test_build_dashboard_summary():
    employees = [Employee(employee_id="E1", full_name="Ana Ortiz")]
    complaints = [
        make_complaint("1", priority="high", technician="E1"),
        make_complaint("2", status="resolved", priority="high"),
        make_complaint("3", status="in-progress", technician="E2"),
    ]
    dashboard = build_dashboard(complaints, employees)
    summary = dashboard.summary
    assert (summary.total, summary.pending, summary.in_progress, summary.resolved) == (3, 1, 1, 1)
    assert summary.high_priority == 2
    assert summary.resolution_rate == 33
    assert summary.active_staff == 2
    payload = dashboard.to_dict()
    assert payload["workload"] == [{"name": "Ana", "active": 1}, {"name": "E2", "active": 1}]


def test_empty_dashboard():
    dashboard = build_dashboard([], [])
    assert dashboard.status == []
    assert dashboard.categories == []
    assert dashboard.workload == []
    assert [row.value for row in dashboard.priorities] == [0, 0, 0]
    assert dashboard.summary.resolution_rate == 0


def test_analytics_view_memoizes_on_identity():
    view = AnalyticsView()
    complaints = (make_complaint("1"),)
    employees = ()
    first = view.dashboard(complaints, employees)
    assert view.dashboard(complaints, employees) is first

    equal_copy = tuple(complaints)
    rebuilt = view.dashboard(list(equal_copy), employees)
    assert rebuilt is not first
    assert rebuilt == first

    assert view.dashboard(complaints, []) is not first


def test_analytics_view_respects_workload_limit():
    view = AnalyticsView(workload_limit=2)
    complaints = [make_complaint(str(i), technician=f"T{i}") for i in range(5)]
    assert len(view.dashboard(complaints, []).workload) == 2


def test_technician_workload_uses_first_employee_for_duplicate_ids():
    employees = [
        Employee(employee_id="E1", full_name="Ana Ortiz"),
        Employee(employee_id="E1", full_name="Bruno Silva"),
    ]
    rows = technician_workload(normalize_all([make_complaint("1", technician="E1")]), employees)
    assert [(row.name, row.active) for row in rows] == [("Ana", 1)]


def test_summary_counts_only_exact_high_priority():
    complaints = [
        make_complaint("1", priority="high"),
        make_complaint("2", priority="HIGH"),
        make_complaint("3", priority="High"),
    ]
    dashboard = build_dashboard(complaints, [])
    assert dashboard.summary.high_priority == 1
    assert dashboard.priorities[0].value == 3
