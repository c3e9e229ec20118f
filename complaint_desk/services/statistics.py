"""Derive dashboard aggregates from complaint and employee snapshots."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..domain.models import (
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    STATUS_IN_PROGRESS,
    STATUS_PENDING,
    STATUS_RESOLVED,
    Complaint,
    Employee,
)
from ..domain.normalize import NormalizedComplaint, normalize_all

DEFAULT_WORKLOAD_LIMIT = 10

STATUS_LABELS: Tuple[Tuple[str, str], ...] = (
    (STATUS_PENDING, "Pending"),
    (STATUS_IN_PROGRESS, "In Progress"),
    (STATUS_RESOLVED, "Resolved"),
)
PRIORITY_LABELS: Tuple[Tuple[str, str], ...] = (
    (PRIORITY_HIGH, "High"),
    (PRIORITY_MEDIUM, "Medium"),
    (PRIORITY_LOW, "Low"),
)


@dataclass(frozen=True)
class StatusSlice:
    status: str
    name: str
    value: int


@dataclass(frozen=True)
class CategoryRow:
    name: str
    count: int


@dataclass(frozen=True)
class WorkloadRow:
    name: str
    active: int


@dataclass(frozen=True)
class PriorityRow:
    priority: str
    name: str
    value: int


@dataclass(frozen=True)
class Summary:
    total: int
    pending: int
    in_progress: int
    resolved: int
    high_priority: int
    resolution_rate: int
    active_staff: int


@dataclass(frozen=True)
class Dashboard:
    summary: Summary
    status: List[StatusSlice] = field(default_factory=list)
    categories: List[CategoryRow] = field(default_factory=list)
    workload: List[WorkloadRow] = field(default_factory=list)
    priorities: List[PriorityRow] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def status_distribution(normalized: Sequence[NormalizedComplaint]) -> List[StatusSlice]:
    counts = Counter(item.status for item in normalized)
    return [
        StatusSlice(status=status, name=label, value=counts[status])
        for status, label in STATUS_LABELS
        if counts[status] > 0
    ]


def category_distribution(normalized: Sequence[NormalizedComplaint]) -> List[CategoryRow]:
    # Counter keeps first-seen key order and sorted() is stable, so ties stay in scan order.
    counts = Counter(item.category for item in normalized)
    rows = [CategoryRow(name=name, count=count) for name, count in counts.items()]
    return sorted(rows, key=lambda row: row.count, reverse=True)


def technician_workload(
    normalized: Sequence[NormalizedComplaint],
    employees: Sequence[Employee],
    limit: int = DEFAULT_WORKLOAD_LIMIT,
) -> List[WorkloadRow]:
    labels: Dict[str, str] = {}
    for employee in employees:
        labels.setdefault(employee.employee_id, employee.short_name)
    counts: Counter = Counter()
    for item in normalized:
        if not item.technician or item.status == STATUS_RESOLVED:
            continue
        counts[labels.get(item.technician) or item.technician] += 1
    return [WorkloadRow(name=name, active=active) for name, active in counts.items()][:limit]


def priority_breakdown(normalized: Sequence[NormalizedComplaint]) -> List[PriorityRow]:
    counts = Counter(item.priority_level for item in normalized)
    return [
        PriorityRow(priority=priority, name=label, value=counts[priority])
        for priority, label in PRIORITY_LABELS
    ]


def resolution_rate(resolved: int, total: int) -> int:
    """Resolved share as a whole percent, rounded half-up."""
    if total <= 0:
        return 0
    return int(math.floor(resolved * 100 / total + 0.5))


def summary(
    normalized: Sequence[NormalizedComplaint],
    workload: Sequence[WorkloadRow],
) -> Summary:
    statuses = Counter(item.status for item in normalized)
    total = len(normalized)
    return Summary(
        total=total,
        pending=statuses[STATUS_PENDING],
        in_progress=statuses[STATUS_IN_PROGRESS],
        resolved=statuses[STATUS_RESOLVED],
        high_priority=sum(1 for item in normalized if item.complaint.priority == PRIORITY_HIGH),
        resolution_rate=resolution_rate(statuses[STATUS_RESOLVED], total),
        active_staff=len(workload),
    )


def build_dashboard(
    complaints: Sequence[Complaint],
    employees: Sequence[Employee],
    *,
    workload_limit: int = DEFAULT_WORKLOAD_LIMIT,
) -> Dashboard:
    normalized = normalize_all(complaints)
    workload = technician_workload(normalized, employees, limit=workload_limit)
    return Dashboard(
        summary=summary(normalized, workload),
        status=status_distribution(normalized),
        categories=category_distribution(normalized),
        workload=workload,
        priorities=priority_breakdown(normalized),
    )


class AnalyticsView:
    """Memoizes the dashboard on the identity of its two inputs."""

    def __init__(self, *, workload_limit: int = DEFAULT_WORKLOAD_LIMIT) -> None:
        self.workload_limit = workload_limit
        self._complaints: Optional[Sequence[Complaint]] = None
        self._employees: Optional[Sequence[Employee]] = None
        self._dashboard: Optional[Dashboard] = None

    def dashboard(self, complaints: Sequence[Complaint], employees: Sequence[Employee]) -> Dashboard:
        if (
            self._dashboard is None
            or complaints is not self._complaints
            or employees is not self._employees
        ):
            self._dashboard = build_dashboard(complaints, employees, workload_limit=self.workload_limit)
            self._complaints = complaints
            self._employees = employees
        return self._dashboard
