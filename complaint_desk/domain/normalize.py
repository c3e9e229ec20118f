"""Single normalization step applied before any derivation.

Storage keeps the raw values; only the derived views see the defaults below.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .models import PRIORITIES, PRIORITY_LOW, Complaint, Employee

DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_PRIORITY_LABEL = "Standard"
EMPTY_DESCRIPTION = "No description provided."
UNASSIGNED = "Unassigned"


@dataclass(frozen=True)
class NormalizedComplaint:
    complaint: Complaint
    category: str
    priority_level: str

    @property
    def status(self) -> Optional[str]:
        return self.complaint.status

    @property
    def technician(self) -> Optional[str]:
        return self.complaint.technician


def priority_level(priority: Optional[str]) -> str:
    value = priority.lower() if isinstance(priority, str) else ""
    return value if value in PRIORITIES else PRIORITY_LOW


def normalize_complaint(complaint: Complaint) -> NormalizedComplaint:
    return NormalizedComplaint(
        complaint=complaint,
        category=complaint.category or DEFAULT_CATEGORY,
        priority_level=priority_level(complaint.priority),
    )


def normalize_all(complaints: Iterable[Complaint]) -> List[NormalizedComplaint]:
    return [normalize_complaint(complaint) for complaint in complaints]


def display_priority(complaint: Complaint) -> str:
    return complaint.priority or DEFAULT_PRIORITY_LABEL


def display_description(complaint: Complaint) -> str:
    return complaint.description or EMPTY_DESCRIPTION


def find_employee(employee_id: Optional[str], employees: Sequence[Employee]) -> Optional[Employee]:
    if not employee_id:
        return None
    for employee in employees:
        if employee.employee_id == employee_id:
            return employee
    return None


def technician_label(complaint: Complaint, employees: Sequence[Employee]) -> str:
    """Full name of the assigned technician, or "Unassigned" for dangling ids."""
    employee = find_employee(complaint.technician, employees)
    return employee.full_name if employee else UNASSIGNED
