"""Domain objects for complaint triage."""

from .models import (
    PRIORITIES,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    ROLE_ADMIN,
    ROLE_USER,
    STATUSES,
    STATUS_IN_PROGRESS,
    STATUS_PENDING,
    STATUS_RESOLVED,
    Complaint,
    Employee,
    Session,
)
from .normalize import NormalizedComplaint, normalize_all, normalize_complaint

__all__ = [
    "Complaint",
    "Employee",
    "Session",
    "NormalizedComplaint",
    "normalize_all",
    "normalize_complaint",
    "PRIORITIES",
    "PRIORITY_HIGH",
    "PRIORITY_LOW",
    "PRIORITY_MEDIUM",
    "ROLE_ADMIN",
    "ROLE_USER",
    "STATUSES",
    "STATUS_IN_PROGRESS",
    "STATUS_PENDING",
    "STATUS_RESOLVED",
]
