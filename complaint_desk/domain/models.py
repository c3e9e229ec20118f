"""Domain dataclasses for complaint triage."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

STATUS_PENDING = "pending"
STATUS_IN_PROGRESS = "in-progress"
STATUS_RESOLVED = "resolved"
STATUSES = (STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_RESOLVED)

PRIORITY_LOW = "low"
PRIORITY_MEDIUM = "medium"
PRIORITY_HIGH = "high"
PRIORITIES = (PRIORITY_LOW, PRIORITY_MEDIUM, PRIORITY_HIGH)

ROLE_USER = "user"
ROLE_ADMIN = "admin"


@dataclass(frozen=True)
class Complaint:
    complaint_id: str
    title: str
    description: str = ""
    category: Optional[str] = None
    status: Optional[str] = STATUS_PENDING
    priority: Optional[str] = None
    technician: Optional[str] = None
    date: Optional[str] = None
    user_id: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Complaint":
        complaint_id = payload.get("complaint_id") or payload.get("complaintId") or payload.get("id")
        return cls(
            complaint_id=str(complaint_id) if complaint_id is not None else "",
            title=payload.get("title") or "",
            description=payload.get("description") or "",
            category=payload.get("category"),
            status=payload.get("status"),
            priority=payload.get("priority"),
            technician=payload.get("technician"),
            date=payload.get("date"),
            user_id=payload.get("user_id") or payload.get("userId"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Employee:
    employee_id: str
    full_name: str
    role: str = ""

    @property
    def short_name(self) -> str:
        """First whitespace-separated token of the full name."""
        parts = self.full_name.split()
        return parts[0] if parts else ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Employee":
        return cls(
            employee_id=str(payload.get("employee_id") or payload.get("employeeId") or ""),
            full_name=payload.get("full_name") or payload.get("fullName") or "",
            role=payload.get("role") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Session:
    """Identity of the caller, passed explicitly to collaborators."""

    user_id: str
    role: str
    token: Optional[str] = None
