"""User portal: submit and track own complaints."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from ..dao import complaints_dao
from ..domain.models import STATUS_PENDING, Complaint, Session
from .buckets import Buckets, bucketize

DEFAULT_CATEGORY = "Technical"


class SubmissionError(ValueError):
    """Raised when a submitted complaint fails field validation."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(errors.values()))
        self.errors = errors


def validate_submission(payload: Mapping[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not str(payload.get("title") or "").strip():
        errors["title"] = "Subject is required"
    if not str(payload.get("description") or "").strip():
        errors["description"] = "Description is required"
    return errors


def new_complaint_id() -> str:
    return f"CMP-{uuid.uuid4().hex[:8].upper()}"


def submit_complaint(session: Session, payload: Mapping[str, Any], *, today: Optional[str] = None) -> Complaint:
    errors = validate_submission(payload)
    if errors:
        raise SubmissionError(errors)
    complaint = Complaint(
        complaint_id=new_complaint_id(),
        title=str(payload["title"]).strip(),
        description=str(payload["description"]).strip(),
        category=payload.get("category") or DEFAULT_CATEGORY,
        status=STATUS_PENDING,
        date=today or datetime.now(timezone.utc).date().isoformat(),
        user_id=session.user_id,
    )
    complaints_dao.create_complaint(complaint.to_dict())
    return complaint


def my_complaints(session: Session) -> Buckets:
    rows = complaints_dao.list_complaints(session.user_id)
    return bucketize(Complaint.from_dict(row) for row in rows)
