"""Data access helpers for complaints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from . import db

_COLUMNS = "complaint_id, user_id, title, description, category, status, priority, technician, date"


def list_complaints(user_id: Optional[str] = None) -> List[Dict[str, Any]]:
    """Return complaints in submission order, optionally for one user."""
    if user_id is None:
        rows = db.query_all(f"SELECT {_COLUMNS} FROM complaints ORDER BY seq")
    else:
        rows = db.query_all(
            f"SELECT {_COLUMNS} FROM complaints WHERE user_id = ? ORDER BY seq",
            (user_id,),
        )
    return [dict(row) for row in rows]


def get_complaint(complaint_id: str) -> Optional[Dict[str, Any]]:
    row = db.query_one(f"SELECT {_COLUMNS} FROM complaints WHERE complaint_id = ?", (complaint_id,))
    return dict(row) if row else None


def create_complaint(payload: Dict[str, Any]) -> str:
    db.execute(
        f"INSERT INTO complaints({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
        (
            payload["complaint_id"],
            payload.get("user_id"),
            payload["title"],
            payload.get("description") or "",
            payload.get("category"),
            payload.get("status"),
            payload.get("priority"),
            payload.get("technician"),
            payload.get("date"),
        ),
    )
    return payload["complaint_id"]


def update_complaint(complaint_id: str, payload: Dict[str, Any]) -> int:
    """Write the triage fields back; returns the number of rows touched."""
    return db.execute(
        "UPDATE complaints SET status = ?, priority = ?, technician = ? WHERE complaint_id = ?",
        (
            payload.get("status"),
            payload.get("priority"),
            payload.get("technician"),
            complaint_id,
        ),
    )
