"""Data access helpers for employees."""

from __future__ import annotations

from typing import Any, Dict, List

from . import db


def list_employees() -> List[Dict[str, Any]]:
    rows = db.query_all("SELECT employee_id, full_name, role FROM employees ORDER BY full_name COLLATE NOCASE")
    return [dict(row) for row in rows]
