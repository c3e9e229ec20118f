"""Blueprint with the admin triage queue and draft workflow."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from ...domain.models import ROLE_ADMIN
from ...domain.normalize import display_description, display_priority, technician_label
from ...services.draft_session import InvalidStateError, PersistenceError
from ...services.triage_service import ComplaintNotFoundError
from ..session import current_board, require_role

bp = Blueprint("queue", __name__, url_prefix="/api/admin")


def _draft_payload():
    board = current_board()
    draft = board.session.draft
    payload = {"state": board.session.state.value, "draft": None}
    if draft is not None:
        employees = board.snapshot().employees
        payload["draft"] = draft.to_dict()
        payload["display"] = {
            "priority": display_priority(draft),
            "description": display_description(draft),
            "technician": technician_label(draft, employees),
        }
    return payload


@bp.get("/queue")
@require_role(ROLE_ADMIN)
def queue():
    board = current_board()
    return jsonify(board.queue().to_dict())


@bp.post("/refresh")
@require_role(ROLE_ADMIN)
def refresh():
    snapshot = current_board().refresh()
    return jsonify({"complaints": len(snapshot.complaints), "employees": len(snapshot.employees)})


@bp.get("/employees")
@require_role(ROLE_ADMIN)
def employees():
    snapshot = current_board().snapshot()
    return jsonify({"employees": [employee.to_dict() for employee in snapshot.employees]})


@bp.get("/draft")
@require_role(ROLE_ADMIN)
def get_draft():
    return jsonify(_draft_payload())


@bp.post("/draft")
@require_role(ROLE_ADMIN)
def open_draft():
    payload = request.get_json(silent=True) or {}
    complaint_id = payload.get("complaint_id")
    if not complaint_id:
        return jsonify({"error": "complaint_id is required"}), 400
    try:
        current_board().open(str(complaint_id))
    except ComplaintNotFoundError:
        return jsonify({"error": f"Complaint {complaint_id} not found"}), 404
    except InvalidStateError as exc:
        return jsonify({"error": str(exc)}), 409
    return jsonify(_draft_payload())


@bp.post("/draft/status")
@require_role(ROLE_ADMIN)
def set_status():
    payload = request.get_json(silent=True) or {}
    try:
        current_board().session.set_status(payload.get("status"))
    except InvalidStateError as exc:
        return jsonify({"error": str(exc)}), 409
    return jsonify(_draft_payload())


@bp.post("/draft/priority")
@require_role(ROLE_ADMIN)
def cycle_priority():
    try:
        current_board().session.cycle_priority()
    except InvalidStateError as exc:
        return jsonify({"error": str(exc)}), 409
    return jsonify(_draft_payload())


@bp.post("/draft/technician")
@require_role(ROLE_ADMIN)
def assign_technician():
    payload = request.get_json(silent=True) or {}
    employee_id = payload.get("employee_id")
    if not employee_id:
        return jsonify({"error": "employee_id is required"}), 400
    try:
        current_board().session.assign_technician(str(employee_id))
    except InvalidStateError as exc:
        return jsonify({"error": str(exc)}), 409
    return jsonify(_draft_payload())


@bp.post("/draft/commit")
@require_role(ROLE_ADMIN)
def commit_draft():
    board = current_board()
    try:
        committed = board.session.commit()
    except InvalidStateError as exc:
        return jsonify({"error": str(exc)}), 409
    except PersistenceError as exc:
        return jsonify({"error": str(exc), "draft": _draft_payload()["draft"]}), 502
    return jsonify({"committed": committed.to_dict(), "stale": board.stale})


@bp.delete("/draft")
@require_role(ROLE_ADMIN)
def discard_draft():
    try:
        current_board().session.discard()
    except InvalidStateError as exc:
        return jsonify({"error": str(exc)}), 409
    return jsonify(_draft_payload())
