"""Blueprint for the user portal: submit and track own complaints."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from ...dao.db import DatabaseError
from ...domain.models import ROLE_USER
from ...services import submission_service
from ..session import board_registry, current_session, require_role

bp = Blueprint("portal", __name__, url_prefix="/api/user")


@bp.get("/complaints")
@require_role(ROLE_USER)
def list_my_complaints():
    buckets = submission_service.my_complaints(current_session())
    return jsonify(buckets.to_dict())


@bp.post("/complaints")
@require_role(ROLE_USER)
def submit():
    payload = request.get_json(silent=True) or {}
    try:
        complaint = submission_service.submit_complaint(current_session(), payload)
    except submission_service.SubmissionError as exc:
        return jsonify({"error": str(exc), "errors": exc.errors}), 400
    except DatabaseError as exc:
        return jsonify({"error": str(exc)}), 500
    board_registry().invalidate_all()
    return jsonify({"complaint": complaint.to_dict()}), 201
