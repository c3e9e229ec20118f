"""Explicit per-request session context and role gating."""

from __future__ import annotations

from functools import wraps
from typing import Callable, Optional, TypeVar, cast

from flask import current_app, g, jsonify, request

from ..domain.models import ROLE_ADMIN, ROLE_USER, Session
from ..services.triage_service import BoardRegistry, TriageBoard

F = TypeVar("F", bound=Callable)

BOARDS_EXTENSION = "complaint_desk.boards"


def session_from_request() -> Optional[Session]:
    """Build the caller's session from request headers; tokens are passed through, not verified."""
    user_id = request.headers.get("X-User-Id")
    role = request.headers.get("X-User-Role")
    if not user_id or role not in (ROLE_USER, ROLE_ADMIN):
        return None
    auth = request.headers.get("Authorization", "")
    token = auth[len("Bearer "):] if auth.startswith("Bearer ") else None
    return Session(user_id=user_id, role=role, token=token)


def require_role(role: str) -> Callable[[F], F]:
    def decorator(view: F) -> F:
        @wraps(view)
        def wrapped(*args, **kwargs):
            session = session_from_request()
            if session is None:
                return jsonify({"error": "Authentication required"}), 401
            if session.role != role:
                return jsonify({"error": "Forbidden for this role"}), 403
            g.session = session
            return view(*args, **kwargs)

        return cast(F, wrapped)

    return decorator


def current_session() -> Session:
    return g.session


def board_registry() -> BoardRegistry:
    return current_app.extensions[BOARDS_EXTENSION]


def current_board() -> TriageBoard:
    return board_registry().board_for(current_session())
