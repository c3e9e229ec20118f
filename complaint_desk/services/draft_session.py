"""Single-slot edit-then-commit workflow over one complaint."""
from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Callable, List, Optional

from ..domain.models import PRIORITIES, STATUSES, Complaint
from ..domain.normalize import priority_level

logger = logging.getLogger(__name__)

Persist = Callable[[Complaint], bool]
StaleListener = Callable[[Complaint], None]


class DraftState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    COMMITTING = "committing"


class InvalidStateError(RuntimeError):
    """Raised when an operation is not valid in the session's current state."""


class PersistenceError(RuntimeError):
    """Raised when the persistence collaborator rejects a commit."""


class DraftEditSession:
    """Holds at most one detached copy of a complaint until commit or discard.

    Opening a complaint while another draft is open replaces the draft and logs
    a warning. A successful commit notifies every stale listener with the
    committed record so the owner can refresh its snapshot.
    """

    def __init__(self, persist: Persist, *, on_stale: Optional[StaleListener] = None) -> None:
        self._persist = persist
        self._listeners: List[StaleListener] = [on_stale] if on_stale else []
        self._draft: Optional[Complaint] = None
        self._state = DraftState.IDLE

    @property
    def state(self) -> DraftState:
        return self._state

    @property
    def draft(self) -> Optional[Complaint]:
        return self._draft

    @property
    def is_editing(self) -> bool:
        return self._state is DraftState.EDITING

    def subscribe(self, listener: StaleListener) -> None:
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    def open(self, complaint: Complaint) -> Complaint:
        if self._state is DraftState.COMMITTING:
            raise InvalidStateError("Cannot open a complaint while a commit is in flight")
        if self._draft is not None:
            logger.warning(
                "Replacing open draft %s with %s", self._draft.complaint_id, complaint.complaint_id
            )
        self._draft = replace(complaint)
        self._state = DraftState.EDITING
        logger.debug("Opened draft %s", complaint.complaint_id)
        return self._draft

    def set_status(self, status: str) -> Complaint:
        draft = self._require_editing("set_status")
        if status not in STATUSES:
            logger.warning("Ignoring unrecognized status %r for draft %s", status, draft.complaint_id)
            return draft
        return self._update(status=status)

    def cycle_priority(self) -> Complaint:
        draft = self._require_editing("cycle_priority")
        current = PRIORITIES.index(priority_level(draft.priority))
        return self._update(priority=PRIORITIES[(current + 1) % len(PRIORITIES)])

    def assign_technician(self, employee_id: str) -> Complaint:
        self._require_editing("assign_technician")
        return self._update(technician=employee_id)

    def commit(self) -> Complaint:
        draft = self._require_editing("commit")
        self._state = DraftState.COMMITTING
        try:
            accepted = self._persist(draft)
        except Exception:
            self._state = DraftState.EDITING
            logger.error("Commit of draft %s failed", draft.complaint_id)
            raise
        if not accepted:
            self._state = DraftState.EDITING
            logger.error("Commit of draft %s was rejected", draft.complaint_id)
            raise PersistenceError(f"Complaint {draft.complaint_id} was not saved")

        self._draft = None
        self._state = DraftState.IDLE
        logger.debug("Committed draft %s", draft.complaint_id)
        for listener in list(self._listeners):
            listener(draft)
        return draft

    def discard(self) -> None:
        draft = self._require_editing("discard")
        self._draft = None
        self._state = DraftState.IDLE
        logger.debug("Discarded draft %s", draft.complaint_id)

    # ------------------------------------------------------------------
    def _require_editing(self, operation: str) -> Complaint:
        if self._state is not DraftState.EDITING or self._draft is None:
            raise InvalidStateError(f"{operation} requires an open draft (state: {self._state.value})")
        return self._draft

    def _update(self, **changes: object) -> Complaint:
        self._draft = replace(self._draft, **changes)  # type: ignore[arg-type]
        return self._draft


__all__ = ["DraftEditSession", "DraftState", "InvalidStateError", "PersistenceError"]
