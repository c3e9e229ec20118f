"""Triage board: snapshot ownership, refresh signalling and the admin draft."""
from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ..dao import complaints_dao, employees_dao
from ..dao.db import DatabaseError
from ..domain.models import Complaint, Employee, Session
from .buckets import Buckets, bucketize
from .draft_session import DraftEditSession, Persist, PersistenceError
from .statistics import DEFAULT_WORKLOAD_LIMIT, AnalyticsView, Dashboard

logger = logging.getLogger(__name__)

DEFAULT_MAX_BOARDS = 64

Source = Callable[[], Tuple[Sequence[Complaint], Sequence[Employee]]]


class ComplaintNotFoundError(LookupError):
    """Raised when a complaint id is not present in the current snapshot."""


@dataclass(frozen=True)
class Snapshot:
    complaints: Tuple[Complaint, ...]
    employees: Tuple[Employee, ...]


def load_snapshot(user_id: Optional[str] = None) -> Tuple[Tuple[Complaint, ...], Tuple[Employee, ...]]:
    """Fetch the full complaint and employee collections from storage."""
    complaints = tuple(Complaint.from_dict(row) for row in complaints_dao.list_complaints(user_id))
    employees = tuple(Employee.from_dict(row) for row in employees_dao.list_employees())
    return complaints, employees


def persist_complaint(complaint: Complaint) -> bool:
    try:
        updated = complaints_dao.update_complaint(complaint.complaint_id, complaint.to_dict())
    except DatabaseError as exc:
        raise PersistenceError(str(exc)) from exc
    return updated > 0


class TriageBoard:
    """Current snapshot plus one draft, for a single administrator."""

    def __init__(
        self,
        source: Source,
        persist: Persist,
        *,
        workload_limit: int = DEFAULT_WORKLOAD_LIMIT,
    ) -> None:
        self._source = source
        self._snapshot: Optional[Snapshot] = None
        self._stale = True
        self.analytics = AnalyticsView(workload_limit=workload_limit)
        self.session = DraftEditSession(persist, on_stale=self._on_committed)

    @property
    def stale(self) -> bool:
        return self._stale

    def invalidate(self) -> None:
        self._stale = True

    def refresh(self) -> Snapshot:
        """Replace the snapshot wholesale; an open draft is left untouched."""
        complaints, employees = self._source()
        self._snapshot = Snapshot(complaints=tuple(complaints), employees=tuple(employees))
        self._stale = False
        logger.debug("Loaded %d complaints, %d employees", len(complaints), len(employees))
        return self._snapshot

    def snapshot(self) -> Snapshot:
        if self._stale or self._snapshot is None:
            return self.refresh()
        return self._snapshot

    def queue(self) -> Buckets:
        return bucketize(self.snapshot().complaints)

    def dashboard(self) -> Dashboard:
        snapshot = self.snapshot()
        return self.analytics.dashboard(snapshot.complaints, snapshot.employees)

    def find(self, complaint_id: str) -> Complaint:
        for complaint in self.snapshot().complaints:
            if complaint.complaint_id == complaint_id:
                return complaint
        raise ComplaintNotFoundError(complaint_id)

    def open(self, complaint_id: str) -> Complaint:
        return self.session.open(self.find(complaint_id))

    def _on_committed(self, complaint: Complaint) -> None:
        logger.info("Complaint %s committed; snapshot marked stale", complaint.complaint_id)
        self.invalidate()


class BoardRegistry:
    """One triage board per administrator user id, least recently used first out.

    A commit on any board marks every board stale. When the registry is full,
    the oldest board without an open draft is evicted, falling back to the
    oldest board overall.
    """

    def __init__(self, factory: Callable[[], TriageBoard], *, max_boards: int = DEFAULT_MAX_BOARDS) -> None:
        if max_boards < 1:
            raise ValueError("max_boards must be at least 1")
        self._factory = factory
        self.max_boards = max_boards
        self._boards: "OrderedDict[str, TriageBoard]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._boards)

    def board_for(self, session: Session) -> TriageBoard:
        board = self._boards.get(session.user_id)
        if board is not None:
            self._boards.move_to_end(session.user_id)
            return board
        while len(self._boards) >= self.max_boards:
            self._evict()
        board = self._boards[session.user_id] = self._factory()
        board.session.subscribe(self._on_committed)
        return board

    def invalidate_all(self) -> None:
        for board in self._boards.values():
            board.invalidate()

    def _on_committed(self, complaint: Complaint) -> None:
        self.invalidate_all()

    def _evict(self) -> None:
        victim = next(
            (user_id for user_id, board in self._boards.items() if board.session.draft is None),
            next(iter(self._boards)),
        )
        logger.debug("Evicting triage board for %s", victim)
        del self._boards[victim]


__all__ = [
    "BoardRegistry",
    "ComplaintNotFoundError",
    "Snapshot",
    "TriageBoard",
    "load_snapshot",
    "persist_complaint",
]
