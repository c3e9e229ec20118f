"""Partition complaints into status queues."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..domain.models import STATUS_IN_PROGRESS, STATUS_PENDING, STATUS_RESOLVED, Complaint

BUCKET_KEYS = {
    STATUS_PENDING: "pending",
    STATUS_IN_PROGRESS: "in_progress",
    STATUS_RESOLVED: "resolved",
}


@dataclass(frozen=True)
class BucketCounts:
    pending: int = 0
    in_progress: int = 0
    resolved: int = 0
    total: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "pending": self.pending,
            "inProgress": self.in_progress,
            "resolved": self.resolved,
            "total": self.total,
        }


@dataclass(frozen=True)
class Buckets:
    pending: List[Complaint] = field(default_factory=list)
    in_progress: List[Complaint] = field(default_factory=list)
    resolved: List[Complaint] = field(default_factory=list)
    counts: BucketCounts = field(default_factory=BucketCounts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pending": [complaint.to_dict() for complaint in self.pending],
            "inProgress": [complaint.to_dict() for complaint in self.in_progress],
            "resolved": [complaint.to_dict() for complaint in self.resolved],
            "counts": self.counts.to_dict(),
        }


def bucket_for(status: Optional[str]) -> Optional[str]:
    """Return the bucket key a status lands in, or None when unrecognized."""
    return BUCKET_KEYS.get(status) if isinstance(status, str) else None


def bucketize(complaints: Iterable[Complaint]) -> Buckets:
    columns: Dict[str, List[Complaint]] = {key: [] for key in BUCKET_KEYS.values()}
    total = 0
    for complaint in complaints:
        total += 1
        key = bucket_for(complaint.status)
        if key is not None:
            columns[key].append(complaint)
    return Buckets(
        pending=columns["pending"],
        in_progress=columns["in_progress"],
        resolved=columns["resolved"],
        counts=BucketCounts(
            pending=len(columns["pending"]),
            in_progress=len(columns["in_progress"]),
            resolved=len(columns["resolved"]),
            total=total,
        ),
    )
