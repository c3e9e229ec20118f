from complaint_desk.domain.models import Complaint
from complaint_desk.services.buckets import bucket_for, bucketize


def make_complaint(cid: str, status, category=None) -> Complaint:
    return Complaint(complaint_id=cid, title=f"Complaint {cid}", status=status, category=category)


def test_bucketize_scenario():
    complaints = [
        make_complaint("1", "pending", "Billing"),
        make_complaint("2", "pending", "Billing"),
        make_complaint("3", "resolved", "Technical"),
    ]
    buckets = bucketize(complaints)
    assert [c.complaint_id for c in buckets.pending] == ["1", "2"]
    assert buckets.in_progress == []
    assert [c.complaint_id for c in buckets.resolved] == ["3"]
    assert buckets.counts.to_dict() == {"pending": 2, "inProgress": 0, "resolved": 1, "total": 3}


def test_unrecognized_status_counts_toward_total_only():
    complaints = [
        make_complaint("1", "in-progress"),
        make_complaint("2", "High"),
        make_complaint("3", None),
        make_complaint("4", "Pending"),
    ]
    buckets = bucketize(complaints)
    assert buckets.counts.total == 4
    assert buckets.counts.in_progress == 1
    assert buckets.counts.pending + buckets.counts.in_progress + buckets.counts.resolved == 1


def test_partition_is_stable_and_preserves_identity():
    complaints = [make_complaint(str(i), "pending" if i % 2 else "resolved") for i in range(6)]
    buckets = bucketize(complaints)
    assert [c.complaint_id for c in buckets.pending] == ["1", "3", "5"]
    assert [c.complaint_id for c in buckets.resolved] == ["0", "2", "4"]
    assert buckets.pending[0] is complaints[1]


def test_empty_input():
    buckets = bucketize([])
    assert buckets.counts.to_dict() == {"pending": 0, "inProgress": 0, "resolved": 0, "total": 0}
    assert buckets.to_dict()["pending"] == []


def test_accepts_generators():
    buckets = bucketize(make_complaint(str(i), "pending") for i in range(3))
    assert buckets.counts.total == 3
    assert buckets.counts.pending == 3


def test_bucket_for():
    assert bucket_for("in-progress") == "in_progress"
    assert bucket_for("resolved") == "resolved"
    assert bucket_for("RESOLVED") is None
    assert bucket_for(None) is None
