from complaint_desk.domain.models import Complaint, Employee
from complaint_desk.domain.normalize import (
    display_description,
    display_priority,
    normalize_complaint,
    technician_label,
)


def test_from_dict_accepts_wire_key_variants():
    a = Complaint.from_dict({"complaintId": "C1", "title": "x", "status": "pending", "userId": "U1"})
    b = Complaint.from_dict({"id": 7, "title": "y"})
    assert (a.complaint_id, a.user_id) == ("C1", "U1")
    assert b.complaint_id == "7"
    assert b.status is None
    assert b.description == ""


def test_employee_short_name():
    assert Employee.from_dict({"employeeId": "E1", "fullName": "Ana  Maria Ortiz"}).short_name == "Ana"
    assert Employee(employee_id="E2", full_name="").short_name == ""


def test_normalize_applies_defaults_without_touching_record():
    complaint = Complaint(complaint_id="C1", title="x", category="", priority="MEDIUM")
    normalized = normalize_complaint(complaint)
    assert normalized.category == "Uncategorized"
    assert normalized.priority_level == "medium"
    assert complaint.category == ""
    assert complaint.priority == "MEDIUM"
    assert normalize_complaint(Complaint(complaint_id="C2", title="y")).priority_level == "low"


def test_display_helpers():
    employees = [Employee(employee_id="E1", full_name="Ana Ortiz")]
    bare = Complaint(complaint_id="C1", title="x", technician="E404")
    assert display_priority(bare) == "Standard"
    assert display_description(bare) == "No description provided."
    assert technician_label(bare, employees) == "Unassigned"
    assigned = Complaint(complaint_id="C2", title="y", technician="E1", priority="high", description="d")
    assert (display_priority(assigned), display_description(assigned)) == ("high", "d")
    assert technician_label(assigned, employees) == "Ana Ortiz"
