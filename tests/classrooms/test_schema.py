from __future__ import annotations

import pytest

from src.eduattend.eduattend.classrooms.model import AttendanceRecord, Note, Student
from src.eduattend.eduattend.classrooms.schema import (
    attendance_from_json,
    classroom_from_json,
    classroom_to_json,
    note_from_json,
    student_from_json,
)
from src.eduattend.eduattend.core.enums import AttendanceStatus
from src.eduattend.eduattend.core.exceptions import ValidationError


def test_classroom_from_json_reads_client_field_names():
    c = classroom_from_json(
        {
            "id": "cls-1",
            "name": "Algebra",
            "subject": "Math",
            "teacherId": "t1",
            "qrCode": "EDU-X",
            "students": [{"id": "s1", "name": "Alice", "joinDate": "2024-01-01"}],
            "attendance": [{"studentId": "s1", "date": "2024-01-02", "status": "present"}],
            "notes": [{"id": "n1", "title": "Intro", "uploadDate": "2024-01-03"}],
            "messages": [],
        }
    )
    assert c.classroom_id == "cls-1"
    assert c.teacher_id == "t1"
    assert c.join_code == "EDU-X"
    assert c.students == [Student("s1", "Alice", join_date="2024-01-01")]
    assert c.attendance == [AttendanceRecord("s1", "2024-01-02", AttendanceStatus.PRESENT)]
    assert c.notes == [Note("n1", "Intro", upload_date="2024-01-03")]


def test_classroom_from_json_defaults_lists_and_code():
    c = classroom_from_json({"name": "Algebra"})
    assert c.classroom_id is None
    assert c.join_code is None
    assert c.students == [] and c.attendance == [] and c.notes == []


def test_round_trip_to_json_uses_client_names():
    payload = {
        "id": "cls-1",
        "name": "Algebra",
        "subject": "Math",
        "teacherId": "t1",
        "qrCode": "EDU-X",
        "students": [{"id": "s1", "name": "A", "email": None, "avatar": None, "joinDate": None, "bio": "hi"}],
        "attendance": [{"studentId": "s1", "date": "d", "status": "absent"}],
        "notes": [
            {"id": "n1", "title": "T", "content": "C", "summary": None, "uploadDate": "u", "author": "me"}
        ],
    }
    assert classroom_to_json(classroom_from_json(payload)) == payload


def test_status_is_case_insensitive():
    records = attendance_from_json([{"studentId": "s1", "date": "d", "status": "PRESENT"}])
    assert records[0].status is AttendanceStatus.PRESENT


@pytest.mark.parametrize("status", ["late", None, ""])
def test_unknown_status_is_rejected(status):
    with pytest.raises(ValidationError):
        attendance_from_json([{"studentId": "s1", "date": "d", "status": status}])


def test_attendance_must_be_a_list():
    with pytest.raises(ValidationError):
        attendance_from_json({"studentId": "s1"})


def test_student_requires_id():
    with pytest.raises(ValidationError):
        student_from_json({"name": "No Id"})
    with pytest.raises(ValidationError):
        student_from_json({"id": "  "})


def test_student_id_is_stripped():
    assert student_from_json({"id": " s1 "}).student_id == "s1"


def test_note_accepts_partial_payload():
    assert note_from_json({"title": "Only title"}) == Note(title="Only title")


def test_non_object_bodies_are_rejected():
    with pytest.raises(ValidationError):
        classroom_from_json([1, 2])
    with pytest.raises(ValidationError):
        note_from_json("text")
