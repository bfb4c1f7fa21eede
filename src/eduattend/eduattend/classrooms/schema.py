"""JSON <-> domain mapping for the classroom API.

Field names match what the web client sends (camelCase, ``qrCode`` for the
join code). Only the fields the aggregate rules depend on are checked
(student id, attendance status); everything else is stored as sent.
"""

from __future__ import annotations

from typing import Any

from ..common.validators import optional_str, require_list, require_non_empty, require_object
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, Classroom, Note, Student


def student_from_json(payload: Any) -> Student:
    data = require_object(payload, "Student")
    return Student(
        student_id=require_non_empty(data.get("id"), "Student id"),
        name=optional_str(data.get("name")),
        email=optional_str(data.get("email")),
        avatar=optional_str(data.get("avatar")),
        join_date=optional_str(data.get("joinDate")),
        bio=optional_str(data.get("bio")),
    )


def attendance_record_from_json(payload: Any) -> AttendanceRecord:
    data = require_object(payload, "Attendance record")
    raw_status = data.get("status")
    try:
        status = AttendanceStatus(str(raw_status).strip().lower())
    except ValueError:
        raise ValidationError(f"Invalid attendance status: {raw_status!r}")
    return AttendanceRecord(
        student_id=optional_str(data.get("studentId")),
        date=optional_str(data.get("date")),
        status=status,
    )


def attendance_from_json(payload: Any) -> list[AttendanceRecord]:
    return [attendance_record_from_json(item) for item in require_list(payload, "Attendance")]


def note_from_json(payload: Any) -> Note:
    data = require_object(payload, "Note")
    return Note(
        note_id=optional_str(data.get("id")),
        title=optional_str(data.get("title")),
        content=optional_str(data.get("content")),
        summary=optional_str(data.get("summary")),
        upload_date=optional_str(data.get("uploadDate")),
        author=optional_str(data.get("author")),
    )


def classroom_from_json(payload: Any) -> Classroom:
    data = require_object(payload, "Classroom")
    return Classroom(
        classroom_id=optional_str(data.get("id")),
        name=optional_str(data.get("name")),
        subject=optional_str(data.get("subject")),
        teacher_id=optional_str(data.get("teacherId")),
        join_code=optional_str(data.get("qrCode")),
        students=[student_from_json(s) for s in require_list(data.get("students") or [], "Students")],
        attendance=attendance_from_json(data.get("attendance") or []),
        notes=[note_from_json(n) for n in require_list(data.get("notes") or [], "Notes")],
    )


def student_to_json(s: Student) -> dict:
    return {
        "id": s.student_id,
        "name": s.name,
        "email": s.email,
        "avatar": s.avatar,
        "joinDate": s.join_date,
        "bio": s.bio,
    }


def attendance_record_to_json(a: AttendanceRecord) -> dict:
    return {"studentId": a.student_id, "date": a.date, "status": a.status.value}


def note_to_json(n: Note) -> dict:
    return {
        "id": n.note_id,
        "title": n.title,
        "content": n.content,
        "summary": n.summary,
        "uploadDate": n.upload_date,
        "author": n.author,
    }


def classroom_to_json(c: Classroom) -> dict:
    return {
        "id": c.classroom_id,
        "name": c.name,
        "subject": c.subject,
        "teacherId": c.teacher_id,
        "qrCode": c.join_code,
        "students": [student_to_json(s) for s in c.students],
        "attendance": [attendance_record_to_json(a) for a in c.attendance],
        "notes": [note_to_json(n) for n in c.notes],
    }
