from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Student:
    """Student enrolled in a classroom (embedded, not shared across classrooms)."""

    student_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None
    join_date: Optional[str] = None
    bio: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRecord:
    student_id: Optional[str]
    date: Optional[str]
    status: AttendanceStatus


@dataclass(frozen=True)
class Note:
    note_id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    summary: Optional[str] = None
    upload_date: Optional[str] = None
    author: Optional[str] = None


@dataclass
class Classroom:
    """Aggregate root: a classroom with its students, attendance and notes.

    Services mutate a loaded instance in place and the repository writes it
    back whole.
    """

    classroom_id: Optional[str]
    name: Optional[str] = None
    subject: Optional[str] = None
    teacher_id: Optional[str] = None
    join_code: Optional[str] = None
    students: List[Student] = field(default_factory=list)
    attendance: List[AttendanceRecord] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)

    def has_student(self, student_id: str) -> bool:
        return any(s.student_id == student_id for s in self.students)
