from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Callable, Sequence

from ..common.datetime_utils import today_iso
from ..core.constants import JOIN_CODE_LENGTH, JOIN_CODE_PREFIX
from ..core.exceptions import ClassroomNotFoundError, JoinCodeNotFoundError
from .model import AttendanceRecord, Classroom, Note, Student
from .repository import ClassroomRepository

logger = logging.getLogger(__name__)


def generate_join_code() -> str:
    """``EDU-`` followed by 8 uppercase characters taken from a random UUID.

    Codes are not checked against existing classrooms.
    """
    return JOIN_CODE_PREFIX + uuid.uuid4().hex[:JOIN_CODE_LENGTH].upper()


def generate_classroom_id() -> str:
    return uuid.uuid4().hex


class ClassroomService:
    """Use cases around the Classroom aggregate.

    Every operation that targets an existing classroom resolves it by id first
    and raises ClassroomNotFoundError when it is missing.
    """

    def __init__(
        self,
        classrooms: ClassroomRepository,
        *,
        code_factory: Callable[[], str] = generate_join_code,
        id_factory: Callable[[], str] = generate_classroom_id,
    ):
        self._classrooms = classrooms
        self._code_factory = code_factory
        self._id_factory = id_factory

    def list_all(self) -> Sequence[Classroom]:
        return self._classrooms.find_all()

    def create(self, classroom: Classroom) -> Classroom:
        if not classroom.join_code or not classroom.join_code.strip():
            classroom.join_code = self._code_factory()
        if not classroom.classroom_id:
            classroom.classroom_id = self._id_factory()

        unique: list[Student] = []
        for student in classroom.students:
            if any(s.student_id == student.student_id for s in unique):
                continue
            unique.append(student)
        classroom.students = unique

        saved = self._classrooms.save(classroom)
        logger.info("Created classroom %s (code=%s)", saved.classroom_id, saved.join_code)
        return saved

    def get_by_id(self, classroom_id: str) -> Classroom:
        classroom = self._classrooms.find_by_id(classroom_id)
        if classroom is None:
            raise ClassroomNotFoundError(classroom_id)
        return classroom

    def replace_attendance(self, classroom_id: str, records: Sequence[AttendanceRecord]) -> Classroom:
        def _replace(classroom: Classroom) -> None:
            classroom.attendance = list(records)

        classroom = self._update(classroom_id, _replace)
        logger.info("Replaced attendance of classroom %s (%d records)", classroom_id, len(classroom.attendance))
        return classroom

    def add_note(self, classroom_id: str, note: Note) -> Classroom:
        def _append(classroom: Classroom) -> None:
            if classroom.notes is None:
                classroom.notes = []
            classroom.notes.append(note)

        return self._update(classroom_id, _append)

    def add_student(self, classroom_id: str, student: Student) -> Classroom:
        """Enroll a student; a second call with the same student id is a no-op.

        The first submitted record wins: later payloads are discarded, not merged.
        """

        def _enroll(classroom: Classroom) -> None:
            if classroom.students is None:
                classroom.students = []
            if classroom.has_student(student.student_id):
                logger.info("Student %s already enrolled in classroom %s", student.student_id, classroom_id)
                return
            classroom.students.append(student)

        return self._update(classroom_id, _enroll)

    def enroll_by_code(self, join_code: str, student: Student) -> Classroom:
        code = (join_code or "").strip()
        classroom = self._classrooms.find_by_join_code(code) if code else None
        if classroom is None:
            raise JoinCodeNotFoundError(code)

        if not student.join_date:
            student = replace(student, join_date=today_iso())
        return self.add_student(classroom.classroom_id, student)

    def _update(self, classroom_id: str, mutate: Callable[[Classroom], None]) -> Classroom:
        classroom = self._classrooms.update(classroom_id, mutate)
        if classroom is None:
            raise ClassroomNotFoundError(classroom_id)
        return classroom
