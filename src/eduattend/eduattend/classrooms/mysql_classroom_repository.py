from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, placeholders
from .model import AttendanceRecord, Classroom, Note, Student
from .repository import ClassroomRepository

logger = logging.getLogger(__name__)

_CLASSROOM_COLUMNS = "classroom_id, name, subject, teacher_id, join_code"


class MySQLClassroomRepository(ClassroomRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_all(self) -> Sequence[Classroom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_CLASSROOM_COLUMNS}
                FROM classrooms
                ORDER BY seq ASC
                """
            )
            rows = fetchall(cur)
            return self._hydrate(cur, rows)

    def find_by_id(self, classroom_id: str) -> Optional[Classroom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_CLASSROOM_COLUMNS} FROM classrooms WHERE classroom_id=%s",
                (classroom_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return self._hydrate(cur, [r])[0]

    def find_by_join_code(self, join_code: str) -> Optional[Classroom]:
        # join_code is not unique; the earliest inserted classroom wins on a collision.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_CLASSROOM_COLUMNS}
                FROM classrooms
                WHERE join_code=%s
                ORDER BY seq ASC
                LIMIT 1
                """,
                (join_code,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return self._hydrate(cur, [r])[0]

    def save(self, classroom: Classroom) -> Classroom:
        with db_cursor(self._conn_factory) as (_, cur):
            self._write(cur, classroom)
        return classroom

    def update(self, classroom_id: str, mutate: Callable[[Classroom], None]) -> Optional[Classroom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_CLASSROOM_COLUMNS} FROM classrooms WHERE classroom_id=%s FOR UPDATE",
                (classroom_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            classroom = self._hydrate(cur, [r])[0]
            mutate(classroom)
            self._write(cur, classroom)
            return classroom

    # ---- row mapping ----

    def _write(self, cur, classroom: Classroom) -> None:
        cur.execute(
            """
            INSERT INTO classrooms(classroom_id, name, subject, teacher_id, join_code)
            VALUES(%s,%s,%s,%s,%s)
            ON DUPLICATE KEY UPDATE
                name=VALUES(name),
                subject=VALUES(subject),
                teacher_id=VALUES(teacher_id),
                join_code=VALUES(join_code)
            """,
            (
                classroom.classroom_id,
                classroom.name,
                classroom.subject,
                classroom.teacher_id,
                classroom.join_code,
            ),
        )

        # Child lists are element collections: rewrite them wholesale.
        for table in ("classroom_students", "classroom_attendance", "classroom_notes"):
            cur.execute(f"DELETE FROM {table} WHERE classroom_id=%s", (classroom.classroom_id,))

        if classroom.students:
            cur.executemany(
                """
                INSERT INTO classroom_students(classroom_id, position, student_id, name, email, avatar, join_date, bio)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                [
                    (classroom.classroom_id, pos, s.student_id, s.name, s.email, s.avatar, s.join_date, s.bio)
                    for pos, s in enumerate(classroom.students)
                ],
            )
        if classroom.attendance:
            cur.executemany(
                """
                INSERT INTO classroom_attendance(classroom_id, position, student_id, attendance_date, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                [
                    (classroom.classroom_id, pos, a.student_id, a.date, a.status.value)
                    for pos, a in enumerate(classroom.attendance)
                ],
            )
        if classroom.notes:
            cur.executemany(
                """
                INSERT INTO classroom_notes(classroom_id, position, note_id, title, content, summary, upload_date, author)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                [
                    (classroom.classroom_id, pos, n.note_id, n.title, n.content, n.summary, n.upload_date, n.author)
                    for pos, n in enumerate(classroom.notes)
                ],
            )

        logger.debug(
            "Saved classroom %s (students=%d attendance=%d notes=%d)",
            classroom.classroom_id,
            len(classroom.students),
            len(classroom.attendance),
            len(classroom.notes),
        )

    def _hydrate(self, cur, rows: List[Dict[str, Any]]) -> List[Classroom]:
        if not rows:
            return []

        classrooms = {
            r["classroom_id"]: Classroom(
                classroom_id=r["classroom_id"],
                name=r.get("name"),
                subject=r.get("subject"),
                teacher_id=r.get("teacher_id"),
                join_code=r.get("join_code"),
            )
            for r in rows
        }
        ids = tuple(classrooms.keys())
        in_clause = placeholders(len(ids))

        cur.execute(
            f"""
            SELECT classroom_id, student_id, name, email, avatar, join_date, bio
            FROM classroom_students
            WHERE classroom_id IN ({in_clause})
            ORDER BY classroom_id, position
            """,
            ids,
        )
        for r in fetchall(cur):
            classrooms[r["classroom_id"]].students.append(
                Student(
                    student_id=r["student_id"],
                    name=r.get("name"),
                    email=r.get("email"),
                    avatar=r.get("avatar"),
                    join_date=r.get("join_date"),
                    bio=r.get("bio"),
                )
            )

        cur.execute(
            f"""
            SELECT classroom_id, student_id, attendance_date, status
            FROM classroom_attendance
            WHERE classroom_id IN ({in_clause})
            ORDER BY classroom_id, position
            """,
            ids,
        )
        for r in fetchall(cur):
            classrooms[r["classroom_id"]].attendance.append(
                AttendanceRecord(
                    student_id=r.get("student_id"),
                    date=r.get("attendance_date"),
                    status=AttendanceStatus(r["status"]),
                )
            )

        cur.execute(
            f"""
            SELECT classroom_id, note_id, title, content, summary, upload_date, author
            FROM classroom_notes
            WHERE classroom_id IN ({in_clause})
            ORDER BY classroom_id, position
            """,
            ids,
        )
        for r in fetchall(cur):
            classrooms[r["classroom_id"]].notes.append(
                Note(
                    note_id=r.get("note_id"),
                    title=r.get("title"),
                    content=r.get("content"),
                    summary=r.get("summary"),
                    upload_date=r.get("upload_date"),
                    author=r.get("author"),
                )
            )

        return [classrooms[r["classroom_id"]] for r in rows]
