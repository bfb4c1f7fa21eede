"""Seed a demo classroom through the service layer.

Re-running is safe: the classroom row is upserted and enrollment is idempotent.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.eduattend.eduattend.classrooms.model import AttendanceRecord, Classroom, Note, Student
from src.eduattend.eduattend.container import build_container
from src.eduattend.eduattend.core.enums import AttendanceStatus

DEMO_STUDENTS = [
    Student("s1", "Alice Johnson", "alice@example.com", "https://picsum.photos/seed/alice/100", "2023-09-01"),
    Student("s2", "Bob Smith", "bob@example.com", "https://picsum.photos/seed/bob/100", "2023-09-01"),
    Student("s3", "Charlie Brown", "charlie@example.com", "https://picsum.photos/seed/charlie/100", "2023-09-02"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    service = build_container(db_config=db_config).classroom_service

    service.create(
        Classroom(
            classroom_id="cls-101",
            name="Advanced Mathematics",
            subject="Math",
            teacher_id="teacher-1",
            join_code="EDU-MATH-101",
        )
    )
    for student in DEMO_STUDENTS:
        service.add_student("cls-101", student)

    service.replace_attendance(
        "cls-101",
        [
            AttendanceRecord("s1", "2023-10-24", AttendanceStatus.PRESENT),
            AttendanceRecord("s2", "2023-10-24", AttendanceStatus.PRESENT),
            AttendanceRecord("s3", "2023-10-24", AttendanceStatus.ABSENT),
        ],
    )
    service.add_note(
        "cls-101",
        Note("n1", "Calculus Basics", "Introduction to derivatives and integrals.", None, "2023-10-20", "Prof. Anderson"),
    )

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
