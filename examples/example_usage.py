"""Example: drive the service layer directly (no Flask).

Controllers stay thin; the classroom rules live in ClassroomService.
"""

import importlib

from config import get_settings_module

from src.eduattend.eduattend.classrooms.model import Classroom, Student
from src.eduattend.eduattend.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    service = build_container(db_config=settings.DB_CONFIG).classroom_service

    classroom = service.create(Classroom(classroom_id=None, name="Algebra", subject="Math", teacher_id="t1"))
    print("created", classroom.classroom_id, classroom.join_code)

    service.add_student(classroom.classroom_id, Student("s1", "Alice"))
    service.add_student(classroom.classroom_id, Student("s1", "Alice again"))
    print([s.name for s in service.get_by_id(classroom.classroom_id).students])


if __name__ == "__main__":
    main()
