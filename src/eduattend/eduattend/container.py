from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .classrooms.mysql_classroom_repository import MySQLClassroomRepository
from .classrooms.repository import ClassroomRepository
from .classrooms.service import ClassroomService
from .database.connection import DBConfig, DatabaseConnection


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    classrooms_repo: ClassroomRepository

    classroom_service: ClassroomService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    classrooms_repo = MySQLClassroomRepository(conn)
    classroom_service = ClassroomService(classrooms_repo)

    return Container(
        conn=conn,
        classrooms_repo=classrooms_repo,
        classroom_service=classroom_service,
    )
