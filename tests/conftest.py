from __future__ import annotations

import copy
import threading
from typing import Callable, Optional

import pytest

from src.eduattend.eduattend.classrooms.model import Classroom
from src.eduattend.eduattend.classrooms.service import ClassroomService
from src.eduattend.eduattend.container import Container
from src.eduattend.eduattend.main import create_app


class InMemoryClassrooms:
    """Dict-backed ClassroomRepository; stores copies like a real database would."""

    def __init__(self):
        self._rows: dict[str, Classroom] = {}
        self._lock = threading.Lock()
        self.save_calls = 0

    def find_all(self):
        return [copy.deepcopy(c) for c in self._rows.values()]

    def find_by_id(self, classroom_id: str) -> Optional[Classroom]:
        c = self._rows.get(classroom_id)
        return copy.deepcopy(c) if c else None

    def find_by_join_code(self, join_code: str) -> Optional[Classroom]:
        for c in self._rows.values():
            if c.join_code == join_code:
                return copy.deepcopy(c)
        return None

    def save(self, classroom: Classroom) -> Classroom:
        self.save_calls += 1
        self._rows[classroom.classroom_id] = copy.deepcopy(classroom)
        return copy.deepcopy(classroom)

    def update(self, classroom_id: str, mutate: Callable[[Classroom], None]) -> Optional[Classroom]:
        with self._lock:
            classroom = self.find_by_id(classroom_id)
            if classroom is None:
                return None
            mutate(classroom)
            return self.save(classroom)


@pytest.fixture
def classrooms_repo() -> InMemoryClassrooms:
    return InMemoryClassrooms()


@pytest.fixture
def classroom_service(classrooms_repo) -> ClassroomService:
    return ClassroomService(classrooms_repo)


@pytest.fixture
def app(monkeypatch, classrooms_repo, classroom_service):
    monkeypatch.setenv("APP_ENV", "testing")
    container = Container(conn=None, classrooms_repo=classrooms_repo, classroom_service=classroom_service)
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
