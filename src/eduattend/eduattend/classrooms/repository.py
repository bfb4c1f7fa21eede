from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from .model import Classroom


class ClassroomRepository(Protocol):
    """Storage interface for the Classroom aggregate.

    The service depends on this interface, never on a concrete database.
    """

    def find_all(self) -> Sequence[Classroom]:
        raise NotImplementedError

    def find_by_id(self, classroom_id: str) -> Optional[Classroom]:
        raise NotImplementedError

    def find_by_join_code(self, join_code: str) -> Optional[Classroom]:
        raise NotImplementedError

    def save(self, classroom: Classroom) -> Classroom:
        """Insert or update by classroom id."""

        raise NotImplementedError

    def update(self, classroom_id: str, mutate: Callable[[Classroom], None]) -> Optional[Classroom]:
        """Load, mutate and save one classroom while holding its write lock.

        Returns the saved classroom, or None when no classroom has that id.
        """

        raise NotImplementedError
