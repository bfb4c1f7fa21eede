from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance mark stored per student and date."""

    PRESENT = "present"
    ABSENT = "absent"
