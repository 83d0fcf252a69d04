from __future__ import annotations

from datetime import tzinfo
from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord, AttendanceSummary
from ...stamps.model import Stamp
from ..calculations import calculate_attendance_from_stamp, calculate_attendance_summary
from .base import AttendanceCalculator


class StandardAttendanceCalculator(AttendanceCalculator):
    """Standard rules: 8h day, 22:00-05:00 late night, 40h statutory limit."""

    def __init__(self, tz: Optional[tzinfo] = None):
        self._tz = tz

    def from_stamp(self, stamp: Stamp) -> AttendanceRecord:
        return calculate_attendance_from_stamp(stamp, tz=self._tz)

    def summarize(self, records: Sequence[AttendanceRecord]) -> AttendanceSummary:
        return calculate_attendance_summary(records)
