from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceRecord, AttendanceSummary
from ...stamps.model import Stamp


class AttendanceCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll figures)."""

    @abstractmethod
    def from_stamp(self, stamp: Stamp) -> AttendanceRecord:
        raise NotImplementedError

    @abstractmethod
    def summarize(self, records: Sequence[AttendanceRecord]) -> AttendanceSummary:
        raise NotImplementedError
